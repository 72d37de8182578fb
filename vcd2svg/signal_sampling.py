"""Signal sampling: turn table columns into drawable runs.

The renderer works in columns, one per recorded time. A run is a maximal
stretch of adjacent columns where a signal keeps the same value; scalar
renderers draw one level per run and bus renderers one box per run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .data_model import BUS_PREFIX, Value, VcdData


class ValueKind(Enum):
    """Represents the kind of signal value."""
    NORMAL = "normal"          # Regular defined value
    UNDEFINED = "undefined"    # Unknown (x) or never assigned
    HIGH_IMPEDANCE = "highz"   # High impedance (z)


@dataclass
class SignalRun:
    """A value held over columns [start_column, end_column)."""
    start_column: int
    end_column: int
    value: Value
    value_kind: ValueKind

    @property
    def columns(self) -> int:
        return self.end_column - self.start_column


@dataclass
class SignalDrawingData:
    """Sampled signal data ready for rendering."""
    name: str
    is_bus: bool
    runs: List[SignalRun] = field(default_factory=list)


def is_bus_literal(value: Value) -> bool:
    return value is not None and value[:1].lower() == BUS_PREFIX


def bus_digits(value: str) -> str:
    """The digit string of a bus literal, without the radix marker."""
    return value[len(BUS_PREFIX):]


def determine_value_kind(value: Value) -> ValueKind:
    """Determine the value kind from the recorded literal."""
    if value is None:
        return ValueKind.UNDEFINED
    digits = bus_digits(value).lower() if is_bus_literal(value) else value.lower()
    if 'x' in digits:
        return ValueKind.UNDEFINED
    if 'z' in digits:
        return ValueKind.HIGH_IMPEDANCE
    return ValueKind.NORMAL


def is_bus_signal(table: VcdData, name: str) -> bool:
    """A signal is drawn as a bus if it is declared wider than one bit or
    any of its recorded values is a bus literal."""
    if table.width_of(name) > 1:
        return True
    return any(is_bus_literal(snapshot.get(name)) for snapshot in table.sim.values())


def sample_signal(table: VcdData, name: str, times: Optional[List[int]] = None) -> SignalDrawingData:
    """Collapse a signal's column values into runs.

    Args:
        table: Normalized Table to read from.
        name: Fully qualified signal name.
        times: Sorted recorded times; computed from the table when omitted.
    """
    if times is None:
        times = table.times()
    drawing_data = SignalDrawingData(name=name, is_bus=is_bus_signal(table, name))

    for column, time in enumerate(times):
        value = table.sim[time][name]
        runs = drawing_data.runs
        if runs and runs[-1].value == value:
            runs[-1].end_column = column + 1
        else:
            runs.append(SignalRun(column, column + 1, value, determine_value_kind(value)))

    return drawing_data
