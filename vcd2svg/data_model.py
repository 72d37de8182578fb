"""Core data structures for vcd2svg.

There are two layers of data here. VcdTree is what the VCD reader hands over:
declarations and a flat list of value changes, exactly as they appear in the
trace. VcdData is the Normalized Table built from it by the timeline module
and read by the renderer.

    VcdData
    ├── signals: ["top clk", "top rst", "top data"]   (declaration order)
    ├── decl:    {"!": "top clk", "\"": "top rst", "#": "top data"}
    ├── widths:  {"top clk": 1, "top rst": 1, "top data": 4}
    └── sim:
        ├── 0:  {"top clk": "0", "top rst": "1", "top data": None}
        ├── 5:  {"top clk": "1", "top rst": "1", "top data": "b1010"}
        └── 10: {"top clk": "0", "top rst": "0", "top data": "b1010"}

Every snapshot in sim is complete: a signal that did not change at that time
keeps its previous value, and a signal that never changed is None (unknown).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

Time = int  # In Timescale units

# Signal value as recorded in the trace: "0", "1", "x", "z" for scalars,
# "b<digits>" for buses. None means no value was ever recorded.
Value = Optional[str]

BUS_PREFIX = "b"


class TimeUnit(Enum):
    FEMTOSECONDS = "fs"  # 10^-15 seconds
    PICOSECONDS = "ps"   # 10^-12 seconds
    NANOSECONDS = "ns"   # 10^-9 seconds
    MICROSECONDS = "us"  # 10^-6 seconds
    MILLISECONDS = "ms"  # 10^-3 seconds
    SECONDS = "s"        # 10^0 seconds

    @classmethod
    def from_string(cls, s: str) -> Optional['TimeUnit']:
        """Convert string representation to TimeUnit."""
        mapping = {
            'fs': cls.FEMTOSECONDS,
            'ps': cls.PICOSECONDS,
            'ns': cls.NANOSECONDS,
            'us': cls.MICROSECONDS,
            'ms': cls.MILLISECONDS,
            's': cls.SECONDS
        }
        return mapping.get(s.strip().lower())


@dataclass(frozen=True)
class Timescale:
    """Represents the timescale of a waveform file."""
    factor: int = 1  # The numeric factor (1, 10 or 100)
    unit: TimeUnit = TimeUnit.PICOSECONDS

    def __str__(self) -> str:
        return f"{self.factor} {self.unit.value}"


@dataclass(frozen=True)
class VarDeclaration:
    """A single $var declaration with its scope-qualified name."""
    id_code: str
    name: str                # Scope path and leaf joined by spaces, e.g. "top cpu clk"
    size: int = 1
    var_type: str = "wire"


@dataclass(frozen=True)
class ValueChange:
    time: Time
    id_code: str
    value: str


@dataclass
class VcdTree:
    """Syntax tree of a VCD trace as produced by the reader.

    Declarations keep duplicates so the timeline builder can reject them.
    """
    declarations: List[VarDeclaration] = field(default_factory=list)
    changes: List[ValueChange] = field(default_factory=list)
    timescale: Timescale = field(default_factory=Timescale)
    date: str = ""
    version: str = ""
    comments: List[str] = field(default_factory=list)


@dataclass
class VcdData:
    """The Normalized Table: per-time, per-signal values of a whole trace."""
    signals: List[str] = field(default_factory=list)
    decl: Dict[str, str] = field(default_factory=dict)
    sim: Dict[Time, Dict[str, Value]] = field(default_factory=dict)
    widths: Dict[str, int] = field(default_factory=dict)
    timescale: Timescale = field(default_factory=Timescale)
    date: str = ""
    version: str = ""

    def times(self) -> List[Time]:
        """Recorded times in ascending order."""
        return sorted(self.sim)

    def value_at(self, name: str, time: Time) -> Value:
        """Value of a signal at a recorded time."""
        return self.sim[time][name]

    def width_of(self, name: str) -> int:
        return self.widths.get(name, 1)
