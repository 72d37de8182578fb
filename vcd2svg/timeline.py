"""Timeline builder: turn a VcdTree into the Normalized Table.

VCD only records changes. The table stores, for every recorded time, the
value of every signal at and after that time, so the renderer never has to
look back. The working set holds one slot per signal, starts out unknown
(None) and is committed as a full snapshot whenever the time moves on.
"""

import logging
from typing import Dict, List, Optional

from .data_model import Time, Value, VcdData, VcdTree
from .errors import DeclarationError, TimelineError

logger = logging.getLogger(__name__)


def _collect_signals(tree: VcdTree, table: VcdData) -> None:
    """Fill signals, decl and widths from the declarations.

    Two codes may name the same signal; one code may not be declared twice.
    """
    seen = set()
    for declaration in tree.declarations:
        if declaration.id_code in table.decl:
            raise DeclarationError(
                f"Identifier code {declaration.id_code!r} declared more than once "
                f"({table.decl[declaration.id_code]!r} and {declaration.name!r})"
            )
        table.decl[declaration.id_code] = declaration.name
        if declaration.name not in seen:
            seen.add(declaration.name)
            table.signals.append(declaration.name)
            table.widths[declaration.name] = declaration.size


def build_timeline(tree: VcdTree) -> VcdData:
    """Build the forward-filled Normalized Table for a trace.

    Raises:
        DeclarationError: An identifier code is declared twice or a change
            refers to an undeclared code.
        TimelineError: Changes are not ordered by time.
    """
    table = VcdData(
        timescale=tree.timescale,
        date=tree.date,
        version=tree.version,
    )
    _collect_signals(tree, table)

    # Slots are indexed by signal position so snapshots follow declaration order
    index: Dict[str, int] = {name: i for i, name in enumerate(table.signals)}
    current: List[Value] = [None] * len(table.signals)
    previous_time: Optional[Time] = None

    def commit(time: Time) -> None:
        table.sim[time] = dict(zip(table.signals, current))

    for change in tree.changes:
        name = table.decl.get(change.id_code)
        if name is None:
            raise DeclarationError(f"Value change at time {change.time} for undeclared code {change.id_code!r}")
        if previous_time is not None and change.time != previous_time:
            if change.time < previous_time:
                raise TimelineError(f"Time goes backwards: #{change.time} after #{previous_time}")
            commit(previous_time)
        current[index[name]] = change.value
        previous_time = change.time

    if previous_time is not None:
        commit(previous_time)

    logger.debug("Built timeline with %d signals over %d times", len(table.signals), len(table.sim))
    return table


# Name used by callers that think of this step as processing the VCD
process_vcd = build_timeline
