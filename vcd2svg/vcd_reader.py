"""Read VCD text into a VcdTree.

Tokenizing is done by pyvcd (``vcd.reader.tokenize``); this module only walks
its token stream, keeps track of the scope stack and turns every value change
into a ``ValueChange`` carrying the literal the way it is written in VCD:
``0 1 x z`` for scalars and ``b<digits>`` for vectors. Literals are never
normalized: a 4-bit signal written as ``b1`` stays ``b1``.
"""

import io
import logging
import re
from typing import List, Union

from vcd.reader import TokenKind, VCDParseError, tokenize

from .data_model import (
    BUS_PREFIX, Time, Timescale, TimeUnit, ValueChange, VarDeclaration, VcdTree
)
from .errors import VcdParseError

logger = logging.getLogger(__name__)

SCOPE_SEPARATOR = " "


def _leaf_name(var) -> str:
    """Variable reference with its bit index, e.g. ``data[7:0]``."""
    bit_index = getattr(var, "bit_index", None)
    if bit_index is None:
        return var.reference
    if isinstance(bit_index, tuple):
        msb, lsb = bit_index
        return f"{var.reference}[{msb}:{lsb}]"
    return f"{var.reference}[{bit_index}]"


# A vector change as written in the body: b<digits> at the start of a word
_VECTOR_WORD = re.compile(rb"(?<!\S)[bB](\S+)")


def _same_vector(digits: str, value: Union[int, str]) -> bool:
    if isinstance(value, int):
        try:
            return int(digits, 2) == value
        except ValueError:
            return False
    return digits.lower() == str(value).lower()


def _vector_literal(lines: List[bytes], token) -> str:
    """The literal of a vector change exactly as the trace spells it.

    pyvcd hands back an int when all digits are 0/1, which loses leading
    zeros and the width the simulator wrote. The token span points back into
    the input, so the literal is cut from the source line instead. The word
    found there must agree with the value pyvcd decoded.
    """
    value = token.data.value
    start = token.span.start
    index = start.line - 1
    if 0 <= index < len(lines):
        line = lines[index]
        for pos in (max(0, start.column - 2), 0):
            for match in _VECTOR_WORD.finditer(line, pos):
                if _same_vector(match.group(1).decode("latin-1"), value):
                    return match.group(0).decode("latin-1")
    logger.debug("No source text for vector change of %r at line %d", token.data.id_code, start.line)
    return BUS_PREFIX + (format(value, "b") if isinstance(value, int) else str(value))


def _timescale(data) -> Timescale:
    # pyvcd 0.4 wraps magnitude and unit in enums, later releases use plain values
    magnitude = getattr(data.magnitude, "value", data.magnitude)
    unit_name = getattr(data.unit, "value", data.unit)
    unit = TimeUnit.from_string(str(unit_name))
    if unit is None:
        logger.warning("Unsupported timescale unit %r, using ps", data.unit)
        return Timescale()
    return Timescale(factor=int(magnitude), unit=unit)


def read_vcd(data: bytes) -> VcdTree:
    """Parse VCD bytes into a VcdTree.

    Raises:
        VcdParseError: The bytes are not VCD, or the declaration section is
            never closed with ``$enddefinitions``.
    """
    tree = VcdTree()
    scope: List[str] = []
    lines = data.split(b"\n")
    time: Time = 0
    header_done = False

    try:
        for token in tokenize(io.BytesIO(data)):
            kind = token.kind
            if kind is TokenKind.CHANGE_SCALAR:
                change = token.data
                tree.changes.append(ValueChange(time, change.id_code, str(change.value)))
            elif kind is TokenKind.CHANGE_VECTOR:
                change = token.data
                tree.changes.append(ValueChange(time, change.id_code, _vector_literal(lines, token)))
            elif kind is TokenKind.CHANGE_TIME:
                time = int(token.data)
            elif kind in (TokenKind.CHANGE_REAL, TokenKind.CHANGE_STRING):
                logger.warning("Skipping unsupported value change for %r at time %d",
                               token.data.id_code, time)
            elif kind is TokenKind.SCOPE:
                scope.append(token.data.ident)
            elif kind is TokenKind.UPSCOPE:
                if scope:
                    scope.pop()
            elif kind is TokenKind.VAR:
                var = token.data
                name = SCOPE_SEPARATOR.join(scope + [_leaf_name(var)])
                var_type = getattr(var.type_, "value", str(var.type_))
                tree.declarations.append(
                    VarDeclaration(id_code=var.id_code, name=name, size=int(var.size), var_type=str(var_type))
                )
            elif kind is TokenKind.TIMESCALE:
                tree.timescale = _timescale(token.data)
            elif kind is TokenKind.DATE:
                tree.date = str(token.data).strip()
            elif kind is TokenKind.VERSION:
                tree.version = str(token.data).strip()
            elif kind is TokenKind.COMMENT:
                tree.comments.append(str(token.data).strip())
            elif kind is TokenKind.ENDDEFINITIONS:
                header_done = True
    except (VCDParseError, UnicodeDecodeError) as exc:
        raise VcdParseError(f"Invalid VCD: {exc}") from exc

    if not header_done:
        raise VcdParseError("Invalid VCD: missing $enddefinitions section")

    logger.debug("Read %d declarations and %d value changes",
                 len(tree.declarations), len(tree.changes))
    return tree
