"""Exceptions raised by vcd2svg.

Each failure kind also derives from the built-in exception a caller would
naturally expect, so ``except ValueError`` or ``except OSError`` keep working.
"""


class Vcd2SvgError(Exception):
    """Base class for all vcd2svg errors."""


class VcdParseError(Vcd2SvgError, ValueError):
    """The input does not follow the VCD grammar."""


class TraceFileError(Vcd2SvgError, OSError):
    """A trace file could not be opened or read.

    Raised as ``TraceFileError(errno, strerror, filename)`` so the usual
    OSError attributes are filled in.
    """


class DeclarationError(Vcd2SvgError, ValueError):
    """Identifier codes collide or reference nothing."""


class TimelineError(Vcd2SvgError, ValueError):
    """Value changes are not in time order."""


class RenderError(Vcd2SvgError, RuntimeError):
    """The Normalized Table breaks an invariant the renderer relies on."""
