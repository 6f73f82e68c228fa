"""Exception types for the mine driller search."""


class MineDrillerError(Exception):
    """Base class for every error raised by the mine driller."""


class MalformedInputError(MineDrillerError, ValueError):
    """Grid source is missing, not square, or holds a non-integer token."""


class OutOfBoundsError(MineDrillerError, IndexError):
    """A cell outside [0, n) was queried."""


class EmptyGridError(MineDrillerError, ValueError):
    """Search was asked to run on a grid with no cells."""
