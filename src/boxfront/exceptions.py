"""Exception types raised by boxfront.

Argument errors are reported with the builtin TypeError/ValueError. The
types below cover contract violations that are specific to this package.
"""


class BoxfrontError(Exception):
    """Base class for boxfront-specific errors."""


class DimensionMismatchError(BoxfrontError, ValueError):
    """Raised when objective, constraint, or epsilon widths disagree.

    A solution whose objective count differs from the width established by a
    population or archive is a programming error. It is never truncated or
    padded to fit.

    Attributes:
        what: Name of the mismatching quantity (e.g. "objectives").
        expected: Width that was established first.
        actual: Width that was received.
    """

    def __init__(self, what: str, expected: int, actual: int) -> None:
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} width mismatch: expected {expected}, got {actual}")
