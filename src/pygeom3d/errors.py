"""Exceptions raised by pygeom3d.

Bad input is reported with the builtin exceptions (``ValueError``,
``ZeroDivisionError``, ``IndexError``, ``TypeError``).  The one
condition without a builtin counterpart gets its own class.
"""


class ZeroLengthError(ArithmeticError):
    """Raised when a direction is requested from a zero-length vector,
    e.g. normalizing the zero vector or rotating about it."""

    def __init__(self, message, vector=None):
        super().__init__(message)
        self.vector = vector
