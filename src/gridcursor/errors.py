"""Exceptions raised while building tables."""

from __future__ import annotations


class CursorBoundsError(ValueError):
    """Raised when a cursor move would leave the table (row or column <= 0).

    This signals a logic error in the calling traversal, not a recoverable
    runtime condition, so it is never caught inside the package.
    """

    def __init__(self, message: str, operation: str, nrow: int, ncol: int):
        super().__init__(message)
        self.operation = operation
        self.nrow = nrow
        self.ncol = ncol
