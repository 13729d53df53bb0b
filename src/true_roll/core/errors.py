"""Exception types raised by the TrueRoll engine."""

from __future__ import annotations


class TrueRollError(Exception):
    """Base class for all TrueRoll errors."""


class InvalidInputError(TrueRollError, ValueError):
    """Raised when an engine call receives malformed or out-of-range arguments.

    The engine is pure, so raising never leaves the caller's table or seed
    in a partially updated state.
    """


class AuditMismatchError(TrueRollError):
    """Raised when a recorded roll history does not replay to the same values.

    Parameters
    ----------
    message:
        Human-readable description of the mismatch.
    roll_index:
        Index of the first offending roll, or ``None`` when the mismatch is
        in the table commitment itself.
    """

    def __init__(self, message: str, roll_index: int | None = None) -> None:
        super().__init__(message)
        self.roll_index = roll_index
