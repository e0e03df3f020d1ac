"""Exceptions raised by the Set table."""


class SetTableError(Exception):
    """Base error for table, deck and card failures."""


class InvalidCardError(SetTableError):
    """Raised when a card cannot be built from the given attributes or code."""


class DuplicateCardError(SetTableError):
    """Raised when a deck would contain the same card twice."""


class EmptyDeckError(SetTableError):
    """Raised when taking a card from an empty deck."""


class InvalidSlotStateError(SetTableError):
    """Raised when an operation refers to a slot that is out of range or empty."""


class TableFullError(SetTableError):
    """Raised when dealing would need more slots than the table capacity."""
