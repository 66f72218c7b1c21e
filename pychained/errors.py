"""Exceptions raised by ChainedHashTable on precondition violations."""


class ChainedTableError(Exception):
    """Base class for all pychained errors."""


class InvalidCapacity(ChainedTableError, ValueError):
    """Capacity is not a positive int, or a resize target does not grow the table."""


class InvalidKey(ChainedTableError, ValueError):
    """Key is None."""
