"""Custom exceptions for the console exercises.

Every domain failure is reported to the user as a printed message and the
program keeps running, so each exception carries the message to print.
"""


class ExerciseError(Exception):
    """Base class for recoverable, user-facing errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordNotFoundError(ExerciseError, LookupError):
    """Raised when a key is not present in a record store."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class DuplicateRecordError(ExerciseError):
    """Raised when adding a key that already exists in a store without merge semantics."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class CapacityExceededError(ExerciseError):
    """Raised when inserting into a full fixed-capacity store.

    The store is left untouched.
    """

    def __init__(self, capacity: int, message: str):
        super().__init__(message)
        self.capacity = capacity


class InsufficientQuantityError(ExerciseError):
    """Raised when a decrement would drive a stored quantity below zero."""

    def __init__(self, key: str, requested: int, available: int, message: str):
        super().__init__(message)
        self.key = key
        self.requested = requested
        self.available = available


class EmptyStoreError(ExerciseError):
    """Raised when listing a store that holds no records."""


class EmptySeriesError(ExerciseError, ValueError):
    """Raised when a statistic needs at least one sample and got none."""
