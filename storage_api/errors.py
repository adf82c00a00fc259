"""Domain error vocabulary shared by stores and request handlers."""

import enum


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    NOT_UNIQUE = "NOT_UNIQUE"
    FILTER_INVALID = "FILTER_INVALID"
    INTERNAL = "INTERNAL"


class StorageError(Exception):
    """Base class for every failure a store reports.

    Handlers switch on ``kind`` only. ``original_exception`` keeps the
    underlying driver error for logs and is never sent to clients.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "storage operation failed"

    def __init__(self, message: str | None = None, original_exception: Exception | None = None) -> None:
        self.message = message or self.default_message
        self.original_exception = original_exception
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class NotFoundError(StorageError):
    kind = ErrorKind.NOT_FOUND
    default_message = "record not found"


class NotUniqueError(StorageError):
    kind = ErrorKind.NOT_UNIQUE
    default_message = "record not unique"


class FilterInvalidError(StorageError):
    kind = ErrorKind.FILTER_INVALID
    default_message = "filter not valid"


class InternalError(StorageError):
    kind = ErrorKind.INTERNAL
    default_message = "internal storage error"


_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NOT_UNIQUE: 409,
    ErrorKind.FILTER_INVALID: 400,
    ErrorKind.INTERNAL: 500,
}


def status_code_for(kind) -> int:
    """HTTP status for a domain error kind; anything unknown is a 500."""
    try:
        return _STATUS_BY_KIND[ErrorKind(kind)]
    except (ValueError, KeyError):
        return 500
