"""Custom exception types for listshaper."""

from __future__ import annotations


class ListShaperError(Exception):
    """Base class for all listshaper errors."""


class MissingKeyError(ListShaperError, KeyError):
    def __init__(self, key: str, index: int | None = None) -> None:
        self.key = key
        self.index = index
        if index is None:
            message = f"Record has no '{key}' field."
        else:
            message = f"Record {index} has no '{key}' field."
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class RecordTypeError(ListShaperError, TypeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotConfiguredError(ListShaperError):
    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"{what} is not configured.")


class ConfigError(ListShaperError, ValueError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class StorageError(ListShaperError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class StartupValidationError(ListShaperError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
