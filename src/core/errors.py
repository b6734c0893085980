"""
Custom exceptions and error handling for Kilometer Trips.

Every failure the handler can surface is one of three kinds, each with its
own HTTP status. The raw message is returned to the caller alongside the code.

Usage:
    from core.errors import InvalidInputError

    raise InvalidInputError("Request body is not valid JSON")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error kinds surfaced in error response bodies."""

    INVALID_INPUT = "INVALID_INPUT"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    UNKNOWN = "UNKNOWN"


STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.STORAGE_UNAVAILABLE: 503,
    ErrorCode.UNKNOWN: 500,
}


class TripsError(Exception):
    """Base exception for all Kilometer Trips errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)


class InvalidInputError(TripsError):
    """Request body or query parameters could not be used."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.INVALID_INPUT)


class StorageUnavailableError(TripsError):
    """The storage backend failed or could not be reached."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.STORAGE_UNAVAILABLE)


class UnknownError(TripsError):
    """Anything not classified above."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.UNKNOWN)
