"""Error taxonomy shared by translation backends and the session."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """What went wrong, as reported to the error sink."""

    TRANSPORT = "transport"
    DECODE = "decode"
    FETCH = "fetch"

    @property
    def label(self) -> str:
        labels = {
            "transport": "Network error",
            "decode": "Unexpected response",
            "fetch": "Could not load languages",
        }
        return labels.get(self.value, self.value)


class TranslationError(Exception):
    """Base class for errors returned inside backend results."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(TranslationError):
    """Connection failure, timeout, TLS failure or non-2xx status."""

    kind = ErrorKind.TRANSPORT


class DecodeError(TranslationError):
    """Response body is not JSON or does not have the expected shape."""

    kind = ErrorKind.DECODE


class FetchError(TranslationError):
    """Language list refresh failed.

    ``cause`` is the kind of the underlying transport or decode failure.
    """

    kind = ErrorKind.FETCH

    def __init__(self, message: str, cause: ErrorKind) -> None:
        super().__init__(message)
        self.cause = cause

    @classmethod
    def from_error(cls, error: TranslationError) -> "FetchError":
        return cls(f"Language list refresh failed: {error.message}", cause=error.kind)
