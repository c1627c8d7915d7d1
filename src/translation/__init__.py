"""Translation backend: Strategy interface plus the RapidAPI implementation."""

from src.translation.base import (
    LanguagesResult,
    TranslationBackend,
    TranslationRequest,
    TranslationResult,
)
from src.translation.config import RapidAPIConfig, TranslationConfig, get_backend
from src.translation.errors import (
    DecodeError,
    ErrorKind,
    FetchError,
    TranslationError,
    TransportError,
)
from src.translation.rapidapi import RapidAPIBackend

__all__ = [
    "DecodeError",
    "ErrorKind",
    "FetchError",
    "LanguagesResult",
    "RapidAPIBackend",
    "RapidAPIConfig",
    "TranslationBackend",
    "TranslationConfig",
    "TranslationError",
    "TranslationRequest",
    "TranslationResult",
    "TransportError",
    "get_backend",
]
