"""Abstract base class for translation backends and the result types they return."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.translation.errors import FetchError, TranslationError

if TYPE_CHECKING:
    from src.languages.catalog import Language


@dataclass(frozen=True)
class TranslationRequest:
    """One translate call's input. Built per call, never stored."""

    text: str
    source_language: str
    target_language: str


@dataclass
class TranslationResult:
    """Outcome of a translation: either ``translated_text`` or ``error`` is set."""

    source_language: str
    target_language: str
    backend_used: str
    translated_text: str | None = None
    error: TranslationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, request: TranslationRequest, text: str, backend: str) -> TranslationResult:
        return cls(
            source_language=request.source_language,
            target_language=request.target_language,
            backend_used=backend,
            translated_text=text,
        )

    @classmethod
    def failure(
        cls, request: TranslationRequest, error: TranslationError, backend: str
    ) -> TranslationResult:
        return cls(
            source_language=request.source_language,
            target_language=request.target_language,
            backend_used=backend,
            error=error,
        )


@dataclass
class LanguagesResult:
    """Outcome of a language list fetch."""

    languages: list[Language] = field(default_factory=list)
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TranslationBackend(ABC):
    """Abstract interface that all translation backends must implement."""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> TranslationResult:
        """Translate text from one language tag to another.

        Args:
            text: The text to translate. Never empty.
            source_language: Tag of the input language (e.g. "es").
            target_language: Tag of the language to translate into (e.g. "en").

        Returns:
            TranslationResult holding the translated text, or the
            TransportError / DecodeError that prevented it. Backends report
            failures through the result instead of raising.
        """
        ...

    @abstractmethod
    async def fetch_languages(self) -> LanguagesResult:
        """Fetch the list of languages the provider supports."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend is properly configured."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this backend."""
        ...

    async def aclose(self) -> None:
        """Release network resources. Backends without any keep this no-op."""
        return None
