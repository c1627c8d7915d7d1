"""Language value type and the catalog of languages offered to the user.

The catalog starts from a fixed list of five languages so that language
selection works without any network access. It can optionally be refreshed
from the provider's language-list endpoint; a refresh replaces the whole list
on success and leaves it untouched on failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from src.translation.base import LanguagesResult, TranslationBackend

logger = logging.getLogger(__name__)

# Flag shown for languages that come from the remote list
PLACEHOLDER_FLAG = "default_flag"


@dataclass(frozen=True)
class Language:
    """A selectable language."""

    name: str           # display name
    flag_asset: str     # image resource id, resolved by the UI
    tag: str            # code sent to the translation API, e.g. "en"

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError(f"Language {self.name!r} has an empty tag")


DEFAULT_LANGUAGES: tuple[Language, ...] = (
    Language(name="English", flag_asset="flag_gb", tag="en"),
    Language(name="Spanish", flag_asset="flag_mx", tag="es"),
    Language(name="French", flag_asset="flag_fr", tag="fr"),
    Language(name="German", flag_asset="flag_de", tag="de"),
    Language(name="Portuguese", flag_asset="flag_pt", tag="pt"),
)


def default_languages() -> list[Language]:
    """Return the fixed fallback list, in display order."""
    return list(DEFAULT_LANGUAGES)


async def fetch_remote_languages(backend: TranslationBackend) -> LanguagesResult:
    """Fetch the provider's language list through ``backend``.

    Remote entries only carry a tag, so each becomes
    ``Language(name=tag, flag_asset=PLACEHOLDER_FLAG, tag=tag)``.
    """
    return await backend.fetch_languages()


class LanguageCatalog:
    """Ordered, whole-list-replaceable collection of languages with unique tags."""

    def __init__(self, languages: Iterable[Language] | None = None) -> None:
        self._languages: tuple[Language, ...] = ()
        self._replace(default_languages() if languages is None else languages)

    @property
    def languages(self) -> tuple[Language, ...]:
        return self._languages

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __getitem__(self, index: int) -> Language:
        return self._languages[index]

    def find(self, tag: str) -> Language | None:
        """Return the language with ``tag``, or None if the catalog has none."""
        for language in self._languages:
            if language.tag == tag:
                return language
        return None

    def tags(self) -> list[str]:
        return [language.tag for language in self._languages]

    async def refresh(self, backend: TranslationBackend) -> LanguagesResult:
        """Replace the catalog with the remote list if the fetch succeeds.

        On failure the current languages are kept and the failed result is
        returned so the caller can report it.
        """
        result = await fetch_remote_languages(backend)
        if not result.ok:
            logger.warning("Keeping %d languages: %s", len(self), result.error)
            return result
        if not result.languages:
            logger.warning("Remote language list was empty, keeping current catalog")
            return result

        self._replace(result.languages)
        logger.info("[INFO] Language catalog refreshed with %d languages", len(self))
        return result

    def _replace(self, languages: Iterable[Language]) -> None:
        languages = tuple(languages)
        seen: set[str] = set()
        for language in languages:
            if language.tag in seen:
                raise ValueError(f"Duplicate language tag: {language.tag!r}")
            seen.add(language.tag)
        self._languages = languages
