"""Selectable languages and the picker handoff."""

from src.languages.catalog import (
    DEFAULT_LANGUAGES,
    PLACEHOLDER_FLAG,
    Language,
    LanguageCatalog,
    default_languages,
    fetch_remote_languages,
)
from src.languages.selection import (
    LanguagePicker,
    LanguageSelection,
    LanguageSelectionMediator,
    SelectionRequest,
    SelectionSlot,
)

__all__ = [
    "DEFAULT_LANGUAGES",
    "Language",
    "LanguageCatalog",
    "LanguagePicker",
    "LanguageSelection",
    "LanguageSelectionMediator",
    "PLACEHOLDER_FLAG",
    "SelectionRequest",
    "SelectionSlot",
    "default_languages",
    "fetch_remote_languages",
]
