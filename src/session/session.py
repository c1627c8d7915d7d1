"""Translation session: the state behind the translate screen and the actions on it.

The session holds the two language tags and the two texts. It is free of any
UI framework so it can be driven directly from tests. ``translate`` is a
coroutine meant to be awaited on the presentation event loop; the backend only
returns a result, and the session applies it after the await, so the fields
are only ever written from that loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from src.languages.catalog import Language, LanguageCatalog
from src.languages.selection import (
    LanguageSelection,
    LanguageSelectionMediator,
    SelectionRequest,
    SelectionSlot,
)
from src.translation.base import TranslationBackend, TranslationResult
from src.translation.errors import ErrorKind

logger = logging.getLogger(__name__)

ErrorSink = Callable[[ErrorKind, str], None]


def log_error(kind: ErrorKind, message: str) -> None:
    """Default error sink: log and move on."""
    logger.warning("%s: %s", kind.label, message)


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the four session fields."""

    source_tag: str
    target_tag: str
    input_text: str
    output_text: str


class TranslationSession:
    """Holds the current language pair and texts; runs swap/clear/translate.

    Args:
        backend:     Backend used by ``translate``.
        on_error:    Sink for failed translations and catalog refreshes.
        on_change:   Called with the session after every state change.
        source_tag:  Initial source language tag.
        target_tag:  Initial target language tag.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        on_error: ErrorSink | None = None,
        on_change: Callable[[TranslationSession], None] | None = None,
        source_tag: str = "es",
        target_tag: str = "en",
    ) -> None:
        self._backend = backend
        self._on_error = on_error or log_error
        self._on_change = on_change

        self.source_tag = source_tag
        self.target_tag = target_tag
        self.input_text = ""
        self.output_text = ""

    @property
    def state(self) -> SessionState:
        return SessionState(self.source_tag, self.target_tag, self.input_text, self.output_text)

    # ------------------------------------------------------------------
    # Language selection
    # ------------------------------------------------------------------

    def select_language(self, language: Language, slot: SelectionSlot) -> None:
        if slot is SelectionSlot.SOURCE:
            self.source_tag = language.tag
        else:
            self.target_tag = language.tag
        logger.debug("%s language set to %s", slot.value, language.tag)
        self._changed()

    def apply_selection(self, selection: LanguageSelection) -> None:
        self.select_language(selection.language, selection.slot)

    def request_language(
        self,
        mediator: LanguageSelectionMediator,
        catalog: LanguageCatalog,
        slot: SelectionSlot,
    ) -> SelectionRequest:
        """Open the picker for ``slot`` and apply whatever the user picks."""
        return mediator.present(catalog, slot, on_selected=self.apply_selection)

    # ------------------------------------------------------------------
    # Text actions
    # ------------------------------------------------------------------

    def set_input(self, text: str, notify: bool = True) -> None:
        """Store typed text. With ``notify=False`` the change listener is skipped,
        for views that already show the text they just reported."""
        self.input_text = text
        if notify:
            self._changed()

    def swap(self) -> None:
        """Exchange source and target; each text travels with its language."""
        self.source_tag, self.target_tag, self.input_text, self.output_text = (
            self.target_tag,
            self.source_tag,
            self.output_text,
            self.input_text,
        )
        self._changed()

    def clear(self) -> None:
        self.input_text = ""
        self.output_text = ""
        self._changed()

    async def translate(self) -> TranslationResult | None:
        """Translate ``input_text`` and store the result in ``output_text``.

        Blank input is ignored: the backend is not called and None is
        returned. On failure ``output_text`` is left as it was and the error
        is reported to the error sink.
        """
        text = self.input_text
        if not text.strip():
            logger.debug("Ignoring translate request with blank input")
            return None

        result = await self._backend.translate(text, self.source_tag, self.target_tag)
        if result.ok:
            self.output_text = result.translated_text or ""
            self._changed()
        else:
            self._on_error(result.error.kind, result.error.message)
        return result

    async def refresh_catalog(self, catalog: LanguageCatalog) -> bool:
        """Refresh ``catalog`` from the backend, reporting failure to the sink."""
        result = await catalog.refresh(self._backend)
        if not result.ok:
            self._on_error(result.error.kind, result.error.message)
        return result.ok

    async def close(self) -> None:
        """Release the backend's network resources at the end of the session."""
        await self._backend.aclose()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self)
