"""One-shot handoff of a picked language from a picker surface to its requester.

The requester asks the mediator to present the catalog for a slot. The picker
surface receives a ``SelectionRequest`` and either calls ``choose`` with the
language the user tapped or ``cancel`` when the user dismisses it. Each request
delivers at most once; presenting again creates a new request.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from src.languages.catalog import Language, LanguageCatalog

logger = logging.getLogger(__name__)


class SelectionSlot(str, Enum):
    """Which side of the translation pair a selection applies to."""

    SOURCE = "source"
    TARGET = "target"

    @property
    def label(self) -> str:
        return "Translate from" if self is SelectionSlot.SOURCE else "Translate to"


@dataclass(frozen=True)
class LanguageSelection:
    language: Language
    slot: SelectionSlot


class SelectionRequest:
    """A single presentation of the picker.

    Args:
        catalog:      Languages to offer.
        slot:         Slot that asked for the selection; echoed back on delivery.
        on_selected:  Called once with the LanguageSelection.
        on_cancelled: Called once if the user dismisses without choosing.
    """

    def __init__(
        self,
        catalog: LanguageCatalog,
        slot: SelectionSlot,
        on_selected: Callable[[LanguageSelection], None],
        on_cancelled: Callable[[], None] | None = None,
    ) -> None:
        self.catalog = catalog
        self.slot = slot
        self._on_selected = on_selected
        self._on_cancelled = on_cancelled
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def choose(self, language: Language) -> bool:
        """Deliver ``language`` for this request's slot.

        Returns False without delivering if the request was already answered.
        """
        if self._done:
            logger.debug("Ignoring selection of %s: %s request already answered", language.tag, self.slot.value)
            return False
        self._done = True
        self._on_selected(LanguageSelection(language=language, slot=self.slot))
        return True

    def cancel(self) -> bool:
        """Close the request without a result."""
        if self._done:
            return False
        self._done = True
        logger.debug("Language selection for %s cancelled", self.slot.value)
        if self._on_cancelled is not None:
            self._on_cancelled()
        return True


class LanguagePicker(ABC):
    """Surface that shows the catalog and answers a SelectionRequest."""

    @abstractmethod
    def show(self, request: SelectionRequest) -> None:
        """Display ``request.catalog`` and answer ``request`` when the user acts."""
        ...


class LanguageSelectionMediator:
    """Connects a requester to a picker surface without either knowing the other."""

    def __init__(self, picker: LanguagePicker) -> None:
        self._picker = picker

    def present(
        self,
        catalog: LanguageCatalog,
        slot: SelectionSlot,
        on_selected: Callable[[LanguageSelection], None],
        on_cancelled: Callable[[], None] | None = None,
    ) -> SelectionRequest:
        request = SelectionRequest(catalog, slot, on_selected, on_cancelled)
        logger.debug("Presenting %d languages for %s", len(catalog), slot.value)
        self._picker.show(request)
        return request

    async def select(
        self, catalog: LanguageCatalog, slot: SelectionSlot
    ) -> LanguageSelection | None:
        """Present the picker and wait for the answer; None if cancelled."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future[LanguageSelection | None] = loop.create_future()

        def _resolve(selection: LanguageSelection | None) -> None:
            if not future.done():
                future.set_result(selection)

        self.present(catalog, slot, on_selected=_resolve, on_cancelled=lambda: _resolve(None))
        return await future
