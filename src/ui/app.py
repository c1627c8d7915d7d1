"""Translate screen: language pair, input/output text and the translate actions.

The screen is a thin view over a TranslationSession: every button forwards
to a session operation, and the session's change callback re-renders the
fields. Language buttons open the picker through the selection mediator.
"""

from __future__ import annotations

import logging

import flet as ft

from src.languages import LanguageCatalog, LanguageSelectionMediator, SelectionSlot
from src.session import TranslationSession
from src.translation import ErrorKind, TranslationBackend, TranslationConfig
from src.ui.components import (
    action_button,
    char_count_label,
    language_button,
    section_header,
    text_area,
)
from src.ui.language_picker import LanguagePickerDialog

logger = logging.getLogger(__name__)


class TranslatorApp:
    """Main screen of the app.

    Args:
        page:     Flet Page.
        backend:  Translation backend shared by the session and catalog refresh.
        config:   App configuration (default language pair, catalog refresh).
        catalog:  Languages offered by the picker. Defaults to the built-in list.
    """

    def __init__(
        self,
        page: ft.Page,
        backend: TranslationBackend,
        config: TranslationConfig,
        catalog: LanguageCatalog | None = None,
    ) -> None:
        self.page = page
        self._config = config
        self._catalog = catalog if catalog is not None else LanguageCatalog()
        self._mediator = LanguageSelectionMediator(LanguagePickerDialog(page))
        self._session = TranslationSession(
            backend,
            on_error=self._on_session_error,
            on_change=lambda _: self._render(),
            source_tag=config.default_source,
            target_tag=config.default_target,
        )
        self._translating = 0

        self._build_ui()
        self._render()
        self.page.on_close = self._on_page_close

        if config.refresh_languages:
            self.page.run_task(self._refresh_catalog)

    # ------------------------------------------------------------------
    # Page setup (called once per app launch, not per screen)
    # ------------------------------------------------------------------

    @staticmethod
    def configure_page(page: ft.Page) -> None:
        page.title = "Parla"
        page.window.width = 480
        page.window.height = 760
        page.window.min_width = 380
        page.window.min_height = 600
        page.theme_mode = ft.ThemeMode.LIGHT
        page.bgcolor = "#F5F5F5"

    # ------------------------------------------------------------------
    # Build UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self.page.controls.clear()

        header = ft.Container(
            content=ft.Text("Parla", size=20, weight=ft.FontWeight.BOLD, color="white"),
            bgcolor="#1976D2",
            padding=ft.padding.symmetric(horizontal=15, vertical=10),
        )

        # ── Language pair ─────────────────────────────────────────────
        self._source_slot = ft.Container()
        self._target_slot = ft.Container()
        swap_button = ft.IconButton(
            icon=ft.Icons.SWAP_HORIZ,
            tooltip="Swap languages",
            on_click=self._on_swap,
            icon_color="#1976D2",
        )
        language_row = ft.Row(
            [self._source_slot, swap_button, self._target_slot],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        # ── Text areas ────────────────────────────────────────────────
        self._input_field = text_area(hint_text="Enter text", on_change=self._on_input_change)
        self._input_count = char_count_label()
        self._output_field = text_area(read_only=True)
        self._output_count = char_count_label()

        # ── Actions ───────────────────────────────────────────────────
        self._btn_translate = action_button(
            "Translate", icon=ft.Icons.TRANSLATE, on_click=self._on_translate
        )
        self._btn_clear = action_button(
            "Clear", icon=ft.Icons.CLEAR, on_click=self._on_clear, primary=False
        )
        self._progress = ft.ProgressRing(width=18, height=18, stroke_width=2, visible=False)
        action_row = ft.Row(
            [self._btn_translate, self._btn_clear, self._progress],
            spacing=10,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        # ── Assemble ──────────────────────────────────────────────────
        self.page.add(
            ft.Column(
                [
                    header,
                    language_row,
                    section_header("Text"),
                    self._input_field,
                    self._input_count,
                    action_row,
                    ft.Divider(height=1),
                    section_header("Translation"),
                    self._output_field,
                    self._output_count,
                ],
                spacing=12,
                expand=True,
            )
        )
        self.page.update()

    def _render(self) -> None:
        """Copy session state into the controls."""
        session = self._session
        self._source_slot.content = language_button(
            self._catalog.find(session.source_tag),
            session.source_tag,
            on_click=self._on_pick_source,
        )
        self._target_slot.content = language_button(
            self._catalog.find(session.target_tag),
            session.target_tag,
            on_click=self._on_pick_target,
        )
        self._input_field.value = session.input_text
        self._output_field.value = session.output_text
        self._set_count(self._input_count, session.input_text)
        self._set_count(self._output_count, session.output_text)
        self.page.update()

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_input_change(self, e) -> None:
        # The field already shows the text; only the count needs redrawing
        text = self._input_field.value or ""
        self._session.set_input(text, notify=False)
        self._set_count(self._input_count, text)
        self._input_count.update()

    def _on_pick_source(self, e) -> None:
        self._session.request_language(self._mediator, self._catalog, SelectionSlot.SOURCE)

    def _on_pick_target(self, e) -> None:
        self._session.request_language(self._mediator, self._catalog, SelectionSlot.TARGET)

    def _on_swap(self, e) -> None:
        self._session.swap()

    def _on_clear(self, e) -> None:
        self._session.clear()

    async def _on_translate(self, e) -> None:
        # Flet awaits async handlers on the page loop, so the session is
        # only mutated from here.
        self._set_translating(+1)
        try:
            await self._session.translate()
        finally:
            self._set_translating(-1)

    async def _refresh_catalog(self) -> None:
        if await self._session.refresh_catalog(self._catalog):
            self._render()
            self._show_snackbar(f"Loaded {len(self._catalog)} languages")

    async def _on_page_close(self, e) -> None:
        await self._session.close()

    def _on_session_error(self, kind: ErrorKind, message: str) -> None:
        logger.warning("%s: %s", kind.label, message)
        self._show_snackbar(f"{kind.label}: {message}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _set_translating(self, delta: int) -> None:
        self._translating += delta
        self._progress.visible = self._translating > 0
        self.page.update()

    @staticmethod
    def _set_count(label: ft.Text, text: str) -> None:
        count = len(text)
        label.value = f"{count:,} characters" if count else "No content"

    def _show_snackbar(self, msg: str) -> None:
        self.page.show_dialog(ft.SnackBar(content=ft.Text(msg)))
        self.page.update()
