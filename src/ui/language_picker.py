"""Language picker dialog, the flet surface behind the selection mediator."""

from __future__ import annotations

import flet as ft

from src.languages.catalog import Language
from src.languages.selection import LanguagePicker, SelectionRequest
from src.ui.components import flag_image


class LanguagePickerDialog(LanguagePicker):
    """Shows the catalog in a modal list and answers the request.

    Tapping a row chooses that language and closes the dialog. Closing the
    dialog any other way cancels the request.
    """

    def __init__(self, page: ft.Page) -> None:
        self.page = page

    def show(self, request: SelectionRequest) -> None:
        rows = ft.ListView(
            controls=[self._language_row(request, language) for language in request.catalog],
            spacing=0,
            height=320,
        )
        dialog = ft.AlertDialog(
            title=ft.Text(request.slot.label, size=18, weight=ft.FontWeight.BOLD),
            content=ft.Container(width=360, content=rows),
            actions=[
                ft.TextButton("Cancel", on_click=lambda _: self._dismiss(request)),
            ],
            on_dismiss=lambda _: request.cancel(),
        )
        self.page.show_dialog(dialog)

    def _language_row(self, request: SelectionRequest, language: Language) -> ft.ListTile:
        return ft.ListTile(
            leading=flag_image(language, language.tag),
            title=ft.Text(language.name),
            subtitle=ft.Text(language.tag, size=11, color="#757575"),
            on_click=lambda _, lang=language: self._choose(request, lang),
        )

    def _choose(self, request: SelectionRequest, language: Language) -> None:
        # Answer before closing so on_dismiss finds the request already done
        request.choose(language)
        self.page.pop_dialog()

    def _dismiss(self, request: SelectionRequest) -> None:
        request.cancel()
        self.page.pop_dialog()
