from __future__ import annotations

"""Reusable UI components for the translate screen."""

import flet as ft

from src.languages.catalog import Language

FLAG_ASSET_DIR = "flags"


def section_header(title: str) -> ft.Text:
    """Create a styled section header."""
    return ft.Text(title, size=14, weight=ft.FontWeight.BOLD, color="#1976D2")


def text_area(
    read_only: bool = False,
    hint_text: str | None = None,
    on_change=None,
    min_lines: int = 6,
    max_lines: int = 12,
) -> ft.TextField:
    """Create a multiline text area for input or translated output."""
    return ft.TextField(
        multiline=True,
        read_only=read_only,
        hint_text=hint_text,
        on_change=on_change,
        min_lines=min_lines,
        max_lines=max_lines,
        expand=True,
        text_size=14,
    )


def flag_image(language: Language | None, tag: str, size: int = 28) -> ft.Control:
    """Flag for ``language``; falls back to the upper-cased tag if the asset is missing."""
    fallback = ft.Text(tag.upper(), size=12, weight=ft.FontWeight.BOLD, color="#1976D2")
    if language is None:
        return fallback
    return ft.Image(
        src=f"{FLAG_ASSET_DIR}/{language.flag_asset}.png",
        width=size,
        height=size,
        error_content=fallback,
    )


def language_button(language: Language | None, tag: str, on_click=None) -> ft.Container:
    """Bordered flag + name button that opens the language picker."""
    name = language.name if language is not None else tag
    return ft.Container(
        content=ft.Row(
            [flag_image(language, tag), ft.Text(name, size=13)],
            spacing=8,
            tight=True,
        ),
        border=ft.border.all(1, "#388E3C"),
        border_radius=15,
        padding=ft.padding.symmetric(horizontal=10, vertical=6),
        on_click=on_click,
        ink=True,
    )


def action_button(
    text: str,
    icon: ft.Icons | None = None,
    on_click=None,
    primary: bool = True,
) -> ft.Control:
    """Create a styled action button."""
    if primary:
        return ft.FilledButton(
            text,
            icon=icon,
            on_click=on_click,
            style=ft.ButtonStyle(bgcolor="#1976D2", color="white"),
        )
    return ft.OutlinedButton(
        text,
        icon=icon,
        on_click=on_click,
    )


def char_count_label(count: int = 0) -> ft.Text:
    """Create a character count label."""
    return ft.Text(
        f"{count:,} characters" if count else "No content",
        size=12,
        color="#757575",
    )
