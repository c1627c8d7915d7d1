import logging

import flet as ft

from src.diagnostics.requirements import DOCS_URL, blocking_issues, check_startup_requirements
from src.translation import TranslationConfig, get_backend
from src.ui.app import TranslatorApp

logger = logging.getLogger(__name__)


class ParlaApp:
    """Top-level navigator: requirements gate first, then the translate screen."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        TranslatorApp.configure_page(page)
        self._requirements_dialog: ft.AlertDialog | None = None
        self._requirements_items: ft.Column | None = None

        issues = check_startup_requirements()
        if blocking_issues(issues):
            self._show_requirements_gate(issues)
            return

        self._show_translator()

    def _show_translator(self) -> None:
        # check_startup_requirements() already parsed this without error
        config = TranslationConfig.from_env()
        backend = get_backend(config)
        logger.info("[INFO] Using %s backend (%s)", backend.name, config.rapidapi.host)
        TranslatorApp(page=self.page, backend=backend, config=config)

    def _show_requirements_gate(self, issues) -> None:
        """Block the app until requirements are satisfied."""
        self.page.controls.clear()
        self.page.add(
            ft.Container(
                expand=True,
                alignment=ft.Alignment.CENTER,
                content=ft.Column(
                    [
                        ft.Text("Parla", size=28, weight=ft.FontWeight.BOLD),
                        ft.Text(
                            "Checking startup requirements...",
                            size=13,
                            color="#757575",
                        ),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    spacing=6,
                    tight=True,
                ),
            )
        )
        self.page.update()

        self._requirements_items = ft.Column(
            controls=self._build_requirement_controls(issues),
            spacing=6,
        )

        intro = ft.Text(
            "Parla cannot translate until the missing requirements are configured.",
            size=13,
        )

        content = ft.Container(
            width=420,
            content=ft.Column(
                [intro, ft.Divider(height=1), self._requirements_items],
                spacing=10,
                tight=True,
                scroll=ft.ScrollMode.AUTO,
            ),
        )

        self._requirements_dialog = ft.AlertDialog(
            title=ft.Text("Missing requirements", size=18, weight=ft.FontWeight.BOLD),
            content=content,
            actions=[
                ft.TextButton(
                    "Open documentation",
                    on_click=lambda _: self.page.launch_url(DOCS_URL),
                ),
                ft.FilledButton(
                    "Re-check",
                    on_click=self._on_recheck_requirements,
                    style=ft.ButtonStyle(bgcolor="#1976D2", color="white"),
                ),
            ],
            modal=True,
        )
        self.page.show_dialog(self._requirements_dialog)

    def _build_requirement_controls(self, issues) -> list[ft.Control]:
        items: list[ft.Control] = []
        for issue in issues:
            prefix = "[WARNING]" if issue.severity == "warning" else "[ERROR]"
            items.append(ft.Text(f"{prefix} {issue.title}", size=13, weight=ft.FontWeight.W_600))
            items.append(ft.Text(issue.details, size=12, color="#616161"))
        return items

    def _on_recheck_requirements(self, e) -> None:
        issues = check_startup_requirements()
        if blocking_issues(issues):
            if self._requirements_items is not None:
                self._requirements_items.controls = self._build_requirement_controls(issues)
                self.page.update()
            return

        if self._requirements_dialog is not None:
            self.page.pop_dialog()
        self._show_translator()


def main(page: ft.Page) -> None:
    """Flet app entry point — called by ft.app() with the page."""
    ParlaApp(page)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ft.app(main, assets_dir="assets")
