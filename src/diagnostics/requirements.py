"""Startup requirement checks.

This module performs best-effort checks for things Python packaging cannot
guarantee (interpreter version, API credentials).

The UI can use these checks to block startup until requirements are met.
"""

from __future__ import annotations

from dataclasses import dataclass
import sys

from src.translation.config import ENV_PREFIX, TranslationConfig


DOCS_URL = "https://rapidapi.com/googlecloud/api/google-translate1"

MIN_PYTHON = (3, 10)


@dataclass(frozen=True)
class RequirementIssue:
    id: str
    title: str
    details: str
    severity: str = "error"  # "error" | "warning"


def check_startup_requirements(config: TranslationConfig | None = None) -> list[RequirementIssue]:
    """Check the environment; reads the config from ``PARLA_*`` variables if not given.

    An unreadable config is reported as a blocking issue instead of raised.
    """
    issues: list[RequirementIssue] = []

    if config is None:
        try:
            config = TranslationConfig.from_env()
        except ValueError as exc:
            issues.append(
                RequirementIssue(
                    id="config",
                    title="Invalid configuration",
                    details=f"{exc}. Fix the environment variable and re-check.",
                    severity="error",
                )
            )
            return issues

    if sys.version_info < MIN_PYTHON:
        issues.append(
            RequirementIssue(
                id="python_version",
                title=f"Python >= {MIN_PYTHON[0]}.{MIN_PYTHON[1]}",
                details=f"Current version: {sys.version.split()[0]}",
                severity="error",
            )
        )

    if not config.rapidapi.api_key:
        issues.append(
            RequirementIssue(
                id="api_key",
                title="RapidAPI key (translation)",
                details=(
                    f"Set {ENV_PREFIX}RAPIDAPI_KEY to your RapidAPI key for "
                    f"{config.rapidapi.host} and restart, or re-check."
                ),
                severity="error",
            )
        )

    if not config.rapidapi.base_url.startswith("https://"):
        issues.append(
            RequirementIssue(
                id="insecure_url",
                title="Translation endpoint is not HTTPS",
                details=f"{config.rapidapi.base_url} will send the API key in clear text.",
                severity="warning",
            )
        )

    return issues


def blocking_issues(issues: list[RequirementIssue]) -> list[RequirementIssue]:
    """Return only the issues that must be fixed before the app can start."""
    return [issue for issue in issues if issue.severity == "error"]
