"""Configuration dataclasses and factory function for the translation backend."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from src.translation.base import TranslationBackend

ENV_PREFIX = "PARLA_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class RapidAPIConfig:
    """Configuration for the RapidAPI-hosted Google Translate v2 endpoint."""

    base_url: str = "https://google-translate1.p.rapidapi.com/language/translate/v2"
    host: str = "google-translate1.p.rapidapi.com"
    api_key: str = ""
    timeout: float = 10.0

    @property
    def languages_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/languages"

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        masked = "***" if self.api_key else ""
        return (
            f"RapidAPIConfig(base_url={self.base_url!r}, host={self.host!r}, "
            f"api_key={masked!r}, timeout={self.timeout!r})"
        )


@dataclass
class TranslationConfig:
    """Top-level configuration."""

    rapidapi: RapidAPIConfig = field(default_factory=RapidAPIConfig)
    refresh_languages: bool = False
    default_source: str = "es"
    default_target: str = "en"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TranslationConfig:
        """Build a config from ``PARLA_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If ``PARLA_TIMEOUT`` is not a positive number, or
                ``PARLA_SOURCE`` / ``PARLA_TARGET`` is set but blank.
        """
        env = os.environ if environ is None else environ
        rapidapi = RapidAPIConfig()

        rapidapi.api_key = env.get(f"{ENV_PREFIX}RAPIDAPI_KEY", rapidapi.api_key).strip()
        rapidapi.host = env.get(f"{ENV_PREFIX}RAPIDAPI_HOST", rapidapi.host)
        rapidapi.base_url = env.get(f"{ENV_PREFIX}BASE_URL", rapidapi.base_url)

        raw_timeout = env.get(f"{ENV_PREFIX}TIMEOUT")
        if raw_timeout:
            try:
                rapidapi.timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {raw_timeout!r}") from None
            if rapidapi.timeout <= 0:
                raise ValueError(f"{ENV_PREFIX}TIMEOUT must be positive, got {raw_timeout!r}")

        config = cls(rapidapi=rapidapi)
        refresh = env.get(f"{ENV_PREFIX}REFRESH_LANGUAGES")
        if refresh is not None:
            config.refresh_languages = refresh.strip().lower() in _TRUTHY
        config.default_source = _tag_from_env(env, "SOURCE", config.default_source)
        config.default_target = _tag_from_env(env, "TARGET", config.default_target)
        return config


def _tag_from_env(env: Mapping[str, str], name: str, default: str) -> str:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    tag = raw.strip()
    if not tag:
        raise ValueError(f"{ENV_PREFIX}{name} must be a language tag, got {raw!r}")
    return tag


def get_backend(config: TranslationConfig | None = None) -> TranslationBackend:
    """Factory function — returns a configured backend instance.

    Args:
        config: Translation configuration. Uses defaults if None.

    Returns:
        A concrete TranslationBackend instance.
    """
    # Import here to avoid circular imports
    from src.translation.rapidapi import RapidAPIBackend

    if config is None:
        config = TranslationConfig()

    return RapidAPIBackend(config.rapidapi)
