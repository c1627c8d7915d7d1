"""Google Translate v2 backend served through RapidAPI, using httpx."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from src.languages.catalog import PLACEHOLDER_FLAG, Language
from src.translation.base import (
    LanguagesResult,
    TranslationBackend,
    TranslationRequest,
    TranslationResult,
)
from src.translation.config import RapidAPIConfig
from src.translation.errors import DecodeError, FetchError, TranslationError, TransportError

logger = logging.getLogger(__name__)


class RapidAPIBackend(TranslationBackend):
    """Translation backend that calls the RapidAPI Google Translate endpoint.

    Every ``translate`` call issues exactly one POST; nothing is retried or
    cached. Failures come back inside the result rather than being raised.

    Args:
        config: Endpoint, credentials and timeout.
        client: Optional pre-built ``httpx.AsyncClient`` (e.g. with a mock
            transport). When omitted the backend creates and owns one.
    """

    def __init__(
        self,
        config: RapidAPIConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or RapidAPIConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._config.timeout)

    async def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
    ) -> TranslationResult:
        """Translate text with a single form-encoded POST.

        Args:
            text: The text to translate.
            source_language: Tag of the input language.
            target_language: Tag of the output language.

        Returns:
            TranslationResult with the first translation, ``""`` when the
            provider returned no translations, or a TransportError /
            DecodeError.
        """
        request = TranslationRequest(text, source_language, target_language)
        logger.info(
            "[INFO] Translating %d characters %s -> %s",
            len(text),
            source_language,
            target_language,
        )
        start_time = time.perf_counter()

        try:
            payload = await self._request_json(
                "POST",
                self._config.base_url,
                data={"q": text, "target": target_language, "source": source_language},
            )
            translated = _parse_translation(payload)
        except TranslationError as exc:
            logger.warning("Translation %s -> %s failed: %s", source_language, target_language, exc)
            return TranslationResult.failure(request, exc, self.name)

        logger.info("[INFO] Translation took %.2fs", time.perf_counter() - start_time)
        return TranslationResult.success(request, translated, self.name)

    async def fetch_languages(self) -> LanguagesResult:
        """GET the provider's language list.

        Returns:
            LanguagesResult with one placeholder-flagged Language per tag, or
            a FetchError wrapping the transport/decode failure.
        """
        try:
            payload = await self._request_json("GET", self._config.languages_url)
            languages = _parse_languages(payload)
        except TranslationError as exc:
            logger.warning("Fetching languages failed: %s", exc)
            return LanguagesResult(error=FetchError.from_error(exc))

        logger.info("[INFO] Fetched %d languages", len(languages))
        return LanguagesResult(languages=languages)

    def is_available(self) -> bool:
        """True if an API key is configured.

        Returns:
            Whether requests can be authenticated.
        """
        return bool(self._config.api_key)

    @property
    def name(self) -> str:
        return "rapidapi"

    async def aclose(self) -> None:
        """Close the HTTP client if this backend created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Accept-Encoding": "application/gzip",
            "X-RapidAPI-Key": self._config.api_key,
            "X-RapidAPI-Host": self._config.host,
        }

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            TransportError: Connection failure, timeout or non-2xx status.
            DecodeError: Body is not valid JSON.
        """
        try:
            response = await self._client.request(
                method,
                url,
                headers=self._headers(),
                timeout=self._config.timeout,
                **kwargs,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"{method} {url} timed out after {self._config.timeout}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"{method} {url} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Response from {url} is not valid JSON: {exc}") from exc


def _parse_translation(payload: Any) -> str:
    """Extract the first ``translatedText`` from a v2 translate response.

    Expected shape::

        {"data": {"translations": [{"translatedText": "..."}, ...]}}

    An empty ``translations`` list is a valid response and yields ``""``.

    Raises:
        DecodeError: If the payload does not have that shape.
    """
    try:
        translations = payload["data"]["translations"]
    except (KeyError, TypeError) as exc:
        raise DecodeError(f"Missing data.translations in response: {exc!r}") from exc
    if not isinstance(translations, list):
        raise DecodeError("data.translations is not a list")
    if not translations:
        return ""

    first = translations[0]
    text = first.get("translatedText") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise DecodeError("First translation has no translatedText string")
    return text


def _parse_languages(payload: Any) -> list[Language]:
    """Map ``{"data": {"languages": [{"language": tag}, ...]}}`` to Languages.

    Duplicate tags keep their first occurrence.

    Raises:
        DecodeError: If the payload does not have that shape.
    """
    try:
        entries = payload["data"]["languages"]
    except (KeyError, TypeError) as exc:
        raise DecodeError(f"Missing data.languages in response: {exc!r}") from exc
    if not isinstance(entries, list):
        raise DecodeError("data.languages is not a list")

    languages: list[Language] = []
    seen: set[str] = set()
    for entry in entries:
        tag = entry.get("language") if isinstance(entry, dict) else None
        if not isinstance(tag, str) or not tag:
            raise DecodeError(f"Invalid language entry: {entry!r}")
        if tag in seen:
            continue
        seen.add(tag)
        languages.append(Language(name=tag, flag_asset=PLACEHOLDER_FLAG, tag=tag))
    return languages
