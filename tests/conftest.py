"""
Shared fixtures: an in-memory backend and an httpx mock transport builder.
"""

import json

import httpx
import pytest

from src.languages.catalog import Language
from src.translation.base import (
    LanguagesResult,
    TranslationBackend,
    TranslationRequest,
    TranslationResult,
)
from src.translation.config import RapidAPIConfig
from src.translation.rapidapi import RapidAPIBackend


class StubBackend(TranslationBackend):
    """Backend that returns canned results and records calls."""

    def __init__(self, text="", error=None, languages=None, fetch_error=None):
        self.text = text
        self.error = error
        self.languages = languages or []
        self.fetch_error = fetch_error
        self.calls = []
        self.closed = False

    async def translate(self, text, source_language, target_language):
        self.calls.append((text, source_language, target_language))
        request = TranslationRequest(text, source_language, target_language)
        if self.error is not None:
            return TranslationResult.failure(request, self.error, self.name)
        return TranslationResult.success(request, self.text, self.name)

    async def fetch_languages(self):
        if self.fetch_error is not None:
            return LanguagesResult(error=self.fetch_error)
        return LanguagesResult(languages=list(self.languages))

    def is_available(self):
        return True

    @property
    def name(self):
        return "stub"

    async def aclose(self):
        self.closed = True


@pytest.fixture
def stub_backend():
    """Factory for StubBackend instances."""
    return StubBackend


@pytest.fixture
def french():
    return Language(name="French", flag_asset="flag_fr", tag="fr")


@pytest.fixture
def rapidapi_config():
    return RapidAPIConfig(
        base_url="https://translate.test/language/translate/v2",
        host="translate.test",
        api_key="test-key",
        timeout=2.0,
    )


@pytest.fixture
def mock_backend(rapidapi_config):
    """Build a RapidAPIBackend whose HTTP calls go to ``handler``.

    Returns ``(backend, requests)`` where ``requests`` collects every
    httpx.Request the backend sent.
    """

    def _build(handler):
        requests = []

        def _record(request):
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return RapidAPIBackend(rapidapi_config, client=client), requests

    return _build


def json_response(payload, status_code=200):
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"),
                          headers={"Content-Type": "application/json"})


@pytest.fixture
def respond_json():
    """Handler factory that always answers with ``payload``."""
    def _make(payload, status_code=200):
        return lambda request: json_response(payload, status_code)
    return _make
