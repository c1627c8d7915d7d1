"""
Tests for the language catalog and the selection mediator.
"""

import asyncio

import pytest

from src.languages.catalog import Language, LanguageCatalog, default_languages
from src.languages.selection import (
    LanguagePicker,
    LanguageSelection,
    LanguageSelectionMediator,
    SelectionSlot,
)
from src.translation.errors import ErrorKind, FetchError


class HoldingPicker(LanguagePicker):
    """Picker that keeps requests so the test can answer them later."""

    def __init__(self):
        self.requests = []

    def show(self, request):
        self.requests.append(request)


def test_default_languages():
    """Test the fixed fallback list and its order."""
    languages = default_languages()
    assert [lang.tag for lang in languages] == ["en", "es", "fr", "de", "pt"]
    assert languages[1] == Language(name="Spanish", flag_asset="flag_mx", tag="es")


def test_default_languages_returns_fresh_list():
    """Test that callers cannot mutate the defaults."""
    languages = default_languages()
    languages.clear()
    assert len(default_languages()) == 5


def test_language_requires_tag():
    """Test that an empty tag is rejected."""
    with pytest.raises(ValueError):
        Language(name="Nothing", flag_asset="x", tag="")


def test_catalog_rejects_duplicate_tags():
    """Test that tags must be unique within a catalog."""
    with pytest.raises(ValueError):
        LanguageCatalog([Language("English", "a", "en"), Language("Inglés", "b", "en")])


def test_catalog_find():
    """Test lookup by tag."""
    catalog = LanguageCatalog()
    assert catalog.find("fr").name == "French"
    assert catalog.find("xx") is None
    assert len(catalog) == 5
    assert catalog[0].tag == "en"


def test_catalog_refresh_replaces_whole_list(stub_backend):
    """Test that a successful refresh replaces every entry."""
    remote = [Language("af", "default_flag", "af"), Language("sq", "default_flag", "sq")]
    catalog = LanguageCatalog()

    result = asyncio.run(catalog.refresh(stub_backend(languages=remote)))

    assert result.ok
    assert catalog.tags() == ["af", "sq"]


def test_catalog_refresh_failure_keeps_catalog(stub_backend):
    """Test that a failed refresh leaves the catalog intact."""
    catalog = LanguageCatalog()
    before = catalog.languages
    backend = stub_backend(fetch_error=FetchError("boom", cause=ErrorKind.DECODE))

    result = asyncio.run(catalog.refresh(backend))

    assert not result.ok
    assert catalog.languages is before
    assert list(catalog) == default_languages()


def test_catalog_refresh_empty_list_keeps_catalog(stub_backend):
    """Test that an empty remote list does not empty the picker."""
    catalog = LanguageCatalog()
    asyncio.run(catalog.refresh(stub_backend(languages=[])))
    assert len(catalog) == 5


def test_present_delivers_once_with_slot():
    """Test one-shot delivery tagged with the originating slot."""
    picker = HoldingPicker()
    mediator = LanguageSelectionMediator(picker)
    catalog = LanguageCatalog()
    received = []

    request = mediator.present(catalog, SelectionSlot.SOURCE, on_selected=received.append)

    assert picker.requests == [request]
    assert request.choose(catalog.find("de")) is True
    assert request.choose(catalog.find("fr")) is False
    assert request.cancel() is False
    assert received == [LanguageSelection(catalog.find("de"), SelectionSlot.SOURCE)]


def test_cancel_delivers_nothing():
    """Test that dismissing the picker is not a selection."""
    mediator = LanguageSelectionMediator(HoldingPicker())
    received = []
    cancelled = []

    request = mediator.present(
        LanguageCatalog(), SelectionSlot.TARGET,
        on_selected=received.append, on_cancelled=lambda: cancelled.append(True),
    )

    assert request.cancel() is True
    assert request.choose(Language("English", "flag_gb", "en")) is False
    assert received == []
    assert cancelled == [True]


def test_each_presentation_is_a_new_request():
    """Test that presenting again opens a fresh channel."""
    picker = HoldingPicker()
    mediator = LanguageSelectionMediator(picker)
    received = []

    first = mediator.present(LanguageCatalog(), SelectionSlot.SOURCE, on_selected=received.append)
    first.cancel()
    second = mediator.present(LanguageCatalog(), SelectionSlot.TARGET, on_selected=received.append)
    second.choose(Language("German", "flag_de", "de"))

    assert first is not second
    assert [selection.slot for selection in received] == [SelectionSlot.TARGET]


def test_select_awaits_choice():
    """Test the awaitable form of the handoff."""
    picker = HoldingPicker()
    mediator = LanguageSelectionMediator(picker)
    catalog = LanguageCatalog()

    async def scenario():
        pending = asyncio.ensure_future(mediator.select(catalog, SelectionSlot.TARGET))
        await asyncio.sleep(0)
        picker.requests[0].choose(catalog.find("pt"))
        return await pending

    selection = asyncio.run(scenario())
    assert selection == LanguageSelection(catalog.find("pt"), SelectionSlot.TARGET)


def test_select_cancelled_returns_none():
    """Test that a cancelled awaitable selection resolves to None."""
    picker = HoldingPicker()
    mediator = LanguageSelectionMediator(picker)

    async def scenario():
        pending = asyncio.ensure_future(mediator.select(LanguageCatalog(), SelectionSlot.SOURCE))
        await asyncio.sleep(0)
        picker.requests[0].cancel()
        return await pending

    assert asyncio.run(scenario()) is None
