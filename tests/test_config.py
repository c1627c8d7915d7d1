"""
Tests for configuration loading and startup requirement checks.
"""

import pytest

from src.diagnostics.requirements import blocking_issues, check_startup_requirements
from src.translation.config import RapidAPIConfig, TranslationConfig, get_backend
from src.translation.rapidapi import RapidAPIBackend


def test_defaults():
    """Test config defaults."""
    config = TranslationConfig()
    assert config.default_source == "es"
    assert config.default_target == "en"
    assert config.refresh_languages is False
    assert config.rapidapi.api_key == ""
    assert config.rapidapi.languages_url.endswith("/language/translate/v2/languages")


def test_from_env():
    """Test reading PARLA_* variables."""
    config = TranslationConfig.from_env({
        "PARLA_RAPIDAPI_KEY": " secret ",
        "PARLA_RAPIDAPI_HOST": "example.test",
        "PARLA_BASE_URL": "https://example.test/v2/",
        "PARLA_TIMEOUT": "3.5",
        "PARLA_REFRESH_LANGUAGES": "yes",
        "PARLA_SOURCE": "fr",
    })
    assert config.rapidapi.api_key == "secret"
    assert config.rapidapi.host == "example.test"
    assert config.rapidapi.timeout == 3.5
    assert config.rapidapi.languages_url == "https://example.test/v2/languages"
    assert config.refresh_languages is True
    assert config.default_source == "fr"
    assert config.default_target == "en"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_from_env_rejects_bad_timeout(value):
    """Test that an invalid timeout is a configuration error."""
    with pytest.raises(ValueError):
        TranslationConfig.from_env({"PARLA_TIMEOUT": value})


def test_repr_hides_api_key():
    """Test that the key never shows up in repr."""
    assert "secret" not in repr(RapidAPIConfig(api_key="secret"))
    assert "secret" not in repr(TranslationConfig(rapidapi=RapidAPIConfig(api_key="secret")))


def test_get_backend():
    """Test the backend factory."""
    backend = get_backend(TranslationConfig(rapidapi=RapidAPIConfig(api_key="k")))
    assert isinstance(backend, RapidAPIBackend)
    assert backend.name == "rapidapi"


def test_requirements_missing_key():
    """Test that a missing API key blocks startup."""
    issues = check_startup_requirements(TranslationConfig())
    assert "api_key" in [issue.id for issue in blocking_issues(issues)]


def test_requirements_satisfied():
    """Test that a configured key leaves no blocking issues."""
    config = TranslationConfig(rapidapi=RapidAPIConfig(api_key="k"))
    assert blocking_issues(check_startup_requirements(config)) == []


def test_requirements_insecure_url_is_warning():
    """Test that a plain-HTTP endpoint only warns."""
    config = TranslationConfig(rapidapi=RapidAPIConfig(api_key="k", base_url="http://local.test/v2"))
    issues = check_startup_requirements(config)
    assert [issue.id for issue in issues] == ["insecure_url"]
    assert blocking_issues(issues) == []


@pytest.mark.parametrize("name,value", [
    ("PARLA_TIMEOUT", "soon"),
    ("PARLA_TIMEOUT", "0"),
    ("PARLA_SOURCE", "  "),
    ("PARLA_TARGET", ""),
])
def test_requirements_report_invalid_env(monkeypatch, name, value):
    """Test that a bad environment variable becomes a blocking issue, not a crash."""
    monkeypatch.setenv("PARLA_RAPIDAPI_KEY", "k")
    monkeypatch.setenv(name, value)

    issues = blocking_issues(check_startup_requirements())

    assert [issue.id for issue in issues] == ["config"]
    assert name in issues[0].details


def test_requirements_read_env_when_valid(monkeypatch):
    """Test that a valid environment passes the check."""
    monkeypatch.setenv("PARLA_RAPIDAPI_KEY", "k")
    monkeypatch.setenv("PARLA_TIMEOUT", "5")
    monkeypatch.delenv("PARLA_SOURCE", raising=False)
    monkeypatch.delenv("PARLA_TARGET", raising=False)
    monkeypatch.delenv("PARLA_BASE_URL", raising=False)

    assert blocking_issues(check_startup_requirements()) == []


@pytest.mark.parametrize("name", ["PARLA_SOURCE", "PARLA_TARGET"])
def test_from_env_rejects_blank_tag(name):
    """Test that a blank default language tag is a configuration error."""
    with pytest.raises(ValueError):
        TranslationConfig.from_env({name: " "})
