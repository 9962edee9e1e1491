import logging

import pytest
from pydantic import ValidationError

from voyageur.config import DEFAULT_MAX_CITIES, configure_logging, get_settings, load_settings


def test_defaults():
    settings = load_settings()
    assert settings.max_cities == DEFAULT_MAX_CITIES
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VOYAGEUR_MAX_CITIES", "6")
    monkeypatch.setenv("VOYAGEUR_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.max_cities == 6
    assert settings.log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("VOYAGEUR_MAX_CITIES=8\n")
    assert load_settings(str(env_file)).max_cities == 8


@pytest.mark.parametrize("value", ["0", "13", "beaucoup"])
def test_invalid_max_cities(monkeypatch, value):
    monkeypatch.setenv("VOYAGEUR_MAX_CITIES", value)
    with pytest.raises(ValidationError):
        load_settings()


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("VOYAGEUR_MAX_CITIES", "3")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().max_cities == 3


def test_configure_logging():
    configure_logging("info")
    assert logging.getLogger().level in (logging.INFO, logging.WARNING)


def test_invalid_log_level():
    with pytest.raises(ValueError):
        configure_logging("bavard")


def test_invalid_log_level_in_environment(monkeypatch):
    monkeypatch.setenv("VOYAGEUR_LOG_LEVEL", "bavard")
    with pytest.raises(ValidationError):
        load_settings()
