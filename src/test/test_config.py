import logging
from pathlib import Path
from typing import Final

import pytest

from kayscan.config import DEFAULT_SOURCE_ENCODING
from kayscan.config import LOG_LEVEL_ENV_VARIABLE
from kayscan.config import SOURCE_ENCODING_ENV_VARIABLE
from kayscan.config import Config
from kayscan.config import get_environment_variable_or_default
from kayscan.config import parse_log_level
from kayscan.config import parse_source_encoding


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keeps a developer's `.env` file out of the tests.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SOURCE_ENCODING_ENV_VARIABLE, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VARIABLE, raising=False)


def test_defaults_are_used_when_nothing_is_set() -> None:
    config: Final = Config()
    assert config.source_encoding == DEFAULT_SOURCE_ENCODING
    assert config.log_level == logging.WARNING


def test_environment_variables_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SOURCE_ENCODING_ENV_VARIABLE, " latin-1 ")
    monkeypatch.setenv(LOG_LEVEL_ENV_VARIABLE, "debug")
    config: Final = Config()
    assert config.source_encoding == "latin-1"
    assert config.log_level == logging.DEBUG


def test_blank_environment_variable_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SOURCE_ENCODING_ENV_VARIABLE, "   ")
    assert get_environment_variable_or_default(SOURCE_ENCODING_ENV_VARIABLE, "ascii") == "ascii"


def test_reload_picks_up_changes(monkeypatch: pytest.MonkeyPatch) -> None:
    config: Final = Config()
    monkeypatch.setenv(LOG_LEVEL_ENV_VARIABLE, "ERROR")
    config.reload()
    assert config.log_level == logging.ERROR


@pytest.mark.parametrize(("name", "level"), [("INFO", logging.INFO), ("warning", logging.WARNING)])
def test_parse_log_level(name: str, level: int) -> None:
    assert parse_log_level(name) == level


def test_unknown_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VARIABLE, "LOUD")
    with pytest.raises(ValueError, match="Unknown log level 'LOUD'"):
        Config()


def test_source_encoding_is_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SOURCE_ENCODING_ENV_VARIABLE, "bogus")
    with pytest.raises(ValueError, match="Unknown source encoding 'bogus'"):
        Config()


@pytest.mark.parametrize("name", ["utf-8", "ascii", "latin-1", "UTF8"])
def test_known_source_encodings_are_accepted(name: str) -> None:
    assert parse_source_encoding(name) == name
