import codecs
import logging
import os
from typing import Final
from typing import Optional
from typing import final

from dotenv import load_dotenv

SOURCE_ENCODING_ENV_VARIABLE = "KAY_SOURCE_ENCODING"
LOG_LEVEL_ENV_VARIABLE = "KAY_LOG_LEVEL"

DEFAULT_SOURCE_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


def get_environment_variable_or_default(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def parse_log_level(name: str) -> int:
    level: Final = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ValueError(f"Unknown log level '{name}' in environment variable '{LOG_LEVEL_ENV_VARIABLE}'.")
    return level


def parse_source_encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ValueError(
            f"Unknown source encoding '{name}' in environment variable '{SOURCE_ENCODING_ENV_VARIABLE}'."
        ) from e
    return name


@final
class Config:
    def __init__(self) -> None:
        self._source_encoding: Optional[str] = None
        self._log_level: Optional[int] = None
        self.reload()

    def reload(self) -> None:
        load_dotenv()
        self._source_encoding = parse_source_encoding(
            get_environment_variable_or_default(SOURCE_ENCODING_ENV_VARIABLE, DEFAULT_SOURCE_ENCODING),
        )
        self._log_level = parse_log_level(
            get_environment_variable_or_default(LOG_LEVEL_ENV_VARIABLE, DEFAULT_LOG_LEVEL),
        )

    @property
    def source_encoding(self) -> str:
        if self._source_encoding is None:
            raise AssertionError("Source encoding is not set. This should not happen.")
        return self._source_encoding

    @property
    def log_level(self) -> int:
        if self._log_level is None:
            raise AssertionError("Log level is not set. This should not happen.")
        return self._log_level
