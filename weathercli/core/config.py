import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..domain.value_objects import Units
from .exceptions import ConfigurationError

load_dotenv()

API_KEY_ENV = "OPENWEATHERMAP_API_KEY"
LOG_LEVEL_ENV = "WEATHERCLI_LOG_LEVEL"

DEFAULT_CITY = "Kyiv"
DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

_LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def parse_log_level(value: str) -> int:

    level = _LOG_LEVELS.get(value.strip().upper())
    if level is None:
        raise ConfigurationError(
            f"Invalid {LOG_LEVEL_ENV} value '{value}'; "
            f"expected one of {', '.join(_LOG_LEVELS)}"
        )
    return level


def log_level_from_env() -> int:
    """Log level requested through the environment; readable without an API key."""

    log_level_str = os.getenv(LOG_LEVEL_ENV, "")
    if log_level_str.strip():
        return parse_log_level(log_level_str)
    return logging.WARNING


@dataclass
class CliConfig:

    api_key: str
    default_city: str = DEFAULT_CITY
    units: Units = Units.METRIC
    lang: str = "en"
    base_url: str = DEFAULT_BASE_URL
    weather_service_provider: str = "openweathermap"
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> "CliConfig":

        api_key = (os.getenv(API_KEY_ENV) or "").strip()
        if not api_key:
            raise ConfigurationError(
                "OpenWeatherMap API key not found. "
                f"Please set the {API_KEY_ENV} environment variable."
            )

        return cls(api_key=api_key, log_level=log_level_from_env())


class ConfigProvider(ABC):

    @abstractmethod
    def get(self) -> CliConfig:

        raise NotImplementedError


class EnvConfigProvider(ConfigProvider):

    def __init__(self) -> None:

        self._config: Optional[CliConfig] = None

    def get(self) -> CliConfig:

        if self._config is None:
            self._config = CliConfig.from_env()
        return self._config

    def reset(self) -> None:

        self._config = None


class StaticConfigProvider(ConfigProvider):

    def __init__(self, config: CliConfig) -> None:

        self._config = config

    def get(self) -> CliConfig:

        return self._config


_config_provider: ConfigProvider = EnvConfigProvider()


def get_config_provider() -> ConfigProvider:

    return _config_provider


def set_config_provider(provider: ConfigProvider) -> None:

    global _config_provider
    _config_provider = provider


def reset_config_provider() -> None:

    set_config_provider(EnvConfigProvider())


def get_config() -> CliConfig:

    return _config_provider.get()


def set_config(config_instance: CliConfig) -> None:

    set_config_provider(StaticConfigProvider(config_instance))
