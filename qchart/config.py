"""Client configuration

Defaults for the chart service endpoint and request behaviour, overridable
through QCHART_* environment variables or, in tests, through Config test mode.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from qchart.exceptions import ConfigurationError

_ENV_PREFIX = "QCHART"

DEFAULT_BASE_URL = "https://quickchart.io"
DEFAULT_MAX_URL_LENGTH = 2000
DEFAULT_LOG_LEVEL = "WARNING"


def _env(name: str) -> Optional[str]:
    value = os.environ.get(f"{_ENV_PREFIX}_{name}")
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class ClientSettings:
    """Settings applied to every QuickchartClient that does not override them"""

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None  # None means wait indefinitely
    max_url_length: int = DEFAULT_MAX_URL_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        if self.max_url_length <= 0:
            raise ConfigurationError(
                f"max_url_length must be positive, got {self.max_url_length}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """
        Build settings from QCHART_* environment variables

        Returns:
            ClientSettings with environment overrides applied to the defaults

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed
        """
        timeout: Optional[float] = None
        raw_timeout = _env("TIMEOUT")
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"{_ENV_PREFIX}_TIMEOUT must be a number, got '{raw_timeout}'"
                ) from e

        max_url_length = DEFAULT_MAX_URL_LENGTH
        raw_length = _env("MAX_URL_LENGTH")
        if raw_length is not None:
            try:
                max_url_length = int(raw_length)
            except ValueError as e:
                raise ConfigurationError(
                    f"{_ENV_PREFIX}_MAX_URL_LENGTH must be an integer, got '{raw_length}'"
                ) from e

        return cls(
            base_url=_env("BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            max_url_length=max_url_length,
            log_level=(_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )


class Config:
    """Process-wide settings lookup with support for testing overrides"""

    _test_mode: bool = False
    _test_settings: Optional[ClientSettings] = None

    @classmethod
    def get_settings(cls) -> ClientSettings:
        """
        Get the settings new clients should use

        Returns:
            Test settings when test mode is active, otherwise settings read
            from the environment
        """
        if cls._test_mode and cls._test_settings is not None:
            return cls._test_settings
        return ClientSettings.from_env()

    @classmethod
    def set_test_mode(cls, settings: Optional[ClientSettings] = None) -> None:
        """
        Enable test mode

        Args:
            settings: Settings to hand out while test mode is active
                (defaults to ClientSettings())
        """
        cls._test_mode = True
        cls._test_settings = settings or ClientSettings()

    @classmethod
    def clear_test_mode(cls) -> None:
        """Disable test mode and return to environment configuration"""
        cls._test_mode = False
        cls._test_settings = None

    @classmethod
    def is_test_mode(cls) -> bool:
        return cls._test_mode


def get_settings() -> ClientSettings:
    """Convenience wrapper around Config.get_settings()"""
    return Config.get_settings()
