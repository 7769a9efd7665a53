import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from qchart.exceptions import ConfigurationError
from .interface import LEVEL_NUMBERS, Logger


class DefaultLogger(Logger):
    """Plain stream logger, no logging module configuration involved"""

    def __init__(
        self,
        output: TextIO = sys.stderr,
        include_timestamp: bool = True,
        min_level: str = "DEBUG",
    ):
        """
        Initialize the default logger

        Args:
            output: Output stream (default: stderr)
            include_timestamp: Whether to prefix lines with a UTC timestamp
            min_level: Lowest level name that is written

        Raises:
            ConfigurationError: If min_level is not a known level name
        """
        try:
            self._min_level = LEVEL_NUMBERS[min_level.upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown log level '{min_level}'") from None
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"))

        parts.append(f"[{level}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            parts.append("(" + " ".join(f"{k}={v}" for k, v in kwargs.items()) + ")")

        return " ".join(parts)

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        if LEVEL_NUMBERS[level] < self._min_level:
            return
        print(self._format_message(level, message, **kwargs), file=self._output, flush=True)
