import logging as python_logging
import uuid
from typing import Any, Optional, Union
from .interface import LEVEL_NUMBERS, Logger


class ConsoleLogger(Logger):
    """
    Logger backed by Python's logging module.

    Every record carries a short session id so lines from one client can be
    told apart when several run in the same process.
    """

    def __init__(
        self,
        name: str = "qchart",
        level: Optional[Union[int, str]] = None,
        format_string: str = "%(asctime)s [%(levelname)s] [session:%(session_id)s] %(message)s",
        default_level: Union[int, str] = python_logging.WARNING,
    ):
        """
        Initialize the console logger

        Args:
            name: Logger name
            level: Level to force on the named logger, as a number or name
            format_string: Log format string (must include %(session_id)s)
            default_level: Level applied only when neither level is given nor
                the application has configured one for this logger
        """
        self._session_id = str(uuid.uuid4())[:8]
        self._logger = python_logging.getLogger(name)

        if level is not None:
            self._logger.setLevel(level)
        elif self._logger.level == python_logging.NOTSET:
            self._logger.setLevel(default_level)

        # Loggers are process-wide; attach a handler only once per name
        if not self._logger.handlers:
            handler = python_logging.StreamHandler()
            handler.setFormatter(python_logging.Formatter(format_string))
            self._logger.addHandler(handler)

    def get_session_id(self) -> str:
        return self._session_id

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        if kwargs:
            message += " " + " ".join(f"{k}={v}" for k, v in kwargs.items())
        self._logger.log(
            LEVEL_NUMBERS[level],
            message,
            extra={"session_id": self._session_id},
        )
