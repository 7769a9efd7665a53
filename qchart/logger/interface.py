from abc import ABC, abstractmethod
from typing import Any

DEBUG = "DEBUG"
INFO = "INFO"
WARNING = "WARNING"
ERROR = "ERROR"
CRITICAL = "CRITICAL"

LEVEL_NUMBERS = {DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50}


class Logger(ABC):
    """Logging interface accepted by QuickchartClient.

    Subclasses implement log(); the per-level helpers route through it with
    the message and any key/value context.
    """

    @abstractmethod
    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Emit message at a level name from LEVEL_NUMBERS"""

    @abstractmethod
    def get_session_id(self) -> str:
        """Identifier shared by every line this logger emits"""

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log(DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log(INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log(WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log(ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self.log(CRITICAL, message, **kwargs)
