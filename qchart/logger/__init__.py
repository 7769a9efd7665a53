"""
Logger module for qchart

QuickchartClient accepts any Logger implementation, so applications can route
the client's request traces into their own logging setup.

Usage:
    from qchart.logger import ConsoleLogger, DefaultLogger

    client = QuickchartClient(logger=DefaultLogger())

    # Or implement your own
    class MyLogger(Logger):
        def debug(self, message: str, **kwargs):
            ...
"""

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
]
