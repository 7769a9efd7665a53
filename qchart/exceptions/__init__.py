"""Custom exceptions for qchart.

Every error raised by the client derives from QuickchartError and carries a
``kind`` tag so callers can branch on the failure category without parsing
message text.
"""

from typing import Optional


class QuickchartError(Exception):
    """Base class for all qchart errors"""

    kind = "quickchart"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(QuickchartError):
    """Client configuration is missing or invalid"""

    kind = "configuration"


class UrlConstructionError(QuickchartError):
    """The chart URL could not be assembled"""

    kind = "url_construction"


class TransportError(QuickchartError):
    """Network-level failure talking to the chart service"""

    kind = "transport"


class HttpStatusError(QuickchartError):
    """The chart service answered with a non-success status"""

    kind = "http_status"

    def __init__(self, status_code: int, body: str = "", url: Optional[str] = None):
        message = f"Chart service returned HTTP {status_code}"
        if url:
            message += f" for {url}"
        if body:
            message += f": {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url


class ResponseParseError(QuickchartError):
    """The short-URL response did not have the expected shape"""

    kind = "response_parse"


class FileWriteError(QuickchartError):
    """Writing chart bytes to disk failed"""

    kind = "io"

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to write chart to {path}: {reason}")
        self.path = path


__all__ = [
    "QuickchartError",
    "ConfigurationError",
    "UrlConstructionError",
    "TransportError",
    "HttpStatusError",
    "ResponseParseError",
    "FileWriteError",
]
