"""qchart: client for the QuickChart chart rendering service

Build a client, chain configuration calls, then ask for a URL, a short URL,
image bytes, or a file:

    from qchart import QuickchartClient

    client = QuickchartClient().set_chart("{type: 'bar', ...}").set_width(800)
    url = client.build_url()
    png = await client.fetch_image()
"""

from qchart.client import QuickchartClient
from qchart.config import ClientSettings, Config
from qchart.exceptions import (
    QuickchartError,
    ConfigurationError,
    UrlConstructionError,
    TransportError,
    HttpStatusError,
    ResponseParseError,
    FileWriteError,
)
from qchart.params import ChartParams
from qchart.version import __version__

__all__ = [
    "QuickchartClient",
    "ChartParams",
    "ClientSettings",
    "Config",
    "QuickchartError",
    "ConfigurationError",
    "UrlConstructionError",
    "TransportError",
    "HttpStatusError",
    "ResponseParseError",
    "FileWriteError",
    "__version__",
]
