"""QuickChart client

Builder-style client for the QuickChart rendering service. Configuration
methods return a new client, so a partially configured client can be shared
and extended without side effects:

    base = QuickchartClient().set_width(800).set_height(400)
    url = base.set_chart('{"type":"bar","data":{"labels":["A","B"],'
                         '"datasets":[{"data":[1,2]}]}}').build_url()

Remote operations open a fresh httpx.AsyncClient per call; the client itself
holds no connections.
"""

import copy
from os import PathLike
from typing import Any, Optional, Union
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from qchart.config import ClientSettings, get_settings
from qchart.encoding import encode_json_body
from qchart.exceptions import (
    ConfigurationError,
    HttpStatusError,
    ResponseParseError,
    TransportError,
    UrlConstructionError,
)
from qchart.logger import ConsoleLogger, Logger
from qchart.params import ChartParams
from qchart.storage import write_bytes
from qchart.version import __version__

CHART_ENDPOINT = "/chart"
CREATE_ENDPOINT = "/chart/create"
USER_AGENT = f"qchart/{__version__}"

# Longest slice of an error response body kept on HttpStatusError
_ERROR_BODY_LIMIT = 500


class QuickchartClient:
    """Client for generating charts with the QuickChart API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[Logger] = None,
        settings: Optional[ClientSettings] = None,
    ):
        """
        Initialize the client

        Args:
            base_url: Service root, e.g. "https://quickchart.io"
            user_agent: User-Agent header for remote calls
            timeout: Seconds to wait on remote calls (None uses settings,
                where the default is to wait indefinitely)
            transport: httpx transport for remote calls, mainly for tests
            logger: Logger for request traces (defaults to ConsoleLogger)
            settings: Settings to fall back on (defaults to get_settings())
        """
        settings = settings or get_settings()
        self._base_url = base_url or settings.base_url
        self._user_agent = user_agent or USER_AGENT
        self._timeout = timeout if timeout is not None else settings.timeout
        self._max_url_length = settings.max_url_length
        self._transport = transport
        self.logger = logger or ConsoleLogger(name="qchart", default_level=settings.log_level)
        self._params = ChartParams()

    def __repr__(self) -> str:
        return f"QuickchartClient(base_url={self._base_url!r}, params={self._params!r})"

    @property
    def params(self) -> ChartParams:
        """Current chart parameters (immutable)"""
        return self._params

    # -- configuration -------------------------------------------------------

    def _with(self, **changes: Any) -> "QuickchartClient":
        try:
            params = ChartParams(**{**self._params.model_dump(), **changes})
        except ValidationError as e:
            field = ", ".join(changes)
            raise ConfigurationError(f"Invalid value for {field}: {e.errors()[0]['msg']}") from e
        clone = copy.copy(self)
        clone._params = params
        return clone

    def set_chart(self, chart: str) -> "QuickchartClient":
        """Set the Chart.js configuration (JSON or JavaScript object notation)"""
        return self._with(chart=chart)

    def set_width(self, width: int) -> "QuickchartClient":
        return self._with(width=width)

    def set_height(self, height: int) -> "QuickchartClient":
        return self._with(height=height)

    def set_device_pixel_ratio(self, ratio: float) -> "QuickchartClient":
        return self._with(device_pixel_ratio=ratio)

    def set_background_color(self, color: str) -> "QuickchartClient":
        """
        Set the background color

        Accepts named colors ("transparent", "white"), HEX ("#ffffff"),
        RGB ("rgb(255, 0, 0)") and HSL ("hsl(0, 100%, 50%)").
        """
        return self._with(background_color=color)

    def set_version(self, version: str) -> "QuickchartClient":
        """Select the Chart.js major version, e.g. "2", "3" or "4" """
        return self._with(version=version)

    def set_format(self, fmt: str) -> "QuickchartClient":
        return self._with(format=fmt)

    # -- terminal operations -------------------------------------------------

    def _require_chart(self) -> None:
        if not self._params.has_chart():
            raise ConfigurationError("Chart configuration is not set; call set_chart() first")

    def _endpoint(self, path: str) -> str:
        try:
            base = httpx.URL(self._base_url)
            if not base.scheme or not base.host:
                raise UrlConstructionError(
                    f"Base URL must be absolute, got '{self._base_url}'"
                )
            return str(base.join(path))
        except httpx.InvalidURL as e:
            raise UrlConstructionError(f"Invalid base URL '{self._base_url}': {e}") from e

    def build_url(self) -> str:
        """
        Build a GET URL that renders the chart

        No network access happens here; the same configuration always
        produces the same URL.

        Returns:
            Chart URL with every set option as a query parameter

        Raises:
            ConfigurationError: If no chart has been set
            UrlConstructionError: If the URL cannot be assembled
        """
        self._require_chart()
        endpoint = self._endpoint(CHART_ENDPOINT)

        try:
            query = urlencode(self._params.to_query_pairs(), quote_via=quote)
        except (UnicodeError, TypeError) as e:
            raise UrlConstructionError(f"Failed to encode chart parameters: {e}") from e

        return f"{endpoint}?{query}"

    async def _post(self, path: str) -> httpx.Response:
        self._require_chart()
        url = self._endpoint(path)
        try:
            content = encode_json_body(self._params.to_json_body())
        except ValueError as e:
            raise UrlConstructionError(f"Failed to encode chart request body: {e}") from e

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent, "Content-Type": "application/json"},
                follow_redirects=True,
            ) as client:
                response = await client.post(url, content=content)
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e!r}") from e

        self.logger.debug(
            "Chart service responded",
            endpoint=path,
            status=response.status_code,
            bytes=len(response.content),
        )

        if not response.is_success:
            raise HttpStatusError(
                response.status_code,
                body=response.text[:_ERROR_BODY_LIMIT],
                url=url,
            )
        return response

    async def fetch_image(self) -> bytes:
        """
        Render the chart remotely and download the image

        The configuration is sent as a JSON body, so large charts are not
        limited by URL length.

        Returns:
            Image bytes exactly as served, in the configured format

        Raises:
            ConfigurationError: If no chart has been set
            TransportError: If the service cannot be reached or the response
                cannot be read
            HttpStatusError: If the service answers with a non-2xx status
        """
        response = await self._post(CHART_ENDPOINT)
        return response.content

    async def fetch_short_url(self) -> str:
        """
        Create a short URL for the chart

        Returns:
            Short link issued by the service

        Raises:
            ConfigurationError: If no chart has been set
            TransportError: If the service cannot be reached
            HttpStatusError: If the service answers with a non-2xx status
            ResponseParseError: If the response has no "url" string
        """
        response = await self._post(CREATE_ENDPOINT)

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseParseError(f"Short URL response is not JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ResponseParseError(
                f"Short URL response must be a JSON object, got {type(payload).__name__}"
            )

        url = payload.get("url")
        if not isinstance(url, str):
            raise ResponseParseError("Missing field in short URL response: url")

        url = url.strip('"').strip("'")
        if not url:
            raise ResponseParseError("Short URL response contains an empty url")
        return url

    async def fetch_shareable_url(self, max_length: Optional[int] = None) -> str:
        """
        Get a link to the chart, preferring the locally built URL

        Args:
            max_length: Longest acceptable full URL (defaults to the
                max_url_length setting)

        Returns:
            build_url() when it fits, otherwise a short URL from the service
        """
        limit = max_length if max_length is not None else self._max_url_length
        url = self.build_url()
        if len(url) <= limit:
            return url

        self.logger.debug("Chart URL too long, requesting short URL", length=len(url), limit=limit)
        return await self.fetch_short_url()

    async def save_to_file(self, path: Union[str, "PathLike[str]"]) -> None:
        """
        Download the chart image and write it to path

        The file is replaced atomically; on any failure an existing file at
        path is left as it was.

        Args:
            path: Destination file (its directory must exist)

        Raises:
            Everything fetch_image() raises, plus FileWriteError if the file
            cannot be written
        """
        image = await self.fetch_image()
        target = write_bytes(path, image)
        self.logger.debug("Chart saved", path=str(target), bytes=len(image))
