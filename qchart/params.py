"""Chart request parameters

Defines the data model accumulated by QuickchartClient and its two wire
forms: URL query pairs and a JSON request body.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from qchart.encoding import chart_to_json_value


def _format_number(value: float) -> str:
    """Render floats like 2.0 as "2" and keep shortest repr otherwise"""
    if value == int(value):
        return str(int(value))
    return repr(value)


class ChartParams(BaseModel):
    """Rendering parameters for a single chart request"""

    model_config = ConfigDict(frozen=True)

    # Chart.js config as JSON or JS object literal; empty until set_chart()
    chart: str = ""

    width: Optional[int] = Field(default=None, gt=0, strict=True)  # pixels
    height: Optional[int] = Field(default=None, gt=0, strict=True)  # pixels
    device_pixel_ratio: Optional[float] = Field(
        default=None, gt=0, allow_inf_nan=False, strict=True
    )
    background_color: Optional[str] = None  # "transparent", "#fff", "rgb(...)", ...
    version: Optional[str] = None  # Chart.js major version, e.g. "3"
    format: Optional[str] = None  # "png", "svg", "webp", "pdf"

    def has_chart(self) -> bool:
        return bool(self.chart.strip())

    def to_query_pairs(self) -> List[Tuple[str, str]]:
        """
        Get the URL query parameters for the GET /chart endpoint

        Returns:
            (name, value) pairs in a fixed order, chart first; unset fields
            are left out
        """
        pairs = [("c", self.chart)]

        if self.width is not None:
            pairs.append(("w", str(self.width)))
        if self.height is not None:
            pairs.append(("h", str(self.height)))
        if self.device_pixel_ratio is not None:
            pairs.append(("devicePixelRatio", _format_number(self.device_pixel_ratio)))
        if self.background_color is not None:
            pairs.append(("bkg", self.background_color))
        if self.version is not None:
            pairs.append(("v", self.version))
        if self.format is not None:
            pairs.append(("f", self.format))

        return pairs

    def to_json_body(self) -> Dict[str, Any]:
        """
        Get the JSON body for the POST /chart and /chart/create endpoints

        Returns:
            Dictionary with the chart under "chart" and every set option under
            its service-side name
        """
        body: Dict[str, Any] = {"chart": chart_to_json_value(self.chart)}

        if self.width is not None:
            body["width"] = self.width
        if self.height is not None:
            body["height"] = self.height
        if self.device_pixel_ratio is not None:
            body["devicePixelRatio"] = self.device_pixel_ratio
        if self.background_color is not None:
            body["backgroundColor"] = self.background_color
        if self.version is not None:
            body["version"] = self.version
        if self.format is not None:
            body["format"] = self.format

        return body
