"""Chart text handling

The chart service accepts a Chart.js config either as strict JSON or as a
JavaScript object literal. The URL form carries the text untouched; the JSON
body form embeds strict JSON as a value and everything else as a string.
"""

import json
import math
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} is out of range for JSON")
    return value


def _parse_json(chart: str) -> Any:
    """
    Decode chart as strict JSON

    NaN, Infinity and numbers that overflow to infinity are not JSON, even
    though json.loads accepts them by default.

    Raises:
        ValueError: If chart is not strict JSON
    """
    return json.loads(
        chart,
        parse_constant=_reject_constant,
        parse_float=_parse_finite_float,
    )


def chart_to_json_value(chart: str) -> Any:
    """
    Convert chart text into the value sent under the "chart" body key

    Args:
        chart: Chart.js configuration text

    Returns:
        The decoded object for strict JSON input, otherwise the text itself
        so the service can evaluate it as a JS object literal
    """
    try:
        return _parse_json(chart)
    except ValueError:
        return chart


def encode_json_body(body: Any) -> bytes:
    """
    Serialize a request body to UTF-8 JSON

    Raises:
        ValueError: If the body holds non-finite floats or text that cannot
            be UTF-8 encoded (UnicodeEncodeError is a ValueError)
    """
    return json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
