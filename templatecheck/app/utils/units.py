"""
Physical unit conversion.

Ratios derive from 72 points per inch, 25.4 millimeters per inch and
96 CSS pixels per inch. No rounding is applied.
"""

import logging
import math
import re
from typing import Union

logger = logging.getLogger(__name__)


MM_TO_PT_RATIO = 72 / 25.4
PT_TO_MM_RATIO = 25.4 / 72
PT_TO_PX_RATIO = 96 / 72


# Leading numeric prefix, as accepted by a lenient float parse.
_NUMERIC_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def _parse_float(value: object) -> float:
    """
    Parse the leading numeric prefix of ``value``.

    ``"12.5mm"`` parses as 12.5. Input without a numeric prefix yields
    NaN, which propagates through any arithmetic that follows.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    match = _NUMERIC_PREFIX.match(str(value))
    if match is None:
        logger.warning("Non-numeric length %r coerced to NaN", value)
        return math.nan
    return float(match.group(1))


def mm2pt(mm: Union[float, str]) -> float:
    return _parse_float(mm) * MM_TO_PT_RATIO


def pt2mm(pt: float) -> float:
    return pt * PT_TO_MM_RATIO


def pt2px(pt: float) -> float:
    return pt * PT_TO_PX_RATIO
