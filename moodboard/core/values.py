"""
Scalar helpers for dynamically typed CSV cells.

Cells arrive as str, int, float, bool or None. These helpers give every
pipeline stage the same rules for turning a cell into text or a number.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional
import math
import re

from moodboard.core.keywords import UNKNOWN_PLATFORM

# Leading numeric prefix, e.g. "12.5k" -> 12.5
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a cell as a finite number.

    Numbers pass through, strings are read by their leading numeric
    prefix. Booleans, None, unparseable text and non-finite values
    give None.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    return number if math.isfinite(number) else None


def to_text(value: Any) -> str:
    """Render a cell as display text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def to_fixed(value: float, digits: int = 1) -> str:
    """
    Format a number with a fixed number of decimals.

    Rounds half away from zero on the exact binary value, so 0.05 -> "0.1"
    but 1.005 -> "1.0" (1.005 is stored slightly below).
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{digits}f}"


def is_blank(value: Any) -> bool:
    """True for missing cells and whitespace-only text."""
    return value is None or to_text(value).strip() == ""


def platform_label(value: Any) -> str:
    """Platform cell as text, "Unknown" when the cell is missing or blank."""
    return UNKNOWN_PLATFORM if is_blank(value) else to_text(value)
