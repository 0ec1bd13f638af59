"""
Type normalizer for the QuickChart Data Dashboard.

Both ingestion paths (CSV text and Excel workbooks) pass every field
through ``normalize_value`` so numeric coercion lives in one place.
The function is pure and per-field: no column or row context is used.
"""

import math
import re
from typing import Any, Mapping

from .data_model import Row

# Plain decimal literal: optional sign, digits with an optional fraction
# (either side of the point may be empty, not both), optional exponent.
# No grouping separators, currency, percent, hex, inf/nan or underscores.
_NUMERIC_LITERAL = re.compile(
    r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?'
)
_INTEGER_LITERAL = re.compile(r'[+-]?\d+')


def is_number(value: Any) -> bool:
    """Return ``True`` if *value* is a Number (not a bool, not NaN)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return not math.isnan(value)
    return False


def parse_number(text: str):
    """Parse a trimmed decimal literal into ``int`` or ``float``.

    Raises ``ValueError`` for anything that is not a plain decimal
    literal.
    """
    s = text.strip()
    if not s or _NUMERIC_LITERAL.fullmatch(s) is None:
        raise ValueError(f"not a numeric literal: {text!r}")
    result = float(s)
    # Overflow ("1e999", or an integer beyond float range) parses to inf;
    # keep it as text
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {text!r}")
    if _INTEGER_LITERAL.fullmatch(s):
        return int(s)
    return result


def normalize_value(value: Any) -> Any:
    """Convert a numeric string to a Number; pass anything else through."""
    if not isinstance(value, str):
        return value
    try:
        return parse_number(value)
    except ValueError:
        return value


def normalize_row(row: Mapping[str, Any]) -> Row:
    """Apply ``normalize_value`` to every field of *row*, keeping key order."""
    return {key: normalize_value(value) for key, value in row.items()}
