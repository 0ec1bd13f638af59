"""
Schema inference for the QuickChart Data Dashboard.

Derives the column list from the first row and picks the default X/Y
axes.  Both functions are pure, order-preserving scans so the chosen
columns are fully determined by the data.
"""

from typing import Sequence, Tuple

from .constants import PREFERRED_Y_PATTERN
from .data_model import AxisSelection, Row
from .normalize import is_number


def infer_columns(rows: Sequence[Row]) -> Tuple[str, ...]:
    """Return the key order of the first row, or ``()`` for no rows."""
    if not rows:
        return ()
    return tuple(rows[0].keys())


def numeric_columns(rows: Sequence[Row], columns: Sequence[str]) -> Tuple[str, ...]:
    """Columns whose value in the first row is a Number, in column order."""
    if not rows:
        return ()
    first = rows[0]
    return tuple(col for col in columns if is_number(first.get(col)))


def default_axes(rows: Sequence[Row], columns: Sequence[str]) -> AxisSelection:
    """Pick the default axes for a freshly loaded dataset.

    X is always the first column.  Y is the first numeric column whose
    lowercased name contains ``amount``, ``value``, ``total``,
    ``price``, ``cost`` or ``sales``; failing that the first numeric
    column; failing that no selection.
    """
    if not columns:
        return AxisSelection()

    candidates = numeric_columns(rows, columns)
    preferred = next(
        (col for col in candidates if PREFERRED_Y_PATTERN.search(col.lower())),
        None,
    )
    if preferred is None:
        preferred = candidates[0] if candidates else ""
    return AxisSelection(x=columns[0], y=preferred)
