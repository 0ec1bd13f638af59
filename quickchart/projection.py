"""
Visualization projection for the QuickChart Data Dashboard.

Reduces a ``Dataset`` to the bounded series handed to the chart
renderer and computes summary statistics for the value column.

The chart series is filtered (numeric Y only), sorted by Y descending
and capped at ``MAX_DISPLAY_DATA`` rows.  Statistics are computed over
the *whole* dataset, so they can describe rows the chart does not show.
"""

from typing import Any, Sequence, Tuple

import numpy as np

from .constants import CHART_PALETTE, MAX_DISPLAY_DATA, PIE_SLICE_LIMIT
from .data_model import EMPTY_STATISTICS, Dataset, Row, SummaryStatistics
from .normalize import is_number


def project_series(dataset: Dataset, x_column: str, y_column: str) -> Tuple[Row, ...]:
    """Return the rows to chart for the given axes.

    Rows whose *y_column* value is not a Number are dropped (never
    zero-filled).  The sort is stable, so rows with equal values keep
    their file order.  Full rows are returned so the view can show more
    context than the two axes.
    """
    if dataset.is_empty or not x_column or not y_column:
        return ()
    numeric_rows = [row for row in dataset.rows if is_number(row.get(y_column))]
    numeric_rows.sort(key=lambda row: row[y_column], reverse=True)
    return tuple(numeric_rows[:MAX_DISPLAY_DATA])


def pie_series(series: Sequence[Row]) -> Tuple[Row, ...]:
    """Largest entries of a projected series, limited for pie charts."""
    return tuple(series[:PIE_SLICE_LIMIT])


def summary_statistics(dataset: Dataset, y_column: str) -> SummaryStatistics:
    """Count, min, max and mean of every Number in *y_column*.

    Computed over the unfiltered, untruncated dataset.
    """
    if dataset.is_empty or not y_column:
        return EMPTY_STATISTICS
    values = [row.get(y_column) for row in dataset.rows]
    numbers = np.array([v for v in values if is_number(v)], dtype=float)
    if numbers.size == 0:
        return EMPTY_STATISTICS
    # Clamp the mean against float round-off so min <= mean <= max holds
    minimum = float(np.min(numbers))
    maximum = float(np.max(numbers))
    mean = min(max(float(np.mean(numbers)), minimum), maximum)
    return SummaryStatistics(
        count=int(numbers.size),
        minimum=minimum,
        maximum=maximum,
        mean=mean,
    )


def format_number(value: Any) -> str:
    """Format a value for labels and tooltips.

    Numbers get thousands grouping and at most two fraction digits
    (trailing zeros dropped); anything else is shown as ``str(value)``.

    >>> format_number(1234.5)
    '1,234.5'
    >>> format_number(2.346)
    '2.35'
    >>> format_number('North')
    'North'
    """
    if value is None:
        return ""
    if not is_number(value):
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    text = f"{value:,.2f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def palette_color(index: int) -> str:
    """Colour for the *index*-th category, cycling through the palette."""
    return CHART_PALETTE[index % len(CHART_PALETTE)]
