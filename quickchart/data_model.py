"""
Data model for the QuickChart Data Dashboard.

Immutable dataclasses representing one ingested file.  A ``Dataset`` is
constructed once per successful ingestion and never mutated; the
projection functions and chart renderers receive it read-only.

Missing values are modelled as ``None``.  Every row of a dataset carries
the same key set, so an absent spreadsheet cell is an explicit ``None``
rather than a missing key.
"""

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

Row = Dict[str, Any]


class ChartKind(enum.Enum):
    """Chart kinds offered by the dashboard."""
    BAR = "Bar"
    LINE = "Line"
    PIE = "Pie"


@dataclass(frozen=True)
class Dataset:
    """All canonical rows of one ingested file.

    Parameters
    ----------
    rows : tuple of dict
        Canonical rows in file order.  Values are ``int``/``float``,
        ``str``, ``bool``, ``None`` or (spreadsheet input only)
        ``datetime.datetime``.
    columns : tuple of str
        Column names in first-row key order.  Empty only when *rows*
        is empty.
    source_name : str
        File name the rows were read from.
    """
    rows: Tuple[Row, ...]
    columns: Tuple[str, ...]
    source_name: str = ""

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class AxisSelection:
    """Selected X (category) and Y (value) columns; ``""`` means none."""
    x: str = ""
    y: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.x) and bool(self.y)


@dataclass(frozen=True)
class SummaryStatistics:
    """Descriptive statistics over every numeric value of one column.

    ``minimum``, ``maximum`` and ``mean`` are ``None`` when ``count``
    is zero.
    """
    count: int = 0
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    mean: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return self.count == 0


EMPTY_DATASET = Dataset(rows=(), columns=())
EMPTY_SELECTION = AxisSelection()
EMPTY_STATISTICS = SummaryStatistics()
