"""
Dashboard controller for the QuickChart Data Dashboard.

Single owner of the mutable dashboard state: the loaded dataset, the
axis selection, the chart kind and the loading/error flags.  Derived
values (column list, chart series, pie slice, statistics) are
properties recomputed from that state on every access, so they can
never drift out of sync with it.

The controller has no Qt dependency.  The GUI calls
``begin_ingestion`` when a file is chosen, hands the returned request
id to the background reader and routes the reader's single completion
or failure back through ``complete_ingestion`` / ``fail_ingestion``.
Results for a request that has since been superseded are discarded.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union

from .data_model import (
    AxisSelection, ChartKind, Dataset, Row, SummaryStatistics,
    EMPTY_DATASET, EMPTY_SELECTION,
)
from .errors import IngestionError, ReadFailure
from .ingest import build_dataset, check_file_type, user_message
from .projection import pie_series, project_series, summary_statistics
from .schema import default_axes

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class DashboardController:
    """Coordinates ingestion and owns all dashboard state."""

    def __init__(self):
        self._dataset: Dataset = EMPTY_DATASET
        self._selection: AxisSelection = EMPTY_SELECTION
        self._chart_kind: ChartKind = ChartKind.BAR
        self._file_name = ""
        self._loading = False
        self._error = ""
        self._request_id = 0
        self._listeners: List[Listener] = []

    # ── Observers ────────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> None:
        """Register a no-argument callback run after every state change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ── Ingestion lifecycle ──────────────────────────────────────────

    def begin_ingestion(self, file_name: str) -> Optional[int]:
        """Start a new ingestion of *file_name*.

        Clears the previous dataset, axes and error and sets the loading
        flag.  Returns the request id to pass to the reader, or ``None``
        if the file type is rejected (no read should be started).
        """
        self._request_id += 1
        request_id = self._request_id
        self._dataset = EMPTY_DATASET
        self._selection = EMPTY_SELECTION
        self._file_name = file_name
        self._error = ""
        self._loading = True
        logger.info("Loading '%s' (request %d)", file_name, request_id)

        try:
            check_file_type(file_name)
        except IngestionError as exc:
            self._finish_with_error(exc)
            return None

        self._notify()
        return request_id

    def complete_ingestion(self, request_id: int, content: Union[bytes, str]) -> None:
        """Read completion: decode *content* and publish the new dataset."""
        if not self._is_current(request_id):
            return
        try:
            dataset = build_dataset(self._file_name, content)
        except IngestionError as exc:
            self._finish_with_error(exc)
            return

        self._dataset = dataset
        self._selection = default_axes(dataset.rows, dataset.columns)
        self._loading = False
        logger.info("Default axes for '%s': x=%r y=%r",
                    self._file_name, self._selection.x, self._selection.y)
        self._notify()

    def fail_ingestion(self, request_id: int, error: Union[IngestionError, str]) -> None:
        """Read failure: abort the ingestion with *error*."""
        if not self._is_current(request_id):
            return
        if not isinstance(error, IngestionError):
            error = ReadFailure(str(error) or "Error reading file")
        self._finish_with_error(error)

    def _is_current(self, request_id: int) -> bool:
        if request_id != self._request_id or not self._loading:
            logger.debug("Discarding result of superseded request %d "
                         "(current %d)", request_id, self._request_id)
            return False
        return True

    def _finish_with_error(self, exc: IngestionError) -> None:
        self._dataset = EMPTY_DATASET
        self._selection = EMPTY_SELECTION
        self._error = user_message(exc)
        self._loading = False
        logger.warning("Failed to load '%s': %s", self._file_name, exc)
        self._notify()

    # ── User intents ─────────────────────────────────────────────────

    def set_x_axis(self, column: str) -> None:
        self._selection = AxisSelection(x=column, y=self._selection.y)
        self._notify()

    def set_y_axis(self, column: str) -> None:
        self._selection = AxisSelection(x=self._selection.x, y=column)
        self._notify()

    def set_chart_kind(self, kind: Union[ChartKind, str]) -> None:
        self._chart_kind = ChartKind(kind)
        self._notify()

    # ── Stored state ─────────────────────────────────────────────────

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def selection(self) -> AxisSelection:
        return self._selection

    @property
    def chart_kind(self) -> ChartKind:
        return self._chart_kind

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str:
        return self._error

    # ── Derived state ────────────────────────────────────────────────

    @property
    def columns(self) -> Tuple[str, ...]:
        return self._dataset.columns

    @property
    def series(self) -> Tuple[Row, ...]:
        """Bounded, sorted rows for the current axes."""
        return project_series(self._dataset, self._selection.x, self._selection.y)

    @property
    def pie_series(self) -> Tuple[Row, ...]:
        return pie_series(self.series)

    @property
    def statistics(self) -> SummaryStatistics:
        """Statistics for the Y column over the full dataset."""
        return summary_statistics(self._dataset, self._selection.y)
