"""
Chart view (right side) for the QuickChart Data Dashboard.

A header with the chart title and row counts above a matplotlib
FigureCanvas with a navigation toolbar and copy/export buttons.
"""

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QMessageBox,
)
from PySide6.QtCore import Signal

from .chart_render import render_chart, render_placeholder
from .constants import (
    DARK_COLORS, PLOT_STYLE_DARK, PLACEHOLDER_NO_FILE, PLACEHOLDER_NO_AXES,
)
from .controller import DashboardController
from .export import copy_to_clipboard
from .theme import apply_plot_style


class ChartView(QWidget):
    """Single chart canvas driven by the dashboard controller."""

    export_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        # ── Header ───────────────────────────────────────────────────
        header = QHBoxLayout()
        self._lbl_title = QLabel("")
        self._lbl_title.setStyleSheet("font-size: 16px; font-weight: bold;")
        self._lbl_count = QLabel("")
        self._lbl_count.setObjectName("dimLabel")
        header.addWidget(self._lbl_title)
        header.addStretch()
        header.addWidget(self._lbl_count)
        layout.addLayout(header)

        # ── Toolbar row ──────────────────────────────────────────────
        apply_plot_style(PLOT_STYLE_DARK)
        self._fig = Figure(figsize=(8, 5))
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row = QHBoxLayout()
        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()

        self._btn_copy = QPushButton("Copy to Clipboard")
        self._btn_copy.clicked.connect(lambda *_: self._on_copy())
        toolbar_row.addWidget(self._btn_copy)

        self._btn_export = QPushButton("Export PNG...")
        self._btn_export.clicked.connect(lambda *_: self.export_requested.emit())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)
        layout.addWidget(self._canvas, 1)

        render_placeholder(self._fig, PLACEHOLDER_NO_FILE)

    @property
    def fig(self) -> Figure:
        return self._fig

    def refresh(self, controller: DashboardController) -> None:
        """Re-render the chart from the controller's current state."""
        dataset = controller.dataset
        selection = controller.selection
        series = controller.series
        kind = controller.chart_kind

        title = f"{kind.value} Chart"
        if selection.is_complete:
            title += f"  ({selection.y} by {selection.x})"
        self._lbl_title.setText(title if not dataset.is_empty else "")
        self._lbl_count.setText(
            f"Showing {len(series)} of {len(dataset)} rows"
            if not dataset.is_empty else ""
        )

        apply_plot_style(PLOT_STYLE_DARK)
        if dataset.is_empty:
            render_placeholder(self._fig, PLACEHOLDER_NO_FILE)
        elif not series:
            render_placeholder(self._fig, PLACEHOLDER_NO_AXES)
        else:
            render_chart(self._fig, series, selection.x, selection.y, kind)

        has_chart = bool(series)
        self._btn_copy.setEnabled(has_chart)
        self._btn_export.setEnabled(has_chart)
        self._canvas.draw_idle()

    def _on_copy(self):
        if copy_to_clipboard(self._fig):
            self.window().statusBar().showMessage(
                "Chart copied to clipboard", 3000
            )
        else:
            QMessageBox.warning(self, "Copy Failed",
                                "Could not copy chart to clipboard.")
