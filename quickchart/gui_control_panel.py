"""
Control panel (left side) for the QuickChart Data Dashboard.

File upload, chart kind, X/Y axis selection, a small data preview and
the data summary with statistics for the selected value column.

The panel never validates what the user picks; it emits plain values
and redraws itself from the controller in ``refresh``.
"""

from html import escape as _html_esc

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QPushButton, QComboBox, QButtonGroup, QFileDialog,
    QTableWidget, QTableWidgetItem, QAbstractItemView,
)
from PySide6.QtCore import Signal

from .constants import (
    FILE_DIALOG_FILTER, PREVIEW_ROWS, PREVIEW_COLUMNS,
    PREVIEW_CELL_CHARS, PREVIEW_MISSING,
)
from .controller import DashboardController
from .data_model import ChartKind
from .projection import format_number


def preview_cell(value) -> str:
    """Text for one data preview cell."""
    if value is None:
        return PREVIEW_MISSING
    return str(value)[:PREVIEW_CELL_CHARS]


class ControlPanel(QWidget):
    """Left-side panel with upload, chart settings and data summary."""

    # Signals
    file_selected = Signal(str)         # emits absolute path
    x_axis_changed = Signal(str)
    y_axis_changed = Signal(str)
    chart_kind_changed = Signal(str)    # emits ChartKind value

    _CHART_KINDS = [
        (ChartKind.BAR, "📊 Bar", "Bar Chart"),
        (ChartKind.LINE, "📈 Line", "Line Chart"),
        (ChartKind.PIE, "🥧 Pie", "Pie Chart"),
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        # ── Upload row ───────────────────────────────────────────────
        grp_file = QGroupBox("Data File")
        file_layout = QVBoxLayout(grp_file)
        file_layout.setSpacing(4)

        self._btn_upload = QPushButton("📤 Upload File")
        self._btn_upload.setObjectName("uploadButton")
        file_layout.addWidget(self._btn_upload)

        self._lbl_file = QLabel("")
        self._lbl_file.setWordWrap(True)
        file_layout.addWidget(self._lbl_file)

        self._lbl_loading = QLabel("⏳ Processing file...")
        self._lbl_loading.setObjectName("dimLabel")
        self._lbl_loading.setVisible(False)
        file_layout.addWidget(self._lbl_loading)

        self._lbl_error = QLabel("")
        self._lbl_error.setObjectName("errorLabel")
        self._lbl_error.setWordWrap(True)
        self._lbl_error.setVisible(False)
        file_layout.addWidget(self._lbl_error)

        layout.addWidget(grp_file)

        # ── Chart settings ───────────────────────────────────────────
        self._grp_settings = QGroupBox("Chart Settings")
        settings_layout = QVBoxLayout(self._grp_settings)
        settings_layout.setSpacing(6)

        kind_row = QHBoxLayout()
        kind_row.setSpacing(4)
        self._kind_group = QButtonGroup(self)
        self._kind_group.setExclusive(True)
        self._kind_buttons = {}
        for kind, text, tooltip in self._CHART_KINDS:
            btn = QPushButton(text)
            btn.setCheckable(True)
            btn.setToolTip(tooltip)
            btn.setChecked(kind is ChartKind.BAR)
            self._kind_group.addButton(btn)
            self._kind_buttons[kind] = btn
            kind_row.addWidget(btn)
        kind_row.addStretch()

        axes_form = QFormLayout()
        axes_form.setSpacing(4)
        self._cmb_x = QComboBox()
        self._cmb_y = QComboBox()
        axes_form.addRow("X-Axis (Category):", self._cmb_x)
        axes_form.addRow("Y-Axis (Values):", self._cmb_y)

        self._tbl_preview = QTableWidget()
        self._tbl_preview.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._tbl_preview.verticalHeader().setVisible(False)
        self._tbl_preview.setMaximumHeight(180)

        settings_layout.addWidget(QLabel("Chart Type"))
        settings_layout.addLayout(kind_row)
        settings_layout.addLayout(axes_form)
        settings_layout.addWidget(QLabel("Data Preview"))
        settings_layout.addWidget(self._tbl_preview)
        layout.addWidget(self._grp_settings)

        # ── Data summary ─────────────────────────────────────────────
        self._grp_summary = QGroupBox("Data Summary")
        summary_layout = QVBoxLayout(self._grp_summary)
        self._lbl_summary = QLabel("")
        self._lbl_summary.setWordWrap(True)
        self._lbl_stats = QLabel("")
        self._lbl_stats.setWordWrap(True)
        summary_layout.addWidget(self._lbl_summary)
        summary_layout.addWidget(self._lbl_stats)
        layout.addWidget(self._grp_summary)

        layout.addStretch()

        self._grp_settings.setVisible(False)
        self._grp_summary.setVisible(False)

    # ── Signal connections ───────────────────────────────────────────

    def _connect_signals(self):
        self._btn_upload.clicked.connect(lambda *_: self.browse_file())
        self._cmb_x.textActivated.connect(self.x_axis_changed.emit)
        self._cmb_y.textActivated.connect(self.y_axis_changed.emit)
        for kind, btn in self._kind_buttons.items():
            btn.clicked.connect(
                lambda checked=False, k=kind: self.chart_kind_changed.emit(k.value)
            )

    # ── Slot implementations ─────────────────────────────────────────

    def browse_file(self):
        path, _ = QFileDialog.getOpenFileName(
            self, "Select Data File", "", FILE_DIALOG_FILTER,
        )
        if path:
            self.file_selected.emit(path)

    # ── Public API ───────────────────────────────────────────────────

    def refresh(self, controller: DashboardController) -> None:
        """Redraw every control from the controller's current state."""
        self._lbl_file.setText(
            f"📄 {controller.file_name}" if controller.file_name else ""
        )
        self._lbl_loading.setVisible(controller.loading)
        self._lbl_error.setText(controller.error)
        self._lbl_error.setVisible(bool(controller.error))

        has_data = not controller.dataset.is_empty
        self._grp_settings.setVisible(has_data)
        self._grp_summary.setVisible(has_data)

        self._kind_buttons[controller.chart_kind].setChecked(True)
        self._sync_combo(self._cmb_x, controller.columns, controller.selection.x)
        self._sync_combo(self._cmb_y, controller.columns, controller.selection.y)
        self._fill_preview(controller)
        self._fill_summary(controller)

    # ── Helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _sync_combo(combo: QComboBox, columns, selected: str) -> None:
        combo.blockSignals(True)
        current = [combo.itemText(i) for i in range(combo.count())]
        if current != list(columns):
            combo.clear()
            combo.addItems(list(columns))
        combo.setCurrentIndex(combo.findText(selected) if selected else -1)
        combo.blockSignals(False)

    def _fill_preview(self, controller: DashboardController) -> None:
        columns = list(controller.columns)
        shown = columns[:PREVIEW_COLUMNS]
        headers = shown + (["..."] if len(columns) > PREVIEW_COLUMNS else [])
        rows = controller.dataset.rows[:PREVIEW_ROWS]

        table = self._tbl_preview
        table.clear()
        table.setColumnCount(len(headers))
        table.setRowCount(len(rows))
        table.setHorizontalHeaderLabels(headers)
        for r, row in enumerate(rows):
            for c, col in enumerate(shown):
                table.setItem(r, c, QTableWidgetItem(preview_cell(row.get(col))))
            if len(headers) > len(shown):
                table.setItem(r, len(shown), QTableWidgetItem("..."))
        table.resizeColumnsToContents()

    def _fill_summary(self, controller: DashboardController) -> None:
        self._lbl_summary.setText(
            f"<b>Total Rows:</b> {len(controller.dataset)}<br>"
            f"<b>Columns:</b> {_html_esc(', '.join(controller.columns))}"
        )
        stats = controller.statistics
        if stats.is_empty:
            self._lbl_stats.setText("")
            return
        self._lbl_stats.setText(
            f"<b>Statistics for {_html_esc(controller.selection.y)}:</b><br>"
            f"<b>Count:</b> {stats.count}<br>"
            f"<b>Min:</b> {format_number(stats.minimum)}<br>"
            f"<b>Max:</b> {format_number(stats.maximum)}<br>"
            f"<b>Average:</b> {format_number(stats.mean)}"
        )
