"""
Main window for the QuickChart Data Dashboard.

Hosts the ControlPanel (left) and ChartView (right) in a horizontal
splitter, with a menu bar and status bar.  Owns the dashboard
controller and the background file readers.
"""

import logging
import os
import tempfile

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea,
    QFileDialog, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import Qt, Slot

from . import APP_NAME, APP_VERSION
from .controller import DashboardController
from .export import export_png
from .file_reader import FileReadWorker
from .gui_chart_view import ChartView
from .gui_control_panel import ControlPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main window for the QuickChart Data Dashboard."""

    def __init__(self):
        super().__init__()
        self._controller = DashboardController()
        self._workers = set()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1100, 720)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self.statusBar().showMessage("Ready. Upload a CSV or Excel file to begin")

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(4)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        # Left panel: controls in scroll area
        self._control_panel = ControlPanel()
        scroll = QScrollArea()
        scroll.setWidget(self._control_panel)
        scroll.setWidgetResizable(True)
        scroll.setMinimumWidth(300)
        scroll.setMaximumWidth(460)

        # Right panel: chart
        self._chart_view = ChartView()

        splitter.addWidget(scroll)
        splitter.addWidget(self._chart_view)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([340, 760])

        main_layout.addWidget(splitter)

    def _setup_menu(self):
        menubar = self.menuBar()

        # ── File menu ────────────────────────────────────────────────
        file_menu = menubar.addMenu("File")

        act_open = QAction("Open File...", self)
        act_open.setShortcut("Ctrl+O")
        act_open.triggered.connect(lambda *_: self._control_panel.browse_file())
        file_menu.addAction(act_open)

        act_export = QAction("Export Chart...", self)
        act_export.triggered.connect(lambda *_: self._export_current())
        file_menu.addAction(act_export)

        file_menu.addSeparator()

        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        # ── Examples menu ────────────────────────────────────────────
        examples_menu = menubar.addMenu("Examples")

        act_load_example = QAction("Load Example Dataset", self)
        act_load_example.triggered.connect(lambda *_: self._load_example())
        examples_menu.addAction(act_load_example)

        # ── Help menu ────────────────────────────────────────────────
        help_menu = menubar.addMenu("Help")

        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        panel = self._control_panel
        controller = self._controller
        panel.file_selected.connect(self.open_file)
        panel.x_axis_changed.connect(controller.set_x_axis)
        panel.y_axis_changed.connect(controller.set_y_axis)
        panel.chart_kind_changed.connect(controller.set_chart_kind)
        self._chart_view.export_requested.connect(self._export_current)
        controller.add_listener(self._on_state_changed)

    # ── Ingestion ────────────────────────────────────────────────────

    def open_file(self, path: str) -> None:
        """Start ingesting *path*; the read runs on a worker thread."""
        request_id = self._controller.begin_ingestion(os.path.basename(path))
        if request_id is None:
            return

        worker = FileReadWorker(path, request_id, self)
        worker.finished_result.connect(self._on_read_finished)
        worker.error_occurred.connect(self._on_read_failed)
        worker.finished.connect(lambda w=worker: self._release_worker(w))
        self._workers.add(worker)
        worker.start()

    @Slot(int, object)
    def _on_read_finished(self, request_id, content):
        self._controller.complete_ingestion(request_id, content)

    @Slot(int, str)
    def _on_read_failed(self, request_id, message):
        self._controller.fail_ingestion(request_id, message)

    def _release_worker(self, worker: FileReadWorker) -> None:
        self._workers.discard(worker)
        worker.deleteLater()

    # ── Slots ────────────────────────────────────────────────────────

    def _on_state_changed(self):
        controller = self._controller
        self._control_panel.refresh(controller)
        self._chart_view.refresh(controller)

        if controller.loading:
            self.statusBar().showMessage(f"Loading {controller.file_name}...")
        elif controller.error:
            self.statusBar().showMessage("Data load failed")
        elif not controller.dataset.is_empty:
            self.statusBar().showMessage(
                f"Loaded {controller.file_name}: {len(controller.dataset)} rows, "
                f"{len(controller.columns)} columns"
            )

    def _load_example(self):
        """Generate and load the example sales CSV."""
        from .example_data import generate_example_csv

        example_dir = os.path.join(tempfile.gettempdir(), 'quickchart_example')
        self.open_file(generate_example_csv(example_dir))

    def _export_current(self):
        """Export the current chart as PNG."""
        controller = self._controller
        series = controller.series
        if not series:
            QMessageBox.warning(
                self, "Nothing to Export",
                "No chart is currently displayed.",
            )
            return

        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart as PNG",
            "", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.png'):
            path += '.png'
        selection = controller.selection
        try:
            export_png(series, selection.x, selection.y,
                       controller.chart_kind, path)
            self.statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 5000
            )
        except (OSError, ValueError) as exc:
            logger.exception("Chart export failed")
            QMessageBox.critical(
                self, "Export Error", f"Failed to export: {exc}"
            )

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Upload an Excel or CSV file to generate interactive "
            f"bar, line and pie charts.</p>"
            f"<p>Charts show up to 100 rows sorted by the value column; "
            f"statistics cover every numeric value in the file.</p>",
        )
