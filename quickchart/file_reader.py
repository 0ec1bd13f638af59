"""
Background file reader for the QuickChart Data Dashboard.

Reads the raw bytes of one file on a worker thread so the window stays
responsive.  Each worker reports exactly once: either
``finished_result`` with the bytes or ``error_occurred`` with a message.
Decoding happens back on the GUI thread, in the controller.
"""

from PySide6.QtCore import QThread, Signal

from .ingest import read_file


class FileReadWorker(QThread):
    """
    Worker thread that reads one file for one ingestion request.

    Signals
    -------
    finished_result : Signal(int, object)
        Emits ``(request_id, content_bytes)`` when the read succeeds.
    error_occurred : Signal(int, str)
        Emits ``(request_id, message)`` when the read fails.
    """

    finished_result = Signal(int, object)
    error_occurred = Signal(int, str)

    def __init__(self, path: str, request_id: int, parent=None):
        super().__init__(parent)
        self._path = path
        self._request_id = request_id

    @property
    def request_id(self) -> int:
        return self._request_id

    def run(self):  # noqa: D401 – Qt override
        try:
            content = read_file(self._path)
        except Exception as exc:
            self.error_occurred.emit(self._request_id, str(exc))
            return
        self.finished_result.emit(self._request_id, content)
