from __future__ import annotations
from typing import List, Optional
from PySide6.QtCore import QThread, Signal
from postercrop.controllers.batch import run_batch
from postercrop.models.settings import BatchItem

class ExportWorker(QThread):
    """
    Runs one batch off the GUI thread. The items carry committed crop
    snapshots, so the editor can keep painting while this runs.
    """
    file_started = Signal(str)
    batch_progress = Signal(int)
    error = Signal(str)
    all_done = Signal(object)  # List[BatchResult]

    def __init__(self, items: List[BatchItem], reference_width: Optional[float]):
        super().__init__()
        self._items = list(items)
        self._reference_width = reference_width

    def run(self):
        def _progress(idx: int, total: int, name: str):
            self.file_started.emit(name)
            self.batch_progress.emit(int((idx - 1) * 100 / total))

        try:
            results = run_batch(self._items, self._reference_width, progress_cb=_progress)
        except Exception as e:
            self.error.emit(str(e))
            return
        self.batch_progress.emit(100)
        self.all_done.emit(results)
