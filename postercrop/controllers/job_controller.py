from __future__ import annotations
from pathlib import Path
from typing import List, Optional
from postercrop.controllers.archive import archive_filename, write_archive
from postercrop.models.results import BatchResult
from postercrop.models.settings import BatchItem
from postercrop.workers.export_worker import ExportWorker

def default_archive_path(output_dir: Path, results: List[BatchResult]) -> Path:
    out = output_dir / archive_filename(results)
    stem = out.stem
    i = 1
    while out.exists():
        out = output_dir / f"{stem}_{i}.zip"
        i += 1
    return out

class JobController:
    """Owns the export worker and writes the archive when it finishes."""

    def __init__(self, ui, logger):
        self.ui = ui
        self.logger = logger
        self.worker: ExportWorker | None = None
        self.output_dir: Optional[Path] = None

    @property
    def busy(self) -> bool:
        return bool(self.worker and self.worker.isRunning())

    def start(self, items: List[BatchItem], reference_width: Optional[float], output_dir: Path):
        if self.busy:
            return
        self.output_dir = output_dir
        self.worker = ExportWorker(items, reference_width)
        self._wire_worker(self.worker)
        self.worker.start()

    def _on_done(self, results: List[BatchResult]):
        try:
            out = write_archive(results, default_archive_path(self.output_dir, results))
        except OSError as e:
            self.logger.error("Could not write archive: %s", e)
            self.ui.on_error(f"Could not write archive: {e}")
            return
        self.ui.on_all_done(results, out)

    def _wire_worker(self, w: ExportWorker):
        w.file_started.connect(lambda f: self.ui.on_file_started(f))
        w.batch_progress.connect(lambda p: self.ui.on_progress(p))
        w.error.connect(lambda msg: self.ui.on_error(msg))
        w.all_done.connect(self._on_done)
