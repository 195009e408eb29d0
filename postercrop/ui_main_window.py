# postercrop/ui_main_window.py
# Dark-themed editor window:
# - Image list (add, drag-drop, remove) backed by an explicit per-image store
# - Crop editor painting the A1 bleed box, cut line and ghosted overflow
# - Crop reaches export only through commits at gesture end (debounced zoom)
# - Export runs on a QThread; the editor keeps painting meanwhile

from __future__ import annotations

import io
import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QObject, QPointF, QRectF, Qt, QTimer, Signal
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen, QTextCursor
from PySide6.QtWidgets import (
    QCheckBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSlider,
    QSpinBox,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from postercrop.controllers.batch import resolve_base_name, validate_items
from postercrop.controllers.job_controller import JobController
from postercrop.errors import ExportError
from postercrop.imaging.raster import as_drawable, decode_image, natural_size
from postercrop.imaging.sizes import REFERENCE_FRAME
from postercrop.imaging.transform import compute_draw_rect, frame_height_for
from postercrop.models.crop import MAX_ZOOM, MIN_ZOOM, CropSession, CropState
from postercrop.models.geometry import Dimensions
from postercrop.models.settings import BatchItem, OutputOptions
from postercrop.utils.config import CONFIG_PATH, AppConfig
from postercrop.utils.logging_utils import QtTailHandler

APP_NAME = "PosterCrop"
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")
PREVIEW_MAX_PX = 2400
ZOOM_COMMIT_DELAY_MS = 150

log = logging.getLogger("postercrop")


# --------------------------- Per-image store ---------------------------
@dataclass
class ImageEntry:
    path: Path
    data: bytes
    natural: Dimensions
    preview: QImage
    session: CropSession
    options: OutputOptions
    custom_name: str = ""
    # frame width the session's offsets are currently expressed in
    reference_width: Optional[float] = None

    @property
    def base_name(self) -> str:
        return resolve_base_name(self.custom_name, self.path.name)

    def to_batch_item(self) -> BatchItem:
        return BatchItem(
            source=self.data,
            filename=self.path.name,
            crop=self.session.committed,
            options=self.options,
            custom_name=self.custom_name,
            original_size=len(self.data),
            reference_width=self.reference_width,
        )


def load_entry(path: Path, defaults: OutputOptions) -> ImageEntry:
    """Decode once for the natural size and a display-sized preview."""
    data = path.read_bytes()
    im = decode_image(data, path.name)
    try:
        natural = natural_size(im)
        thumb = as_drawable(im).copy()
        thumb.thumbnail((PREVIEW_MAX_PX, PREVIEW_MAX_PX))
        buf = io.BytesIO()
        thumb.save(buf, format="PNG")
    finally:
        im.close()

    preview = QImage()
    preview.loadFromData(buf.getvalue())
    return ImageEntry(path, data, natural, preview, CropSession(natural), defaults)


# --------------------------- Crop Editor ---------------------------
class CropEditor(QWidget):
    """
    Paints the reference frame and the image placed by the live crop.
    Emits crop_committed only when a gesture or discrete action ends.
    """

    crop_committed = Signal(object)  # CropState

    MARGIN = 40

    def __init__(self, parent=None):
        super().__init__(parent)
        self.entry: Optional[ImageEntry] = None
        self.setMinimumSize(420, 420)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

    # ---- geometry ----
    def view_rect(self) -> QRectF:
        aspect = REFERENCE_FRAME.aspect
        avail_w = max(1, self.width() - 2 * self.MARGIN)
        avail_h = max(1, self.height() - 2 * self.MARGIN)
        view_h = avail_h
        view_w = int(view_h * aspect)
        if view_w > avail_w:
            view_w = avail_w
            view_h = int(frame_height_for(view_w, aspect))
        x = (self.width() - view_w) // 2
        y = (self.height() - view_h) // 2
        return QRectF(x, y, view_w, view_h)

    def view_width(self) -> float:
        return self.view_rect().width()

    def _sync_reference(self) -> None:
        if self.entry is None:
            return
        w = self.view_width()
        if self.entry.reference_width and self.entry.reference_width != w:
            self.entry.session.rebase(self.entry.reference_width, w)
        self.entry.reference_width = w

    def set_entry(self, entry: Optional[ImageEntry]) -> None:
        self.entry = entry
        self._sync_reference()
        self.update()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._sync_reference()

    # ---- painting ----
    def paintEvent(self, event) -> None:
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(self.rect(), QColor("#0a0a0a"))

        view = self.view_rect()
        image_rect = None
        if self.entry is not None:
            rect = compute_draw_rect(
                self.entry.natural,
                self.entry.session.live,
                view.width(),
                Dimensions(int(view.width()), int(view.height())),
            )
            image_rect = QRectF(view.x() + rect.x, view.y() + rect.y, rect.width, rect.height)

            # overflow ghost
            p.setOpacity(0.15)
            p.drawImage(image_rect, self.entry.preview)
            p.setOpacity(1.0)

        # paper
        p.fillRect(view, QColor("#ffffff"))

        if image_rect is not None:
            p.save()
            p.setClipRect(view)
            p.drawImage(image_rect, self.entry.preview)
            p.restore()

        # cut line
        bleed_px = REFERENCE_FRAME.bleed_cm * view.width() / REFERENCE_FRAME.total_width_cm
        p.setPen(QPen(QColor("#3b82f6"), 2))
        p.drawRect(view.adjusted(bleed_px, bleed_px, -bleed_px, -bleed_px))

        # bleed edge
        pen = QPen(QColor("#ef4444"), 1)
        pen.setDashPattern([4, 4])
        p.setPen(pen)
        p.drawRect(view)

        # mask outside the bleed box
        mask = QPainterPath()
        mask.setFillRule(Qt.FillRule.OddEvenFill)
        mask.addRect(QRectF(self.rect()))
        mask.addRect(view)
        p.fillPath(mask, QColor(10, 10, 10, 217))
        p.end()

    # ---- interaction ----
    def _pos(self, event) -> QPointF:
        return event.position()

    def mousePressEvent(self, event) -> None:
        if self.entry is None or event.button() != Qt.MouseButton.LeftButton:
            return
        pos = self._pos(event)
        self.entry.session.begin_drag(pos.x(), pos.y())
        self.setCursor(Qt.CursorShape.ClosedHandCursor)

    def mouseMoveEvent(self, event) -> None:
        if self.entry is None or not self.entry.session.dragging:
            return
        pos = self._pos(event)
        self.entry.session.drag_to(pos.x(), pos.y())
        self.update()

    def mouseReleaseEvent(self, event) -> None:
        self._finish_drag()

    def leaveEvent(self, event) -> None:
        self._finish_drag()
        super().leaveEvent(event)

    def _finish_drag(self) -> None:
        if self.entry is None or not self.entry.session.dragging:
            return
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self._emit_commit(self.entry.session.end_drag())

    def _emit_commit(self, crop: CropState) -> None:
        self.entry.reference_width = self.view_width()
        self.update()
        self.crop_committed.emit(crop)

    # ---- discrete actions ----
    def preview_zoom(self, scale: float) -> None:
        if self.entry is not None:
            self.entry.session.preview_zoom(scale)
            self.update()

    def commit_zoom(self, scale: float) -> None:
        if self.entry is not None:
            self._emit_commit(self.entry.session.set_zoom(scale))

    def center(self) -> None:
        if self.entry is not None:
            self._emit_commit(self.entry.session.center())

    def _view_dims(self) -> Dimensions:
        view = self.view_rect()
        return Dimensions(max(1, int(view.width())), max(1, int(view.height())))

    def fit(self) -> None:
        if self.entry is not None:
            self._emit_commit(self.entry.session.fit(self._view_dims()))

    def fill(self) -> None:
        if self.entry is not None:
            self._emit_commit(self.entry.session.fill(self._view_dims()))


# --------------------------- Logging Bridge ---------------------------
class QtLogEmitter(QObject):
    """Signal emitter for logging to Qt UI"""

    message = Signal(str)


# --------------------------- Smooth Progress Bar ---------------------------
class SmoothProgressBar(QProgressBar):
    """
    Progress bar that smoothly animates and never goes backwards.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._target_value = 0
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._animate_step)
        self._timer.setInterval(20)

    def reset_to_zero(self):
        self._timer.stop()
        self._target_value = 0
        self.setValue(0)

    def setValueSmooth(self, value: int):
        value = max(0, min(100, value))
        if value <= self._target_value:
            return
        self._target_value = value
        if not self._timer.isActive():
            self._timer.start()

    def _animate_step(self):
        current = self.value()
        target = self._target_value
        if current >= target:
            self._timer.stop()
            return
        step = max(1, (target - current) // 10)
        self.setValue(min(current + step, target))


# --------------------------- Main Window ---------------------------
class MainWindow(QMainWindow):
    def __init__(self, config_path: Path = CONFIG_PATH):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} – Print & Web Export")
        self.resize(1400, 900)
        self.setAcceptDrops(True)

        self.config_path = config_path
        self.config = AppConfig.load(config_path)
        self.entries: List[ImageEntry] = []
        self.current: Optional[ImageEntry] = None
        self.jobs = JobController(self, log)

        self._zoom_timer = QTimer(self)
        self._zoom_timer.setSingleShot(True)
        self._zoom_timer.setInterval(ZOOM_COMMIT_DELAY_MS)
        self._zoom_timer.timeout.connect(self._commit_zoom)

        self._build_ui()
        self._apply_dark_theme()
        self._install_logging_bridge()
        self._show_options(self.config.options)

    # ---------------------- UI Construction ----------------------
    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(15, 15, 15, 15)
        main_layout.setSpacing(20)

        # LEFT: images
        left = QVBoxLayout()
        images_group = QGroupBox("Images")
        images_layout = QVBoxLayout(images_group)
        self.image_list = QListWidget()
        self.image_list.currentRowChanged.connect(self._on_select)
        images_layout.addWidget(self.image_list)
        btn_add = QPushButton("Add...")
        btn_add.clicked.connect(self._browse_images)
        self.remove_btn = QPushButton("Remove")
        self.remove_btn.clicked.connect(self._remove_current)
        images_layout.addWidget(self._hbox(btn_add, self.remove_btn))
        left.addWidget(images_group)
        main_layout.addLayout(left, 0)

        # CENTER: editor
        center = QVBoxLayout()
        self.editor = CropEditor()
        self.editor.crop_committed.connect(self._on_crop_committed)
        center.addWidget(self.editor, 1)

        zoom_row = QHBoxLayout()
        zoom_row.addWidget(QLabel("Zoom"))
        self.zoom_slider = QSlider(Qt.Orientation.Horizontal)
        self.zoom_slider.setRange(int(MIN_ZOOM * 100), int(MAX_ZOOM * 100))
        self.zoom_slider.setValue(100)
        self.zoom_slider.valueChanged.connect(self._on_zoom_changed)
        zoom_row.addWidget(self.zoom_slider, 1)
        self.zoom_label = QLabel("100%")
        self.zoom_label.setMinimumWidth(48)
        zoom_row.addWidget(self.zoom_label)
        for text, slot in (("Fit", self.editor.fit), ("Fill", self.editor.fill), ("Center", self.editor.center)):
            b = QPushButton(text)
            b.clicked.connect(slot)
            zoom_row.addWidget(b)
        center.addLayout(zoom_row)
        main_layout.addLayout(center, 1)

        # RIGHT: outputs, run, logs
        right_widget = QWidget()
        right_widget.setMaximumWidth(460)
        right = QVBoxLayout(right_widget)

        out_group = QGroupBox("Outputs (selected image)")
        out_layout = QFormLayout(out_group)
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Defaults to the file name")
        self.name_edit.editingFinished.connect(self._store_options)
        out_layout.addRow("File name:", self.name_edit)

        self.pdf_check = QCheckBox("PDF A1 + A2 (300 DPI, 3mm bleed)")
        self.web_check = QCheckBox("WebP 912 x 1296 px")
        self.resize_check = QCheckBox("Resized original (WebP)")
        self.resize_spin = QSpinBox()
        self.resize_spin.setRange(1, 100)
        self.resize_spin.setSuffix(" %")
        for w in (self.pdf_check, self.web_check, self.resize_check):
            w.toggled.connect(self._store_options)
        self.resize_spin.valueChanged.connect(self._store_options)
        out_layout.addRow(self.pdf_check)
        out_layout.addRow(self.web_check)
        out_layout.addRow(self._hbox(self.resize_check, self.resize_spin))

        apply_all = QPushButton("Apply outputs to all images")
        apply_all.clicked.connect(self._apply_options_to_all)
        out_layout.addRow(apply_all)
        right.addWidget(out_group)

        dest_group = QGroupBox("Destination")
        dest_layout = QFormLayout(dest_group)
        self.output_edit = QLineEdit(self.config.output_dir)
        self.output_edit.setPlaceholderText("Select output folder...")
        btn_out = QPushButton("Browse...")
        btn_out.clicked.connect(self._browse_output)
        dest_layout.addRow("Folder:", self._hbox(self.output_edit, btn_out))
        right.addWidget(dest_group)

        controls = QHBoxLayout()
        self.run_btn = QPushButton("Generate Files")
        self.run_btn.setMinimumHeight(40)
        self.run_btn.setObjectName("run_btn")
        self.run_btn.clicked.connect(self._run)
        controls.addWidget(self.run_btn)
        self.save_btn = QPushButton("Save Config")
        self.save_btn.clicked.connect(self._save_config)
        controls.addWidget(self.save_btn)
        right.addLayout(controls)

        self.status_label = QLabel("Add images to begin")
        self.status_label.setStyleSheet("color: #888; font-style: italic;")
        right.addWidget(self.status_label)
        self.progress = SmoothProgressBar()
        self.progress.setRange(0, 100)
        right.addWidget(self.progress)

        self.log_edit = QTextEdit()
        self.log_edit.setReadOnly(True)
        self.log_edit.setPlaceholderText("Export logs will appear here...")
        right.addWidget(self.log_edit, 1)

        main_layout.addWidget(right_widget, 0)

    def _apply_dark_theme(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background-color: #0d1117;
                color: #c9d1d9;
                font-family: 'Segoe UI', Arial, sans-serif;
                font-size: 10pt;
            }
            QGroupBox {
                background-color: #161b22;
                border: 1px solid #30363d;
                border-radius: 6px;
                margin-top: 12px;
                padding-top: 16px;
                font-weight: 600;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 5px;
            }
            QLineEdit, QSpinBox, QListWidget, QTextEdit {
                background-color: #0d1117;
                border: 1px solid #30363d;
                border-radius: 6px;
                padding: 4px 8px;
            }
            QLineEdit:focus, QSpinBox:focus { border: 1px solid #388bfd; }
            QPushButton {
                background-color: #21262d;
                border: 1px solid #30363d;
                border-radius: 6px;
                padding: 6px 16px;
                font-weight: 600;
            }
            QPushButton:hover { background-color: #30363d; border-color: #8b949e; }
            QPushButton:disabled { background-color: #161b22; color: #484f58; }
            QPushButton#run_btn { background-color: #238636; border-color: #2ea043; color: white; }
            QPushButton#run_btn:hover { background-color: #2ea043; }
            QPushButton#run_btn:disabled { background-color: #161b22; color: #484f58; }
            QProgressBar {
                border: 1px solid #30363d;
                border-radius: 6px;
                text-align: center;
                height: 24px;
            }
            QProgressBar::chunk { background-color: #1f6feb; border-radius: 5px; }
            QTextEdit { font-family: 'Consolas', 'Courier New', monospace; font-size: 9pt; }
            QLabel { background: transparent; }
        """
        )

    # ---------------------- Helpers ----------------------
    def _hbox(self, *widgets: QWidget) -> QWidget:
        container = QWidget()
        layout = QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        for w in widgets:
            layout.addWidget(w)
        return container

    def _append_log(self, text: str) -> None:
        self.log_edit.append(text)
        self.log_edit.moveCursor(QTextCursor.MoveOperation.End)

    def _install_logging_bridge(self) -> None:
        self._log_emitter = QtLogEmitter()
        self._log_emitter.message.connect(self._append_log)
        handler = QtTailHandler(self._log_emitter.message.emit)
        root = logging.getLogger("postercrop")
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    # ---------------------- Images ----------------------
    def add_images(self, paths: List[Path]) -> None:
        for path in paths:
            if path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                self._append_log(f"Skipped {path.name}: only JPEG, PNG and WebP are accepted")
                continue
            try:
                entry = load_entry(path, self.config.options)
            except (OSError, ExportError) as e:
                QMessageBox.warning(self, "Cannot open image", f"{path.name}:\n{e}")
                continue
            self.entries.append(entry)
            self.image_list.addItem(path.name)
            self.config.input_dir = str(path.parent)
        if self.entries and self.image_list.currentRow() < 0:
            self.image_list.setCurrentRow(0)
        self._update_status()

    def _browse_images(self) -> None:
        paths, _ = QFileDialog.getOpenFileNames(
            self, "Select Images", self.config.input_dir, "Images (*.png *.jpg *.jpeg *.webp)"
        )
        self.add_images([Path(p) for p in paths])

    def _remove_current(self) -> None:
        row = self.image_list.currentRow()
        if row < 0 or self.jobs.busy:
            return
        del self.entries[row]
        self.current = None
        self.image_list.takeItem(row)
        if not self.entries:
            self._on_select(-1)
        self._update_status()

    def dragEnterEvent(self, event) -> None:
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event) -> None:
        paths = [Path(u.toLocalFile()) for u in event.mimeData().urls() if u.isLocalFile()]
        self.add_images(paths)

    def _on_select(self, row: int) -> None:
        self._store_options()
        self.current = self.entries[row] if 0 <= row < len(self.entries) else None
        self.editor.set_entry(self.current)
        if self.current is not None:
            self._show_options(self.current.options)
            self.name_edit.setText(self.current.custom_name)
            self.name_edit.setPlaceholderText(self.current.base_name)
            self._show_zoom(self.current.session.committed.scale)

    # ---------------------- Crop ----------------------
    def _show_zoom(self, scale: float) -> None:
        self.zoom_slider.blockSignals(True)
        self.zoom_slider.setValue(int(round(scale * 100)))
        self.zoom_slider.blockSignals(False)
        self.zoom_label.setText(f"{int(round(scale * 100))}%")

    def _on_zoom_changed(self, value: int) -> None:
        self.zoom_label.setText(f"{value}%")
        self.editor.preview_zoom(value / 100)
        self._zoom_timer.start()

    def _commit_zoom(self) -> None:
        self.editor.commit_zoom(self.zoom_slider.value() / 100)

    def _on_crop_committed(self, crop: CropState) -> None:
        self._show_zoom(crop.scale)
        self.status_label.setText(f"Crop x={crop.x:.0f} y={crop.y:.0f} zoom={crop.scale:.2f}")

    # ---------------------- Options ----------------------
    def _read_options(self) -> OutputOptions:
        return OutputOptions(
            include_pdf_set=self.pdf_check.isChecked(),
            include_fixed_thumbnail=self.web_check.isChecked(),
            include_resize=self.resize_check.isChecked(),
            resize_percentage=self.resize_spin.value(),
        )

    def _show_options(self, options: OutputOptions) -> None:
        for w in (self.pdf_check, self.web_check, self.resize_check, self.resize_spin):
            w.blockSignals(True)
        self.pdf_check.setChecked(options.include_pdf_set)
        self.web_check.setChecked(options.include_fixed_thumbnail)
        self.resize_check.setChecked(options.include_resize)
        self.resize_spin.setValue(options.resize_percentage)
        for w in (self.pdf_check, self.web_check, self.resize_check, self.resize_spin):
            w.blockSignals(False)

    def _store_options(self, *_args) -> None:
        if self.current is None:
            return
        self.current.options = self._read_options()
        self.current.custom_name = self.name_edit.text().strip()

    def _apply_options_to_all(self) -> None:
        options = self._read_options()
        for entry in self.entries:
            entry.options = options
        self._append_log(f"Applied outputs to {len(self.entries)} image(s)")

    # ---------------------- Config ----------------------
    def _save_config(self) -> None:
        self.config.output_dir = self.output_edit.text().strip()
        self.config.options = self._read_options()
        try:
            self.config.save(self.config_path)
            QMessageBox.information(self, "Configuration Saved", f"Settings saved to:\n{self.config_path}")
        except OSError as e:
            QMessageBox.warning(self, "Save Failed", f"Could not save configuration:\n{e}")

    def _browse_output(self) -> None:
        path = QFileDialog.getExistingDirectory(self, "Select Output Folder", self.output_edit.text())
        if path:
            self.output_edit.setText(path)

    # ---------------------- Run ----------------------
    def _run(self) -> None:
        self._zoom_timer.stop()
        if self.current is not None and self.current.session.live != self.current.session.committed:
            self._commit_zoom()
        self._store_options()

        output_dir = self.output_edit.text().strip()
        items = [e.to_batch_item() for e in self.entries]
        try:
            if not output_dir:
                raise ValueError("Please select an output folder")
            validate_items(items, self.editor.view_width())
        except (ValueError, ExportError) as e:
            QMessageBox.critical(self, "Cannot export", str(e))
            return

        self.log_edit.clear()
        self.progress.reset_to_zero()
        self._set_processing_state(True)
        self.jobs.start(items, self.editor.view_width(), Path(output_dir))

    def _set_processing_state(self, processing: bool) -> None:
        for w in (self.run_btn, self.save_btn, self.remove_btn, self.output_edit):
            w.setEnabled(not processing)

    def _update_status(self) -> None:
        self.status_label.setText(f"{len(self.entries)} image(s) loaded")

    # worker callbacks (via JobController)
    def on_file_started(self, name: str) -> None:
        self.status_label.setText(f"Exporting {name}...")

    def on_progress(self, pct: int) -> None:
        self.progress.setValueSmooth(pct)

    def on_error(self, msg: str) -> None:
        self._set_processing_state(False)
        self.progress.reset_to_zero()
        self.status_label.setText("Export failed")
        QMessageBox.critical(self, "Export Failed", f"Nothing was written:\n\n{msg}")

    def on_all_done(self, results, out_path: Path) -> None:
        self._set_processing_state(False)
        self.progress.setValueSmooth(100)
        count = sum(len(r.files) for r in results)
        self.status_label.setText(f"Done: {count} file(s)")
        reply = QMessageBox.question(
            self,
            "Files Ready",
            f"{count} file(s) written to:\n{out_path}\n\nOpen output folder?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        if reply == QMessageBox.StandardButton.Yes:
            self._open_output_folder(out_path)

    def _open_output_folder(self, file_path: Path) -> None:
        try:
            if sys.platform == "win32":
                subprocess.run(["explorer", "/select,", str(file_path)], check=False)
            elif sys.platform == "darwin":
                subprocess.run(["open", "-R", str(file_path)], check=False)
            else:
                subprocess.run(["xdg-open", str(file_path.parent)], check=False)
        except OSError as e:
            QMessageBox.warning(self, "Folder Open Failed", f"Could not open folder:\n{e}")

