from enum import Enum

class OutputKind(Enum):
    PDF = "pdf"
    WEBP = "webp"

class ExportFormat(Enum):
    JPEG = "JPEG"   # raster embedded in the print PDFs
    WEBP = "WEBP"

class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
