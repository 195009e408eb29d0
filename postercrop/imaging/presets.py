from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional
from postercrop.models.enums import ExportFormat
from postercrop.imaging.sizes import PRINT_DPI

@dataclass(frozen=True)
class EncodePreset:
    format: ExportFormat
    quality: int
    dpi: Optional[int] = None

PRINT_JPEG = EncodePreset(ExportFormat.JPEG, 95, PRINT_DPI)
THUMBNAIL_WEBP = EncodePreset(ExportFormat.WEBP, 90)
RESIZE_WEBP = EncodePreset(ExportFormat.WEBP, 85)

PRESETS: Dict[str, EncodePreset] = {
    "print": PRINT_JPEG,
    "thumbnail": THUMBNAIL_WEBP,
    "resize": RESIZE_WEBP,
}

def save_kwargs(preset: EncodePreset) -> Dict[str, object]:
    kw: Dict[str, object] = {"format": preset.format.value, "quality": preset.quality}
    if preset.dpi:
        kw["dpi"] = (preset.dpi, preset.dpi)
    return kw
