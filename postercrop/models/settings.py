from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from .crop import CropState

MIN_RESIZE_PCT = 1
MAX_RESIZE_PCT = 100
DEFAULT_RESIZE_PCT = 50

def clamp_percentage(value) -> int:
    return max(MIN_RESIZE_PCT, min(MAX_RESIZE_PCT, int(round(value))))

@dataclass(frozen=True)
class OutputOptions:
    include_pdf_set: bool = True
    include_fixed_thumbnail: bool = True
    include_resize: bool = False
    resize_percentage: int = DEFAULT_RESIZE_PCT

    def __post_init__(self):
        # frozen, so bypass __setattr__ to store the clamped value
        object.__setattr__(self, "resize_percentage", clamp_percentage(self.resize_percentage))

    @property
    def any_selected(self) -> bool:
        return self.include_pdf_set or self.include_fixed_thumbnail or self.include_resize

@dataclass(frozen=True)
class BatchItem:
    """One source image with the settings it is exported with."""
    source: bytes
    filename: str
    crop: CropState = field(default_factory=CropState)
    options: OutputOptions = field(default_factory=OutputOptions)
    custom_name: str = ""
    original_size: int = 0
    # on-screen width of the reference frame when this crop was authored;
    # None falls back to the batch-wide width
    reference_width: Optional[float] = None

    def __post_init__(self):
        if not self.original_size:
            object.__setattr__(self, "original_size", len(self.source))
