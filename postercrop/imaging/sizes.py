# postercrop/imaging/sizes.py
# Physical print targets and their 300 DPI pixel sizes.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from postercrop.models.geometry import Dimensions

CM_PER_INCH = 2.54
PRINT_DPI = 300

# 300 px / 2.54 cm, truncated the way the print shop quotes it
PPCM = 118.1102


@dataclass(frozen=True)
class PrintSpec:
    """A trimmed page plus bleed on every edge."""

    key: str
    trim_width_cm: float
    trim_height_cm: float
    bleed_mm: float = 3.0

    @property
    def bleed_cm(self) -> float:
        return self.bleed_mm / 10

    @property
    def total_width_cm(self) -> float:
        return round(self.trim_width_cm + 2 * self.bleed_cm, 4)

    @property
    def total_height_cm(self) -> float:
        return round(self.trim_height_cm + 2 * self.bleed_cm, 4)

    @property
    def aspect(self) -> float:
        return self.total_width_cm / self.total_height_cm

    def pixel_size(self) -> Dimensions:
        w, h = target_pixels(self.total_width_cm, self.total_height_cm)
        return Dimensions(w, h)

    def describe(self) -> str:
        return (
            f"{_fmt_cm(self.total_width_cm)} x {_fmt_cm(self.total_height_cm)} cm "
            f"(incl. {_fmt_cm(self.bleed_mm)}mm bleed)"
        )


A1 = PrintSpec("A1", 59.4, 84.1)
A2 = PrintSpec("A2", 42.0, 59.4)

PRINT_SPECS: Dict[str, PrintSpec] = {s.key: s for s in (A1, A2)}

# Crop/zoom is authored against the A1 bleed box
REFERENCE_FRAME = A1

# Independent aspect; framing against the reference frame is approximate
WEB_THUMBNAIL = Dimensions(912, 1296)


def to_pixels(cm: float) -> int:
    # ceil: a raster that undershoots the page leaves an unprinted sliver
    return max(1, math.ceil(cm * PPCM))


def target_pixels(width_cm: float, height_cm: float) -> Tuple[int, int]:
    return (to_pixels(width_cm), to_pixels(height_cm))


def _fmt_cm(value: float) -> str:
    return f"{value:g}"
