# postercrop/imaging/resize.py
# Crop-independent percentage resize of the untouched original.

from __future__ import annotations

import logging
import math
from typing import Tuple

from PIL import Image

from postercrop.imaging.presets import RESIZE_WEBP, EncodePreset
from postercrop.imaging.raster import RESAMPLE_LANCZOS, encode, natural_size, new_surface, as_drawable
from postercrop.models.geometry import Dimensions
from postercrop.models.settings import clamp_percentage

log = logging.getLogger("postercrop.pipeline")

BYTE_UNITS = ("B", "KB", "MB", "GB")


def resized_dimensions(natural: Dimensions, percentage: int) -> Dimensions:
    scale = clamp_percentage(percentage) / 100
    w = max(1, _round_half_up(natural.width * scale))
    h = max(1, _round_half_up(natural.height * scale))
    return Dimensions(w, h)


def resize_original(
    im: Image.Image,
    percentage: int,
    preset: EncodePreset = RESIZE_WEBP,
) -> Tuple[bytes, Dimensions]:
    size = resized_dimensions(natural_size(im), percentage)
    log.info("Resizing original %dx%d -> %s", im.width, im.height, size)

    surface = new_surface(size)
    try:
        scaled = as_drawable(im).resize(size.as_tuple(), resample=RESAMPLE_LANCZOS)
        if scaled.mode == "RGBA":
            surface.paste(scaled, (0, 0), scaled)
        else:
            surface.paste(scaled, (0, 0))
        scaled.close()
        return encode(surface, preset), size
    finally:
        surface.close()


def format_bytes(num: int, decimals: int = 1) -> str:
    """1536 -> '1.5 KB'. Trailing zeros are dropped ('1 MB', not '1.0 MB')."""
    if num <= 0:
        return "0 B"
    value, i = float(num), 0
    while value >= 1024 and i < len(BYTE_UNITS) - 1:
        value /= 1024
        i += 1
    value = round(value, max(0, decimals))
    return f"{value:g} {BYTE_UNITS[i]}"


def savings_percent(original: int, result: int) -> int:
    return _round_half_up((original - result) / original * 100)


def size_comparison(original: int, result: int) -> str:
    """
    Human readable before/after, e.g. '1 MB → 512 KB (↓50%)'.
    A file that grew shows '↑' with the growth magnitude.
    """
    if original <= 0:
        return format_bytes(result)
    pct = savings_percent(original, result)
    arrow = "↓" if original > result else "↑"
    return f"{format_bytes(original)} → {format_bytes(result)} ({arrow}{abs(pct)}%)"


def _round_half_up(value: float) -> int:
    # JS Math.round semantics; Python's round() is banker's rounding
    return int(math.floor(value + 0.5))
