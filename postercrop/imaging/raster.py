# postercrop/imaging/raster.py
# Purpose: decode sources, draw them onto exact-size surfaces, encode bytes.
# - Surfaces are always opaque white RGB; transparent sources are flattened
# - Only the visible part of the source is resampled (Lanczos)
# - Every failure maps onto the export error taxonomy

from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from postercrop.errors import DecodeFailure, EncodeFailure, SurfaceUnavailable
from postercrop.imaging.presets import EncodePreset, save_kwargs
from postercrop.imaging.transform import compute_draw_rect
from postercrop.models.crop import CropState
from postercrop.models.geometry import Dimensions, DrawRect

RESAMPLE_LANCZOS = Image.Resampling.LANCZOS
WHITE = (255, 255, 255)

log = logging.getLogger("postercrop.pipeline")


# ---------------------------- decode ----------------------------
def decode_image(data: bytes, name: str = "image") -> Image.Image:
    """
    Decode source bytes into a fully loaded Pillow image.
    EXIF orientation is applied so the natural size is what a viewer shows.
    """
    if not data:
        raise DecodeFailure(f"{name}: file is empty")

    Image.MAX_IMAGE_PIXELS = None  # print sources are routinely huge
    try:
        im = Image.open(io.BytesIO(data))
        im.load()
        im = ImageOps.exif_transpose(im)
    except (UnidentifiedImageError, OSError, ValueError, SyntaxError) as e:
        raise DecodeFailure(f"{name}: not a readable image ({e})") from e

    log.info("Decoded %s: %dx%d %s", name, im.width, im.height, im.mode)
    return im


def natural_size(im: Image.Image) -> Dimensions:
    return Dimensions(im.width, im.height)


def _has_alpha(im: Image.Image) -> bool:
    return im.mode in ("RGBA", "LA", "PA", "RGBa", "La") or (
        im.mode == "P" and "transparency" in im.info
    )


def as_drawable(im: Image.Image) -> Image.Image:
    mode = "RGBA" if _has_alpha(im) else "RGB"
    return im if im.mode == mode else im.convert(mode)


# ---------------------------- surface ----------------------------
def new_surface(size: Dimensions) -> Image.Image:
    try:
        return Image.new("RGB", size.as_tuple(), WHITE)
    except (MemoryError, ValueError) as e:
        raise SurfaceUnavailable(f"Cannot allocate {size.width}x{size.height} surface: {e}") from e


def draw_image(surface: Image.Image, im: Image.Image, rect: DrawRect) -> None:
    """Draw `im` scaled into `rect`; parts outside the surface are skipped."""
    left = max(0.0, rect.x)
    top = max(0.0, rect.y)
    right = min(float(surface.width), rect.right)
    bottom = min(float(surface.height), rect.bottom)

    x0, y0, x1, y1 = round(left), round(top), round(right), round(bottom)
    if x1 <= x0 or y1 <= y0:
        log.info("Image lies entirely outside the frame; surface left blank")
        return

    # destination pixel box mapped back into source coordinates
    sx = im.width / rect.width
    sy = im.height / rect.height
    box = (
        min(max(0.0, (x0 - rect.x) * sx), im.width),
        min(max(0.0, (y0 - rect.y) * sy), im.height),
        min(max(0.0, (x1 - rect.x) * sx), im.width),
        min(max(0.0, (y1 - rect.y) * sy), im.height),
    )
    if box[2] <= box[0] or box[3] <= box[1]:
        return

    src = as_drawable(im)
    try:
        tile = src.resize((x1 - x0, y1 - y0), resample=RESAMPLE_LANCZOS, box=box)
    except MemoryError as e:
        raise SurfaceUnavailable(f"Cannot allocate {x1 - x0}x{y1 - y0} tile: {e}") from e

    if tile.mode == "RGBA":
        surface.paste(tile, (x0, y0), tile)
    else:
        surface.paste(tile, (x0, y0))


# ---------------------------- encode ----------------------------
def encode(surface: Image.Image, preset: EncodePreset) -> bytes:
    buf = io.BytesIO()
    try:
        surface.save(buf, **save_kwargs(preset))
    except (OSError, ValueError, KeyError) as e:
        raise EncodeFailure(f"{preset.format.value} encoding failed: {e}") from e

    data = buf.getvalue()
    if not data:
        raise EncodeFailure(f"{preset.format.value} encoder produced no bytes")
    return data


# ---------------------------- public API ----------------------------
def render_surface(
    im: Image.Image,
    crop: CropState,
    reference_width: float,
    size: Dimensions,
) -> Image.Image:
    rect = compute_draw_rect(natural_size(im), crop, reference_width, size)
    surface = new_surface(size)
    draw_image(surface, im, rect)
    return surface


def render_frame(
    im: Image.Image,
    crop: CropState,
    reference_width: float,
    size: Dimensions,
    preset: EncodePreset,
) -> bytes:
    """Rasterize the cropped composition at `size` and encode it."""
    log.info(
        "Rendering %dx%d %s q%d (crop x=%.1f y=%.1f scale=%.3f, ref=%.1f)",
        size.width, size.height, preset.format.value, preset.quality,
        crop.x, crop.y, crop.scale, reference_width,
    )
    surface = render_surface(im, crop, reference_width, size)
    try:
        return encode(surface, preset)
    finally:
        surface.close()
