# postercrop/controllers/batch.py
# Runs the export pipeline over many images, one at a time.
#
# Strictly sequential: one decoded source and one print surface alive at
# any moment. The first failure aborts the whole batch and results from
# earlier images are dropped with it.

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePath
from typing import Callable, List, Optional, Sequence

from postercrop.errors import DecodeFailure, InvalidOptions
from postercrop.imaging.pipeline import process_exports
from postercrop.imaging.raster import decode_image
from postercrop.models.crop import CropState
from postercrop.models.results import BatchResult
from postercrop.models.settings import BatchItem, OutputOptions
from postercrop.utils.logging_utils import log_section

log = logging.getLogger("postercrop.batch")

ProgressCallback = Callable[[int, int, str], None]

# characters that break archive paths or common file systems
_UNSAFE_NAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def strip_extension(filename: str) -> str:
    return PurePath(filename).stem


def resolve_base_name(custom_name: str, filename: str) -> str:
    """Custom name if given, otherwise the file name without its extension."""
    name = (custom_name or "").strip() or strip_extension(filename)
    name = _UNSAFE_NAME_CHARS.sub("_", name).strip(" .")
    return name or "image"


def validate_items(items: Sequence[BatchItem], reference_width: Optional[float]) -> None:
    """Reject the whole batch up front so a bad item never leaves partial output."""
    if not items:
        raise InvalidOptions("No images selected for export")
    for item in items:
        if not item.options.any_selected:
            raise InvalidOptions(f"{item.filename}: no output format selected")
        ref = item.reference_width or reference_width
        if not ref or ref <= 0:
            raise InvalidOptions(f"{item.filename}: crop has no reference width")


def _emit_progress(cb: Optional[ProgressCallback], index: int, total: int, name: str) -> None:
    if cb is None:
        return
    try:
        cb(index, total, name)
    except Exception as e:
        log.warning(f"Progress callback failed at {index}/{total}: {e}")


def run_batch(
    items: Sequence[BatchItem],
    reference_width: Optional[float],
    progress_cb: Optional[ProgressCallback] = None,
) -> List[BatchResult]:
    """
    Export every item in order and return one BatchResult per item.

    `reference_width` is the on-screen frame width shared by all items; an
    item that recorded its own width (authored at a different layout) uses
    that instead.
    """
    validate_items(items, reference_width)

    total = len(items)
    results: List[BatchResult] = []
    with log_section(f"BATCH EXPORT: {total} image(s)", log):
        for idx, item in enumerate(items, 1):
            base_name = resolve_base_name(item.custom_name, item.filename)
            ref = item.reference_width or reference_width
            log.info("[%d/%d] %s -> %s (ref width %.1f)", idx, total, item.filename, base_name, ref)
            _emit_progress(progress_cb, idx, total, base_name)

            image = decode_image(item.source, item.filename)
            try:
                files = process_exports(
                    image,
                    item.crop,
                    ref,
                    base_name,
                    item.options,
                    item.original_size,
                )
            finally:
                image.close()

            results.append(BatchResult(base_name, tuple(files)))

    return results


def load_items(
    paths: Sequence[Path],
    crop: CropState,
    options: OutputOptions,
    names: Sequence[str] = (),
) -> List[BatchItem]:
    """Read sources from disk, applying one crop/options set to all of them."""
    items: List[BatchItem] = []
    for i, p in enumerate(paths):
        try:
            data = Path(p).read_bytes()
        except OSError as e:
            raise DecodeFailure(f"{p}: cannot read file ({e})") from e
        custom = names[i] if i < len(names) else ""
        items.append(BatchItem(source=data, filename=Path(p).name, crop=crop,
                               options=options, custom_name=custom))
    return items
