# postercrop/imaging/pipeline.py
# Purpose: turn one image + one authored crop into every enabled output.
# - Fixed output order: A1 PDF, A2 PDF, web thumbnail, resized original
# - Print rasters are ceil-sized to the bleed box at 300 DPI, JPEG q95
# - Web thumbnail is 912x1296 WebP q90 (aspect differs from the frame)
# - Resize ignores the crop entirely, WebP q85

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from PIL import Image

from postercrop.imaging.pdf import assemble_pdf
from postercrop.imaging.presets import PRINT_JPEG, THUMBNAIL_WEBP
from postercrop.imaging.raster import render_frame
from postercrop.imaging.resize import format_bytes, resize_original, size_comparison
from postercrop.imaging.sizes import A1, A2, PrintSpec, REFERENCE_FRAME, WEB_THUMBNAIL
from postercrop.models.crop import CropState
from postercrop.models.enums import OutputKind
from postercrop.models.results import GeneratedFile
from postercrop.models.settings import OutputOptions

log = logging.getLogger("postercrop.pipeline")

PRINT_TARGETS = (A1, A2)

# offsets typed on the command line are in A1 print pixels
DEFAULT_REFERENCE_WIDTH = float(REFERENCE_FRAME.pixel_size().width)


def banner(msg: str) -> None:
    line = "=" * 72
    log.info("\n%s\n%s\n%s", line, msg, line)


def _emit_progress(cb: Optional[Callable[[str], None]], name: str) -> None:
    """Report the file about to be produced; a broken callback never stops an export."""
    if cb is None:
        return
    try:
        cb(name)
    except Exception as e:
        log.warning(f"Progress callback failed for {name}: {e}")


def _print_pdf(
    image: Image.Image,
    crop: CropState,
    reference_width: float,
    base_name: str,
    spec: PrintSpec,
) -> GeneratedFile:
    size = spec.pixel_size()
    raster = render_frame(image, crop, reference_width, size, PRINT_JPEG)
    data = assemble_pdf(raster, spec, title=f"{base_name} {spec.key}")
    return GeneratedFile(
        name=f"{base_name}_{spec.key}.pdf",
        data=data,
        kind=OutputKind.PDF,
        declared_dimensions=spec.describe(),
        size_display=format_bytes(len(data)),
        pixel_size=size,
    )


# ---------------------------- public API ----------------------------
def process_exports(
    image: Image.Image,
    crop: CropState,
    reference_width: float,
    base_name: str,
    options: OutputOptions,
    original_size: int = 0,
    progress_cb: Optional[Callable[[str], None]] = None,
) -> List[GeneratedFile]:
    """
    Produce every output enabled in `options`, in fixed order.

    `crop` is read, never modified. No enabled output gives an empty list;
    whether that is an error is the caller's decision.
    """
    results: List[GeneratedFile] = []

    if options.include_pdf_set:
        for spec in PRINT_TARGETS:
            _emit_progress(progress_cb, f"{base_name}_{spec.key}.pdf")
            results.append(_print_pdf(image, crop, reference_width, base_name, spec))

    if options.include_fixed_thumbnail:
        name = f"{base_name}_web.webp"
        _emit_progress(progress_cb, name)
        data = render_frame(image, crop, reference_width, WEB_THUMBNAIL, THUMBNAIL_WEBP)
        results.append(
            GeneratedFile(
                name=name,
                data=data,
                kind=OutputKind.WEBP,
                declared_dimensions=str(WEB_THUMBNAIL),
                size_display=format_bytes(len(data)),
                pixel_size=WEB_THUMBNAIL,
            )
        )

    if options.include_resize:
        name = f"{base_name}_small.webp"
        _emit_progress(progress_cb, name)
        data, size = resize_original(image, options.resize_percentage)
        results.append(
            GeneratedFile(
                name=name,
                data=data,
                kind=OutputKind.WEBP,
                declared_dimensions=str(size),
                size_display=size_comparison(original_size, len(data)),
                pixel_size=size,
            )
        )

    for f in results:
        log.info("  %-32s %-34s %s", f.name, f.declared_dimensions, f.size_display)
    return results


# ---------------------------- CLI helper ----------------------------
def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    from postercrop.controllers.archive import archive_filename, write_archive
    from postercrop.controllers.batch import load_items, run_batch
    from postercrop.models.settings import DEFAULT_RESIZE_PCT
    from postercrop.utils.logging_utils import build_logger

    ap = argparse.ArgumentParser(description="Export print PDFs and web images from cropped artwork.")
    ap.add_argument("inputs", nargs="+", help="Source images (JPEG/PNG/WebP)")
    ap.add_argument("-o", "--out", help="Output .zip path or folder (default: current folder)")
    ap.add_argument("--name", action="append", default=[],
                    help="Custom base name, once per input in order (blank = file name)")
    ap.add_argument("--x", type=float, default=0.0, help="Horizontal offset from centre")
    ap.add_argument("--y", type=float, default=0.0, help="Vertical offset from centre")
    ap.add_argument("--scale", type=float, default=1.0, help="Zoom; 1.0 = image width fills the frame")
    ap.add_argument("--reference-width", type=float, default=DEFAULT_REFERENCE_WIDTH,
                    help="Frame width the offsets are measured against (default: A1 pixels)")
    ap.add_argument("--no-pdf", action="store_true", help="Skip the A1/A2 PDFs")
    ap.add_argument("--no-web", action="store_true", help="Skip the 912x1296 WebP")
    ap.add_argument("--resize", type=int, metavar="PCT", nargs="?", const=DEFAULT_RESIZE_PCT,
                    help="Also emit the original resized to PCT percent")

    args = ap.parse_args(argv)
    logger = build_logger("postercrop")

    try:
        crop = CropState(args.x, args.y, args.scale)
        options = OutputOptions(
            include_pdf_set=not args.no_pdf,
            include_fixed_thumbnail=not args.no_web,
            include_resize=args.resize is not None,
            resize_percentage=args.resize or DEFAULT_RESIZE_PCT,
        )
        items = load_items([Path(p) for p in args.inputs], crop, options, args.name)
        banner(f"EXPORTING {len(items)} IMAGE(S)")
        results = run_batch(items, args.reference_width)

        out = Path(args.out) if args.out else Path.cwd()
        if out.suffix.lower() != ".zip":
            out = out / archive_filename(results)
        write_archive(results, out)
        banner("SUCCESS")
        logger.info("Archive: %s", out)
        return 0
    except Exception as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
