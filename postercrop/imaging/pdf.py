# postercrop/imaging/pdf.py
# Wraps a print raster into a single physically-sized PDF page.
# Bleed is baked into the raster; the page is exactly trim + bleed and the
# image fills it from (0, 0). No separate crop/trim box is written.

from __future__ import annotations

import io
import logging
from typing import Tuple

from reportlab.lib.units import cm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from postercrop.errors import EncodeFailure
from postercrop.imaging.sizes import PrintSpec

log = logging.getLogger("postercrop.pipeline")


def page_size_points(spec: PrintSpec) -> Tuple[float, float]:
    """Portrait page size in PDF points for the full bleed box."""
    return (spec.total_width_cm * cm, spec.total_height_cm * cm)


def assemble_pdf(raster: bytes, spec: PrintSpec, title: str = "") -> bytes:
    if not raster:
        raise EncodeFailure(f"{spec.key}: no raster to embed")

    page_w, page_h = page_size_points(spec)
    buf = io.BytesIO()
    try:
        c = canvas.Canvas(buf, pagesize=(page_w, page_h), pageCompression=1)
        if title:
            c.setTitle(title)
        c.drawImage(ImageReader(io.BytesIO(raster)), 0, 0, width=page_w, height=page_h)
        c.showPage()
        c.save()
    except (OSError, ValueError) as e:
        raise EncodeFailure(f"{spec.key}: PDF assembly failed: {e}") from e

    data = buf.getvalue()
    if not data:
        raise EncodeFailure(f"{spec.key}: PDF writer produced no bytes")

    log.info(
        "Assembled %s PDF: %.1f x %.1f cm, %d bytes",
        spec.key, spec.total_width_cm, spec.total_height_cm, len(data),
    )
    return data
