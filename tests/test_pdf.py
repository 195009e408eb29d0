import re

import pytest
from PIL import Image

from postercrop.errors import EncodeFailure
from postercrop.imaging.pdf import assemble_pdf, page_size_points
from postercrop.imaging.sizes import A1, A2

MEDIABOX = re.compile(rb"/MediaBox\s*\[\s*([\d.]+)\s+([\d.]+)\s+([\d.]+)\s+([\d.]+)\s*\]")


def test_page_size_is_total_bleed_box():
    w, h = page_size_points(A1)
    assert w == pytest.approx(60.0 / 2.54 * 72)
    assert h == pytest.approx(84.7 / 2.54 * 72)


def test_single_page_filled_with_raster(encode):
    raster = encode(Image.new("RGB", (50, 70), (0, 128, 0)), "JPEG", quality=95)
    data = assemble_pdf(raster, A2, title="poster A2")

    assert data.startswith(b"%PDF")
    boxes = MEDIABOX.findall(data)
    assert boxes
    w, h = page_size_points(A2)
    for box in boxes:
        x0, y0, x1, y1 = (float(v) for v in box)
        assert (x0, y0) == (0.0, 0.0)
        assert x1 == pytest.approx(w, abs=0.01)
        assert y1 == pytest.approx(h, abs=0.01)
        assert x1 < y1  # portrait
    assert b"/Count 1" in data


def test_missing_raster_is_encode_failure():
    with pytest.raises(EncodeFailure):
        assemble_pdf(b"", A1)
