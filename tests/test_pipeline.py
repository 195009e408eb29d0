import io

import pytest
from PIL import Image

from postercrop.imaging import pipeline
from postercrop.imaging.pipeline import process_exports
from postercrop.models.crop import CropState
from postercrop.models.enums import OutputKind
from postercrop.models.settings import OutputOptions

ALL = OutputOptions(True, True, True, 25)


@pytest.fixture
def small_print_rasters(monkeypatch, encode):
    """Full-size A1/A2 rasters are ~70 MP; record the request, return a tiny JPEG."""
    calls = []
    real = pipeline.render_frame

    def fake(im, crop, reference_width, size, preset):
        if preset is pipeline.PRINT_JPEG:
            calls.append(size.as_tuple())
            return encode(Image.new("RGB", (8, 11), (255, 255, 255)), "JPEG")
        return real(im, crop, reference_width, size, preset)

    monkeypatch.setattr(pipeline, "render_frame", fake)
    return calls


def test_all_outputs_in_fixed_order(small_print_rasters):
    src = Image.new("RGB", (800, 600), (30, 60, 90))
    files = process_exports(src, CropState(10, -5, 1.1), 400, "poster", ALL, original_size=100_000)

    assert [f.name for f in files] == [
        "poster_A1.pdf",
        "poster_A2.pdf",
        "poster_web.webp",
        "poster_small.webp",
    ]
    assert [f.kind for f in files] == [OutputKind.PDF, OutputKind.PDF, OutputKind.WEBP, OutputKind.WEBP]
    assert small_print_rasters == [(7087, 10004), (5032, 7087)]

    a1, a2, web, small = files
    assert a1.declared_dimensions == "60 x 84.7 cm (incl. 3mm bleed)"
    assert a2.declared_dimensions == "42.6 x 60 cm (incl. 3mm bleed)"
    assert a1.data.startswith(b"%PDF")
    assert web.declared_dimensions == "912 x 1296 px"
    assert small.declared_dimensions == "200 x 150 px"
    assert "→" in small.size_display


def test_thumbnail_is_exact_size():
    src = Image.new("RGB", (800, 600), (30, 60, 90))
    files = process_exports(src, CropState(), 400, "p", OutputOptions(False, True, False))
    with Image.open(io.BytesIO(files[0].data)) as out:
        assert out.size == (912, 1296)
        assert out.mode == "RGB"


def test_no_outputs_selected_gives_empty_list():
    src = Image.new("RGB", (10, 10))
    assert process_exports(src, CropState(), 400, "p", OutputOptions(False, False, False)) == []


def test_repeated_export_declares_same_dimensions(small_print_rasters):
    src = Image.new("RGB", (640, 480), (200, 100, 0))
    crop = CropState(3, 4, 0.9)
    first = process_exports(src, crop, 320, "x", ALL)
    second = process_exports(src, crop, 320, "x", ALL)
    assert [(f.declared_dimensions, f.pixel_size) for f in first] == [
        (f.declared_dimensions, f.pixel_size) for f in second
    ]


def test_resize_ignores_crop():
    src = Image.new("RGB", (640, 480), (200, 100, 0))
    opts = OutputOptions(False, False, True, 40)
    a = process_exports(src, CropState(0, 0, 1.0), 320, "x", opts)[0]
    b = process_exports(src, CropState(-900, 250, 2.7), 120, "x", opts)[0]

    assert a.pixel_size == b.pixel_size
    with Image.open(io.BytesIO(a.data)) as ia, Image.open(io.BytesIO(b.data)) as ib:
        assert ia.tobytes() == ib.tobytes()


def test_progress_callback_failure_does_not_stop_export():
    def broken(name):
        raise RuntimeError("ui gone")

    src = Image.new("RGB", (64, 64))
    files = process_exports(src, CropState(), 100, "p", OutputOptions(False, True, False), progress_cb=broken)
    assert len(files) == 1
