import pytest

from postercrop.controllers import batch
from postercrop.controllers.batch import load_items, resolve_base_name, run_batch
from postercrop.errors import DecodeFailure, InvalidOptions
from postercrop.models.crop import CropState
from postercrop.models.settings import BatchItem, OutputOptions

WEB_ONLY = OutputOptions(include_pdf_set=False, include_fixed_thumbnail=True, include_resize=False)
NOTHING = OutputOptions(False, False, False)


@pytest.mark.parametrize(
    "custom, filename, expected",
    [
        ("", "photo.jpg", "photo"),
        ("   ", "photo.jpg", "photo"),
        ("", "my.holiday.png", "my.holiday"),
        ("Gig Poster", "x.png", "Gig Poster"),
        ("a/b:c", "x.png", "a_b_c"),
    ],
)
def test_resolve_base_name(custom, filename, expected):
    assert resolve_base_name(custom, filename) == expected


def test_results_follow_input_order(make_jpeg):
    items = [
        BatchItem(make_jpeg(), "first.jpg", options=WEB_ONLY),
        BatchItem(make_jpeg(), "second.jpg", options=WEB_ONLY, custom_name="Custom"),
    ]
    results = run_batch(items, 400)
    assert [r.original_base_name for r in results] == ["first", "Custom"]
    assert [f.name for f in results[1].files] == ["Custom_web.webp"]


def test_nothing_selected_is_rejected_before_any_work(make_jpeg, monkeypatch):
    decoded = []
    monkeypatch.setattr(batch, "decode_image", lambda data, name: decoded.append(name))
    items = [
        BatchItem(make_jpeg(), "ok.jpg", options=WEB_ONLY),
        BatchItem(make_jpeg(), "empty.jpg", options=NOTHING),
    ]
    with pytest.raises(InvalidOptions):
        run_batch(items, 400)
    assert decoded == []


def test_empty_batch_is_rejected():
    with pytest.raises(InvalidOptions):
        run_batch([], 400)


def test_missing_reference_width_is_rejected(make_jpeg):
    with pytest.raises(InvalidOptions):
        run_batch([BatchItem(make_jpeg(), "a.jpg", options=WEB_ONLY)], None)


def test_failure_aborts_whole_batch(make_jpeg, monkeypatch):
    exported = []
    real = batch.process_exports

    def spy(image, crop, ref, base_name, options, original_size):
        exported.append(base_name)
        return real(image, crop, ref, base_name, options, original_size)

    monkeypatch.setattr(batch, "process_exports", spy)
    items = [
        BatchItem(make_jpeg(), "good.jpg", options=WEB_ONLY),
        BatchItem(b"garbage", "bad.jpg", options=WEB_ONLY),
        BatchItem(make_jpeg(), "never.jpg", options=WEB_ONLY),
    ]
    with pytest.raises(DecodeFailure):
        run_batch(items, 400)
    assert exported == ["good"]


def test_per_item_reference_width_overrides_shared(make_jpeg, monkeypatch):
    seen = []
    monkeypatch.setattr(
        batch, "process_exports",
        lambda image, crop, ref, base_name, options, original_size: seen.append((base_name, ref)) or [],
    )
    items = [
        BatchItem(make_jpeg(), "a.jpg", options=WEB_ONLY, reference_width=800),
        BatchItem(make_jpeg(), "b.jpg", options=WEB_ONLY),
    ]
    run_batch(items, 400)
    assert seen == [("a", 800), ("b", 400)]


def test_crop_is_passed_through_unchanged(make_jpeg, monkeypatch):
    seen = []
    monkeypatch.setattr(
        batch, "process_exports",
        lambda image, crop, ref, base_name, options, original_size: seen.append(crop) or [],
    )
    crop = CropState(12, -7, 1.4)
    run_batch([BatchItem(make_jpeg(), "a.jpg", crop=crop, options=WEB_ONLY)], 400)
    assert seen == [CropState(12, -7, 1.4)]


def test_each_image_is_released_before_the_next(make_jpeg, monkeypatch):
    events = []
    real_decode = batch.decode_image

    def decode(data, name):
        im = real_decode(data, name)
        events.append(f"open {name}")
        real_close = im.close

        def close():
            events.append(f"close {name}")
            real_close()

        im.close = close
        return im

    monkeypatch.setattr(batch, "decode_image", decode)
    items = [BatchItem(make_jpeg(), f"{n}.jpg", options=WEB_ONLY) for n in ("a", "b")]
    run_batch(items, 400)
    assert events == ["open a.jpg", "close a.jpg", "open b.jpg", "close b.jpg"]


def test_progress_reports_each_image(make_jpeg):
    progress = []
    items = [BatchItem(make_jpeg(), f"{n}.jpg", options=WEB_ONLY) for n in ("a", "b")]
    run_batch(items, 400, progress_cb=lambda i, total, name: progress.append((i, total, name)))
    assert progress == [(1, 2, "a"), (2, 2, "b")]


def test_load_items_reads_files(tmp_path, make_jpeg):
    p = tmp_path / "art.jpg"
    p.write_bytes(make_jpeg())
    items = load_items([p], CropState(), WEB_ONLY, ["Named"])
    assert items[0].filename == "art.jpg"
    assert items[0].custom_name == "Named"
    assert items[0].original_size == p.stat().st_size


def test_load_items_missing_file(tmp_path):
    with pytest.raises(DecodeFailure):
        load_items([tmp_path / "nope.jpg"], CropState(), WEB_ONLY)
