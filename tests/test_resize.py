import io

from PIL import Image

from postercrop.imaging.resize import (
    format_bytes,
    resize_original,
    resized_dimensions,
    savings_percent,
    size_comparison,
)
from postercrop.models.geometry import Dimensions


def test_dimensions_round_half_up():
    assert resized_dimensions(Dimensions(1001, 333), 50).as_tuple() == (501, 167)


def test_percentage_is_clamped():
    natural = Dimensions(400, 200)
    assert resized_dimensions(natural, 0).as_tuple() == (4, 2)
    assert resized_dimensions(natural, 250).as_tuple() == (400, 200)


def test_tiny_result_never_collapses_to_zero():
    assert resized_dimensions(Dimensions(10, 3), 1).as_tuple() == (1, 1)


def test_resize_draws_whole_image():
    src = Image.new("RGB", (300, 100), (0, 0, 255))
    data, size = resize_original(src, 10)
    assert size.as_tuple() == (30, 10)
    with Image.open(io.BytesIO(data)) as out:
        assert out.format == "WEBP"
        assert out.size == (30, 10)


def test_savings_shown_with_down_arrow():
    assert savings_percent(1_048_576, 524_288) == 50
    assert size_comparison(1_048_576, 524_288) == "1 MB → 512 KB (↓50%)"


def test_growth_shown_with_up_arrow():
    text = size_comparison(1000, 1500)
    assert text == "1000 B → 1.5 KB (↑50%)"


def test_unknown_original_size_shows_plain_size():
    assert size_comparison(0, 2048) == "2 KB"


def test_format_bytes():
    assert format_bytes(0) == "0 B"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(5 * 1024 ** 3) == "5 GB"
