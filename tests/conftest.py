import io

import pytest
from PIL import Image


def encode_image(im: Image.Image, fmt: str = "JPEG", **kw) -> bytes:
    buf = io.BytesIO()
    im.save(buf, format=fmt, **kw)
    return buf.getvalue()


@pytest.fixture
def make_jpeg():
    def _make(size=(400, 300), color=(200, 40, 40)) -> bytes:
        return encode_image(Image.new("RGB", size, color))
    return _make


@pytest.fixture
def encode():
    return encode_image
