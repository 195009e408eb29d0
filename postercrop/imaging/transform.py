# postercrop/imaging/transform.py
# Maps one authored CropState onto any target resolution.
#
# The crop is authored against a reference frame displayed R pixels wide.
# Everything scales linearly with target_width / R, so targets that share
# the frame's aspect get identical framing with no per-target maths. A
# target with a different aspect (the fixed web thumbnail, and A2 which is
# ~0.2% narrower than A1) is centred and scaled by width only; its framing
# is approximate and is not corrected here.

from __future__ import annotations

from postercrop.errors import InvalidOptions
from postercrop.models.crop import CropState
from postercrop.models.geometry import Dimensions, DrawRect


def compute_draw_rect(
    natural: Dimensions,
    crop: CropState,
    reference_width: float,
    target: Dimensions,
) -> DrawRect:
    if not reference_width or reference_width <= 0:
        raise InvalidOptions(f"Reference width must be positive, got {reference_width!r}")

    ratio = target.width / reference_width
    draw_w = reference_width * crop.scale * ratio
    draw_h = draw_w * (natural.height / natural.width)
    draw_x = target.width / 2 - draw_w / 2 + crop.x * ratio
    draw_y = target.height / 2 - draw_h / 2 + crop.y * ratio
    return DrawRect(draw_x, draw_y, draw_w, draw_h)


def frame_height_for(width: float, frame_aspect: float) -> float:
    """Height of a box of `width` that shares the frame's aspect."""
    return width / frame_aspect
