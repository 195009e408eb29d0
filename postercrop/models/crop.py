from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .enums import DragState
from .geometry import Dimensions

MIN_ZOOM = 0.1
MAX_ZOOM = 3.0


@dataclass(frozen=True)
class CropState:
    """
    Placement of one image inside the reference frame.

    x/y are pixel offsets of the image centre from the frame centre and
    scale is the zoom factor (1.0 = image width equals frame width). All
    three are measured against the on-screen frame width the state was
    authored at. Offsets are unconstrained; panning out of frame just
    leaves background visible.
    """

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0

    def __post_init__(self):
        if not self.scale > 0:
            raise ValueError(f"CropState.scale must be positive, got {self.scale}")

    def moved_to(self, x: float, y: float) -> "CropState":
        return replace(self, x=x, y=y)

    def zoomed(self, scale: float) -> "CropState":
        return replace(self, scale=scale)

    def rebased(self, old_width: float, new_width: float) -> "CropState":
        """Same framing expressed against a frame drawn `new_width` wide."""
        if not old_width or old_width == new_width:
            return self
        k = new_width / old_width
        return replace(self, x=self.x * k, y=self.y * k)


def clamp_zoom(scale: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, float(scale)))


def fit_scale(natural: Dimensions, view: Dimensions) -> float:
    """Zoom at which the whole image is visible inside the view."""
    if natural.aspect > view.aspect:
        return 1.0
    return (view.height * natural.width) / (view.width * natural.height)


def fill_scale(natural: Dimensions, view: Dimensions) -> float:
    """Zoom at which the image covers the whole view."""
    if natural.aspect > view.aspect:
        return (view.height * natural.width) / (view.width * natural.height)
    return 1.0


class CropSession:
    """
    Pointer/zoom interaction for one image.

    The live state changes on every pointer move and is what the preview
    paints. `committed` only changes at gesture end (or on a discrete
    action like zoom, center, fit) and is the only state export ever sees.
    """

    def __init__(self, natural: Dimensions, crop: Optional[CropState] = None):
        self.natural = natural
        self.committed = crop or CropState()
        self.live = self.committed
        self.state = DragState.IDLE
        self._anchor: Tuple[float, float] = (0.0, 0.0)

    @property
    def dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def begin_drag(self, px: float, py: float) -> None:
        self._anchor = (px - self.live.x, py - self.live.y)
        self.state = DragState.DRAGGING

    def drag_to(self, px: float, py: float) -> CropState:
        if self.dragging:
            ax, ay = self._anchor
            self.live = self.live.moved_to(px - ax, py - ay)
        return self.live

    def end_drag(self) -> CropState:
        # pointer-leave also lands here, so ending an idle session is a no-op commit
        self.state = DragState.IDLE
        return self._commit(self.live)

    def preview_zoom(self, scale: float) -> CropState:
        """Slider is moving: update what is painted, commit nothing."""
        self.live = self.live.zoomed(clamp_zoom(scale))
        return self.live

    def set_zoom(self, scale: float) -> CropState:
        return self._commit(self.live.zoomed(clamp_zoom(scale)))

    def center(self) -> CropState:
        return self._commit(self.live.moved_to(0.0, 0.0))

    def fit(self, view: Dimensions) -> CropState:
        return self._commit(CropState(0.0, 0.0, fit_scale(self.natural, view)))

    def fill(self, view: Dimensions) -> CropState:
        return self._commit(CropState(0.0, 0.0, fill_scale(self.natural, view)))

    def rebase(self, old_width: float, new_width: float) -> CropState:
        """Re-express both live and committed state for a resized frame."""
        self.live = self.live.rebased(old_width, new_width)
        self.committed = self.committed.rebased(old_width, new_width)
        return self.committed

    def reset(self) -> CropState:
        self.state = DragState.IDLE
        return self._commit(CropState())

    def _commit(self, crop: CropState) -> CropState:
        self.live = crop
        self.committed = crop
        return crop
