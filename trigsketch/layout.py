"""Fit solved leg lengths onto a raster canvas."""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .config import get_layout_config
from .logging_utils import apply_debug_logging
from .model import Layout
from .validate import GeometryError

logger = logging.getLogger(__name__)

# Row order of the corner array.
HYP_OPP, HYP_ADJ, OPP_ADJ = 0, 1, 2


def scale_legs(opp: float, adj: float, max_w: float, max_h: float) -> float:
    """Return the uniform factor that makes the binding leg fill its axis."""

    if abs(opp) / max_h > abs(adj) / max_w:
        return max_h / abs(opp)
    return max_w / abs(adj)


def raw_corners(opp: float, adj: float) -> np.ndarray:
    # y is negated for hyp_opp: canvas y grows downward
    return np.array(
        [
            [adj / 2, -opp / 2],
            [-adj / 2, opp / 2],
            [adj / 2, opp / 2],
        ],
        dtype=float,
    )


def move_to_positive_quadrant(corners: np.ndarray) -> np.ndarray:
    """Shift all corners by each negative coordinate found, point by point."""

    moved = corners.copy()
    for row in range(moved.shape[0]):
        for axis in (0, 1):
            value = moved[row, axis]
            if value < 0:
                moved[:, axis] += abs(value)
    return moved


def center_on_canvas(corners: np.ndarray, canvas_width: float, canvas_height: float) -> np.ndarray:
    max_x = corners[:, 0].max()
    max_y = corners[:, 1].max()
    return corners + np.array([(canvas_width - max_x) / 2, (canvas_height - max_y) / 2])


def layout_triangle(
    opp: float,
    adj: float,
    target_width: float,
    target_height: float,
    canvas_width: Optional[float] = None,
    canvas_height: Optional[float] = None,
    fill_ratio: Optional[float] = None,
) -> Layout:
    """Scale, orient and center a right triangle with legs ``opp`` and ``adj``.

    The triangle fills ``fill_ratio`` of the target area along its binding
    axis and is centered on the canvas, which defaults to the target size.
    """

    if target_width <= 0 or target_height <= 0:
        raise ValueError("target dimensions must be positive")
    opp = float(opp)
    adj = float(adj)
    if not (math.isfinite(opp) and math.isfinite(adj)) or (opp == 0 and adj == 0):
        raise GeometryError(f"cannot lay out legs opp={opp!r} adj={adj!r}")

    if fill_ratio is None:
        fill_ratio = get_layout_config().fill_ratio
    canvas_width = target_width if canvas_width is None else canvas_width
    canvas_height = target_height if canvas_height is None else canvas_height

    max_w = target_width * fill_ratio
    max_h = target_height * fill_ratio
    scale = scale_legs(opp, adj, max_w, max_h)
    opp *= scale
    adj *= scale
    hyp = math.sqrt(opp * opp + adj * adj)

    corners = raw_corners(opp, adj)
    corners = move_to_positive_quadrant(corners)
    corners = center_on_canvas(corners, canvas_width, canvas_height)

    return Layout(
        hyp_opp=(float(corners[HYP_OPP, 0]), float(corners[HYP_OPP, 1])),
        hyp_adj=(float(corners[HYP_ADJ, 0]), float(corners[HYP_ADJ, 1])),
        opp_adj=(float(corners[OPP_ADJ, 0]), float(corners[OPP_ADJ, 1])),
        hyp=hyp,
        opp=opp,
        adj=adj,
        canvas_size=(float(canvas_width), float(canvas_height)),
    )


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "center_on_canvas",
    "layout_triangle",
    "move_to_positive_quadrant",
    "raw_corners",
    "scale_legs",
]
