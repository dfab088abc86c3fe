"""Label anchors for the sides and the angle of a laid-out triangle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .config import LabelConfig, get_label_config, get_layout_config
from .geometry import Point, midpoint
from .model import Triangle

logger = logging.getLogger(__name__)

LABEL_PREFIXES: Dict[str, str] = {"h": "H", "o": "O", "a": "A", "t": "θ"}
THUMBNAIL_LINE_HEIGHT = 10.0


@dataclass
class LabelPositions:
    h: Point
    o: Point
    a: Point
    t: Point

    def as_list(self) -> List[Point]:
        return [self.h, self.o, self.a, self.t]

    def as_dict(self) -> Dict[str, Tuple[float, float]]:
        return {"h": self.h.as_tuple(), "o": self.o.as_tuple(), "a": self.a.as_tuple(), "t": self.t.as_tuple()}


def clamped_midpoint(p1: Point, p2: Point, x_bound: float, y_bound: float) -> Point:
    # Only +x / -y overflow is possible because the triangle is centered.
    point = midpoint(p1, p2)
    if point.x > x_bound:
        point.x = x_bound
    if point.y < y_bound:
        point.y = y_bound
    return point


def resolve_overlaps(points: Sequence[Point], min_x: float, min_y: float, variant: str = "primary") -> int:
    """Nudge labels apart vertically in a single pass over all ordered pairs.

    Of two close labels the one lower on the canvas (larger y; the second of
    the pair on ties) moves down: by ``min_y`` in the primary variant, to
    exactly ``min_y`` below the other label in the compact one. The pass is
    not repeated, so three or more mutually close labels can still overlap
    afterwards. Returns the number of nudges applied.
    """

    if variant not in ("primary", "compact"):
        raise ValueError(f"unknown overlap variant {variant!r}")

    moves = 0
    for i, first in enumerate(points):
        for j, second in enumerate(points):
            if i == j:
                continue
            if abs(first.y - second.y) < min_y and abs(first.x - second.x) < min_x:
                anchor, mover = (first, second) if first.y <= second.y else (second, first)
                if variant == "compact":
                    mover.y = anchor.y + min_y
                else:
                    mover.y += min_y
                moves += 1
    if moves:
        logger.debug("Applied %d label nudge(s) (%s)", moves, variant)
    return moves


def place_labels(
    hyp_opp: Point,
    hyp_adj: Point,
    opp_adj: Point,
    x_bound: float,
    y_bound: float,
    config: Optional[LabelConfig] = None,
) -> LabelPositions:
    """Return label anchors for the hypotenuse, both legs and the angle."""

    config = config or get_label_config()
    labels = LabelPositions(
        h=clamped_midpoint(hyp_adj, hyp_opp, x_bound, y_bound),
        o=clamped_midpoint(hyp_opp, opp_adj, x_bound, y_bound),
        a=clamped_midpoint(hyp_adj, opp_adj, x_bound, y_bound),
        t=clamped_midpoint(hyp_adj, hyp_adj, x_bound, y_bound),
    )
    resolve_overlaps(labels.as_list(), config.min_x, config.min_y, config.variant)
    return labels


def label_bounds(canvas_width: float) -> Tuple[float, float]:
    layout_config = get_layout_config()
    return canvas_width - layout_config.label_x_margin, layout_config.label_y_bound


def place_triangle_labels(triangle: Triangle, config: Optional[LabelConfig] = None) -> LabelPositions:
    width, _ = triangle.canvas_size
    x_bound, y_bound = label_bounds(width)
    return place_labels(triangle.hyp_opp, triangle.hyp_adj, triangle.opp_adj, x_bound, y_bound, config)


def shorten(text: str, limit: int = 5) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def label_texts(triangle: Triangle, *, limit: Optional[int] = None) -> Dict[str, str]:
    texts: Dict[str, str] = {}
    for key, info_key in (("h", "hyp"), ("o", "opp"), ("a", "adj"), ("t", "ang")):
        value = triangle.info(info_key)
        if limit is not None:
            value = shorten(value, limit)
        texts[key] = f"{LABEL_PREFIXES[key]}: {value}"
    return texts


def thumbnail_positions() -> LabelPositions:
    """Stacked anchors in the top-left corner used on catalog thumbnails."""

    step = THUMBNAIL_LINE_HEIGHT
    return LabelPositions(
        h=Point(0, step),
        o=Point(0, 2 * step),
        a=Point(0, 3 * step),
        t=Point(0, 4 * step),
    )


__all__ = [
    "LABEL_PREFIXES",
    "LabelPositions",
    "clamped_midpoint",
    "label_bounds",
    "label_texts",
    "place_labels",
    "place_triangle_labels",
    "resolve_overlaps",
    "shorten",
    "thumbnail_positions",
]
