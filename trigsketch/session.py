"""Application state owned by a front end: catalog, selection and settings."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .builder import build_triangle
from .catalog import TriangleCatalog
from .config import COMPACT_LABELS, get_layout_config
from .labels import LabelPositions, label_texts, place_triangle_labels, thumbnail_positions
from .model import FIELD_ROLES, AngleUnit, SolveMode, Triangle
from .printer import format_info
from .randomize import random_inputs
from .validate import INPUT_COUNT_MESSAGE, count_inputs

logger = logging.getLogger(__name__)


@dataclass
class CalculateOutcome:
    triangle: Optional[Triangle]
    added: bool
    error: str = ""


@dataclass
class Scene:
    """Everything a renderer needs to draw one triangle."""

    triangle: Triangle
    labels: LabelPositions
    texts: Dict[str, str]
    info_text: str


def _default_canvas() -> Tuple[float, float]:
    config = get_layout_config()
    return (config.canvas_width, config.canvas_height)


@dataclass
class Session:
    angle_unit: AngleUnit = "degrees"
    mode: SolveMode = "value"
    canvas_size: Tuple[float, float] = field(default_factory=_default_canvas)
    catalog: TriangleCatalog = field(default_factory=TriangleCatalog)
    current: Optional[Triangle] = None
    highlighted_index: int = 0

    def calculate(self, hyp: str = "", opp: str = "", adj: str = "", ang: str = "") -> CalculateOutcome:
        """Solve the typed fields and append the result to the catalog.

        A result identical (by displayed values) to the current triangle is
        not added again and reports no error.
        """

        texts = {"hyp": hyp, "opp": opp, "adj": adj, "ang": ang}
        if count_inputs(texts) != 2:
            return CalculateOutcome(None, False, INPUT_COUNT_MESSAGE)

        triangle = build_triangle(
            hyp,
            opp,
            adj,
            ang,
            angle_unit=self.angle_unit,
            mode=self.mode,
            canvas_size=self.canvas_size,
        )
        if not triangle.is_valid:
            return CalculateOutcome(triangle, False, triangle.error_description)
        if self.current is not None and not self.current.is_different(triangle):
            logger.info("Skipping duplicate triangle")
            return CalculateOutcome(triangle, False)

        self.catalog.add(triangle)
        self.current = triangle
        self.highlighted_index = self.catalog.size() - 1
        logger.info("Catalog now holds %d triangle(s)", self.catalog.size())
        return CalculateOutcome(triangle, True)

    def add_random(self, rng: Optional[random.Random] = None) -> CalculateOutcome:
        texts = random_inputs(self.angle_unit, rng)
        logger.info("Random inputs: %s", {k: v for k, v in texts.items() if v})
        return self.calculate(**texts)

    def select(self, index: int) -> Optional[Triangle]:
        if self.catalog.size() == 0:
            return None
        self.current = self.catalog.get(index)
        self.highlighted_index = self.catalog.index_of(self.current)
        return self.current

    def next(self) -> Optional[Triangle]:
        return self._step(self.catalog.next_of)

    def previous(self) -> Optional[Triangle]:
        return self._step(self.catalog.previous_of)

    def _step(self, lookup) -> Optional[Triangle]:
        if self.current is None:
            return None
        neighbour = lookup(self.current)
        if neighbour is not None:
            self.current = neighbour
            self.highlighted_index = self.catalog.index_of(neighbour)
        return self.current

    def remove(self, triangle: Triangle) -> Optional[Triangle]:
        """Drop ``triangle``; the selection stays on the same neighbour where possible."""

        if self.catalog.find(triangle) is None:
            return self.current
        if self.highlighted_index >= self.catalog.index_of(triangle) and self.highlighted_index > 0:
            self.highlighted_index -= 1
        self.catalog.remove(triangle)
        if self.catalog.size() == 0:
            self.current = None
            self.highlighted_index = 0
        else:
            self.current = self.catalog.get(self.highlighted_index)
        return self.current

    def clear(self) -> None:
        self.catalog.clear()
        self.current = None
        self.highlighted_index = 0

    def current_inputs(self) -> Dict[str, str]:
        """Raw field texts of the selected triangle, or blanks."""

        if self.current is None:
            return {role: "" for role in FIELD_ROLES}
        return self.current.inputs()

    def scene(self, triangle: Optional[Triangle] = None) -> Optional[Scene]:
        triangle = triangle or self.current
        if triangle is None:
            return None
        triangle.require_valid()
        return Scene(
            triangle=triangle,
            labels=place_triangle_labels(triangle),
            texts=label_texts(triangle),
            info_text=format_info(triangle),
        )

    def thumbnail(self, triangle: Triangle, compact_labels: bool = False) -> Scene:
        """Small catalog rendering: truncated labels stacked top-left."""

        size = get_layout_config().thumbnail_size
        small = triangle.require_valid().relayout(size, size)
        labels = place_triangle_labels(small, COMPACT_LABELS) if compact_labels else thumbnail_positions()
        return Scene(
            triangle=small,
            labels=labels,
            texts=label_texts(small, limit=5),
            info_text=format_info(small),
        )


__all__ = ["CalculateOutcome", "Scene", "Session"]
