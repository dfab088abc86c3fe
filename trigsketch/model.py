"""Core data structures shared by the solve/layout pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Dict, Literal, Optional, Tuple, overload

from .geometry import Point, Point2D

AngleUnit = Literal["degrees", "radians"]
SolveMode = Literal["value", "formula"]
FieldRole = Literal["hyp", "opp", "adj", "ang"]

FIELD_ROLES: Tuple[FieldRole, ...] = ("hyp", "opp", "adj", "ang")

FIELD_LABELS: Dict[str, str] = {
    "hyp": "Hypotenuse",
    "opp": "Opposite",
    "adj": "Adjacent",
    "ang": "Angle θ",
}

INPUT_KEYS: Dict[str, str] = {
    "hyp": "hypInput",
    "opp": "oppInput",
    "adj": "adjInput",
    "ang": "angInput",
}

DISPLAY_KEYS: Tuple[str, ...] = (
    "hypInput",
    "oppInput",
    "adjInput",
    "angInput",
    "hyp",
    "opp",
    "adj",
    "ang",
    "solveMethod",
)


@dataclass(frozen=True)
class Layout:
    """Corner coordinates of a triangle fitted to a canvas.

    ``hyp``, ``opp`` and ``adj`` are the scaled (drawn) lengths, not the
    solved ones.
    """

    hyp_opp: Point2D
    hyp_adj: Point2D
    opp_adj: Point2D
    hyp: float
    opp: float
    adj: float
    canvas_size: Tuple[float, float]

    def points(self) -> Tuple[Point, Point, Point]:
        return (Point(*self.hyp_opp), Point(*self.hyp_adj), Point(*self.opp_adj))


@dataclass(frozen=True, eq=False)
class Triangle:
    """Solved right triangle.

    Instances are never mutated after construction; corner points are
    rebuilt on every access so callers may translate them freely.
    """

    hyp: float
    opp: float
    adj: float
    ang: float
    angle_unit: AngleUnit = "degrees"
    mode: SolveMode = "value"
    display_info: Dict[str, str] = field(default_factory=dict)
    error_description: str = ""
    error: Optional[Exception] = None
    layout: Optional[Layout] = None

    @classmethod
    def invalid(
        cls,
        error: Exception,
        *,
        display_info: Optional[Dict[str, str]] = None,
        angle_unit: AngleUnit = "degrees",
        mode: SolveMode = "value",
    ) -> "Triangle":
        nan = float("nan")
        return cls(
            hyp=nan,
            opp=nan,
            adj=nan,
            ang=nan,
            angle_unit=angle_unit,
            mode=mode,
            display_info=dict(display_info or {}),
            error_description=str(error),
            error=error,
        )

    @property
    def is_valid(self) -> bool:
        if self.error_description:
            return False
        for value in (self.hyp, self.opp, self.adj, self.ang):
            if not math.isfinite(value) or value == 0:
                return False
        return True

    def require_valid(self) -> "Triangle":
        if self.is_valid:
            return self
        if self.error is not None:
            raise self.error
        # Imported lazily: validate.py depends on this module.
        from .validate import GeometryError

        raise GeometryError(self.error_description or "invalid triangle")

    def _require_layout(self) -> Layout:
        if self.layout is None:
            from .validate import GeometryError

            raise GeometryError("triangle has no canvas layout")
        return self.layout

    @property
    def hyp_opp(self) -> Point:
        return Point(*self._require_layout().hyp_opp)

    @property
    def hyp_adj(self) -> Point:
        return Point(*self._require_layout().hyp_adj)

    @property
    def opp_adj(self) -> Point:
        return Point(*self._require_layout().opp_adj)

    @property
    def canvas_size(self) -> Tuple[float, float]:
        return self._require_layout().canvas_size

    @overload
    def info(self) -> Dict[str, str]: ...

    @overload
    def info(self, key: str) -> str: ...

    def info(self, key: Optional[str] = None):
        if key is None:
            return dict(self.display_info)
        return self.display_info.get(key, "")

    def inputs(self) -> Dict[str, str]:
        """Return the raw text typed for each field, keyed by role."""

        return {role: self.display_info.get(INPUT_KEYS[role], "") for role in FIELD_ROLES}

    def is_different(self, other: "Triangle") -> bool:
        """Compare displayed side lengths and angle with ``other``."""

        return any(self.info(key) != other.info(key) for key in ("hyp", "opp", "adj", "ang"))

    def relayout(self, width: float, height: float) -> "Triangle":
        """Return a copy fitted to a ``width`` x ``height`` canvas."""

        from .layout import layout_triangle

        current = self._require_layout()
        return replace(
            self,
            display_info=dict(self.display_info),
            layout=layout_triangle(current.opp, current.adj, width, height),
        )


__all__ = [
    "AngleUnit",
    "DISPLAY_KEYS",
    "FIELD_LABELS",
    "FIELD_ROLES",
    "FieldRole",
    "INPUT_KEYS",
    "Layout",
    "SolveMode",
    "Triangle",
]
