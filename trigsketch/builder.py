"""Turn four raw text fields into a solved, laid-out :class:`Triangle`."""

from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional, Tuple

from .config import get_layout_config
from .layout import layout_triangle
from .model import FIELD_ROLES, INPUT_KEYS, AngleUnit, SolveMode, Triangle
from .numbers import SymbolicNumber, format_quantity
from .solver import SolveResult, solve, strategy_for
from .validate import GEOMETRY_MESSAGE, GeometryError, ValidationError, validate_input

logger = logging.getLogger(__name__)

# Unit right triangle drawn for formula-mode results.
FORMULA_LEG = 1.0


def _angle_suffix(angle_unit: AngleUnit) -> str:
    return "°" if angle_unit == "degrees" else "rad"


def _numeric_display(result: SolveResult, angle_unit: AngleUnit) -> Dict[str, str]:
    return {
        "hyp": format_quantity(result.hyp),
        "opp": format_quantity(result.opp),
        "adj": format_quantity(result.adj),
        "ang": format_quantity(result.ang) + _angle_suffix(angle_unit),
    }


def _formula_display(result: SolveResult, texts: Mapping[str, str]) -> Dict[str, str]:
    display: Dict[str, str] = {}
    for role in FIELD_ROLES:
        if texts.get(role):
            display[role] = texts[role]
        else:
            value = getattr(result, role)
            display[role] = str(value) if isinstance(value, SymbolicNumber) else ""
    return display


def _geometry_error(hyp: float, opp: float, adj: float, ang: float) -> Optional[GeometryError]:
    for value in (hyp, opp, adj, ang):
        if not math.isfinite(value) or value == 0:
            return GeometryError(GEOMETRY_MESSAGE)
    return None


def build_triangle(
    hyp: str = "",
    opp: str = "",
    adj: str = "",
    ang: str = "",
    *,
    angle_unit: AngleUnit = "degrees",
    mode: SolveMode = "value",
    canvas_size: Optional[Tuple[float, float]] = None,
) -> Triangle:
    """Validate, solve and lay out a triangle from the raw field texts.

    Problems are not raised; they come back as an invalid triangle whose
    ``error_description`` holds the first error found.
    """

    texts = {"hyp": hyp or "", "opp": opp or "", "adj": adj or "", "ang": ang or ""}
    info: Dict[str, str] = {INPUT_KEYS[role]: texts[role] for role in FIELD_ROLES}

    values: Dict[str, float] = {}
    first_error: Optional[ValidationError] = None
    for role in FIELD_ROLES:
        checked = validate_input(role, texts[role], angle_unit, mode)
        values[role] = checked.value
        if checked.error is not None and first_error is None:
            first_error = checked.error

    strategy = strategy_for(mode, angle_unit, texts)
    result = solve(values["hyp"], values["opp"], values["adj"], values["ang"], angle_unit, strategy)
    info["solveMethod"] = result.derivation

    if mode == "formula":
        info.update(_formula_display(result, texts))
        solved_opp = solved_adj = FORMULA_LEG
        solved_hyp = math.sqrt(solved_opp * solved_opp + solved_adj * solved_adj)
        solved_ang = 45.0 if angle_unit == "degrees" else math.pi / 4
        if result.branch is None and first_error is None:
            first_error = GeometryError(GEOMETRY_MESSAGE)
    else:
        solved_hyp = float(result.hyp)
        solved_opp = float(result.opp)
        solved_adj = float(result.adj)
        solved_ang = float(result.ang)
        info.update(_numeric_display(result, angle_unit))
        if first_error is None:
            first_error = _geometry_error(solved_hyp, solved_opp, solved_adj, solved_ang)

    if first_error is not None:
        logger.info("Triangle rejected: %s", first_error)
        return Triangle.invalid(first_error, display_info=info, angle_unit=angle_unit, mode=mode)

    if canvas_size is None:
        layout_config = get_layout_config()
        canvas_size = (layout_config.canvas_width, layout_config.canvas_height)
    width, height = canvas_size
    layout = layout_triangle(solved_opp, solved_adj, width, height)

    triangle = Triangle(
        hyp=solved_hyp,
        opp=solved_opp,
        adj=solved_adj,
        ang=solved_ang,
        angle_unit=angle_unit,
        mode=mode,
        display_info=info,
        layout=layout,
    )
    logger.info(
        "Built %s triangle hyp=%s opp=%s adj=%s ang=%s",
        mode,
        info["hyp"],
        info["opp"],
        info["adj"],
        info["ang"],
    )
    return triangle


__all__ = ["FORMULA_LEG", "build_triangle"]
