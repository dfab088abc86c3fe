"""Solver façade: pick a strategy for the mode and run the dispatch table."""

from __future__ import annotations

from typing import Mapping, Optional

from ..model import AngleUnit, SolveMode
from .dispatch import BRANCHES, select_branch, solve
from .strategies import FormulaStrategy, NumericStrategy
from .types import Branch, SolveResult, SolveStrategy


def strategy_for(
    mode: SolveMode,
    angle_unit: AngleUnit = "degrees",
    tokens: Optional[Mapping[str, str]] = None,
) -> SolveStrategy:
    if mode == "value":
        return NumericStrategy(angle_unit)
    if mode == "formula":
        return FormulaStrategy(tokens or {})
    raise ValueError(f"unknown solve mode {mode!r}")


def solve_values(
    hyp: float,
    opp: float,
    adj: float,
    ang: float,
    angle_unit: AngleUnit = "degrees",
) -> SolveResult:
    return solve(hyp, opp, adj, ang, angle_unit, NumericStrategy(angle_unit))


def solve_formulas(tokens: Mapping[str, str], angle_unit: AngleUnit = "degrees") -> SolveResult:
    """Solve symbolically; a token counts as known when it is non-empty."""

    flags = [1.0 if tokens.get(name) else 0.0 for name in ("hyp", "opp", "adj", "ang")]
    return solve(*flags, angle_unit=angle_unit, strategy=FormulaStrategy(tokens))


__all__ = [
    "BRANCHES",
    "Branch",
    "FormulaStrategy",
    "NumericStrategy",
    "SolveResult",
    "SolveStrategy",
    "select_branch",
    "solve",
    "solve_formulas",
    "solve_values",
    "strategy_for",
]
