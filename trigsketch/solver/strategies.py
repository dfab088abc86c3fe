"""Numeric and symbolic implementations of the solver arithmetic."""

from __future__ import annotations

import math
from typing import Mapping

import numpy as np

from ..model import AngleUnit
from ..numbers import Quantity, SymbolicNumber
from .types import QuantityName, SolveStrategy


def _evaluate(func, *args: float) -> float:
    # numpy turns domain errors (asin(1.2), sqrt(-1)) into NaN instead of raising
    with np.errstate(invalid="ignore", divide="ignore"):
        return float(func(*args))


class NumericStrategy(SolveStrategy):
    """Evaluate every formula; angles are handled in radians internally."""

    mode = "value"

    def __init__(self, angle_unit: AngleUnit = "degrees") -> None:
        self.angle_unit = angle_unit

    def operand(self, name: QuantityName, value: float) -> Quantity:
        value = float(value)
        if name == "ang" and self.angle_unit == "degrees":
            return math.radians(value)
        return value

    def finish_angle(self, value: Quantity) -> Quantity:
        if self.angle_unit == "degrees":
            return math.degrees(float(value))
        return float(value)

    def asin_ratio(self, opp: Quantity, hyp: Quantity) -> Quantity:
        return _evaluate(np.arcsin, abs(float(opp)) / abs(float(hyp)))

    def acos_ratio(self, adj: Quantity, hyp: Quantity) -> Quantity:
        return _evaluate(np.arccos, abs(float(adj)) / abs(float(hyp)))

    def atan_ratio(self, opp: Quantity, adj: Quantity) -> Quantity:
        return _evaluate(np.arctan, abs(float(opp)) / abs(float(adj)))

    def leg_from_hyp(self, hyp: Quantity, leg: Quantity) -> Quantity:
        h, o = float(hyp), float(leg)
        return _evaluate(np.sqrt, h * h - o * o)

    def hyp_from_legs(self, adj: Quantity, opp: Quantity) -> Quantity:
        a, o = float(adj), float(opp)
        return _evaluate(np.sqrt, a * a + o * o)

    def times_sin(self, side: Quantity, ang: Quantity) -> Quantity:
        return float(side) * math.sin(float(ang))

    def times_cos(self, side: Quantity, ang: Quantity) -> Quantity:
        return float(side) * math.cos(float(ang))

    def times_tan(self, side: Quantity, ang: Quantity) -> Quantity:
        return float(side) * math.tan(float(ang))

    def over_tan(self, side: Quantity, ang: Quantity) -> Quantity:
        return float(side) / math.tan(float(ang))


class FormulaStrategy(SolveStrategy):
    """Substitute the typed tokens into the formula skeletons.

    Nothing is evaluated; every solved quantity is a :class:`SymbolicNumber`
    whose ``value`` is a placeholder of ``1``.
    """

    mode = "formula"

    def __init__(self, tokens: Mapping[str, str]) -> None:
        self.tokens = dict(tokens)

    def operand(self, name: QuantityName, value: float) -> Quantity:
        return SymbolicNumber(self.tokens.get(name, ""), 1.0)

    @staticmethod
    def _expr(text: str) -> SymbolicNumber:
        return SymbolicNumber(text, 1.0)

    def asin_ratio(self, opp: Quantity, hyp: Quantity) -> Quantity:
        return self._expr(f"aSin({opp} / {hyp})")

    def acos_ratio(self, adj: Quantity, hyp: Quantity) -> Quantity:
        return self._expr(f"aCos({adj} / {hyp})")

    def atan_ratio(self, opp: Quantity, adj: Quantity) -> Quantity:
        return self._expr(f"aTan({opp} / {adj})")

    def leg_from_hyp(self, hyp: Quantity, leg: Quantity) -> Quantity:
        return self._expr(f"sqrt({hyp}² - {leg}²)")

    def hyp_from_legs(self, adj: Quantity, opp: Quantity) -> Quantity:
        return self._expr(f"sqrt({_group(adj)}² + {_group(opp)}²)")

    def times_sin(self, side: Quantity, ang: Quantity) -> Quantity:
        return self._expr(f"{side} * sin({ang})")

    def times_cos(self, side: Quantity, ang: Quantity) -> Quantity:
        return self._expr(f"{side} * cos({ang})")

    def times_tan(self, side: Quantity, ang: Quantity) -> Quantity:
        return self._expr(f"{side} * tan({ang})")

    def over_tan(self, side: Quantity, ang: Quantity) -> Quantity:
        return self._expr(f"{side} / tan({ang})")


def _group(value: Quantity) -> str:
    if isinstance(value, SymbolicNumber):
        return value.grouped()
    return str(value)


__all__ = ["FormulaStrategy", "NumericStrategy"]
