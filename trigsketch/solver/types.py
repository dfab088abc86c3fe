from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..numbers import Quantity

QuantityName = str
Quantities = Dict[QuantityName, Quantity]


@dataclass(frozen=True)
class Branch:
    """One row of the dispatch table: which pair is known and how to finish."""

    name: str
    known: Tuple[QuantityName, QuantityName]
    derivation: str
    apply: Callable[["SolveStrategy", Quantities], None]


@dataclass(frozen=True)
class SolveResult:
    hyp: Quantity
    opp: Quantity
    adj: Quantity
    ang: Quantity
    derivation: str = ""
    branch: Optional[str] = None

    def as_dict(self) -> Quantities:
        return {"hyp": self.hyp, "opp": self.opp, "adj": self.adj, "ang": self.ang}


class SolveStrategy:
    """Capability object supplying the arithmetic for the dispatch table.

    Subclasses decide whether an operation evaluates a number or builds an
    expression string; the branch selection never changes.
    """

    mode: str = ""

    def operand(self, name: QuantityName, value: float) -> Quantity:
        raise NotImplementedError

    def finish_angle(self, value: Quantity) -> Quantity:
        return value

    def asin_ratio(self, opp: Quantity, hyp: Quantity) -> Quantity:
        raise NotImplementedError

    def acos_ratio(self, adj: Quantity, hyp: Quantity) -> Quantity:
        raise NotImplementedError

    def atan_ratio(self, opp: Quantity, adj: Quantity) -> Quantity:
        raise NotImplementedError

    def leg_from_hyp(self, hyp: Quantity, leg: Quantity) -> Quantity:
        raise NotImplementedError

    def hyp_from_legs(self, adj: Quantity, opp: Quantity) -> Quantity:
        raise NotImplementedError

    def times_sin(self, side: Quantity, ang: Quantity) -> Quantity:
        raise NotImplementedError

    def times_cos(self, side: Quantity, ang: Quantity) -> Quantity:
        raise NotImplementedError

    def times_tan(self, side: Quantity, ang: Quantity) -> Quantity:
        raise NotImplementedError

    def over_tan(self, side: Quantity, ang: Quantity) -> Quantity:
        raise NotImplementedError


__all__ = ["Branch", "Quantities", "QuantityName", "SolveResult", "SolveStrategy"]
