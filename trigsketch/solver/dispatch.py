"""Six-way dispatch from the known pair of quantities to a trig identity."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from ..logging_utils import apply_debug_logging
from ..model import AngleUnit
from .strategies import NumericStrategy
from .types import Branch, Quantities, SolveResult, SolveStrategy

logger = logging.getLogger(__name__)

_SIN_NOTE = "Rearranged from: sinθ = o/h"
_COS_NOTE = "Rearranged from: cosθ = a/h"
_TAN_NOTE = "Rearranged from: tanθ = o/a"


def _hyp_opp(s: SolveStrategy, q: Quantities) -> None:
    q["ang"] = s.asin_ratio(q["opp"], q["hyp"])
    q["adj"] = s.leg_from_hyp(q["hyp"], q["opp"])


def _hyp_adj(s: SolveStrategy, q: Quantities) -> None:
    q["ang"] = s.acos_ratio(q["adj"], q["hyp"])
    q["opp"] = s.leg_from_hyp(q["hyp"], q["adj"])


def _hyp_ang(s: SolveStrategy, q: Quantities) -> None:
    q["opp"] = s.times_sin(q["hyp"], q["ang"])
    q["adj"] = s.times_cos(q["hyp"], q["ang"])


def _opp_adj(s: SolveStrategy, q: Quantities) -> None:
    q["ang"] = s.atan_ratio(q["opp"], q["adj"])
    q["hyp"] = s.hyp_from_legs(q["adj"], q["opp"])


def _opp_ang(s: SolveStrategy, q: Quantities) -> None:
    q["adj"] = s.over_tan(q["opp"], q["ang"])
    q["hyp"] = s.hyp_from_legs(q["adj"], q["opp"])


def _adj_ang(s: SolveStrategy, q: Quantities) -> None:
    q["opp"] = s.times_tan(q["adj"], q["ang"])
    q["hyp"] = s.hyp_from_legs(q["adj"], q["opp"])


# Order is significant: the first pair whose members are both non-zero wins.
BRANCHES: Tuple[Branch, ...] = (
    Branch("hyp_opp", ("hyp", "opp"), f"θ = aSin(o/h)\n{_SIN_NOTE}", _hyp_opp),
    Branch("hyp_adj", ("hyp", "adj"), f"θ = aCos(a/h)\n{_COS_NOTE}", _hyp_adj),
    Branch(
        "hyp_ang",
        ("hyp", "ang"),
        f"o = h*sin(θ)\n{_SIN_NOTE}\n\nTrig. Formula Used: a = h*cos(θ)\n{_COS_NOTE}",
        _hyp_ang,
    ),
    Branch("opp_adj", ("opp", "adj"), f"θ = aTan(o/a)\n{_TAN_NOTE}", _opp_adj),
    Branch("opp_ang", ("opp", "ang"), f"a = o/tan(θ)\n{_TAN_NOTE}", _opp_ang),
    Branch("adj_ang", ("adj", "ang"), f"o = a*tan(θ)\n{_TAN_NOTE}", _adj_ang),
)


def select_branch(hyp: float, opp: float, adj: float, ang: float) -> Optional[Branch]:
    present = {"hyp": hyp != 0, "opp": opp != 0, "adj": adj != 0, "ang": ang != 0}
    for branch in BRANCHES:
        first, second = branch.known
        if present[first] and present[second]:
            return branch
    return None


def solve(
    hyp: float,
    opp: float,
    adj: float,
    ang: float,
    angle_unit: AngleUnit = "degrees",
    strategy: Optional[SolveStrategy] = None,
) -> SolveResult:
    """Solve the two unknown quantities from the two known ones.

    Unknowns are passed as ``0``. When no pair of known quantities matches,
    the inputs come back unchanged with an empty derivation.
    """

    strategy = strategy or NumericStrategy(angle_unit)
    branch = select_branch(hyp, opp, adj, ang)
    raw = {"hyp": hyp, "opp": opp, "adj": adj, "ang": ang}

    if branch is None:
        logger.info("No known pair among hyp=%s opp=%s adj=%s ang=%s", hyp, opp, adj, ang)
        return SolveResult(hyp=hyp, opp=opp, adj=adj, ang=ang)

    quantities: Quantities = {}
    for name, value in raw.items():
        quantities[name] = strategy.operand(name, value) if name in branch.known else value
    branch.apply(strategy, quantities)
    # every branch either reads or produces the angle, so it is always converted back
    quantities["ang"] = strategy.finish_angle(quantities["ang"])

    logger.info("Solved via %s (%s mode)", branch.name, strategy.mode)
    return SolveResult(
        hyp=quantities["hyp"],
        opp=quantities["opp"],
        adj=quantities["adj"],
        ang=quantities["ang"],
        derivation=branch.derivation,
        branch=branch.name,
    )


apply_debug_logging(globals(), logger=logger)

__all__ = ["BRANCHES", "select_branch", "solve"]
