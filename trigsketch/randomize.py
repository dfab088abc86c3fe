"""Random but always-valid field values for the "random triangle" action."""

from __future__ import annotations

import math
import random
from typing import Dict, Optional

from .model import AngleUnit

# The hypotenuse is never picked: pairing it with a random leg could make the leg longer.
RANDOM_FIELDS = ("opp", "adj", "ang")
LEG_SPAN = 20.0


def _two_decimals(value: float) -> str:
    return f"{value:.2f}"


def _is_zero_text(text: str) -> bool:
    return float(text) == 0


def random_leg(rng: random.Random) -> str:
    while True:
        text = _two_decimals((rng.random() - 0.5) * LEG_SPAN)
        if not _is_zero_text(text):
            return text


def random_angle(angle_unit: AngleUnit, rng: random.Random) -> str:
    limit = 90.0 if angle_unit == "degrees" else math.pi / 2
    while True:
        value = rng.random() * limit
        text = _two_decimals(value)
        if not _is_zero_text(text) and float(text) < limit:
            return text


def random_inputs(angle_unit: AngleUnit = "degrees", rng: Optional[random.Random] = None) -> Dict[str, str]:
    """Fill two distinct fields among opposite, adjacent and angle."""

    rng = rng or random.Random()
    first, second = rng.sample(RANDOM_FIELDS, 2)
    texts = {"hyp": "", "opp": "", "adj": "", "ang": ""}
    for role in (first, second):
        texts[role] = random_angle(angle_unit, rng) if role == "ang" else random_leg(rng)
    return texts


__all__ = ["RANDOM_FIELDS", "random_angle", "random_inputs", "random_leg"]
