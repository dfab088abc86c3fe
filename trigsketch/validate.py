import logging
import math
import string
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .model import FIELD_LABELS, FIELD_ROLES, AngleUnit, SolveMode

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    pass


class FormatError(ValidationError):
    """Disallowed characters, several decimal points or misplaced signs."""


class RangeError(ValidationError):
    """Well-formed number outside the domain of its field."""


class InputCountError(ValidationError):
    """Not exactly two fields were filled in."""


class GeometryError(ValidationError):
    """Inputs that no right triangle can satisfy (e.g. a leg longer than the hypotenuse)."""


INPUT_COUNT_MESSAGE = "Enter values for two components."
GEOMETRY_MESSAGE = "Opp. and Adj. can't be larger than or equal to Hyp."


@dataclass(frozen=True)
class ValidatedInput:
    value: float
    text: str
    error: Optional[ValidationError] = None

    @property
    def message(self) -> str:
        return "" if self.error is None else str(self.error)

    @property
    def present(self) -> bool:
        return self.value != 0


def _label(role: str) -> str:
    return FIELD_LABELS.get(role, role)


def _angle_limit(angle_unit: AngleUnit) -> float:
    return 90.0 if angle_unit == "degrees" else math.pi / 2


def _scan(role: str, text: str) -> None:
    dots = 0
    dashes = 0
    other = 0
    for idx, ch in enumerate(text):
        if ch in string.digits:
            continue
        if ch == ".":
            dots += 1
        elif ch == "-":
            dashes += 1
            if idx != 0:
                other += 1
        else:
            other += 1

    label = _label(role)
    if dots > 1:
        raise FormatError(f"{label} can only contain one decimal point.")
    if dashes > 1:
        raise FormatError(f"{label} can only contain one negative sign.")
    if other:
        raise FormatError(f"{label} can only contain digits, decimals or neg. signs.")
    if not any(ch in string.digits for ch in text):
        raise FormatError(f"{label} must contain at least one digit.")


def check_input(role: str, text: str, angle_unit: AngleUnit = "degrees") -> float:
    """Parse ``text`` for ``role`` in numeric mode, raising on the first problem.

    Empty text is the "solve for me" marker and parses to ``0.0``.
    """

    if role not in FIELD_ROLES:
        raise ValueError(f"unknown field role {role!r}")
    if not text:
        return 0.0

    _scan(role, text)
    value = float(text)
    label = _label(role)

    if role == "ang" and (value < 0 or value >= _angle_limit(angle_unit)):
        raise RangeError(f"{label} must be less than 90° or π/2 (~1.57)")
    if role == "hyp" and value < 0:
        raise RangeError(f"{label} cannot be less than 0.")
    if value == 0:
        raise RangeError(f"{label} cannot be 0.")
    return value


def validate_input(
    role: str,
    text: str,
    angle_unit: AngleUnit = "degrees",
    mode: SolveMode = "value",
) -> ValidatedInput:
    """Return the parsed value for one field together with any error.

    In formula mode every non-empty token is accepted and reported as ``1``.
    """

    if not text:
        return ValidatedInput(0.0, text)
    if mode == "formula":
        return ValidatedInput(1.0, text)
    try:
        value = check_input(role, text, angle_unit)
    except ValidationError as exc:
        logger.debug("Rejected %s input %r: %s", role, text, exc)
        return ValidatedInput(0.0, text, exc)
    return ValidatedInput(value, text)


def count_inputs(texts: Mapping[str, Union[str, None]]) -> int:
    return sum(1 for role in FIELD_ROLES if texts.get(role))


def check_input_count(texts: Mapping[str, Union[str, None]]) -> None:
    if count_inputs(texts) != 2:
        raise InputCountError(INPUT_COUNT_MESSAGE)


__all__ = [
    "FormatError",
    "GEOMETRY_MESSAGE",
    "GeometryError",
    "INPUT_COUNT_MESSAGE",
    "InputCountError",
    "RangeError",
    "ValidatedInput",
    "ValidationError",
    "check_input",
    "check_input_count",
    "count_inputs",
    "validate_input",
]
