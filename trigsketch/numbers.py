from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SymbolicNumber:
    """Formula text standing in for a value whose magnitude is not evaluated.

    ``value`` is the placeholder used when the quantity has to be drawn.
    """

    text: str
    value: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SymbolicNumber(text={self.text!r}, value={self.value!r})"

    def grouped(self) -> str:
        """Return the text wrapped in parentheses unless it is a bare token."""

        if _is_atomic(self.text):
            return self.text
        return f"({self.text})"


Quantity = Union[float, SymbolicNumber]


def _is_atomic(text: str) -> bool:
    depth = 0
    for idx, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0 and idx != len(text) - 1:
                # closing a call like sqrt(...) that is followed by more text
                return False
        elif ch == " " and depth == 0:
            return False
    return True


def format_quantity(value: Quantity, decimals: int = 2) -> str:
    """Render a solved quantity for display (``#0.00`` style for floats)."""

    if isinstance(value, SymbolicNumber):
        return value.text
    if math.isnan(value):
        return "NaN"
    return f"{value:.{decimals}f}"


__all__ = ["Quantity", "SymbolicNumber", "format_quantity"]
