"""Configuration helpers for layout and label placement."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Literal

OverlapVariant = Literal["primary", "compact"]


@dataclass(frozen=True)
class LayoutConfig:
    fill_ratio: float = 0.8
    canvas_width: float = 400.0
    canvas_height: float = 300.0
    thumbnail_size: float = 80.0
    label_x_margin: float = 35.0
    label_y_bound: float = 10.0


@dataclass(frozen=True)
class LabelConfig:
    """Minimum spacing between two labels before they are nudged apart."""

    min_x: float = 100.0
    min_y: float = 15.0
    variant: OverlapVariant = "primary"


PRIMARY_LABELS = LabelConfig(min_x=100.0, min_y=15.0, variant="primary")
COMPACT_LABELS = LabelConfig(min_x=50.0, min_y=15.0, variant="compact")

_LAYOUT_CONFIG = LayoutConfig()
_LABEL_CONFIG = PRIMARY_LABELS


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)


def get_label_config() -> LabelConfig:
    return copy.deepcopy(_LABEL_CONFIG)


def set_label_config(config: LabelConfig) -> None:
    global _LABEL_CONFIG
    _LABEL_CONFIG = copy.deepcopy(config)


__all__ = [
    "COMPACT_LABELS",
    "LabelConfig",
    "LayoutConfig",
    "OverlapVariant",
    "PRIMARY_LABELS",
    "get_label_config",
    "get_layout_config",
    "set_label_config",
    "set_layout_config",
]
