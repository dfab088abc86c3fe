from .geometry import Point, midpoint
from .model import Triangle, Layout, AngleUnit, SolveMode, DISPLAY_KEYS, FIELD_LABELS
from .numbers import SymbolicNumber, format_quantity
from .validate import (
    validate_input,
    check_input,
    check_input_count,
    ValidatedInput,
    ValidationError,
    FormatError,
    RangeError,
    InputCountError,
    GeometryError,
)
from .solver import (
    solve,
    solve_values,
    solve_formulas,
    select_branch,
    strategy_for,
    NumericStrategy,
    FormulaStrategy,
    SolveResult,
    SolveStrategy,
    BRANCHES,
)
from .layout import layout_triangle
from .labels import LabelPositions, place_labels, place_triangle_labels, resolve_overlaps, label_texts
from .catalog import TriangleCatalog
from .builder import build_triangle
from .session import Session, Scene, CalculateOutcome
from .config import (
    LayoutConfig,
    LabelConfig,
    PRIMARY_LABELS,
    COMPACT_LABELS,
    get_layout_config,
    set_layout_config,
    get_label_config,
    set_label_config,
)
from .printer import format_info
from .randomize import random_inputs
from .tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape_keep_math

__all__ = [
    'Point',
    'midpoint',
    'Triangle',
    'Layout',
    'AngleUnit',
    'SolveMode',
    'DISPLAY_KEYS',
    'FIELD_LABELS',
    'SymbolicNumber',
    'format_quantity',
    'validate_input',
    'check_input',
    'check_input_count',
    'ValidatedInput',
    'ValidationError',
    'FormatError',
    'RangeError',
    'InputCountError',
    'GeometryError',
    'solve',
    'solve_values',
    'solve_formulas',
    'select_branch',
    'strategy_for',
    'NumericStrategy',
    'FormulaStrategy',
    'SolveResult',
    'SolveStrategy',
    'BRANCHES',
    'layout_triangle',
    'LabelPositions',
    'place_labels',
    'place_triangle_labels',
    'resolve_overlaps',
    'label_texts',
    'TriangleCatalog',
    'build_triangle',
    'Session',
    'Scene',
    'CalculateOutcome',
    'LayoutConfig',
    'LabelConfig',
    'PRIMARY_LABELS',
    'COMPACT_LABELS',
    'get_layout_config',
    'set_layout_config',
    'get_label_config',
    'set_label_config',
    'format_info',
    'random_inputs',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape_keep_math',
]
