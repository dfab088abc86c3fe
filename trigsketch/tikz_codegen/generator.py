"""TikZ renderer for a laid-out triangle and its labels."""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Tuple

from .utils import latex_escape_keep_math
from ..labels import LabelPositions, label_texts, place_triangle_labels
from ..model import Triangle

DRAWING_WIDTH_CM = 8.0
RIGHT_ANGLE_FRACTION = 0.06
ANGLE_RADIUS_FRACTION = 0.08

CORNER_NAMES = ("HO", "HA", "OA")

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{adjustbox}
\usepackage{tikz}
\usetikzlibrary{angles,quotes}
\tikzset{
  ts/line width/.store in=\tsLW,     ts/line width=0.8pt,
  carrier/.style={line width=\tsLW},
  tslabel/.style={font=\footnotesize, inner sep=1pt, text=red, anchor=south west},
  tsangle/.style={draw, line width=0.6pt},
}
\pgfdeclarelayer{bg}\pgfdeclarelayer{fg}\pgfsetlayers{bg,main,fg}
\begin{document}
\begin{minipage}[t]{\linewidth}
%s

\begin{adjustbox}{max width=\linewidth, max totalheight=\textheight, keepaspectratio}
%s
\end{adjustbox}
\end{minipage}
\end{document}
"""


def generate_tikz_document(
    triangle: Triangle,
    labels: Optional[LabelPositions] = None,
    *,
    texts: Optional[Mapping[str, str]] = None,
    problem_text: Optional[str] = None,
) -> str:
    """Render a standalone document around :func:`generate_tikz_code`."""

    header = ""
    if problem_text:
        header = (
            "\\noindent\\textbf{Problem:} "
            + latex_escape_keep_math(problem_text.strip())
            + "\\par\\vspace{4pt}\n"
        )
    tikz_code = generate_tikz_code(triangle, labels, texts=texts)
    return standalone_tpl % (header, tikz_code)


def generate_tikz_code(
    triangle: Triangle,
    labels: Optional[LabelPositions] = None,
    *,
    texts: Optional[Mapping[str, str]] = None,
) -> str:
    """Draw the triangle outline, right-angle and θ marks, and the four labels.

    Canvas coordinates (y down) are flipped into TikZ coordinates (y up) and
    scaled so the canvas is ``DRAWING_WIDTH_CM`` wide.
    """

    if not isinstance(triangle, Triangle):
        raise TypeError("triangle must be an instance of Triangle")
    triangle.require_valid()
    labels = labels or place_triangle_labels(triangle)
    texts = dict(texts or label_texts(triangle))

    width, height = triangle.canvas_size
    scale = DRAWING_WIDTH_CM / width

    def to_tikz(x: float, y: float) -> Tuple[float, float]:
        return (x * scale, (height - y) * scale)

    corners: Dict[str, Tuple[float, float]] = {
        "HO": to_tikz(*triangle.hyp_opp.as_tuple()),
        "HA": to_tikz(*triangle.hyp_adj.as_tuple()),
        "OA": to_tikz(*triangle.opp_adj.as_tuple()),
    }
    span = max(_distance(corners["HA"], corners["HO"]), 1e-9)

    lines: List[str] = ["\\begin{tikzpicture}"]
    lines.append(
        f"  \\draw[black] (0, 0) rectangle ({_format_float(width * scale)}, {_format_float(height * scale)});"
    )
    for name in CORNER_NAMES:
        x, y = corners[name]
        lines.append(f"  \\coordinate ({name}) at ({_format_float(x)}, {_format_float(y)});")
    lines.append("")

    lines.append("  \\begin{pgfonlayer}{main}")
    lines.append("    \\draw[carrier] (HA) -- (HO) -- (OA) -- cycle;")
    lines.append("  \\end{pgfonlayer}")
    lines.append("")

    lines.append("  \\begin{pgfonlayer}{fg}")
    right_radius = _format_float(RIGHT_ANGLE_FRACTION * span)
    first, second = _choose_angle_orientation(corners, "HO", "OA", "HA")
    lines.append(
        f"    \\pic[tsangle, angle radius={right_radius}cm] {{right angle={first}--OA--{second}}};"
    )
    theta_radius = _format_float(ANGLE_RADIUS_FRACTION * span)
    first, second = _choose_angle_orientation(corners, "HO", "HA", "OA")
    lines.append(f"    \\pic[tsangle, angle radius={theta_radius}cm] {{angle={first}--HA--{second}}};")

    for key, point in labels.as_dict().items():
        text = texts.get(key)
        if not text:
            continue
        x, y = to_tikz(*point)
        lines.append(
            f"    \\node[tslabel] at ({_format_float(x)}, {_format_float(y)}) {{{latex_escape_keep_math(text)}}};"
        )
    lines.append("  \\end{pgfonlayer}")
    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _choose_angle_orientation(
    coords: Mapping[str, Tuple[float, float]], a: str, b: str, c: str
) -> Tuple[str, str]:
    # TikZ sweeps counter-clockwise from the first ray, so start from the ray
    # that reaches the other through the interior angle.
    ax, ay = _vector(coords[b], coords[a])
    cx, cy = _vector(coords[b], coords[c])
    if ax * cy - ay * cx >= 0:
        return a, c
    return c, a


def _vector(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (b[0] - a[0], b[1] - a[1])


def _distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
