from typing import Iterable, Optional

from .geometry import Point
from .labels import LabelPositions
from .model import Triangle


def format_point(point: Point, precision: int = 2) -> str:
    return f"({point.x:.{precision}f}, {point.y:.{precision}f})"


def format_info(triangle: Triangle) -> str:
    """Text shown under the canvas: the four quantities and the identity used."""

    return (
        f"Hypotenuse: {triangle.info('hyp')}"
        f"\nOpposite: {triangle.info('opp')}"
        f"\nAdjacent: {triangle.info('adj')}"
        f"\nAngle θ: {triangle.info('ang')}"
        f"\n\nTrig. Formula Used: {triangle.info('solveMethod')}"
    )


def format_corners(triangle: Triangle) -> str:
    lines = [
        f"  hyp/opp: {format_point(triangle.hyp_opp)}",
        f"  hyp/adj: {format_point(triangle.hyp_adj)}",
        f"  opp/adj: {format_point(triangle.opp_adj)}",
    ]
    return "\n".join(lines)


def format_labels(labels: LabelPositions) -> str:
    return "\n".join(f"  {key}: ({x:.2f}, {y:.2f})" for key, (x, y) in labels.as_dict().items())


def format_catalog(triangles: Iterable[Triangle], current: Optional[Triangle] = None) -> str:
    lines = []
    for idx, triangle in enumerate(triangles):
        marker = "*" if triangle is current else " "
        lines.append(
            f"{marker} [{idx}] H={triangle.info('hyp')} O={triangle.info('opp')} "
            f"A={triangle.info('adj')} θ={triangle.info('ang')}"
        )
    if not lines:
        return "(empty)"
    return "\n".join(lines)


__all__ = ["format_catalog", "format_corners", "format_info", "format_labels", "format_point"]
