import math

import numpy as np
import pytest

from trigsketch.layout import (
    layout_triangle,
    move_to_positive_quadrant,
    raw_corners,
    scale_legs,
)
from trigsketch.validate import GeometryError


def test_three_four_triangle_on_default_canvas():
    layout = layout_triangle(3, 4, 400, 300)

    assert layout.hyp_opp == pytest.approx((360.0, 30.0))
    assert layout.hyp_adj == pytest.approx((40.0, 270.0))
    assert layout.opp_adj == pytest.approx((360.0, 270.0))
    assert layout.opp == pytest.approx(240.0)
    assert layout.adj == pytest.approx(320.0)
    assert layout.hyp == pytest.approx(400.0)
    assert layout.canvas_size == (400.0, 300.0)


def test_layout_is_deterministic():
    assert layout_triangle(2.5, 7.1, 400, 300) == layout_triangle(2.5, 7.1, 400, 300)


@pytest.mark.parametrize(
    'opp, adj, width, height',
    [
        (3, 4, 400, 300),
        (10, 1, 400, 300),
        (0.01, 50, 400, 300),
        (-3, 4, 400, 300),
        (3, -4, 80, 80),
        (-7.5, -2.25, 120, 500),
    ],
)
def test_corners_stay_on_canvas_and_keep_right_angle(opp, adj, width, height):
    layout = layout_triangle(opp, adj, width, height)

    for x, y in (layout.hyp_opp, layout.hyp_adj, layout.opp_adj):
        assert 0 <= x <= width + 1e-9
        assert 0 <= y <= height + 1e-9

    # legs meet at opp_adj
    ho = np.subtract(layout.hyp_opp, layout.opp_adj)
    ha = np.subtract(layout.hyp_adj, layout.opp_adj)
    assert float(np.dot(ho, ha)) == pytest.approx(0.0, abs=1e-6)


def test_binding_axis_fills_eighty_percent():
    tall = layout_triangle(10, 1, 400, 300)
    wide = layout_triangle(1, 10, 400, 300)

    assert tall.opp == pytest.approx(240.0)
    assert tall.opp / tall.adj == pytest.approx(10.0)
    assert wide.adj == pytest.approx(320.0)
    assert wide.adj / wide.opp == pytest.approx(10.0)


def test_layout_centers_on_a_larger_canvas():
    layout = layout_triangle(3, 4, 200, 150, canvas_width=400, canvas_height=300)

    assert layout.hyp_opp == pytest.approx((280.0, 90.0))
    assert layout.hyp_adj == pytest.approx((120.0, 210.0))
    assert layout.opp_adj == pytest.approx((280.0, 210.0))


def test_scale_legs_picks_binding_axis():
    assert scale_legs(3, 4, 320, 240) == pytest.approx(80.0)
    assert scale_legs(10, 1, 320, 240) == pytest.approx(24.0)


def test_move_to_positive_quadrant_shifts_each_axis():
    moved = move_to_positive_quadrant(raw_corners(120, 160))

    assert moved.tolist() == [[160.0, 0.0], [0.0, 120.0], [160.0, 120.0]]
    assert (moved >= 0).all()


@pytest.mark.parametrize('opp, adj', [(0, 0), (math.nan, 4), (3, math.inf)])
def test_degenerate_legs_are_rejected(opp, adj):
    with pytest.raises(GeometryError):
        layout_triangle(opp, adj, 400, 300)


def test_non_positive_target_is_rejected():
    with pytest.raises(ValueError):
        layout_triangle(3, 4, 0, 300)
