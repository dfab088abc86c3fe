import math

import pytest

from trigsketch.builder import build_triangle
from trigsketch.model import DISPLAY_KEYS
from trigsketch.validate import GEOMETRY_MESSAGE, FormatError, GeometryError, RangeError


def test_hypotenuse_and_angle_end_to_end():
    triangle = build_triangle(hyp='10', ang='30')

    assert triangle.is_valid
    assert triangle.opp == pytest.approx(5.0)
    assert triangle.adj == pytest.approx(8.660254, abs=1e-6)
    assert triangle.info('opp') == '5.00'
    assert triangle.info('adj') == '8.66'
    assert triangle.info('ang') == '30.00°'
    assert triangle.info('hyp') == '10.00'
    assert triangle.info('solveMethod').startswith('o = h*sin(θ)')
    assert set(triangle.info()) == set(DISPLAY_KEYS)

    width, height = triangle.canvas_size
    for point in (triangle.hyp_opp, triangle.hyp_adj, triangle.opp_adj):
        assert 0 <= point.x <= width
        assert 0 <= point.y <= height


def test_raw_inputs_are_echoed():
    triangle = build_triangle(hyp='10', ang='30')

    assert triangle.inputs() == {'hyp': '10', 'opp': '', 'adj': '', 'ang': '30'}
    assert triangle.info('hypInput') == '10'
    assert triangle.info('oppInput') == ''


def test_radians_suffix():
    triangle = build_triangle(opp='1', adj='1', angle_unit='radians')

    assert triangle.info('ang') == '0.79rad'
    assert triangle.ang == pytest.approx(math.pi / 4)


def test_leg_longer_than_hypotenuse_is_invalid():
    triangle = build_triangle(hyp='3', opp='5')

    assert not triangle.is_valid
    assert triangle.error_description == GEOMETRY_MESSAGE
    assert isinstance(triangle.error, GeometryError)
    assert triangle.layout is None
    assert math.isnan(triangle.hyp)
    with pytest.raises(GeometryError):
        triangle.require_valid()
    with pytest.raises(GeometryError):
        triangle.hyp_opp


def test_first_field_error_wins():
    triangle = build_triangle(hyp='-5', opp='12.5.3')

    assert isinstance(triangle.error, RangeError)
    assert triangle.error_description == 'Hypotenuse cannot be less than 0.'
    assert triangle.info('hypInput') == '-5'


def test_format_error_is_reported():
    triangle = build_triangle(opp='3', adj='4x')

    assert isinstance(triangle.error, FormatError)
    with pytest.raises(FormatError):
        triangle.require_valid()


def test_formula_mode_displays_substituted_formulas():
    triangle = build_triangle(hyp='h', opp='o', mode='formula')

    assert triangle.is_valid
    assert triangle.info('hyp') == 'h'
    assert triangle.info('opp') == 'o'
    assert triangle.info('ang') == 'aSin(o / h)'
    assert triangle.info('adj') == 'sqrt(h² - o²)'
    assert (triangle.opp, triangle.adj) == (1.0, 1.0)
    assert triangle.hyp == pytest.approx(math.sqrt(2))
    assert triangle.ang == pytest.approx(45.0)


def test_formula_mode_radians_placeholder_angle():
    triangle = build_triangle(adj='a', ang='t', mode='formula', angle_unit='radians')

    assert triangle.ang == pytest.approx(math.pi / 4)
    assert triangle.info('opp') == 'a * tan(t)'


def test_formula_mode_needs_two_fields():
    triangle = build_triangle(hyp='h', mode='formula')

    assert not triangle.is_valid
    assert triangle.error_description == GEOMETRY_MESSAGE


def test_relayout_returns_resized_copy():
    triangle = build_triangle(opp='3', adj='4', canvas_size=(400, 300))
    small = triangle.relayout(80, 80)

    assert small.canvas_size == (80.0, 80.0)
    assert triangle.canvas_size == (400.0, 300.0)
    assert small.info() == triangle.info()
    assert small.opp_adj.as_tuple() == pytest.approx((72.0, 64.0))


def test_corner_points_are_fresh_copies():
    triangle = build_triangle(opp='3', adj='4', canvas_size=(400, 300))

    point = triangle.hyp_opp
    point.translate(5, 5)

    assert triangle.hyp_opp.as_tuple() == pytest.approx((360.0, 30.0))


def test_is_different_compares_displayed_values():
    a = build_triangle(opp='3', adj='4')
    b = build_triangle(hyp='5', opp='3')
    c = build_triangle(opp='3.0001', adj='4')

    assert not a.is_different(b)
    assert a.is_different(build_triangle(opp='6', adj='8'))
    # equal once rounded for display
    assert not a.is_different(c)


def test_relayout_does_not_share_display_info():
    triangle = build_triangle(opp='3', adj='4', canvas_size=(400, 300))
    small = triangle.relayout(80, 80)

    small.display_info['hyp'] = 'changed'

    assert triangle.info('hyp') == '5.00'
