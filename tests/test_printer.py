from trigsketch.builder import build_triangle
from trigsketch.geometry import Point
from trigsketch.labels import place_triangle_labels
from trigsketch.numbers import SymbolicNumber, format_quantity
from trigsketch.printer import format_catalog, format_corners, format_info, format_labels, format_point


def test_format_info():
    triangle = build_triangle(opp='3', adj='4')

    assert format_info(triangle) == (
        'Hypotenuse: 5.00\n'
        'Opposite: 3.00\n'
        'Adjacent: 4.00\n'
        'Angle θ: 36.87°\n'
        '\n'
        'Trig. Formula Used: θ = aTan(o/a)\nRearranged from: tanθ = o/a'
    )


def test_format_corners_and_labels():
    triangle = build_triangle(opp='3', adj='4', canvas_size=(400, 300))

    assert format_corners(triangle).splitlines() == [
        '  hyp/opp: (360.00, 30.00)',
        '  hyp/adj: (40.00, 270.00)',
        '  opp/adj: (360.00, 270.00)',
    ]
    assert format_labels(place_triangle_labels(triangle)).splitlines()[0] == '  h: (200.00, 150.00)'


def test_format_catalog_marks_current():
    first = build_triangle(opp='3', adj='4')
    second = build_triangle(hyp='10', ang='30')

    text = format_catalog([first, second], current=second)

    assert text.splitlines() == [
        '  [0] H=5.00 O=3.00 A=4.00 θ=36.87°',
        '* [1] H=10.00 O=5.00 A=8.66 θ=30.00°',
    ]
    assert format_catalog([]) == '(empty)'


def test_format_point():
    assert format_point(Point(1, 2.346)) == '(1.00, 2.35)'
    assert format_point(Point(1, 2.346), precision=1) == '(1.0, 2.3)'


def test_format_quantity():
    assert format_quantity(8.660254) == '8.66'
    assert format_quantity(float('nan')) == 'NaN'
    assert format_quantity(SymbolicNumber('h * cos(t)')) == 'h * cos(t)'


def test_symbolic_grouping():
    assert SymbolicNumber('x').grouped() == 'x'
    assert SymbolicNumber('tan(x)').grouped() == 'tan(x)'
    assert SymbolicNumber('3 / tan(x)').grouped() == '(3 / tan(x))'
    assert SymbolicNumber('f(a)(b)').grouped() == '(f(a)(b))'
    assert float(SymbolicNumber('y', 2)) == 2.0
