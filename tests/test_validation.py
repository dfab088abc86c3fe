import math

import pytest

from trigsketch.validate import (
    FormatError,
    GeometryError,
    InputCountError,
    RangeError,
    ValidationError,
    check_input,
    check_input_count,
    count_inputs,
    validate_input,
)


def test_empty_text_is_unknown_without_error():
    result = validate_input('hyp', '')

    assert result.value == 0
    assert result.error is None
    assert result.message == ''
    assert not result.present


def test_two_decimal_points_is_format_error():
    result = validate_input('opp', '12.5.3')

    assert isinstance(result.error, FormatError)
    assert result.value == 0
    assert result.message == 'Opposite can only contain one decimal point.'


def test_negative_hypotenuse_is_range_error():
    result = validate_input('hyp', '-5')

    assert isinstance(result.error, RangeError)
    assert 'Hypotenuse' in result.message


def test_negative_leg_is_accepted():
    assert check_input('opp', '-3') == -3.0
    assert check_input('adj', '-.5') == -0.5


@pytest.mark.parametrize('role', ['hyp', 'opp', 'adj', 'ang'])
def test_zero_is_rejected_for_every_role(role):
    with pytest.raises(RangeError) as exc:
        check_input(role, '0')

    assert 'cannot be 0' in str(exc.value)


@pytest.mark.parametrize(
    'text, message_part',
    [
        ('--5', 'one negative sign'),
        ('5-3', 'digits, decimals or neg. signs'),
        ('abc', 'digits, decimals or neg. signs'),
        ('1e5', 'digits, decimals or neg. signs'),
        ('-', 'at least one digit'),
        ('.', 'at least one digit'),
    ],
)
def test_lexical_errors(text, message_part):
    with pytest.raises(FormatError) as exc:
        check_input('adj', text)

    assert message_part in str(exc.value)


def test_lexical_checks_run_before_range_checks():
    # '-9.9.9' is both malformed and negative; the format problem wins
    with pytest.raises(FormatError):
        check_input('hyp', '-9.9.9')


@pytest.mark.parametrize(
    'text, unit, ok',
    [
        ('89.9', 'degrees', True),
        ('90', 'degrees', False),
        ('120', 'degrees', False),
        ('-10', 'degrees', False),
        ('1.5', 'radians', True),
        ('1.58', 'radians', False),
        ('45', 'radians', False),
    ],
)
def test_angle_range_depends_on_unit(text, unit, ok):
    result = validate_input('ang', text, unit)

    if ok:
        assert result.error is None
        assert math.isclose(result.value, float(text))
    else:
        assert isinstance(result.error, RangeError)
        assert result.message.startswith('Angle θ must be less than 90°')


def test_formula_mode_accepts_any_token():
    result = validate_input('hyp', 'dist(a, b)', mode='formula')

    assert result.error is None
    assert result.value == 1
    assert result.text == 'dist(a, b)'


def test_formula_mode_skips_range_checks():
    assert validate_input('hyp', '-5', mode='formula').value == 1
    assert validate_input('ang', '400', mode='formula').value == 1


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        check_input('side', '3')


def test_input_count():
    assert count_inputs({'hyp': '5', 'opp': '', 'adj': '3', 'ang': ''}) == 2
    check_input_count({'hyp': '5', 'adj': '3'})

    with pytest.raises(InputCountError) as exc:
        check_input_count({'hyp': '5'})
    assert str(exc.value) == 'Enter values for two components.'

    with pytest.raises(InputCountError):
        check_input_count({'hyp': '5', 'opp': '3', 'adj': '4'})


def test_error_hierarchy():
    for cls in (FormatError, RangeError, InputCountError, GeometryError):
        assert issubclass(cls, ValidationError)
        assert issubclass(cls, ValueError)
