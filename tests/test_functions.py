import math

import pytest

from funcarray.functions import Function, Logarithmic, Polynomial, Power


def test_function_is_abstract():
    with pytest.raises(TypeError):
        Function()


# Polynomial


def test_polynomial_value_at_zero_is_constant_term():
    p = Polynomial([4.5, -2.0, 7.0])
    assert p.value(0) == 4.5


def test_polynomial_value_at_one_is_sum_of_coefficients():
    coeffs = [1.0, 2.0, 3.0, 4.0]
    assert Polynomial(coeffs)(1) == pytest.approx(sum(coeffs))


def test_polynomial_call_matches_value():
    p = Polynomial([1, -3, 2])
    for x in (-2.0, 0.5, 3.0):
        assert p(x) == p.value(x)


def test_polynomial_empty_coefficients_raises():
    with pytest.raises(ValueError):
        Polynomial([])


def test_uninitialized_polynomial():
    p = Polynomial()
    assert p.degree == -1
    assert "Uninitialized polynomial" in p.describe()
    with pytest.raises(ValueError):
        p.value(1.0)


def test_polynomial_degree():
    assert Polynomial([1, 2, 3]).degree == 2


def test_polynomial_reset():
    p = Polynomial([1, 2])
    p.reset()
    assert p.coefficients == ()
    assert p == Polynomial()


def test_polynomial_set_coefficients_copies_input():
    source = [1.0, 2.0]
    p = Polynomial(source)
    source[0] = 99.0
    assert p.coefficients == (1.0, 2.0)


def test_polynomial_addition_is_pointwise():
    p = Polynomial([1, 2, 3])
    q = Polynomial([-4, 0.5])
    s = p + q
    assert s.degree == 2
    for x in (-1.5, 0.0, 2.0, 10.0):
        assert s(x) == pytest.approx(p(x) + q(x))


def test_polynomial_addition_commutes():
    p = Polynomial([1, 2, 3])
    q = Polynomial([5, -1])
    assert p + q == q + p


def test_polynomial_addition_with_uninitialized():
    p = Polynomial([2, 3])
    assert p + Polynomial() == p


def test_polynomial_equality():
    assert Polynomial([1, 2]) == Polynomial([1.0, 2.0])
    assert not Polynomial([1, 2]) == Polynomial([1, 2, 0])
    assert not Polynomial([1, 2]) == Polynomial([1, 3])


def test_polynomial_describe_format():
    assert Polynomial([1, -2, 3]).describe().splitlines() == [
        "---Polynomial---",
        " 1 -2x +3x^2",
    ]


# Power


def test_power_default_is_zero():
    assert Power() == Power(0, 0)
    assert Power()(5.0) == 0.0


def test_power_linear_and_constant_cases():
    assert Power(3.0, 1.0)(7.0) == pytest.approx(21.0)
    assert Power(2.5, 0.0)(123.0) == 2.5


def test_power_square_root_invariant():
    r = Power(1.0, 0.5)
    for x in (4.0, 9.0, 2.0):
        assert r(x) ** 2 == pytest.approx(x)


def test_power_zero_base_negative_exponent_is_infinite():
    assert Power(1.0, -1.0)(0.0) == math.inf


def test_power_negative_base_fractional_exponent_is_nan():
    result = Power(1.0, 0.5)(-4.0)
    assert str(result) == "nan"


def test_power_reset_and_equality():
    p = Power(2.0, 3.0)
    assert p == Power(2.0, 3.0)
    assert not p == Power(2.0, 4.0)
    p.reset()
    assert p == Power()


def test_power_set_coefficients():
    p = Power()
    p.set_coefficients(4.0, 2.0)
    assert (p.k, p.exponent) == (4.0, 2.0)


def test_power_describe():
    lines = Power(2.0, 3.0).describe().splitlines()
    assert lines[0] == "---Power---"
    assert "k coeff = 2" in lines
    assert "e coeff = 3" in lines


# Logarithmic


def test_logarithmic_defaults():
    log = Logarithmic()
    assert (log.base, log.k) == (10.0, 1.0)


def test_logarithmic_value_at_base_is_k():
    log = Logarithmic(2.0, 5.0)
    assert log(2.0) == pytest.approx(5.0)


def test_logarithmic_value_at_one_is_zero():
    assert Logarithmic(3.0, 7.0)(1.0) == 0.0


def test_logarithmic_powers_of_base():
    log = Logarithmic(3.0, 2.0)
    for n in range(-2, 4):
        assert log(3.0**n) == pytest.approx(2.0 * n)


@pytest.mark.parametrize("base", [0.0, -2.0, 1.0])
def test_logarithmic_invalid_base_warns_and_resets(base):
    with pytest.warns(UserWarning):
        log = Logarithmic(base, 4.0)
    assert log == Logarithmic()


@pytest.mark.parametrize("base", [0.0, 1.0])
def test_logarithmic_set_invalid_base_raises(base):
    log = Logarithmic(2.0, 1.0)
    with pytest.raises(ValueError):
        log.set_coefficients(base, 1.0)
    assert log.base == 2.0


@pytest.mark.parametrize("x", [0.0, -1.0])
def test_logarithmic_non_positive_input_warns_and_returns_zero(x):
    log = Logarithmic(2.0, 3.0)
    with pytest.warns(UserWarning):
        assert log(x) == 0.0


def test_logarithmic_reset_and_equality():
    log = Logarithmic(2.0, 3.0)
    assert log == Logarithmic(2.0, 3.0)
    assert not log == Logarithmic(2.0, 4.0)
    log.reset()
    assert log == Logarithmic()


def test_logarithmic_describe():
    lines = Logarithmic(2.0, 3.0).describe().splitlines()
    assert lines[0] == "---Logarithmic---"
    assert "k coeff = 3" in lines
    assert "b coeff = 2" in lines


def test_different_function_kinds_are_not_equal():
    assert not Power(1.0, 1.0) == Polynomial([0.0, 1.0])
    assert not Logarithmic() == Power()