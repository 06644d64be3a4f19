import math

import pytest

from vector3.core import utils


def test_float_bits_round_trip() -> None:
    assert utils.float_to_bits(1.0) == 0x3FF0000000000000
    assert utils.float_to_bits(-2.0) == 0xC000000000000000
    assert utils.bits_to_float(0x4010000000000000) == 4.0
    assert utils.bits_to_float(1) == 5e-324


def test_same_bits() -> None:
    assert utils.same_bits(1.5, 1.5)
    assert utils.same_bits(math.nan, math.nan)
    assert not utils.same_bits(0.0, -0.0)
    assert not utils.same_bits(1.0, 1.0000000000000002)


def test_is_nan_and_is_finite() -> None:
    assert utils.is_nan(math.nan)
    assert not utils.is_nan(math.inf)
    assert utils.is_finite(0.0)
    assert utils.is_finite(-1.7976931348623157e308)
    assert not utils.is_finite(math.inf)
    assert not utils.is_finite(-math.inf)
    assert not utils.is_finite(math.nan)


@pytest.mark.parametrize("value, expected", [
    (3.0, True),
    (-3.0, True),
    (1, True),
    (2.0, False),
    (0.0, False),
    (2.5, False),
    (math.inf, False),
    (math.nan, False),
    (2.0 ** 53 + 2, False),
])
def test_is_odd_integer(value: float, expected: bool) -> None:
    assert utils.is_odd_integer(value) is expected


def test_sign_bit_and_copysign() -> None:
    assert utils.sign_bit(-0.0)
    assert not utils.sign_bit(0.0)
    assert utils.sign_bit(-math.inf)
    assert utils.copysign(2.0, -0.0) == -2.0
    assert utils.copysign(-2.0, 1.0) == 2.0
    assert utils.same_bits(utils.copysign(0.0, -1.0), -0.0)


def test_divide() -> None:
    assert utils.divide(1.0, 4.0) == 0.25
    assert utils.divide(1.0, 0.0) == math.inf
    assert utils.divide(-1.0, 0.0) == -math.inf
    assert utils.divide(1.0, -0.0) == -math.inf
    assert utils.divide(-1.0, -0.0) == math.inf
    assert math.isnan(utils.divide(0.0, 0.0))
    assert math.isnan(utils.divide(math.nan, 0.0))
    assert utils.divide(math.inf, 0.0) == math.inf


def test_clamp() -> None:
    assert utils.clamp(1.0000000000000002, -1.0, 1.0) == 1.0
    assert utils.clamp(-1.5, -1.0, 1.0) == -1.0
    assert utils.clamp(0.5, -1.0, 1.0) == 0.5
    assert math.isnan(utils.clamp(math.nan, -1.0, 1.0))
