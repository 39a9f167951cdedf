from fractions import Fraction

import pytest

from pyalgebra.core import ZeroOne
from pyalgebra.scalar import (
    FloatZeroOne,
    IntegerZeroOne,
    capabilities,
    divide,
    register_zero_one,
    require,
    zero_one,
)


class FractionZeroOne(ZeroOne[Fraction]):
    def zero(self) -> Fraction:
        return Fraction(0)

    def one(self) -> Fraction:
        return Fraction(1)


def test_builtin_zero_ones() -> None:
    assert isinstance(zero_one(int), IntegerZeroOne)
    assert isinstance(zero_one(float), FloatZeroOne)

    assert zero_one(int).zero() == 0
    assert zero_one(int).one() == 1
    assert isinstance(zero_one(float).zero(), float)
    assert zero_one(float).one() == 1.0


def test_unregistered_scalar() -> None:
    with pytest.raises(TypeError, match="No ZeroOne registered for scalar type str"):
        zero_one(str)

    with pytest.raises(TypeError):
        zero_one(bool)


def test_register_zero_one() -> None:
    register_zero_one(Fraction, FractionZeroOne())

    assert zero_one(Fraction).zero() == Fraction(0)
    assert zero_one(Fraction).one() == Fraction(1)


def test_capabilities() -> None:
    assert capabilities(int) == frozenset({"add", "sub", "mul", "truediv", "neg"})
    assert capabilities(float) == capabilities(int)
    assert capabilities(str) == frozenset({"add", "mul"})
    assert capabilities(object) == frozenset()


def test_require() -> None:
    require(int, "add", "neg")

    with pytest.raises(TypeError, match="Scalar type str does not support neg"):
        require(str, "add", "neg")


def test_divide_keeps_scalar_type() -> None:
    assert divide(6, 2) == 3
    assert isinstance(divide(6, 2), int)
    assert divide(6.0, 2.0) == 3.0
    assert divide(Fraction(1), Fraction(3)) == Fraction(1, 3)


def test_integer_division_truncates_toward_zero() -> None:
    assert divide(7, 2) == 3
    assert divide(-7, 2) == -3
    assert divide(7, -2) == -3
    assert divide(-7, -2) == 3
    assert divide(1, 2) == 0
    assert divide(-1, 2) == 0
    assert divide(-6, 3) == -2
