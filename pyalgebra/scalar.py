from functools import cache
from numbers import Integral
from typing import Any, Dict, FrozenSet

from pyalgebra.core import ZeroOne

OPERATORS = ("add", "sub", "mul", "truediv", "neg")


class IntegerZeroOne(ZeroOne[int]):
    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1


class FloatZeroOne(ZeroOne[float]):
    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0


_zero_ones: Dict[type, ZeroOne[Any]] = {
    int: IntegerZeroOne(),
    float: FloatZeroOne(),
}


def register_zero_one[T](kind: type[T], zero_one: ZeroOne[T]) -> None:
    """Makes `kind` usable as the scalar of a field element."""
    _zero_ones[kind] = zero_one


def zero_one[T](kind: type[T]) -> ZeroOne[T]:
    """
    Returns the ZeroOne registered for exactly `kind`.

    Subclasses are not resolved to their parents, so `bool` is not mistaken for `int`.
    """
    if kind not in _zero_ones:
        raise TypeError(f"No ZeroOne registered for scalar type {kind.__name__}")

    return _zero_ones[kind]


@cache
def capabilities(kind: type) -> FrozenSet[str]:
    """Returns the names of the arithmetic operators that instances of `kind` support."""
    return frozenset(name for name in OPERATORS if callable(getattr(kind, f"__{name}__", None)))


def require(kind: type, *operators: str) -> None:
    supported = capabilities(kind)
    for operator in operators:
        if operator not in supported:
            raise TypeError(f"Scalar type {kind.__name__} does not support {operator}")


def divide[T](a: T, b: T) -> T:
    """
    Divides two scalars keeping their type. Integers truncate toward zero.
    """
    if isinstance(a, Integral) and isinstance(b, Integral):
        quotient = a // b
        if quotient < 0 and quotient * b != a:
            quotient += 1

        return quotient  # type: ignore

    return a / b  # type: ignore
