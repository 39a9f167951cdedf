from types import NotImplementedType

from pyalgebra.core import Group, ZeroOne
from pyalgebra.scalar import OPERATORS, divide, require, zero_one


class FieldElement[T]:
    """
    Represents an element of a field whose arithmetic is that of a wrapped scalar.

    The scalar type must have a registered ZeroOne and support every arithmetic
    operator. Both are checked on construction. Dividing by zero, or asking for the
    multiplicative inverse of zero, raises a ZeroDivisionError.
    """

    element: T
    zero_one: ZeroOne[T]

    def __init__(self, element: T) -> None:
        kind = type(element)
        self.zero_one = zero_one(kind)
        require(kind, *OPERATORS)
        self.element = element

    @staticmethod
    def identity_add[S](kind: type[S]) -> "FieldElement[S]":
        """Returns the additive identity, zero, of `kind`."""
        return FieldElement(zero_one(kind).zero())

    @staticmethod
    def identity_mul[S](kind: type[S]) -> "FieldElement[S]":
        """Returns the multiplicative identity, one, of `kind`."""
        return FieldElement(zero_one(kind).one())

    def is_zero(self) -> bool:
        return self.element == self.zero_one.zero()

    def inverse_add(self) -> "FieldElement[T]":
        return FieldElement(-self.element)  # type: ignore

    def inverse_mul(self) -> "FieldElement[T]":
        if self.is_zero():
            raise ZeroDivisionError("Cannot find multiplicative inverse of zero")

        return FieldElement(divide(self.zero_one.one(), self.element))

    def _check_operand(self, other: "FieldElement[object]") -> None:
        if type(self.element) is not type(other.element):
            raise TypeError(
                f"Cannot combine field elements over {type(self.element).__name__} and {type(other.element).__name__}"
            )

    def __add__(self, other: object) -> "FieldElement[T] | NotImplementedType":
        if not isinstance(other, FieldElement):
            return NotImplemented

        self._check_operand(other)
        return FieldElement(self.element + other.element)  # type: ignore

    def __sub__(self, other: object) -> "FieldElement[T] | NotImplementedType":
        if not isinstance(other, FieldElement):
            return NotImplemented

        self._check_operand(other)
        return FieldElement(self.element - other.element)  # type: ignore

    def __mul__(self, other: object) -> "FieldElement[T] | NotImplementedType":
        if not isinstance(other, FieldElement):
            return NotImplemented

        self._check_operand(other)
        return FieldElement(self.element * other.element)  # type: ignore

    def __truediv__(self, other: object) -> "FieldElement[T] | NotImplementedType":
        if not isinstance(other, FieldElement):
            return NotImplemented

        self._check_operand(other)
        if other.is_zero():
            raise ZeroDivisionError("Cannot divide by zero")

        return FieldElement(divide(self.element, other.element))  # type: ignore

    def __neg__(self) -> "FieldElement[T]":
        return self.inverse_add()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return False

        return type(self.element) is type(other.element) and self.element == other.element

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"FieldElement({self.element!r})"


class FieldAddition[T](Group[FieldElement[T]]):
    """
    The elements of a field under addition.
    """

    kind: type[T]

    def __init__(self, kind: type[T]) -> None:
        self.kind = kind

    def op(self, a: FieldElement[T], b: FieldElement[T]) -> FieldElement[T]:
        return a + b  # type: ignore

    def identity(self) -> FieldElement[T]:
        return FieldElement.identity_add(self.kind)

    def inverse(self, a: FieldElement[T]) -> FieldElement[T]:
        return a.inverse_add()


class FieldMultiplication[T](Group[FieldElement[T]]):
    """
    The non-zero elements of a field under multiplication.

    Integers are not closed under inverses, so the inverse law only holds for units
    there, i.e. 1 and -1.
    """

    kind: type[T]

    def __init__(self, kind: type[T]) -> None:
        self.kind = kind

    def op(self, a: FieldElement[T], b: FieldElement[T]) -> FieldElement[T]:
        return a * b  # type: ignore

    def identity(self) -> FieldElement[T]:
        return FieldElement.identity_mul(self.kind)

    def inverse(self, a: FieldElement[T]) -> FieldElement[T]:
        return a.inverse_mul()
