from types import NotImplementedType

from pyalgebra.core import Group
from pyalgebra.scalar import require


class GroupElement[T]:
    """
    Wraps a single scalar and forwards addition, multiplication and negation to it.

    Which operators are usable depends on the scalar type. They are detected once per
    type, and using a missing one raises a TypeError.
    """

    element: T

    def __init__(self, element: T) -> None:
        self.element = element

    @staticmethod
    def default[S](kind: type[S]) -> "GroupElement[S]":
        """Returns the wrapped default value of `kind`, zero for numeric types."""
        return GroupElement(kind())

    def __add__(self, other: object) -> "GroupElement[T] | NotImplementedType":
        if not isinstance(other, GroupElement):
            return NotImplemented

        require(type(self.element), "add")
        return GroupElement(self.element + other.element)  # type: ignore

    def __mul__(self, other: object) -> "GroupElement[T] | NotImplementedType":
        if not isinstance(other, GroupElement):
            return NotImplemented

        require(type(self.element), "mul")
        return GroupElement(self.element * other.element)  # type: ignore

    def __neg__(self) -> "GroupElement[T]":
        require(type(self.element), "neg")
        return GroupElement(-self.element)  # type: ignore

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupElement):
            return False

        return self.element == other.element

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return f"GroupElement({self.element!r})"


class GroupElementAddition[T](Group[GroupElement[T]]):
    """
    Group elements over `kind` under addition.
    """

    kind: type[T]

    def __init__(self, kind: type[T]) -> None:
        self.kind = kind

    def op(self, a: GroupElement[T], b: GroupElement[T]) -> GroupElement[T]:
        return a + b  # type: ignore

    def identity(self) -> GroupElement[T]:
        return GroupElement.default(self.kind)

    def inverse(self, a: GroupElement[T]) -> GroupElement[T]:
        return -a
