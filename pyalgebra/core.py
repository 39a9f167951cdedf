from abc import abstractmethod
from typing import Protocol, TypeVar

T = TypeVar("T")


class Group(Protocol[T]):
    """
    This protocol defines the operations of a group: a closed binary operation,
    its identity and the inverse of an element.
    """

    @abstractmethod
    def op(self, a: T, b: T) -> T:
        raise NotImplementedError

    @abstractmethod
    def identity(self) -> T:
        """Returns the two-sided identity element of the group"""
        raise NotImplementedError

    @abstractmethod
    def inverse(self, a: T) -> T:
        """Returns the two-sided inverse of the given element"""
        raise NotImplementedError

    def is_closed(self, a: T, b: T) -> bool:
        """
        Returns whether a op b is of the same type as a.
        """
        result = self.op(a, b)
        test = isinstance(result, type(a))
        if not test:
            print(f"Failed closure assertion: {type(result).__name__} == {type(a).__name__}")

        return test

    def is_associative(self, a: T, b: T, c: T) -> bool:
        """
        Returns whether (a op b) op c == a op (b op c).
        """
        test = self.op(self.op(a, b), c) == self.op(a, self.op(b, c))
        if not test:
            print(f"Failed associativity assertion: {self.op(self.op(a, b), c)} == {self.op(a, self.op(b, c))}")

        return test

    def has_identity(self, a: T) -> bool:
        """
        Checks if the identity element behaves correctly for the given element.
        """
        identity = self.identity()
        test = self.op(a, identity) == a and self.op(identity, a) == a
        if not test:
            print(f"Failed identity assertion: {self.op(a, identity)} == {self.op(identity, a)}")

        return test

    def has_inverse(self, a: T) -> bool:
        """
        Returns if the given element has a well defined inverse.
        """
        identity = self.identity()
        inv_a = self.inverse(a)
        test = self.op(a, inv_a) == identity and self.op(inv_a, a) == identity
        if not test:
            print(f"Failed inverse assertion: {self.op(a, inv_a)} == {self.op(inv_a, a)}")

        return test

    def is_commutative(self, a: T, b: T) -> bool:
        """
        Returns whether a op b == b op a. Groups need not be commutative.
        """
        test = self.op(a, b) == self.op(b, a)
        if not test:
            print(f"Failed commutativity assertion: {self.op(a, b)} == {self.op(b, a)}")

        return test


class ZeroOne(Protocol[T]):
    """
    Supplies the additive and multiplicative identities of a scalar type.
    """

    @abstractmethod
    def zero(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def one(self) -> T:
        raise NotImplementedError
