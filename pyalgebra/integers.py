from pyalgebra.core import Group


class IntegerAddition(Group[int]):
    """
    The integers under addition.
    """

    def op(self, a: int, b: int) -> int:
        return a + b

    def identity(self) -> int:
        return 0

    def inverse(self, a: int) -> int:
        return -a
