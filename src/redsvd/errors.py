"""
Exceptions raised by the decomposition drivers.
"""


class RedSVDError(Exception):
    """Base class for all redsvd errors."""


class EmptyMatrixError(RedSVDError, ValueError):
    """The input matrix has zero rows or zero columns."""

    def __init__(self, shape: tuple[int, ...]) -> None:
        self.shape = tuple(shape)
        super().__init__(f"Cannot decompose a matrix of shape {self.shape}: it has no entries.")


class InvalidRankError(RedSVDError, ValueError):
    """The requested rank is not a positive integer."""

    def __init__(self, rank) -> None:
        self.rank = rank
        super().__init__(f"Rank must be a positive integer, got {rank!r}.")


class NotComputedError(RedSVDError, ValueError):
    """A result was accessed before a compute call produced it."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not computed yet.")
