"""
Input validation and small helpers shared by the decomposition drivers.
"""
import logging
import numbers
import numpy as np

from typing import Optional
from numpy.typing import ArrayLike, NDArray

from redsvd.errors import EmptyMatrixError, InvalidRankError

logger = logging.getLogger(__name__)


def as_float_matrix(A: ArrayLike) -> NDArray:
    """
    Return `A` as a 2-D floating point array. float32 and float64 keep their
    precision, every other real dtype is promoted to float64.
    """
    A = np.asarray(A)
    if np.iscomplexobj(A):
        raise TypeError("Complex matrices are not supported.")
    if A.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got an array with {A.ndim} dimension(s).")
    if A.dtype not in (np.float32, np.float64):
        A = A.astype(np.float64)
    return A


def check_nonempty(A: NDArray) -> None:
    if A.shape[0] == 0 or A.shape[1] == 0:
        raise EmptyMatrixError(A.shape)


def check_rank(rank: Optional[int], shape: tuple[int, int]) -> int:
    """
    Validate the requested rank and clamp it to min(rows, cols).
    `None` requests the full rank min(rows, cols).
    """
    r_max = min(shape)
    if rank is None:
        return r_max
    if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
        raise InvalidRankError(rank)
    if rank < 1:
        raise InvalidRankError(rank)

    r = min(int(rank), r_max)
    if r < rank:
        logger.debug("Rank %d clamped to %d for a matrix of shape %s", rank, r, shape)
    return r


def relative_error(A: ArrayLike, U: NDArray, S: NDArray, V: NDArray) -> float:
    """
    Relative Frobenius error ||A - U diag(S) V^T|| / ||A||.
    """
    A = np.asarray(A)
    norm_A = np.linalg.norm(A)
    residual = np.linalg.norm(A - (U * S) @ V.T)
    if norm_A == 0:
        return float(residual)
    return float(residual / norm_A)
