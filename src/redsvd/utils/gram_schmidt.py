"""
Gram-Schmidt orthonormalization with a numerical rank cutoff.
"""
import logging
import numpy as np

from typing import Optional
from numpy.typing import NDArray

from redsvd import config
from redsvd.utils.utils import as_float_matrix

logger = logging.getLogger(__name__)


def gram_schmidt(mat: NDArray, eps: Optional[float] = None, copy: bool = True) -> NDArray:
    """
    Orthonormalize the columns of `mat` from first to last.

    Column i has its component along every earlier column removed and is then
    scaled to unit norm. If the residual norm of column i drops below `eps`
    the matrix is numerically rank deficient: column i and all later columns
    are set to zero and the routine stops.

    With `copy=False` the columns of `mat` are rewritten in place.
    """
    if eps is None:
        eps = config.GRAM_SCHMIDT_EPS
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    Q = as_float_matrix(mat).copy() if copy else mat
    _, k = Q.shape

    for i in range(k):
        for j in range(i):
            r = Q[:, i] @ Q[:, j]
            Q[:, i] -= r * Q[:, j]

        norm = np.linalg.norm(Q[:, i])
        if norm < eps:
            logger.debug("Rank deficiency at column %d of %d (norm=%.1e)", i, k, norm)
            Q[:, i:] = 0
            return Q
        Q[:, i] /= norm

    return Q


def numerical_rank(basis: NDArray) -> int:
    """
    Number of leading non-zero columns of a basis returned by `gram_schmidt`.
    """
    nonzero = np.any(basis != 0, axis=0)
    if nonzero.all():
        return int(nonzero.size)
    return int(np.argmin(nonzero))
