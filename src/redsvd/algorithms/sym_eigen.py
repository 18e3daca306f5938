"""
Randomized eigendecomposition of symmetric matrices.
"""
import logging
import numpy as np

from typing import Optional
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import eigh

from redsvd.algorithms.projection import project_symmetric
from redsvd.errors import NotComputedError
from redsvd.utils.sampling import SeedLike, get_rng
from redsvd.utils.utils import as_float_matrix, check_rank

logger = logging.getLogger(__name__)


class RedSymEigen:
    def __init__(
            self,
            A: Optional[ArrayLike] = None,
            rank: Optional[int] = None,
            *,
            seed: SeedLike = None,
            eps: Optional[float] = None
        ) -> None:
        """
        Randomized eigendecomposition A ~= W diag(lambda) W^T of a symmetric A.
        Only the symmetry of A is used, it is not checked.
        """
        self.rng = get_rng(seed)
        self.eps = eps
        self._eigenvalues: Optional[NDArray] = None
        self._eigenvectors: Optional[NDArray] = None

        if A is not None:
            self.compute(A, rank)

    @property
    def eigenvalues(self) -> NDArray:
        """
        Eigenvalues in ascending order.
        """
        if self._eigenvalues is None:
            raise NotComputedError("eigenvalues")
        return self._eigenvalues

    @property
    def eigenvectors(self) -> NDArray:
        if self._eigenvectors is None:
            raise NotComputedError("eigenvectors")
        return self._eigenvectors

    def compute(self, A: ArrayLike, rank: Optional[int] = None) -> tuple[NDArray, NDArray]:
        A = as_float_matrix(A)
        n_rows, n_cols = A.shape

        # An empty matrix has an empty decomposition
        if n_rows == 0 or n_cols == 0:
            self._eigenvalues = np.zeros(0, dtype=A.dtype)
            self._eigenvectors = np.zeros((n_rows, 0), dtype=A.dtype)
            return self._eigenvalues, self._eigenvectors

        if n_rows != n_cols:
            raise ValueError(f"Expected a square symmetric matrix, got shape {A.shape}")

        r = check_rank(rank, A.shape)
        self._eigenvalues, self._eigenvectors = None, None

        proj = project_symmetric(A, r, rng=self.rng, eps=self.eps)
        eigenvalues, W = eigh(proj.B, check_finite=False)
        logger.debug("Randomized eigendecomposition of %s matrix at rank %d", A.shape, r)

        # Eigenvalues of B are already on the scale of A
        self._eigenvalues = eigenvalues
        self._eigenvectors = proj.Y @ W
        return self._eigenvalues, self._eigenvectors


def compute_sym_eigen(
        A: ArrayLike, rank: Optional[int] = None, seed: SeedLike = None, eps: Optional[float] = None
    ) -> tuple[NDArray, NDArray]:
    """
    Randomized eigendecomposition of the symmetric matrix A.
    Returns (eigenvalues, eigenvectors) with eigenvalues ascending.
    """
    return RedSymEigen(seed=seed, eps=eps).compute(A, rank)
