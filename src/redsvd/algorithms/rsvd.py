"""
Implementation of the randomized singular value decomposition.
"""
import logging

from time import time
from typing import Optional
from numpy.typing import ArrayLike, NDArray

from redsvd.algorithms.projection import Projection, project, solve_reduced
from redsvd.errors import NotComputedError
from redsvd.utils.sampling import SeedLike, get_rng
from redsvd.utils.utils import as_float_matrix, check_nonempty, check_rank

logger = logging.getLogger(__name__)


class RedSVD:
    def __init__(
            self,
            A: Optional[ArrayLike] = None,
            rank: Optional[int] = None,
            *,
            seed: SeedLike = None,
            eps: Optional[float] = None
        ) -> None:
        """
        Randomized SVD A ~= U diag(S) V^T of rank `rank`.

        A, optional: Matrix to decompose right away with `compute`.
        rank, optional: Target rank, defaults to min(rows, cols).
        seed, optional: Seed or Generator for the Gaussian test matrices.
        eps, optional: Rank-deficiency threshold used by Gram-Schmidt.
        """
        self.rng = get_rng(seed)
        self.eps = eps
        self._U: Optional[NDArray] = None
        self._S: Optional[NDArray] = None
        self._V: Optional[NDArray] = None
        self.times = None

        if A is not None:
            self.compute(A, rank)

    @property
    def matrix_u(self) -> NDArray:
        if self._U is None:
            raise NotComputedError("U")
        return self._U

    @property
    def singular_values(self) -> NDArray:
        if self._S is None:
            raise NotComputedError("S")
        return self._S

    @property
    def matrix_v(self) -> NDArray:
        if self._V is None:
            raise NotComputedError("V")
        return self._V

    U = matrix_u
    S = singular_values
    V = matrix_v

    def compute(self, A: ArrayLike, rank: Optional[int] = None) -> tuple[NDArray, NDArray, NDArray]:
        """
        Compute U, S and V. Returns (U, S, V).
        """
        proj, (Uc, Sc, Vc) = self._compute_svd(A, rank)

        t0 = time()
        self._U = proj.Z @ Uc
        self._S = Sc
        self._V = proj.Y @ Vc
        self.times.append(time() - t0)
        return self._U, self._S, self._V

    def compute_v(self, A: ArrayLike, rank: Optional[int] = None) -> tuple[NDArray, NDArray]:
        """
        Compute S and V only. Returns (S, V).
        """
        proj, (_, Sc, Vc) = self._compute_svd(A, rank)

        t0 = time()
        self._S = Sc
        self._V = proj.Y @ Vc
        self.times.append(time() - t0)
        return self._S, self._V

    def compute_u(self, A: ArrayLike, rank: Optional[int] = None) -> tuple[NDArray, NDArray]:
        """
        Compute S and U only. Returns (S, U).
        """
        proj, (Uc, Sc, _) = self._compute_svd(A, rank)

        t0 = time()
        self._S = Sc
        self._U = proj.Z @ Uc
        self.times.append(time() - t0)
        return self._S, self._U

    def compute_singular_values(self, A: ArrayLike, rank: Optional[int] = None) -> NDArray:
        """
        Compute the singular values only.
        """
        _, (_, Sc, _) = self._compute_svd(A, rank)
        self._S = Sc
        return self._S

    def reconstruct(self) -> NDArray:
        """
        Return the low-rank approximation U diag(S) V^T.
        """
        return (self.matrix_u * self.singular_values) @ self.matrix_v.T

    def _compute_svd(
            self, A: ArrayLike, rank: Optional[int]
        ) -> tuple[Projection, tuple[NDArray, NDArray, NDArray]]:
        """
        Validate the input, project A and take the exact SVD of the reduced
        matrix: C = Uc Sc Vc^T, so A ~= (Z Uc) Sc (Y Vc)^T.
        """
        A = as_float_matrix(A)
        check_nonempty(A)
        r = check_rank(rank, A.shape)

        # Results of a previous compute are discarded
        self._U, self._S, self._V = None, None, None
        self.times = []

        t0 = time()
        proj = project(A, r, rng=self.rng, eps=self.eps)
        self.times.append(time() - t0)

        t0 = time()
        svd_of_C = solve_reduced(proj.C)
        self.times.append(time() - t0)

        logger.debug(
            "Randomized SVD of %s matrix at rank %d: projection %.2es, reduced SVD %.2es",
            A.shape, r, *self.times
        )
        return proj, svd_of_C


def compute(
        A: ArrayLike, rank: Optional[int] = None, seed: SeedLike = None, eps: Optional[float] = None
    ) -> tuple[NDArray, NDArray, NDArray]:
    """
    Randomized SVD of A. Returns (U, S, V) with U (m x r), S (r,) and V (n x r).
    """
    return RedSVD(seed=seed, eps=eps).compute(A, rank)


def compute_v(
        A: ArrayLike, rank: Optional[int] = None, seed: SeedLike = None, eps: Optional[float] = None
    ) -> tuple[NDArray, NDArray]:
    return RedSVD(seed=seed, eps=eps).compute_v(A, rank)


def compute_u(
        A: ArrayLike, rank: Optional[int] = None, seed: SeedLike = None, eps: Optional[float] = None
    ) -> tuple[NDArray, NDArray]:
    return RedSVD(seed=seed, eps=eps).compute_u(A, rank)


def compute_singular_values(
        A: ArrayLike, rank: Optional[int] = None, seed: SeedLike = None, eps: Optional[float] = None
    ) -> NDArray:
    return RedSVD(seed=seed, eps=eps).compute_singular_values(A, rank)
