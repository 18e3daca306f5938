"""
Randomized range finding: project a large matrix onto random subspaces and
reduce it to a small r x r matrix whose exact decomposition can be lifted back.
"""
from dataclasses import dataclass
from typing import Optional
from numpy.typing import NDArray
from scipy.linalg import svd

from redsvd import config
from redsvd.utils.gram_schmidt import gram_schmidt
from redsvd.utils.sampling import SeedLike, get_rng, sample_gaussian


@dataclass
class Projection:
    """
    A ~= Z @ C @ Y.T with Y (n x r) spanning the approximate row space and
    Z (m x r) the approximate column space of A.
    """
    Y: NDArray
    Z: NDArray
    C: NDArray


@dataclass
class SymmetricProjection:
    """
    A ~= Y @ B @ Y.T for a symmetric A, with B symmetric (r x r).
    """
    Y: NDArray
    B: NDArray


def find_row_basis(
        A: NDArray, rank: int, rng: SeedLike = None, eps: Optional[float] = None
    ) -> NDArray:
    """
    Orthonormal n x r basis of the sampled row space of the m x n matrix A.
    """
    # Gaussian random matrix for A^T
    O = sample_gaussian(A.shape[0], rank, rng=rng, dtype=A.dtype)

    # Sample matrix of A^T, orthonormalized in place
    Y = A.T @ O
    return gram_schmidt(Y, eps=eps, copy=False)


def project(
        A: NDArray, rank: int, rng: SeedLike = None, eps: Optional[float] = None
    ) -> Projection:
    """
    Two-sided randomized projection of the m x n matrix A to rank `rank`,
    which must already be clamped to min(m, n).
    """
    rng = get_rng(rng)
    Y = find_row_basis(A, rank, rng=rng, eps=eps)

    # Range(B) = A Range(A^T)
    B = A @ Y

    # Sample the column space of B with an independent Gaussian matrix
    P = sample_gaussian(B.shape[1], rank, rng=rng, dtype=A.dtype)
    Z = gram_schmidt(B @ P, eps=eps, copy=False)

    # Range(C) = Range(B)
    C = Z.T @ B
    return Projection(Y=Y, Z=Z, C=C)


def project_symmetric(
        A: NDArray, rank: int, rng: SeedLike = None, eps: Optional[float] = None
    ) -> SymmetricProjection:
    """
    One-sided projection of the symmetric n x n matrix A: its row and column
    spaces coincide, so a single basis Y suffices.
    """
    Y = find_row_basis(A, rank, rng=get_rng(rng), eps=eps)
    B = Y.T @ A @ Y

    # Remove round-off asymmetry before the symmetric solver sees B
    B = 0.5 * (B + B.T)
    return SymmetricProjection(Y=Y, B=B)


def solve_reduced(C: NDArray) -> tuple[NDArray, NDArray, NDArray]:
    """
    Thin SVD C = Uc diag(Sc) Vc^T of the reduced matrix. Vc is returned
    column-oriented, not transposed.
    """
    Uc, Sc, Vct = svd(
        C, full_matrices=False, lapack_driver=config.SVD_LAPACK_DRIVER, check_finite=False
    )
    return Uc, Sc, Vct.T
