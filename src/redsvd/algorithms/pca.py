"""
Principal component analysis on top of the randomized SVD.
"""
from typing import Optional
from numpy.typing import ArrayLike, NDArray

from redsvd.algorithms.rsvd import RedSVD
from redsvd.errors import NotComputedError
from redsvd.utils.sampling import SeedLike, get_rng


class RedPCA:
    def __init__(
            self,
            A: Optional[ArrayLike] = None,
            rank: Optional[int] = None,
            *,
            seed: SeedLike = None,
            eps: Optional[float] = None
        ) -> None:
        """
        Randomized PCA of the rows of A. A is used as given: center it first
        if the components should describe variance around the mean.
        """
        self.rng = get_rng(seed)
        self.eps = eps
        self._components: Optional[NDArray] = None
        self._scores: Optional[NDArray] = None
        self._singular_values: Optional[NDArray] = None
        self._n_samples: Optional[int] = None

        if A is not None:
            self.compute(A, rank)

    @property
    def components(self) -> NDArray:
        if self._components is None:
            raise NotComputedError("components")
        return self._components

    @property
    def scores(self) -> NDArray:
        if self._scores is None:
            raise NotComputedError("scores")
        return self._scores

    @property
    def singular_values(self) -> NDArray:
        if self._singular_values is None:
            raise NotComputedError("singular values")
        return self._singular_values

    def compute(self, A: ArrayLike, rank: Optional[int] = None) -> tuple[NDArray, NDArray]:
        """
        Components are the right singular vectors V, scores are U diag(S).
        Returns (components, scores).
        """
        self._components, self._scores, self._singular_values = None, None, None

        redsvd = RedSVD(seed=self.rng, eps=self.eps)
        U, S, V = redsvd.compute(A, rank)

        self._n_samples = U.shape[0]
        self._singular_values = S
        self._components = V
        self._scores = U * S
        return self._components, self._scores

    def explained_variance(self) -> NDArray:
        """
        Variance of the scores along each component, S^2 / (n_samples - 1).
        """
        S = self.singular_values
        return S**2 / max(self._n_samples - 1, 1)


def compute_pca(
        A: ArrayLike, rank: Optional[int] = None, seed: SeedLike = None, eps: Optional[float] = None
    ) -> tuple[NDArray, NDArray]:
    """
    Randomized PCA of A. Returns (components, scores).
    """
    return RedPCA(seed=seed, eps=eps).compute(A, rank)
