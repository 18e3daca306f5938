"""
Randomized low-rank SVD, symmetric eigendecomposition and PCA.
"""
import logging

from redsvd.algorithms.pca import RedPCA, compute_pca
from redsvd.algorithms.rsvd import (
    RedSVD, compute, compute_singular_values, compute_u, compute_v
)
from redsvd.algorithms.sym_eigen import RedSymEigen, compute_sym_eigen
from redsvd.errors import EmptyMatrixError, InvalidRankError, NotComputedError, RedSVDError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "RedSVD",
    "RedSymEigen",
    "RedPCA",
    "compute",
    "compute_v",
    "compute_u",
    "compute_singular_values",
    "compute_sym_eigen",
    "compute_pca",
    "RedSVDError",
    "EmptyMatrixError",
    "InvalidRankError",
    "NotComputedError",
]
