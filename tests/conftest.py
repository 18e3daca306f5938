import os
import sys

import numpy as np
import pytest

# Make the packages under src/ importable without installing the project.
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)


def orthonormal_columns(rng, n, k):
    Q, _ = np.linalg.qr(rng.standard_normal((n, k)))
    return Q


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def low_rank_50x3(rng):
    """50 x 3 matrix C diag(5, 3, 1) R^T with orthonormal C and R."""
    C = orthonormal_columns(rng, 50, 3)
    R = orthonormal_columns(rng, 3, 3)
    return C @ np.diag([5.0, 3.0, 1.0]) @ R.T


@pytest.fixture
def low_rank_50x20(rng):
    """50 x 20 matrix of exact rank 3 with singular values (5, 3, 1)."""
    C = orthonormal_columns(rng, 50, 3)
    R = orthonormal_columns(rng, 20, 3)
    return C @ np.diag([5.0, 3.0, 1.0]) @ R.T
