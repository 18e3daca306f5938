import numpy as np
import pytest

import redsvd
from redsvd import (
    EmptyMatrixError, InvalidRankError, NotComputedError, RedSVD,
    compute, compute_singular_values, compute_u, compute_v
)
from redsvd.utils.utils import relative_error


def test_exact_rank_three_recovers_singular_values(low_rank_50x3):
    U, S, V = compute(low_rank_50x3, 3, seed=0)

    assert U.shape == (50, 3)
    assert S.shape == (3,)
    assert V.shape == (3, 3)
    np.testing.assert_allclose(S, [5.0, 3.0, 1.0], atol=1e-4)
    assert relative_error(low_rank_50x3, U, S, V) < 1e-6


def test_rank_above_true_rank_pads_with_zeros(low_rank_50x20):
    U, S, V = compute(low_rank_50x20, 5, seed=0)

    assert S.shape == (5,)
    np.testing.assert_allclose(S[:3], [5.0, 3.0, 1.0], atol=1e-4)
    assert np.all(np.abs(S[3:]) < 1e-8)

    np.testing.assert_allclose(U[:, :3].T @ U[:, :3], np.eye(3), atol=1e-8)
    np.testing.assert_allclose(V[:, :3].T @ V[:, :3], np.eye(3), atol=1e-8)
    np.testing.assert_allclose(U[:, 3:], 0, atol=1e-8)
    np.testing.assert_allclose(V[:, 3:], 0, atol=1e-8)
    assert relative_error(low_rank_50x20, U, S, V) < 1e-6


def test_factors_are_orthonormal_and_ordered(rng):
    A = rng.standard_normal((60, 40)) @ np.diag(0.7 ** np.arange(40)) @ rng.standard_normal((40, 30))
    U, S, V = compute(A, 10, seed=1)

    np.testing.assert_allclose(U.T @ U, np.eye(10), atol=1e-8)
    np.testing.assert_allclose(V.T @ V, np.eye(10), atol=1e-8)
    assert np.all(S >= 0)
    assert np.all(np.diff(S) <= 0)


def test_approximates_leading_singular_values(rng):
    A = rng.standard_normal((80, 50)) @ np.diag(0.3 ** np.arange(50)) @ rng.standard_normal((50, 50))
    S_exact = np.linalg.svd(A, compute_uv=False)
    S = compute_singular_values(A, 10, seed=2)
    np.testing.assert_allclose(S[:3], S_exact[:3], rtol=1e-3)


def test_wide_matrix(rng):
    A = rng.standard_normal((5, 2)) @ rng.standard_normal((2, 40))
    U, S, V = compute(A, 2, seed=0)
    assert U.shape == (5, 2)
    assert V.shape == (40, 2)
    assert relative_error(A, U, S, V) < 1e-6


def test_partial_variants_match_full(low_rank_50x20):
    U, S, V = compute(low_rank_50x20, 4, seed=7)

    S_v, V_v = compute_v(low_rank_50x20, 4, seed=7)
    S_u, U_u = compute_u(low_rank_50x20, 4, seed=7)
    S_s = compute_singular_values(low_rank_50x20, 4, seed=7)

    np.testing.assert_allclose(S_v, S)
    np.testing.assert_allclose(V_v, V)
    np.testing.assert_allclose(S_u, S)
    np.testing.assert_allclose(U_u, U)
    np.testing.assert_allclose(S_s, S)


def test_partial_compute_clears_previous_results(low_rank_50x3):
    svd = RedSVD(low_rank_50x3, 3, seed=0)
    assert svd.matrix_u.shape == (50, 3)

    svd.compute_v(low_rank_50x3, 2)
    assert svd.V.shape == (3, 2)
    with pytest.raises(NotComputedError):
        svd.matrix_u

    svd.compute_singular_values(low_rank_50x3, 2)
    assert svd.S.shape == (2,)
    with pytest.raises(NotComputedError):
        svd.matrix_v


def test_results_before_compute_raise():
    svd = RedSVD()
    for name in ("matrix_u", "singular_values", "matrix_v", "U", "S", "V"):
        with pytest.raises(NotComputedError):
            getattr(svd, name)
    with pytest.raises(ValueError):
        svd.reconstruct()


def test_reconstruct(low_rank_50x3):
    svd = RedSVD(low_rank_50x3, seed=0)
    np.testing.assert_allclose(svd.reconstruct(), low_rank_50x3, atol=1e-8)


def test_default_rank_is_full(rng):
    A = rng.standard_normal((12, 7))
    svd = RedSVD(A, seed=0)
    assert svd.S.shape == (7,)


def test_rank_is_clamped(rng):
    A = rng.standard_normal((10, 4))
    U, S, V = compute(A, 10, seed=0)
    assert U.shape == (10, 4)
    assert S.shape == (4,)
    assert V.shape == (4, 4)


def test_stage_times_are_recorded(low_rank_50x3):
    svd = RedSVD(low_rank_50x3, 3, seed=0)
    assert len(svd.times) == 3
    svd.compute_singular_values(low_rank_50x3, 3)
    assert len(svd.times) == 2


def test_same_seed_is_reproducible(rng):
    A = rng.standard_normal((30, 20))
    U1, S1, V1 = compute(A, 5, seed=123)
    U2, S2, V2 = compute(A, 5, seed=123)
    assert np.array_equal(U1, U2)
    assert np.array_equal(S1, S2)
    assert np.array_equal(V1, V2)


def test_float32_precision_is_kept(low_rank_50x3):
    U, S, V = compute(low_rank_50x3.astype(np.float32), 3, seed=0)
    assert U.dtype == np.float32
    assert S.dtype == np.float32
    assert V.dtype == np.float32
    np.testing.assert_allclose(S, [5.0, 3.0, 1.0], atol=1e-3)


def test_integer_input_is_promoted():
    A = np.arange(12).reshape(4, 3)
    U, S, V = compute(A, 2, seed=0)
    assert S.dtype == np.float64


@pytest.mark.parametrize("rank", [0, -1, 2.5, True, "3"])
def test_invalid_rank_raises(low_rank_50x3, rank):
    with pytest.raises(InvalidRankError):
        compute(low_rank_50x3, rank)


@pytest.mark.parametrize("shape", [(0, 5), (5, 0), (0, 0)])
def test_empty_matrix_raises(shape):
    with pytest.raises(EmptyMatrixError) as excinfo:
        compute(np.zeros(shape), 1)
    assert excinfo.value.shape == shape
    assert isinstance(excinfo.value, ValueError)


def test_empty_check_precedes_rank_check():
    with pytest.raises(EmptyMatrixError):
        compute_singular_values(np.zeros((0, 3)), 0)


def test_non_matrix_input_raises():
    with pytest.raises(ValueError):
        compute(np.ones(5), 1)
    with pytest.raises(TypeError):
        compute(np.ones((3, 3), dtype=complex), 1)


def test_errors_share_base_class():
    assert issubclass(EmptyMatrixError, redsvd.RedSVDError)
    assert issubclass(InvalidRankError, redsvd.RedSVDError)
    assert issubclass(NotComputedError, redsvd.RedSVDError)
