"""
Standard normal test matrices drawn with the Box-Muller transform.
"""
import numpy as np

from typing import Optional, Union
from numpy.typing import DTypeLike, NDArray

from redsvd import config

SeedLike = Union[None, int, np.random.Generator]


def get_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Return a Generator for `seed`. An existing Generator is passed through,
    so repeated draws from it continue its stream.
    """
    if seed is None:
        seed = config.DEFAULT_SEED
    return np.random.default_rng(seed)


def open_uniform(rng: np.random.Generator, size=None) -> Union[float, NDArray]:
    """
    Uniform draws strictly inside (0, 1): an integer u in [0, RAND_MAX] is
    mapped to (u + 1) / (RAND_MAX + 2).
    """
    u = rng.integers(0, config.RAND_MAX, size=size, endpoint=True)
    return (u + 1.0) / (config.RAND_MAX + 2.0)


def sample_gaussian_pair(rng: np.random.Generator, size=None) -> tuple:
    """
    Draw a pair of independent standard normal values (or arrays of pairs
    with shape `size`).
    """
    shape = (2,) if size is None else tuple(np.atleast_1d(size)) + (2,)
    v = open_uniform(rng, size=shape)
    v1, v2 = v[..., 0], v[..., 1]

    length = np.sqrt(-2.0 * np.log(v1))
    x = length * np.cos(2.0 * np.pi * v2)
    y = length * np.sin(2.0 * np.pi * v2)
    return x, y


def sample_gaussian(
        rows: int, cols: int, rng: SeedLike = None, dtype: DTypeLike = np.float64
    ) -> NDArray:
    """
    Return a `rows` x `cols` matrix of independent standard normal entries.

    Entries are produced pairwise along each row. When `cols` is odd the last
    entry of every row takes the second (sine) value of an extra pair.
    """
    out = np.empty((rows, cols), dtype=dtype)
    if out.size == 0:
        return out

    rng = get_rng(rng)
    n_pairs = (cols + 1) // 2
    x, y = sample_gaussian_pair(rng, size=(rows, n_pairs))

    pairs = np.empty((rows, 2 * n_pairs))
    pairs[:, 0::2] = x
    pairs[:, 1::2] = y
    out[:] = pairs[:, :cols]
    if cols % 2:
        out[:, -1] = y[:, -1]
    return out


def fill_gaussian(mat: NDArray, rng: Optional[SeedLike] = None) -> NDArray:
    """
    Overwrite every entry of the 2-D array `mat` with a standard normal draw.
    """
    rows, cols = mat.shape
    mat[...] = sample_gaussian(rows, cols, rng=rng, dtype=mat.dtype)
    return mat
