"""
Default parameters for the randomized decompositions.
"""

# --- Orthonormalization ---

# Residual norm below which Gram-Schmidt treats the remaining columns as
# numerically dependent and zeroes them out.
GRAM_SCHMIDT_EPS: float = 1e-4

# --- Random sampling ---

# Number of distinct uniform integers is RAND_MAX + 1; they are shifted into
# the open interval (0, 1) before the Box-Muller transform.
RAND_MAX: int = 2**31 - 1

# Seed used when none is given (None for fresh OS entropy)
DEFAULT_SEED: int | None = None

# --- Reduced solvers ---

# LAPACK driver for the SVD of the reduced matrix: 'gesdd' or 'gesvd'
SVD_LAPACK_DRIVER: str = "gesdd"
