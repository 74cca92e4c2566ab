"""Default inversion routine for cache_solve, backed by numpy.linalg."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
from numpy.linalg import LinAlgError


def _as_square(matrix: Any) -> np.ndarray:
    a = np.asarray(matrix)
    if a.ndim != 2:
        raise LinAlgError(
            f"{a.ndim}-dimensional array given. Array must be two-dimensional"
        )
    rows, cols = a.shape
    if rows != cols:
        raise LinAlgError(f"matrix must be square (got {rows}x{cols})")
    if not np.issubdtype(a.dtype, np.inexact):
        a = a.astype(float)
    return a


def reciprocal_condition(a: np.ndarray, inverse: np.ndarray) -> float:
    """1-norm reciprocal condition number, 1 / (||A|| * ||A^-1||)."""
    product = np.linalg.norm(a, 1) * np.linalg.norm(inverse, 1)
    if product == 0:
        return 0.0
    return float(1.0 / product)


def invert(matrix: Any, tol: Optional[float] = None) -> np.ndarray:
    """
    Invert a square matrix.

    Args:
        matrix: Anything numpy.asarray accepts as a 2-D numeric array; float
            and complex dtypes are kept, integer input is cast to float
        tol: Reject matrices whose reciprocal condition number is below this

    Returns:
        The inverse as an ndarray of the input's inexact dtype

    Raises:
        LinAlgError: non-square or wrongly shaped input, a singular matrix,
            or one that is computationally singular under ``tol``
    """
    a = _as_square(matrix)
    inverse = np.linalg.inv(a)

    if tol is not None and a.size:
        rcond = reciprocal_condition(a, inverse)
        if rcond < tol:
            raise LinAlgError(
                f"system is computationally singular: "
                f"reciprocal condition number = {rcond:g}"
            )

    return inverse
