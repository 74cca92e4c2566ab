"""
Cached Solve

cache_solve(cell) returns the inverse held by a CacheMatrix, computing and
storing it on the first call after construction or after set().
"""

import logging
from typing import Any, Callable

from .cell import CacheMatrix
from .linalg import invert

logger = logging.getLogger(__name__)

CACHE_HIT_NOTICE = "getting cached data"


def cache_solve(
    cell: CacheMatrix,
    *args: Any,
    routine: Callable[..., Any] = invert,
    notify: bool = True,
    **options: Any,
) -> Any:
    """
    Return the inverse of the matrix held by ``cell``.

    Args:
        cell: Matrix wrapper whose cached inverse is read and filled
        *args: Passed through to ``routine``
        routine: Inversion routine, called as ``routine(value, *args, **options)``
        notify: Log a notice when the cached inverse is returned
        **options: Passed through to ``routine`` (e.g. ``tol``)

    Returns:
        The cached inverse on a hit (the same object every time), otherwise the
        freshly computed one.

    Errors raised by ``routine`` propagate as-is and leave the cell untouched.
    """
    inverse = cell.get_inverse()
    if inverse is not None:
        if notify:
            logger.info(CACHE_HIT_NOTICE)
        return inverse

    data = cell.get()
    logger.debug(f"Computing inverse with {getattr(routine, '__name__', routine)!s}")
    inverse = routine(data, *args, **options)
    cell.set_inverse(inverse)
    return inverse
