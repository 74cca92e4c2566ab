"""
Matrix Cache
Lazily computed, invalidation-aware matrix inverses.
"""

from .cell import CacheMatrix
from .linalg import invert
from .solve import cache_solve

__all__ = ['CacheMatrix', 'cache_solve', 'invert']
