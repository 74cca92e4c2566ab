#!/usr/bin/env python3
"""
Matrix Cache Walkthrough

Replays the cache lifecycle on two small matrices:
set, lazy solve, cached solve, replace, recompute.

Usage:
    python -m matrixcache [config_path]
"""

import logging
import sys
from pathlib import Path

import numpy as np
from numpy.linalg import LinAlgError

from .cell import CacheMatrix
from .config import DEFAULT_CONFIG_PATH, MatrixCacheConfig, default_config, load_config
from .solve import cache_solve

logger = logging.getLogger(__name__)

FIRST = np.array([[1, 3], [2, 4]])
SECOND = np.array([[5, 7], [6, 8]])


def resolve_config(argv) -> MatrixCacheConfig:
    """Use the path from argv, else the defaults file, else built-in defaults."""
    if len(argv) > 1:
        return load_config(argv[1])
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def walkthrough(cfg: MatrixCacheConfig) -> None:
    options = {"tol": cfg.tolerance, "notify": cfg.cache_hit_notice}

    cell = CacheMatrix()
    cell.set(FIRST)
    print(f"matrix:\n{cell.get()}")
    print(f"cached inverse: {cell.get_inverse()}")

    print(f"solve:\n{cache_solve(cell, **options)}")
    print(f"cached inverse:\n{cell.get_inverse()}")
    print(f"solve:\n{cache_solve(cell, **options)}")

    cell.set(SECOND)
    print(f"matrix:\n{cell.get()}")
    print(f"cached inverse: {cell.get_inverse()}")
    print(f"solve:\n{cache_solve(cell, **options)}")


def main(argv=None) -> int:
    """Entry point for ``python -m matrixcache`` and the console script."""
    argv = sys.argv if argv is None else argv
    try:
        cfg = resolve_config(argv)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(format="%(asctime)s [%(levelname)s] %(message)s")
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        with np.printoptions(precision=cfg.print_precision, suppress=True):
            walkthrough(cfg)
    except LinAlgError as e:
        logger.error(f"Inversion failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
