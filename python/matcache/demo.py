"""Walk through a cache miss followed by a cache hit on a random matrix.

Run from repo root:
  - `python -m matcache.demo --size 4 --seed 1`
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

import numpy as np

from ._internal.cached_matrix import CachedMatrix
from ._internal.formatting import write_table
from ._internal.linalg_cache import cache_solve


def demonstrate(size: int = 4, seed: int | None = None, file: TextIO | None = None) -> np.ndarray:
    out = sys.stdout if file is None else file
    rng = np.random.default_rng(seed)

    print("demonstrate:", file=out)
    matrix = rng.standard_normal((size, size))
    print(f"Created random {size}x{size} matrix:", file=out)
    write_table(matrix, out)

    cached = CachedMatrix(matrix)
    print(f"Created cached matrix of random {size}x{size} matrix:", file=out)
    write_table(cached.get(), out)

    inv = cache_solve(cached)
    print("Call cache_solve 1st time:", file=out)
    write_table(inv, out)

    inv = cache_solve(cached)
    print("Call cache_solve 2nd time:", file=out)
    write_table(inv, out)
    return inv


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="matcache.demo", description=__doc__)
    parser.add_argument("--size", type=int, default=4, help="matrix dimension (default: 4)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("--size must be at least 1")

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    demonstrate(size=args.size, seed=args.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
