"""matcache exception types.

Both concrete errors also derive from the builtin/NumPy exception callers
would otherwise catch, so ``except ValueError`` and
``except numpy.linalg.LinAlgError`` keep working.
"""

from __future__ import annotations

import numpy as np


class MatCacheError(Exception):
    """Base class for all matcache errors."""


class ShapeError(MatCacheError, ValueError):
    """The matrix (or right-hand side) has a shape inversion cannot accept."""


class SingularMatrixError(MatCacheError, np.linalg.LinAlgError):
    """The matrix is singular or computationally singular."""
