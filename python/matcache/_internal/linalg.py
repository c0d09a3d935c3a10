"""Inversion primitive used by ``cache_solve``.

Thin layer over :func:`numpy.linalg.inv` / :func:`numpy.linalg.solve` that
maps NumPy failures onto matcache's error types and applies the
reciprocal-condition tolerance check.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from . import runtime as _runtime
from .coercion import as_matrix
from .errors import ShapeError, SingularMatrixError
from .warnings import MatCacheConditionWarning


def reciprocal_condition(matrix: np.ndarray) -> float:
    """1-norm reciprocal condition number; 0.0 for exactly singular input."""
    return 1.0 / float(np.linalg.cond(matrix, 1))


def _check_square(matrix: np.ndarray) -> int:
    if matrix.ndim != 2:
        raise ShapeError(f"Matrix must be 2D to invert, got {matrix.ndim}D input.")
    rows, cols = matrix.shape
    if rows != cols:
        raise ShapeError(f"Matrix must be square to invert, got shape ({rows}, {cols}).")
    return rows


def _coerce_rhs(b: Any, size: int) -> np.ndarray:
    rhs = as_matrix(b)
    if rhs.ndim not in (1, 2) or rhs.shape[0] != size:
        raise ShapeError(
            f"Right-hand side with shape {rhs.shape} does not match a {size}x{size} matrix."
        )
    return rhs


def invert(
    matrix: Any,
    b: Any = None,
    *,
    tol: float | None = None,
    stacklevel: int = 2,
) -> np.ndarray:
    """Invert ``matrix``, or solve ``matrix @ x = b`` when ``b`` is given.

    A successful inversion of an ill-conditioned matrix emits
    :class:`MatCacheConditionWarning`, attributed ``stacklevel`` frames up.

    Raises:
        ShapeError: ``matrix`` is not square, or ``b`` does not match it.
        SingularMatrixError: the reciprocal condition number is below ``tol``
            (machine epsilon unless configured), NumPy reports a singular
            matrix, or the result is not finite.
    """

    a = as_matrix(matrix)
    size = _check_square(a)
    rhs = None if b is None else _coerce_rhs(b, size)

    if size == 0:
        dtype = np.result_type(a.dtype, np.float64)
        tail = () if rhs is None else rhs.shape[1:]
        return np.empty((0, 0) if rhs is None else (0,) + tail, dtype=dtype)

    runtime = _runtime.default_instance()
    if tol is None:
        tol = runtime.tolerance()
    else:
        tol = _runtime.validate_threshold(tol, name="tol")

    rcond = reciprocal_condition(a)
    if rcond < tol:
        raise SingularMatrixError(
            f"system is computationally singular: reciprocal condition number = {rcond:g}"
        )

    try:
        result = np.linalg.inv(a) if rhs is None else np.linalg.solve(a, rhs)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(str(exc)) from exc

    if not np.all(np.isfinite(result)):
        raise SingularMatrixError("Inverse contains non-finite values.")

    if rcond < runtime.condition_warning_threshold():
        warnings.warn(
            f"Matrix is ill-conditioned (reciprocal condition number = {rcond:g}); "
            "the inverse may be inaccurate.",
            MatCacheConditionWarning,
            stacklevel=stacklevel,
        )
    return result
