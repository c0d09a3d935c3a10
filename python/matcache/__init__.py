"""Memoized matrix inversion.

Wrap a matrix in :class:`CachedMatrix` and call :func:`cache_solve` on it as
often as needed: the inverse is computed once and reused until the matrix is
replaced with :meth:`CachedMatrix.set`.
"""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

import logging as _logging
from typing import Any

from ._internal import runtime as _runtime_mod
from ._internal import observability as _observability
from ._internal.cached_matrix import CachedMatrix
from ._internal.errors import MatCacheError, ShapeError, SingularMatrixError
from ._internal.linalg import invert
from ._internal.linalg_cache import cache_solve
from ._internal.warnings import MatCacheWarning, MatCacheConditionWarning

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_runtime = _runtime_mod.default_instance()


def get_tolerance() -> float:
    """Reciprocal condition number below which inversion fails."""
    return _runtime.tolerance()


def set_tolerance(value: float | None) -> float:
    """Set the singularity tolerance; ``None`` restores the env/default value."""
    return _runtime.set_tolerance(value)


def get_condition_warning_threshold() -> float:
    return _runtime.condition_warning_threshold()


def set_condition_warning_threshold(value: float | None) -> float:
    return _runtime.set_condition_warning_threshold(value)


def last_solve_trace(op: str | None = None) -> dict[str, Any] | None:
    """Return the record of the most recent ``cache_solve`` call, if any."""
    return _observability.default_instance().last(op)


def clear_solve_traces() -> None:
    _observability.default_instance().clear()


__all__ = [
    "CachedMatrix",
    "cache_solve",
    "invert",
    "MatCacheError",
    "ShapeError",
    "SingularMatrixError",
    "MatCacheWarning",
    "MatCacheConditionWarning",
    "get_tolerance",
    "set_tolerance",
    "get_condition_warning_threshold",
    "set_condition_warning_threshold",
    "last_solve_trace",
    "clear_solve_traces",
]
