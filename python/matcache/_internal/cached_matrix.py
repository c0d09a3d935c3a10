from __future__ import annotations

import logging
from typing import Any

import numpy as np

from . import formatting as _formatting
from .coercion import as_matrix

logger = logging.getLogger(__name__)


class CachedMatrix:
    """A matrix together with a slot for its memoized inverse.

    The slot is only ever filled by :func:`matcache.cache_solve`. Every call to
    :meth:`set` empties it, whether or not the new matrix differs from the old
    one.

    Both the matrix and the cached inverse are held as read-only arrays.
    :meth:`get` hands out a copy so callers cannot reach the stored value.
    """

    def __init__(self, initial: Any):
        self._value = as_matrix(initial)
        self._cached_inverse: np.ndarray | None = None

    def set(self, new_value: Any) -> None:
        value = as_matrix(new_value)
        if self._cached_inverse is not None:
            logger.debug("Matrix replaced; discarding cached inverse")
        self._value = value
        self._cached_inverse = None

    def get(self) -> np.ndarray:
        return self._value.copy()

    def set_cached_inverse(self, inv: Any) -> None:
        # No check that inv actually inverts the current value.
        self._cached_inverse = as_matrix(inv)

    def get_cached_inverse(self) -> np.ndarray | None:
        return self._cached_inverse

    @property
    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None

    @property
    def shape(self) -> tuple[int, ...]:
        return self._value.shape

    def __str__(self) -> str:
        return _formatting.matrix_str(self._value, name=self.__class__.__name__)

    def __repr__(self) -> str:
        state = "cached" if self.has_cached_inverse else "empty"
        return f"<{self.__class__.__name__} shape={self.shape} inverse={state}>"
