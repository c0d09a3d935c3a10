from __future__ import annotations

import math
import os

import numpy as np

_EPS = float(np.finfo(np.float64).eps)


def validate_threshold(value: float, *, name: str) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"{name} must be a finite non-negative number, got {value!r}")
    return value


class Runtime:
    """Process-wide numeric settings for the inversion primitive.

    Values come from explicit setters first, then the environment, then the
    float64 defaults. Environment lookups are cached until reset.
    """

    def __init__(
        self,
        *,
        tol_env_var: str = "MATCACHE_TOL",
        cond_warn_env_var: str = "MATCACHE_COND_WARN",
    ) -> None:
        self._tol_env_var = tol_env_var
        self._cond_warn_env_var = cond_warn_env_var
        self._tolerance: float | None = None
        self._cond_warn: float | None = None

    def _from_env(self, env_var: str, default: float) -> float:
        env = os.environ.get(env_var)
        if not env:
            return default
        try:
            return validate_threshold(float(env), name=env_var)
        except ValueError as exc:
            raise ValueError(f"Invalid value for {env_var}: {env!r}") from exc

    def tolerance(self) -> float:
        if self._tolerance is None:
            self._tolerance = self._from_env(self._tol_env_var, _EPS)
        return self._tolerance

    def set_tolerance(self, value: float | None) -> float:
        self._tolerance = None if value is None else validate_threshold(value, name="tolerance")
        return self.tolerance()

    def condition_warning_threshold(self) -> float:
        if self._cond_warn is None:
            self._cond_warn = self._from_env(self._cond_warn_env_var, math.sqrt(_EPS))
        return self._cond_warn

    def set_condition_warning_threshold(self, value: float | None) -> float:
        if value is None:
            self._cond_warn = None
        else:
            self._cond_warn = validate_threshold(value, name="condition warning threshold")
        return self.condition_warning_threshold()


_DEFAULT = Runtime()


def default_instance() -> Runtime:
    return _DEFAULT
