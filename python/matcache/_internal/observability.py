from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass
class SolveRecord:
    op: str
    route: str
    reason: str
    shape: Tuple[int, ...] | None
    dtype: str | None
    has_rhs: bool | None
    duration: float
    timestamp: float


def _shape(obj: Any) -> Tuple[int, ...] | None:
    shape = getattr(obj, "shape", None)
    if isinstance(shape, tuple):
        return tuple(int(x) for x in shape)
    return None


def _dtype_label(obj: Any) -> str | None:
    dtype = getattr(obj, "dtype", None)
    return None if dtype is None else str(dtype)


class SolveObservability:
    """Keeps the most recent solve record, overall and per op."""

    def __init__(self) -> None:
        self._last: Dict[str, Dict[str, Any]] = {}

    def clear(self) -> None:
        self._last.clear()

    def record(
        self,
        op: str,
        *,
        route: str,
        reason: str,
        operand: Any,
        has_rhs: bool | None = False,
        started: float | None = None,
    ) -> Dict[str, Any]:
        now = time.perf_counter()
        record = SolveRecord(
            op=op,
            route=route,
            reason=reason,
            shape=_shape(operand),
            dtype=_dtype_label(operand),
            has_rhs=has_rhs,
            duration=0.0 if started is None else now - started,
            timestamp=time.time(),
        )
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[op] = payload
        return payload

    def last(self, op: str | None = None) -> Dict[str, Any] | None:
        key = op or "__latest__"
        payload = self._last.get(key)
        return None if payload is None else dict(payload)


_DEFAULT = SolveObservability()


def default_instance() -> SolveObservability:
    return _DEFAULT
