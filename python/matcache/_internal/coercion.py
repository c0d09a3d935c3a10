from __future__ import annotations

from typing import Any

import numpy as np


def as_matrix(candidate: Any) -> np.ndarray:
    """Return a private read-only ndarray copy of ``candidate``.

    Integer, boolean, float16 and long double data is promoted to float64 or
    complex128; float32/float64 and complex64/complex128 keep their dtype.
    Shape is not validated here.
    """

    if isinstance(candidate, (str, bytes, bytearray)):
        raise TypeError(
            "Matrix data must be provided as a nested numeric sequence or a NumPy array."
        )

    try:
        array = np.array(candidate, copy=True)
    except (TypeError, ValueError) as exc:
        # Ragged rows end up here on current NumPy.
        raise TypeError(
            "Matrix data must be provided as a nested numeric sequence or a NumPy array."
        ) from exc

    kind = array.dtype.kind
    if kind in ("b", "i", "u"):
        array = array.astype(np.float64)
    elif kind == "f" and array.dtype not in (np.float32, np.float64):
        # float16 and longdouble are not supported by numpy.linalg.
        array = array.astype(np.float64)
    elif kind == "c" and array.dtype not in (np.complex64, np.complex128):
        array = array.astype(np.complex128)
    elif kind not in ("f", "c"):
        raise TypeError(f"Matrix entries must be numeric, got dtype {array.dtype}.")

    array.flags.writeable = False
    return array
