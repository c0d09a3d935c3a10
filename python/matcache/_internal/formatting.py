from __future__ import annotations

from typing import Any, TextIO

import numpy as np

_EDGE_ITEMS: int = 4


def configure(*, edge_items: int = 4) -> None:
    global _EDGE_ITEMS
    if int(edge_items) < 1:
        raise ValueError("edge_items must be at least 1")
    _EDGE_ITEMS = int(edge_items)


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, complex):
        return f"{value.real:g}{value.imag:+g}i"
    return str(value)


def _format_matrix_row(
    matrix: np.ndarray,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(matrix[row_index, col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(matrix[row_index, col]) for col in col_tail)
    return " ".join(entries)


def matrix_str(matrix: np.ndarray, *, name: str = "Matrix") -> str:
    if matrix.ndim != 2:
        return f"{name}(shape={matrix.shape})\n{matrix!s}"

    rows, cols = matrix.shape
    header = f"{name}(shape=({rows}, {cols}), dtype={matrix.dtype})"

    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(matrix, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


def write_table(matrix: Any, file: TextIO) -> None:
    """Write ``matrix`` as a quoted header line plus one numbered line per row.

    Columns are labelled V1..Vn and rows 1..m; values are written in full
    precision.
    """

    array = np.asarray(matrix)
    if array.ndim == 1:
        array = array[:, np.newaxis]
    cols = array.shape[1]
    file.write(" ".join(f'"V{j + 1}"' for j in range(cols)) + "\n")
    for i, row in enumerate(array):
        values = " ".join(repr(v.item()) for v in row)
        file.write(f'"{i + 1}" {values}\n')
