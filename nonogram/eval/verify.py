# -*- coding: utf-8 -*-
"""
盤面がヒントを満たしているかを検証するモジュールです。

ソルバーの結果（SolveResult）だけでなく、フィクスチャの正解盤面
（0/1 の2次元リストや numpy 配列）もそのまま検証できます。
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ..csp.candidates import runs_from_mask
from ..grid.bitmatrix import cells_to_mask
from ..postprocess.export_result import to_array
from ..types import Constraint, Constraints, SolveResult

GridLike = Union[SolveResult, np.ndarray, Sequence[Sequence[int]]]


def line_runs(line: Sequence[int]) -> Constraint:
    """0/1 の並びからブロック長の並びを求めます。"""
    return runs_from_mask(len(line), cells_to_mask(int(v) for v in line))


def verify_solution(solution: GridLike, constraints: Constraints) -> bool:
    """
    盤面のすべての行・列が、それぞれのヒントを再現するかを判定します。

    未確定のマス（-1）が残っている盤面や、
    status が "solved" でない SolveResult は False になります。
    """
    if isinstance(solution, SolveResult):
        if not solution.is_solved:
            return False
        grid = to_array(solution)
    else:
        grid = np.asarray(solution, dtype=np.int8)

    rows = len(constraints.row_constraints)
    cols = len(constraints.col_constraints)
    if grid.ndim != 2 or grid.shape != (rows, cols):
        return False
    if (grid < 0).any():
        return False

    for r, hint in enumerate(constraints.row_constraints):
        if line_runs(grid[r, :]) != tuple(hint):
            return False

    for c, hint in enumerate(constraints.col_constraints):
        if line_runs(grid[:, c]) != tuple(hint):
            return False

    return True
