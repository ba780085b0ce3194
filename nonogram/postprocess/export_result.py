# -*- coding: utf-8 -*-
"""
SolveResult を外部に渡しやすい形へ変換するモジュールです。

- build_result : JSON にそのまま載せられる dict
- to_array     : numpy 配列（1 = 塗り, 0 = 空白, -1 = 未確定）
- to_frame     : pandas.DataFrame（行・列ラベル付き）
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd

from ..types import SolveResult

UNKNOWN = -1


def to_array(result: SolveResult) -> np.ndarray:
    """
    結果を shape = (rows, cols) の int8 配列に変換します。

    Returns
    -------
    numpy.ndarray
        1（塗り）/ 0（空白）/ -1（未確定）の2次元配列。
    """
    rows, cols = result.dimensions.rows, result.dimensions.cols
    out = np.full((rows, cols), UNKNOWN, dtype=np.int8)

    for r in range(rows):
        for c in range(cols):
            v = result.cell(r, c)
            if v is not None:
                out[r, c] = v

    return out


def to_frame(result: SolveResult) -> pd.DataFrame:
    """結果を DataFrame に変換します。行・列ラベルは 0 始まりの番号です。"""
    return pd.DataFrame(
        to_array(result),
        index=pd.RangeIndex(result.dimensions.rows, name="row"),
        columns=pd.RangeIndex(result.dimensions.cols, name="col"),
    )


def build_result(result: SolveResult) -> Dict[str, Any]:

    grid = to_array(result)

    return {
        "status": result.status,
        "shape": (result.dimensions.rows, result.dimensions.cols),
        "dimensions": str(result.dimensions),
        "filled": list(result.filled),
        "known": list(result.known),
        "grid": grid.tolist(),  # ★ numpy 配列のままだと JSON にできない
        "passes": result.passes,
        "message": result.message,
    }
