# -*- coding: utf-8 -*-
"""
パズルデータ（JSON Lines）を読み込むモジュールです。

今回の仕様：
- 1行に1パズルの JSON があり、"data" の下に
  'solution' / 'hintsX' / 'hintsY' を持つ
  （"data" で包まれていない平たい形式も受け付ける）
- hintsX は各行のヒント、hintsY は各列のヒント
- ヒント中の 0 は「空のライン」を表すので取り除く

戻り値の DataFrame の列：
- name       : パズル名（無ければ "<ファイル名>-<番号>"）
- row_hints  : 行ヒントのリスト（tuple の list）
- col_hints  : 列ヒントのリスト
- solution   : 正解盤面（0/1 の2次元リスト）
- rows, cols : 盤面サイズ
- dimensions : "<cols>x<rows>" 形式の文字列
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence

import pandas as pd

from ..types import Constraint, Constraints, Dimensions

REQUIRED_KEYS = ("solution", "hintsX", "hintsY")


def _normalize_hints(lines: Sequence[Sequence[Any]]) -> List[Constraint]:
    return [tuple(int(v) for v in line if int(v) != 0) for line in lines]


def load_fixtures(path: str | Path) -> pd.DataFrame:
    """
    パズルデータを読み込み、統一フォーマットの DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        JSON Lines ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        モジュール docstring に書いた列を持つ DataFrame。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Fixture file not found: {p}")

    raw = pd.read_json(p, lines=True)

    # "data" で包まれている形式なら中身を取り出す
    if "data" in raw.columns:
        df = pd.DataFrame(list(raw["data"]))
        if "name" in raw.columns:
            df["name"] = raw["name"].values
    else:
        df = raw.copy()

    missing = [k for k in REQUIRED_KEYS if k not in df.columns]
    if missing:
        raise ValueError(f"Fixture file {p} is missing keys: {missing}")

    if "name" not in df.columns:
        df["name"] = [f"{p.stem}-{i}" for i in range(len(df))]

    df["row_hints"] = df["hintsX"].apply(_normalize_hints)
    df["col_hints"] = df["hintsY"].apply(_normalize_hints)
    df["solution"] = df["solution"].apply(lambda grid: [[int(v) for v in row] for row in grid])
    df["rows"] = df["row_hints"].apply(len)
    df["cols"] = df["col_hints"].apply(len)
    df["dimensions"] = df["cols"].astype(str) + "x" + df["rows"].astype(str)

    df = df[["name", "row_hints", "col_hints", "solution", "rows", "cols", "dimensions"]]

    # index を 0 から振り直しておくと扱いやすい
    return df.reset_index(drop=True)


def fixture_constraints(row: pd.Series) -> Constraints:
    """load_fixtures() の1行から Constraints を作ります。"""
    return Constraints.from_lists(row["row_hints"], row["col_hints"])


def fixture_dimensions(row: pd.Series) -> Dimensions:
    return Dimensions(rows=int(row["rows"]), cols=int(row["cols"]))
