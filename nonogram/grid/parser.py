# -*- coding: utf-8 -*-
"""
ヒント文字列・盤面サイズ文字列を内部表現に変換するモジュールです。

ヒント文字列の形式
------------------
- ライン同士は ";" で区切る
- 1ライン内のブロック長は "," で区切る
- 空のライン（または "0"）は「全部空白」のラインを表す

例: "2,2;4;1;2,1;1"  → [(2, 2), (4,), (1,), (2, 1), (1,)]

盤面サイズ文字列は "<cols>x<rows>" 形式です（例: "4x2" は 4 列 2 行）。

ソルバー本体（csp パッケージ）は文字列を一切扱わず、
ここで作った Constraints / Dimensions だけを受け取ります。
"""

from __future__ import annotations

from typing import List, Sequence

from ..config import DIMENSION_SEPARATOR, LINE_SEPARATOR, RUN_SEPARATOR
from ..errors import HintParseError
from ..types import Constraint, Dimensions


def parse_line(text: str) -> Constraint:
    """
    1ライン分のヒント文字列（例: "2,1"）をタプルに変換します。

    "0" は、それがラインの唯一のトークンのときだけ空ラインとして受け付けます。
    """
    tokens = [t.strip() for t in text.split(RUN_SEPARATOR)]
    tokens = [t for t in tokens if t]

    runs: List[int] = []
    for token in tokens:
        if not token.isdigit():
            raise HintParseError(f"Invalid run length {token!r} in line {text!r}")
        value = int(token)
        if value == 0:
            if len(tokens) > 1:
                raise HintParseError(f"\"0\" must be the only run in line {text!r}")
            continue
        runs.append(value)
    return tuple(runs)


def parse_hints(text: str) -> List[Constraint]:
    """
    ヒント文字列全体をライン単位に分割して変換します。

    Parameters
    ----------
    text : str
        ";" 区切りのヒント文字列。

    Returns
    -------
    list of tuple[int, ...]
        ラインごとのヒント。
    """
    if text is None:
        raise HintParseError("Hint string must not be None")
    return [parse_line(part) for part in text.strip().split(LINE_SEPARATOR)]


def format_hints(constraints: Sequence[Sequence[int]]) -> str:
    """parse_hints() の逆変換です。"""
    return LINE_SEPARATOR.join(
        RUN_SEPARATOR.join(str(v) for v in line) for line in constraints
    )


def parse_dimensions(text: str) -> Dimensions:
    """
    "<cols>x<rows>" 形式の文字列を Dimensions に変換します。

    大文字の "X" も受け付けます。値の範囲チェック（ビット幅との比較）は
    盤面構築時に行います。
    """
    parts = text.strip().lower().split(DIMENSION_SEPARATOR)
    if len(parts) != 2:
        raise HintParseError(f"Dimensions must look like '<cols>x<rows>', got {text!r}")

    cols_s, rows_s = (p.strip() for p in parts)
    if not cols_s.isdigit() or not rows_s.isdigit():
        raise HintParseError(f"Dimensions must be positive integers, got {text!r}")

    return Dimensions(rows=int(rows_s), cols=int(cols_s))
