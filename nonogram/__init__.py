# -*- coding: utf-8 -*-
"""
nonogram パッケージの入口となるモジュールです。

webapp/web_app.py などから:

    from nonogram import solve_from_strings

と呼び出されることを想定しています。

ここでは、ヒント（構造化済み、または文字列）を受け取り、
1. ヒント文字列・盤面サイズのパース（文字列で渡された場合）
2. 盤面サイズ・ヒント本数のチェック
3. 各ラインの候補生成
4. 行・列の交互伝播
5. 結果（SolveResult）の構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Optional, Sequence

from .csp.propagation import Board
from .errors import (
    CandidateLimitExceeded,
    ConstraintCountMismatch,
    ContradictionError,
    DimensionOverflow,
    HintParseError,
    InvalidConstraint,
)
from .grid.parser import parse_dimensions, parse_hints
from .logging_utils import get_logger
from .types import (
    CONTRADICTION,
    SOLVED,
    STUCK,
    Constraints,
    Dimensions,
    SolveResult,
)

logger = get_logger()

__all__ = [
    "Board",
    "Constraints",
    "Dimensions",
    "SolveResult",
    "SOLVED",
    "CONTRADICTION",
    "STUCK",
    "CandidateLimitExceeded",
    "ConstraintCountMismatch",
    "ContradictionError",
    "DimensionOverflow",
    "HintParseError",
    "InvalidConstraint",
    "solve",
    "solve_from_strings",
]


def solve(
    row_constraints: Sequence[Sequence[int]],
    col_constraints: Sequence[Sequence[int]],
    dimensions: Optional[Dimensions] = None,
) -> SolveResult:
    """
    構造化済みのヒントからノノグラムを解くメイン関数です。

    Parameters
    ----------
    row_constraints : list of list[int]
        上の行から順に、各行のブロック長の並び。
    col_constraints : list of list[int]
        左の列から順に、各列のブロック長の並び。
    dimensions : Dimensions, optional
        盤面サイズ。省略時はヒントの本数から決めます。

    Returns
    -------
    SolveResult
        status が "solved" / "contradiction" / "stuck" のいずれかの結果。

    Raises
    ------
    DimensionOverflow, ConstraintCountMismatch, InvalidConstraint, CandidateLimitExceeded
        盤面構築前の前提条件を満たさない場合。
    """
    constraints = Constraints.from_lists(row_constraints, col_constraints)
    return Board(constraints, dimensions).solve()


def solve_from_strings(
    row_hints: str,
    col_hints: str,
    dimensions: Optional[str] = None,
) -> SolveResult:
    """
    ヒント文字列（例: "1,2;3"）と盤面サイズ文字列（例: "4x2"）から解きます。

    dimensions を省略した場合は、ヒントの本数から盤面サイズを決めます。
    """
    rows = parse_hints(row_hints)
    cols = parse_hints(col_hints)
    dims = parse_dimensions(dimensions) if dimensions else None

    logger.info("Parsed hints: %d rows, %d cols (dimensions=%s)", len(rows), len(cols), dimensions)
    return solve(rows, cols, dims)
