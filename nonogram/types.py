# -*- coding: utf-8 -*-
"""
nonogram solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

ビットマスクの約束
------------------
1ライン（行または列）は int のビットマスクで表します。
ビット i がライン上の i 番目のマスに対応します（最下位ビット = 先頭のマス）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

# 1ライン分のヒント（ブロック長の並び）。空タプルは「全部空白」のライン。
Constraint = Tuple[int, ...]

# 解の状態
SOLVED = "solved"
CONTRADICTION = "contradiction"
STUCK = "stuck"

# 伝播ループのフェーズ
ROW_PHASE = "row_phase"
COL_PHASE = "col_phase"


@dataclass(frozen=True)
class Dimensions:
    """
    盤面の大きさを表すクラスです。

    Attributes
    ----------
    rows : int
        行数（縦のマス数）。
    cols : int
        列数（横のマス数）。
    """

    rows: int
    cols: int

    @property
    def cells(self) -> int:
        return self.rows * self.cols

    def __str__(self) -> str:
        # 外部とのやり取りでは "<cols>x<rows>" 形式を使う
        return f"{self.cols}x{self.rows}"


@dataclass(frozen=True)
class Constraints:
    """
    全ての行・列のヒントをまとめたクラスです。

    Attributes
    ----------
    row_constraints : list of tuple[int, ...]
        上の行から順に並べた各行のヒント。
    col_constraints : list of tuple[int, ...]
        左の列から順に並べた各列のヒント。
    """

    row_constraints: List[Constraint]
    col_constraints: List[Constraint]

    @classmethod
    def from_lists(
        cls,
        row_constraints: Sequence[Sequence[int]],
        col_constraints: Sequence[Sequence[int]],
    ) -> "Constraints":
        """list の list からタプル化した Constraints を作ります。"""
        return cls(
            row_constraints=[tuple(int(v) for v in c) for c in row_constraints],
            col_constraints=[tuple(int(v) for v in c) for c in col_constraints],
        )

    def dimensions(self) -> Dimensions:
        """ヒントの本数から盤面サイズを推定します。"""
        return Dimensions(rows=len(self.row_constraints), cols=len(self.col_constraints))


@dataclass
class SolveResult:
    """
    Board.solve() の結果を表すクラスです。

    Attributes
    ----------
    status : str
        "solved" / "contradiction" / "stuck" のいずれか。
    filled : list[int]
        行ごとの「塗られていることが確定したマス」のビットマスク。
    known : list[int]
        行ごとの「状態が確定したマス」のビットマスク。
        filled は常に known の部分集合です。
    dimensions : Dimensions
        盤面サイズ。
    passes : int
        実行した行・列ペアのパス数。

    status が "contradiction" の場合、どのマスも信頼できないため
    filled / known はすべて 0 になります。
    """

    status: str
    filled: List[int]
    known: List[int]
    dimensions: Dimensions
    passes: int = 0
    message: str = field(default="")

    @property
    def is_solved(self) -> bool:
        return self.status == SOLVED

    def cell(self, row: int, col: int) -> Optional[int]:
        """マス (row, col) の状態を 1（塗り）/ 0（空白）/ None（未確定）で返します。"""
        bit = 1 << col
        if not self.known[row] & bit:
            return None
        return 1 if self.filled[row] & bit else 0

    def grid(self) -> List[List[Optional[int]]]:
        """盤面全体を cell() の値の2次元リストとして返します。"""
        return [
            [self.cell(r, c) for c in range(self.dimensions.cols)]
            for r in range(self.dimensions.rows)
        ]
