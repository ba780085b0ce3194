# -*- coding: utf-8 -*-
"""
制約伝播（propagation）で盤面を解くモジュールです。

Board は盤面全体の状態を一手に持ち、

1. 行フェーズ: 各行の候補を現在の盤面で絞り込み、合意したマスを盤面に書き込む
2. 列フェーズ: 盤面を転置して列ごとに同じことを行い、結果を転置して戻す

を交互に繰り返します。1回の「行 + 列」のペアを1パスと呼びます。

状態の持ち方
------------
- filled[r] : r 行目で塗りが確定したマスのビットマスク
- known[r]  : r 行目で状態が確定したマスのビットマスク

列方向の状態は保持せず、必要になるたびに transpose() で作ります。
（行と列で二重に持つと、どちらが正しいのかわからなくなるため）

終了条件
--------
- known が全マス埋まった              → SOLVED
- 候補が空になった / 確定マスが食い違った → CONTRADICTION
- 1パスで新しく確定したマスが無い        → STUCK

known はビットが増える一方で、候補集合は減る一方なので、
確定マスが増えないパスが来た時点で必ず止まります。
各パスで少なくとも1マスは確定するため、パス数は rows * cols + 1 を超えません。

STUCK は「伝播だけでは決まらない」盤面（解が複数ある等）で、
仮置き・分岐による探索はここでは行いません。
"""

from __future__ import annotations

from typing import List, Optional, Set, Tuple, Type

from ..config import LINE_BIT_WIDTH, MAX_CANDIDATES_PER_BOARD, MAX_CANDIDATES_PER_LINE
from ..errors import (
    CandidateLimitExceeded,
    ConstraintCountMismatch,
    ContradictionError,
    DimensionOverflow,
    InvalidConstraint,
)
from ..grid.bitmatrix import count_bits, full_mask, transpose
from ..logging_utils import get_logger
from ..types import (
    COL_PHASE,
    CONTRADICTION,
    ROW_PHASE,
    SOLVED,
    STUCK,
    Constraint,
    Constraints,
    Dimensions,
    SolveResult,
)
from .candidates import count_candidates, generate_candidates
from .line_state import BitLineState, LineState

logger = get_logger()


def validate_inputs(
    constraints: Constraints,
    dimensions: Dimensions,
    width: int = LINE_BIT_WIDTH,
) -> None:
    """
    盤面構築前の前提条件をチェックします。

    Raises
    ------
    DimensionOverflow
        行数・列数が [1, width] の範囲外。
    ConstraintCountMismatch
        ヒントの本数が行数・列数と一致しない。
    InvalidConstraint
        ブロック長に 1 未満の値がある。
    """
    for name, value in (("rows", dimensions.rows), ("cols", dimensions.cols)):
        if not isinstance(value, int) or value < 1 or value > width:
            raise DimensionOverflow(
                f"{name}={value!r} is outside the supported range [1, {width}]"
            )

    if len(constraints.row_constraints) != dimensions.rows:
        raise ConstraintCountMismatch(
            f"Expected {dimensions.rows} row constraints, "
            f"got {len(constraints.row_constraints)}"
        )
    if len(constraints.col_constraints) != dimensions.cols:
        raise ConstraintCountMismatch(
            f"Expected {dimensions.cols} column constraints, "
            f"got {len(constraints.col_constraints)}"
        )

    for axis, lines in (("row", constraints.row_constraints), ("column", constraints.col_constraints)):
        for idx, line in enumerate(lines):
            if any(v < 1 for v in line):
                raise InvalidConstraint(
                    f"{axis} {idx}: run lengths must be >= 1, got {list(line)}"
                )


def check_candidate_budget(
    constraints: Constraints,
    dimensions: Dimensions,
    max_candidates: int = MAX_CANDIDATES_PER_LINE,
    max_board_candidates: int = MAX_CANDIDATES_PER_BOARD,
) -> int:
    """
    列挙せずに各ラインの候補数を数え、上限を超えていないかチェックします。

    Returns
    -------
    int
        盤面全体の候補数の合計。

    Raises
    ------
    CandidateLimitExceeded
        1ラインの候補数が max_candidates を、
        または合計が max_board_candidates を超える場合。
    """
    total = 0
    for axis, length, lines in (
        ("row", dimensions.cols, constraints.row_constraints),
        ("column", dimensions.rows, constraints.col_constraints),
    ):
        for idx, line in enumerate(lines):
            n = count_candidates(length, line)
            if n > max_candidates:
                raise CandidateLimitExceeded(
                    f"{axis} {idx}: {list(line)} has {n} candidates (limit {max_candidates})"
                )
            total += n

    if total > max_board_candidates:
        raise CandidateLimitExceeded(
            f"Board {dimensions} has {total} candidates in total (limit {max_board_candidates})"
        )
    return total


class Board:
    """
    行・列の交互伝播で盤面を解くクラスです。

    Parameters
    ----------
    constraints : Constraints
        全ての行・列のヒント。
    dimensions : Dimensions, optional
        盤面サイズ。省略時はヒントの本数から決めます。
    line_state_cls : type of LineState
        1ライン分の確定情報の実装。
    max_candidates : int
        1ラインあたりの候補数の安全上限。
    max_board_candidates : int
        盤面全体の候補数の合計の安全上限。
    """

    def __init__(
        self,
        constraints: Constraints,
        dimensions: Optional[Dimensions] = None,
        line_state_cls: Type[LineState] = BitLineState,
        max_candidates: int = MAX_CANDIDATES_PER_LINE,
        max_board_candidates: int = MAX_CANDIDATES_PER_BOARD,
    ) -> None:
        dims = dimensions or constraints.dimensions()
        validate_inputs(constraints, dims)
        check_candidate_budget(constraints, dims, max_candidates, max_board_candidates)

        self.dimensions = dims
        self.row_constraints: List[Constraint] = [tuple(c) for c in constraints.row_constraints]
        self.col_constraints: List[Constraint] = [tuple(c) for c in constraints.col_constraints]
        self._line_state_cls = line_state_cls

        # 各ラインの候補集合（以降は絞り込みで減る一方）
        self._row_candidates: List[Set[int]] = [
            set(generate_candidates(dims.cols, c, max_candidates)) for c in self.row_constraints
        ]
        self._col_candidates: List[Set[int]] = [
            set(generate_candidates(dims.rows, c, max_candidates)) for c in self.col_constraints
        ]

        self._filled: List[int] = [0] * dims.rows
        self._known: List[int] = [0] * dims.rows

        self.phase: str = ROW_PHASE
        self.status: Optional[str] = None
        self.message: str = ""
        self.passes: int = 0

        logger.debug(
            "Board %s built: %d row candidates, %d column candidates",
            dims,
            sum(len(c) for c in self._row_candidates),
            sum(len(c) for c in self._col_candidates),
        )

    # ------------------------------------------------------------------
    # 読み取り用
    # ------------------------------------------------------------------
    @property
    def filled(self) -> List[int]:
        return list(self._filled)

    @property
    def known(self) -> List[int]:
        return list(self._known)

    def snapshot(self) -> Tuple[List[int], List[int]]:
        """(filled, known) のコピーを返します。"""
        return list(self._filled), list(self._known)

    def candidate_counts(self) -> Tuple[List[int], List[int]]:
        """行ごと・列ごとの残り候補数を返します。"""
        return (
            [len(c) for c in self._row_candidates],
            [len(c) for c in self._col_candidates],
        )

    def known_count(self) -> int:
        return count_bits(self._known)

    def is_fully_known(self) -> bool:
        row_full = full_mask(self.dimensions.cols)
        return all(k == row_full for k in self._known)

    # ------------------------------------------------------------------
    # 伝播
    # ------------------------------------------------------------------
    def _line_views(self, phase: str) -> Tuple[List[int], List[int], List[Set[int]], int]:
        """フェーズに応じて、ラインごとの (filled, known, 候補, ライン長) を返します。"""
        if phase == ROW_PHASE:
            return list(self._filled), list(self._known), self._row_candidates, self.dimensions.cols

        cols = self.dimensions.cols
        return (
            transpose(self._filled)[:cols],
            transpose(self._known)[:cols],
            self._col_candidates,
            self.dimensions.rows,
        )

    def run_phase(self, phase: str) -> None:
        """
        行または列のフェーズを1回実行します。

        Raises
        ------
        ContradictionError
            いずれかのラインで候補が空になった、または合意が確定マスと食い違った場合。
        """
        self.phase = phase
        line_filled, line_known, candidates, length = self._line_views(phase)
        axis = "row" if phase == ROW_PHASE else "column"

        new_filled: List[int] = []
        new_known: List[int] = []
        for idx, cands in enumerate(candidates):
            state = self._line_state_cls(length, line_filled[idx], line_known[idx])

            remaining = state.filter(cands)
            if not remaining:
                raise ContradictionError(f"{axis} {idx}: no candidate is compatible with the board")
            candidates[idx] = remaining

            try:
                merged = state.merge(state.consensus(remaining))
            except ContradictionError as e:
                raise ContradictionError(f"{axis} {idx}: {e}") from e

            new_filled.append(merged.filled)
            new_known.append(merged.known)

        if phase == COL_PHASE:
            rows = self.dimensions.rows
            new_filled = transpose(new_filled)[:rows]
            new_known = transpose(new_known)[:rows]

        self._filled = new_filled
        self._known = new_known

    def run_pass(self) -> Optional[str]:
        """
        行フェーズ → 列フェーズの1パスを実行します。

        Returns
        -------
        str or None
            終了状態になった場合はその状態（"solved" など）、続行できる場合は None。
        """
        if self.status is not None:
            return self.status

        before = self.known_count()
        try:
            self.run_phase(ROW_PHASE)
            self.run_phase(COL_PHASE)
            self.passes += 1

            if self.is_fully_known():
                # 列フェーズで埋まったマスが行のヒントも満たしているか確認する
                self.run_phase(ROW_PHASE)
                return self._finish(SOLVED)
        except ContradictionError as e:
            return self._finish(CONTRADICTION, str(e))

        after = self.known_count()
        logger.debug("pass %d: known %d -> %d / %d", self.passes, before, after, self.dimensions.cells)

        if after == before:
            return self._finish(STUCK, "No new cell was determined by propagation")
        return None

    def _finish(self, status: str, message: str = "") -> str:
        self.status = status
        self.message = message
        return status

    def solve(self) -> SolveResult:
        """
        終了状態になるまでパスを繰り返し、結果を1つ返します。

        Raises
        ------
        RuntimeError
            パス数が上限（rows * cols + 1）を超えた場合。
            確定マスは毎パス増えるので、これは実装の不具合を意味します。
        """
        max_passes = self.dimensions.cells + 1
        logger.info("=== solve() START === board=%s", self.dimensions)

        while self.status is None:
            if self.passes >= max_passes:
                raise RuntimeError(
                    f"Propagation did not converge within {max_passes} passes"
                )
            self.run_pass()

        if self.status == STUCK:
            logger.warning(
                "Board %s is stuck after %d passes (%d / %d cells known)",
                self.dimensions, self.passes, self.known_count(), self.dimensions.cells,
            )
        logger.info("=== solve() END === status=%s passes=%d", self.status, self.passes)
        return self.result()

    def result(self) -> SolveResult:
        """現在の終了状態を SolveResult として返します。"""
        if self.status is None:
            raise RuntimeError("Board has not reached a terminal state yet")

        if self.status == CONTRADICTION:
            # 矛盾した盤面のマスはどれも信頼できない
            zeros = [0] * self.dimensions.rows
            return SolveResult(
                status=self.status,
                filled=list(zeros),
                known=list(zeros),
                dimensions=self.dimensions,
                passes=self.passes,
                message=self.message,
            )

        return SolveResult(
            status=self.status,
            filled=self.filled,
            known=self.known,
            dimensions=self.dimensions,
            passes=self.passes,
            message=self.message,
        )
