# -*- coding: utf-8 -*-
"""
1ライン分の候補（配置パターン）を列挙するモジュールです。

ヒント (r_1, ..., r_n) をライン長 L に置く方法は、
各ブロックの後ろに必須の空白を1マス付けて（最後のブロックを除く）
固定長の塊とみなすと、

    必須マス数  = r_1 + ... + r_n + (n - 1)
    余白        = L - 必須マス数

となり、余白を n + 1 個の隙間（先頭・ブロック間・末尾）に配る方法の数、
つまり「free + n 個の枠から n 個の仕切り位置を選ぶ」組合せ（stars and bars）
になります。

計算量
------
候補数は comb(free + n, n) で、余白とブロック数に対して二項係数的に増えます。
32 マスのラインでは最悪で百数十万程度になるため、
config.MAX_CANDIDATES_PER_LINE を超える場合は列挙前にエラーにします。
"""

from __future__ import annotations

from functools import lru_cache
from itertools import combinations
from math import comb
from typing import FrozenSet, Sequence, Tuple

from ..config import MAX_CANDIDATES_PER_LINE, PLACEMENT_CACHE_SIZE
from ..errors import CandidateLimitExceeded, InvalidConstraint
from ..types import Constraint


def _normalize(constraint: Sequence[int]) -> Constraint:
    runs = tuple(int(v) for v in constraint)
    for v in runs:
        if v < 1:
            raise InvalidConstraint(f"Run lengths must be >= 1, got {list(runs)}")
    return runs


def free_slack(length: int, constraint: Sequence[int]) -> int:
    """
    ライン長から必須マス数を引いた余白を返します。

    負の値は「このライン長ではヒントを満たせない」ことを意味します。
    """
    runs = _normalize(constraint)
    if not runs:
        return length
    return length - (sum(runs) + len(runs) - 1)


def count_candidates(length: int, constraint: Sequence[int]) -> int:
    """列挙せずに候補数だけを計算します。"""
    runs = _normalize(constraint)
    if not runs:
        return 1
    free = free_slack(length, runs)
    if free < 0:
        return 0
    return comb(free + len(runs), len(runs))


@lru_cache(maxsize=PLACEMENT_CACHE_SIZE)
def _placements(length: int, runs: Constraint) -> Tuple[int, ...]:
    n = len(runs)
    free = free_slack(length, runs)
    out = []

    for dividers in combinations(range(free + n), n):
        mask = 0
        pos = 0
        prev = -1
        for run, d in zip(runs, dividers):
            # 直前の仕切りとの間にある枠の数が、このブロック前の余白
            pos += d - prev - 1
            mask |= ((1 << run) - 1) << pos
            pos += run + 1
            prev = d
        out.append(mask)

    return tuple(out)


def generate_candidates(
    length: int,
    constraint: Sequence[int],
    max_candidates: int = MAX_CANDIDATES_PER_LINE,
) -> FrozenSet[int]:
    """
    ヒントをライン長 length に置く全ての配置をビットマスクで返します。

    Parameters
    ----------
    length : int
        ラインのマス数。
    constraint : sequence of int
        ブロック長の並び。空なら「全部空白」の1候補だけを返します。
    max_candidates : int
        候補数の安全上限。

    Returns
    -------
    frozenset of int
        候補のビットマスク集合。必須マス数が length を超える場合は空集合
        （エラーではなく、Board 側で矛盾として扱われます）。

    Raises
    ------
    InvalidConstraint
        ブロック長に 1 未満の値が含まれる場合。
    CandidateLimitExceeded
        候補数が max_candidates を超える場合。
    """
    runs = _normalize(constraint)
    if not runs:
        return frozenset((0,))

    if free_slack(length, runs) < 0:
        return frozenset()

    total = count_candidates(length, runs)
    if total > max_candidates:
        raise CandidateLimitExceeded(
            f"Constraint {list(runs)} on a line of length {length} has "
            f"{total} candidates (limit {max_candidates})"
        )

    return frozenset(_placements(length, runs))


def runs_from_mask(length: int, mask: int) -> Constraint:
    """ビットマスクからブロック長の並び（ヒント）を復元します。"""
    out = []
    run = 0
    for i in range(length):
        if mask & (1 << i):
            run += 1
        elif run:
            out.append(run)
            run = 0
    if run:
        out.append(run)
    return tuple(out)
