# -*- coding: utf-8 -*-
"""
1ライン分の候補集合に対する「絞り込み」と「合意（consensus）」を行うモジュールです。

- is_compatible / filter_candidates :
    現在確定しているマスと食い違う候補を捨てる
- consensus :
    残った候補すべてで塗り（または空白）になっているマスを求める

どちらもビット演算だけで完結するので、1ラインあたり
「候補数 x 数回の AND / OR」程度の計算量です。
"""

from __future__ import annotations

from typing import Iterable, Set, Tuple

from ..errors import ContradictionError
from ..grid.bitmatrix import full_mask


def is_compatible(candidate: int, line_filled: int, line_known: int) -> bool:
    """
    候補が、確定済みのマスとすべて一致しているかを判定します。

    known のビットが立っているマスについて、
    filled も立っていれば候補でも塗り、立っていなければ候補でも空白
    である必要があります。
    """
    return ((candidate ^ line_filled) & line_known) == 0


def filter_candidates(
    candidates: Iterable[int],
    line_filled: int,
    line_known: int,
) -> Set[int]:
    """確定済みのマスと両立する候補だけを残した集合を返します。"""
    if not line_known:
        return set(candidates)
    return {c for c in candidates if is_compatible(c, line_filled, line_known)}


def consensus(candidates: Iterable[int], length: int) -> Tuple[int, int]:
    """
    候補集合の合意をとります。

    Parameters
    ----------
    candidates : iterable of int
        残っている候補のビットマスク。
    length : int
        ラインのマス数。

    Returns
    -------
    forced_filled : int
        全候補で塗りになっているマス。
    certain : int
        全候補で値が一致しているマス（forced_filled | forced_empty）。

    Raises
    ------
    ContradictionError
        候補が1つも残っていない場合。
        「全部空白」とみなして続行すると矛盾を見逃すため、必ず例外にします。
    """
    limit = full_mask(length)
    all_filled = limit
    any_filled = 0
    seen = False

    for c in candidates:
        all_filled &= c
        any_filled |= c
        seen = True

    if not seen:
        raise ContradictionError("No candidate left for line")

    forced_empty = ~any_filled & limit
    return all_filled, all_filled | forced_empty
