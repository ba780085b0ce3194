# -*- coding: utf-8 -*-
"""
ビット行列（int のビットマスクを並べたもの）を扱うモジュールです。

主な役割:
- 行方向のビットマスク配列を列方向に転置する（transpose）
- ビットマスクと 0/1 リストの相互変換
- 確定マス数の集計

盤面の状態は常に「行ごとのビットマスク」で保持し、
列方向のビューが必要なときだけ transpose() で作ります。
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..config import LINE_BIT_WIDTH


def full_mask(length: int) -> int:
    """長さ length のラインで、全マスが立ったビットマスクを返します。"""
    return (1 << length) - 1


def transpose(rows: Sequence[int], width: int = LINE_BIT_WIDTH) -> List[int]:
    """
    width x width のビット行列を転置します。

    出力の r 行目のビット c は、入力の c 行目のビット r に等しくなります。
    入力が width 行に満たない場合は 0 の行で埋めて扱い、
    出力は常に width 行になります。

    ブロック単位の入れ替え（16, 8, 4, 2, 1 ビット）で計算するので、
    1マスずつ見るより少ない演算回数で済みます。

    Parameters
    ----------
    rows : sequence of int
        行ごとのビットマスク。
    width : int
        行列の一辺。2 のべき乗である必要があります。

    Returns
    -------
    list of int
        転置後の行ごとのビットマスク（長さ width）。
    """
    if width <= 0 or width & (width - 1):
        raise ValueError(f"width must be a power of two, got {width}")
    if len(rows) > width:
        raise ValueError(f"bit matrix has {len(rows)} rows, more than width={width}")

    limit = full_mask(width)
    a = [r & limit for r in rows]
    a.extend([0] * (width - len(a)))

    j = width >> 1
    m = full_mask(j)
    while j:
        k = 0
        while k < width:
            for i in range(k, k + j):
                t = ((a[i] >> j) ^ a[i + j]) & m
                a[i] ^= t << j
                a[i + j] ^= t
            k += j << 1
        j >>= 1
        m ^= m << j

    return a


def mask_to_cells(mask: int, length: int) -> List[int]:
    """ビットマスクを、先頭マスから順に 0/1 を並べたリストに変換します。"""
    return [(mask >> i) & 1 for i in range(length)]


def cells_to_mask(cells: Iterable[int]) -> int:
    """0/1 のリスト（先頭マスから順）をビットマスクに変換します。"""
    mask = 0
    for i, v in enumerate(cells):
        if v:
            mask |= 1 << i
    return mask


def count_bits(masks: Iterable[int]) -> int:
    """ビットマスク列に立っているビットの総数を返します。"""
    return sum(m.bit_count() for m in masks)
