# -*- coding: utf-8 -*-
"""
1ライン分の「わかっていること」を表すクラスをまとめたモジュールです。

Board（伝播ループ）が1ラインに対して必要とする操作は

- この候補は、今わかっていることと両立するか（is_compatible / filter）
- 残った候補がすべて合意しているマスはどこか（consensus）
- 新しくわかったことを取り込む（merge）

の3つだけなので、LineState という小さなインターフェースにまとめています。
現在の実装は、ビット幅以内のラインを int のペアで表す BitLineState だけです。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Set

from ..errors import ContradictionError
from ..grid.bitmatrix import full_mask
from .consensus import consensus, is_compatible


class LineState(ABC):
    """1ライン分の確定情報のインターフェース。"""

    length: int

    @abstractmethod
    def is_compatible(self, candidate: int) -> bool:
        raise NotImplementedError

    def filter(self, candidates: Iterable[int]) -> Set[int]:
        """is_compatible() を満たす候補だけを残します。"""
        return {c for c in candidates if self.is_compatible(c)}

    @abstractmethod
    def consensus(self, candidates: Iterable[int]) -> "LineState":
        """候補集合の合意を、同じ型の LineState として返します。"""
        raise NotImplementedError

    @abstractmethod
    def merge(self, other: "LineState") -> "LineState":
        """
        2つの確定情報を合わせた LineState を返します。

        同じマスについて塗り / 空白が食い違う場合は ContradictionError。
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def known_count(self) -> int:
        raise NotImplementedError

    @property
    def is_complete(self) -> bool:
        return self.known_count == self.length


@dataclass(frozen=True)
class BitLineState(LineState):
    """
    ビットマスクのペアで表した LineState です。

    Attributes
    ----------
    length : int
        ラインのマス数。
    filled : int
        塗りが確定したマス。
    known : int
        状態が確定したマス。filled は known の部分集合。
    """

    length: int
    filled: int = 0
    known: int = 0

    def __post_init__(self) -> None:
        if self.filled & ~self.known:
            raise ValueError("filled bits must be a subset of known bits")
        if self.known & ~full_mask(self.length):
            raise ValueError(f"known bits exceed line length {self.length}")

    def is_compatible(self, candidate: int) -> bool:
        return is_compatible(candidate, self.filled, self.known)

    def consensus(self, candidates: Iterable[int]) -> "BitLineState":
        forced_filled, certain = consensus(candidates, self.length)
        return BitLineState(self.length, forced_filled, certain)

    def merge(self, other: LineState) -> "BitLineState":
        if not isinstance(other, BitLineState):
            raise TypeError(f"Cannot merge BitLineState with {type(other).__name__}")
        if other.length != self.length:
            raise ValueError(f"Line length mismatch: {self.length} != {other.length}")

        both = self.known & other.known
        if (self.filled ^ other.filled) & both:
            raise ContradictionError("Merge would flip an already known cell")

        return BitLineState(
            self.length,
            self.filled | other.filled,
            self.known | other.known,
        )

    @property
    def known_count(self) -> int:
        return self.known.bit_count()
