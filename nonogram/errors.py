# -*- coding: utf-8 -*-
"""
nonogram で使う例外クラスをまとめたモジュールです。

盤面構築前に検出できる「前提条件の違反」はすべて ValueError の
サブクラスとして定義しているので、呼び出し側は

    except ValueError:

でまとめて捕まえることができます。

一方、伝播中に見つかる矛盾（ContradictionError）は Board の内部で
捕まえられ、SolveResult.status = "contradiction" として返されます。
"""

from __future__ import annotations


class DimensionOverflow(ValueError):
    """行数・列数が 1 未満、またはビット幅を超えている。"""


class ConstraintCountMismatch(ValueError):
    """ヒントの本数が行数・列数と一致しない。"""


class InvalidConstraint(ValueError):
    """ブロック長に 1 未満の値が含まれている。"""


class CandidateLimitExceeded(ValueError):
    """1ラインの候補数が設定された安全上限を超えている。"""


class HintParseError(ValueError):
    """ヒント文字列・盤面サイズ文字列の形式が不正。"""


class ContradictionError(Exception):
    """
    伝播中に矛盾が見つかったことを表す例外です。

    - あるラインの候補集合が空になった
    - 既に確定しているマスを、逆の値で上書きしようとした

    のどちらかで送出されます。
    """
