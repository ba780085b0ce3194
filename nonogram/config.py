# -*- coding: utf-8 -*-
"""
nonogram 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 1ライン分のビット幅（盤面サイズの上限）
- 1ライン・盤面全体あたりの候補数の安全上限
- ヒント文字列の区切り文字
- ベンチマークの繰り返し回数
などを簡単に変更できます。
"""

from __future__ import annotations

# ==== 盤面サイズ関連 =======================================================

# 1ライン（行・列）を表すビットマスクの幅。
# 行数・列数はどちらもこの値以下でなければなりません。
LINE_BIT_WIDTH: int = 32

# ==== 候補生成関連 =========================================================

# 1ラインに対して生成してよい候補（配置パターン）の最大数。
# 候補数はヒントの個数と余白に対して二項係数で増えるため、
# これを超える場合は盤面構築時にエラーとします。
# 32 マスの最悪ケース（1 が 9 個）は約 130 万になるので、そういうラインは拒否します。
MAX_CANDIDATES_PER_LINE: int = 100_000

# 盤面全体（全ての行・列の合計）で生成してよい候補数の上限。
# 列挙を始める前に count_candidates() で合計を出してチェックします。
MAX_CANDIDATES_PER_BOARD: int = 1_000_000

# 配置パターンのキャッシュに残す (ライン長, ヒント) の組の数
PLACEMENT_CACHE_SIZE: int = 128

# ==== ヒント文字列関連 =====================================================

# ライン同士の区切り文字（例: "1,2;3"）
LINE_SEPARATOR: str = ";"

# 1ライン内のブロック長の区切り文字
RUN_SEPARATOR: str = ","

# 盤面サイズ文字列の区切り文字（"<cols>x<rows>"）
DIMENSION_SEPARATOR: str = "x"

# ==== ベンチマーク関連 =====================================================

# 1パズルあたりの計測回数
BENCH_DEFAULT_REPEAT: int = 3
