# -*- coding: utf-8 -*-
"""
nonogram.fixtures パッケージ

回帰テスト・ベンチマーク用のパズルデータ（JSON Lines）の読み込みを行います。
"""
