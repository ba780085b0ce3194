# -*- coding: utf-8 -*-
"""
nonogram.grid パッケージ

盤面（グリッド）の表現に関する処理をまとめたサブパッケージです。
- parser.py    : ヒント文字列・盤面サイズ文字列から内部表現への変換
- bitmatrix.py : 行ビットマスク配列の転置などのビット演算
"""
