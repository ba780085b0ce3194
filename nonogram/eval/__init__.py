# -*- coding: utf-8 -*-
"""
nonogram.eval パッケージ

解の検証（verify.py）と、処理時間の計測（benchmark.py）をまとめています。
"""
