# -*- coding: utf-8 -*-
"""
nonogram.csp パッケージ

制約伝播によるノノグラムの解法をまとめています。

主に以下の役割を持つモジュールから構成されています。
- candidates.py  : 1ライン分の候補（配置パターン）の列挙
- consensus.py   : 候補の絞り込みと、残った候補の合意
- line_state.py  : 1ライン分の確定情報のインターフェースと実装
- propagation.py : 行・列を交互に伝播させる Board
"""
