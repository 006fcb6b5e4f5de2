# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- board.py  : 行・列・ブロックの取り出し、置ける数字の判定
- parser.py : DataFrame や文字列などから内部表現への変換
"""
