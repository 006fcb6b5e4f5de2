# -*- coding: utf-8 -*-
"""
sudoku_solver.ga パッケージ

遺伝的アルゴリズムによる探索をまとめています。

主に以下の役割を持つモジュールから構成されています。
- fitness.py    : 盤面の評価（重複の個数）
- population.py : 個体と初期個体群の生成（貪欲ランダム埋め）
- operators.py  : トーナメント選択・一様交叉・突然変異
- engine.py     : 世代ループ（エリート保存＋交配）と終了判定
"""
