# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

# 盤面。shape = (9, 9) の整数配列で、0 は空きマスを表します。
Grid = np.ndarray

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


@dataclass
class GenerationStats:
    """
    1世代分の評価結果です。

    Attributes
    ----------
    generation : int
        世代番号（0 が初期個体群）。
    best_fitness : int
        その世代で最も小さい fitness。
    mean_fitness : float
        その世代の fitness の平均値。
    """

    generation: int
    best_fitness: int
    mean_fitness: float


@dataclass
class SearchResult:
    """
    遺伝的アルゴリズムの探索結果を表すクラスです。

    Attributes
    ----------
    grid : numpy.ndarray
        最終世代で最も良かった個体の盤面。
        converged が False の場合は制約違反を含みます。
    fitness : int
        grid の fitness（0 なら正解）。
    generations : int
        収束した世代番号、または世代上限に達したときの世代数。
    converged : bool
        fitness 0 の個体が見つかったかどうか。
    history : list of GenerationStats
        評価した各世代の統計。
    """

    grid: Grid
    fitness: int
    generations: int
    converged: bool
    history: List[GenerationStats] = field(default_factory=list)
