# -*- coding: utf-8 -*-
"""
遺伝的アルゴリズムの演算子（選択・交叉・突然変異）をまとめたモジュールです。

どの演算子も問題盤面の固定マス（最初から数字が入っているマス）は書き換えません。
乱数はすべて引数の rng から引くので、シードを固定すれば結果を再現できます。
"""

from __future__ import annotations

import random
from typing import List

from ..config import GA_TOURNAMENT_SIZE
from ..grid.board import copy_grid, fixed_mask, free_cells, possible_values
from ..types import Grid
from .population import Individual


def tournament_selection(
    population: List[Individual],
    rng: random.Random,
    tournament_size: int = GA_TOURNAMENT_SIZE,
) -> Individual:
    """
    トーナメント選択: ランダムに選んだ個体の中で最良のものを返す

    tournament_size 個を「復元抽出」で選ぶので、同じ個体が複数回選ばれることもあります。
    fitness が同じ場合は先に選ばれた方を返します。個体群は書き換えません。
    """
    fittest = population[rng.randrange(len(population))]
    for _ in range(tournament_size - 1):
        challenger = population[rng.randrange(len(population))]
        if challenger.fitness < fittest.fitness:
            fittest = challenger
    return fittest


def crossover(parent1: Grid, parent2: Grid, puzzle: Grid, rng: random.Random) -> Grid:
    """
    一様交叉: 2つの親から子の盤面を生成

    固定マスは問題盤面の値、空きマスはマスごとに 50% の確率で
    parent1 か parent2 の値を受け継ぎます（行やブロック単位ではありません）。
    """
    child = copy_grid(puzzle)
    for r, c in free_cells(puzzle):
        child[r, c] = parent1[r, c] if rng.random() < 0.5 else parent2[r, c]
    return child


def mutate(board: Grid, puzzle: Grid, mutation_rate: float, rng: random.Random) -> None:
    """
    突然変異: 空きマスごとに確率 mutation_rate で、置ける数字に置き換える（インプレース）

    空きマスは行優先で順番に見ていき、置ける数字は「このパスですでに変異した
    マスも含めた今の盤面」で計算します。置ける数字が無いマスはそのままです。

    mutation_rate が 1 以上なら、すべての空きマスが変異の対象になります。
    盤面を書き換えるので、呼び出し側で fitness を計算し直してください。
    """
    for r, c in free_cells(puzzle):
        if rng.random() < mutation_rate:
            candidates = possible_values(board, r, c)
            if candidates:
                board[r, c] = rng.choice(candidates)


def preserves_fixed_cells(board: Grid, puzzle: Grid) -> bool:
    """盤面が問題盤面の固定マスをすべてそのまま保っているかを返します。"""
    mask = fixed_mask(puzzle)
    return bool((board[mask] == puzzle[mask]).all())
