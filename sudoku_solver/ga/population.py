# -*- coding: utf-8 -*-
"""
遺伝的アルゴリズムの個体（Individual）と初期個体群の生成を行うモジュールです。

個体 = 「空きマスをすべて埋めた盤面」＋「その盤面の fitness」です。
個体の盤面は作った後に書き換えません。新しい盤面は :meth:`Individual.from_grid` で
別の個体にします（fitness もそこで計算します）。
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List

from ..config import GRID_SIZE
from ..grid.board import copy_grid, free_cells, possible_values
from ..logging_utils import get_logger
from ..types import Grid
from .fitness import fitness

logger = get_logger()

# 置ける数字が無かったときに使う数字
FALLBACK_VALUES = list(range(1, GRID_SIZE + 1))


@dataclass
class Individual:
    """遺伝的アルゴリズムの個体"""
    grid: Grid
    fitness: int

    @classmethod
    def from_grid(cls, grid: Grid) -> "Individual":
        """盤面から個体を作ります（fitness はここで計算します）。"""
        return cls(grid=grid, fitness=fitness(grid))


def random_fill(puzzle: Grid, rng: random.Random) -> Grid:
    """
    問題盤面の空きマスを、行優先の順番で貪欲にランダムに埋めます。

    各空きマスでは「それまでに埋めた数字も含めた今の盤面」で置ける数字から
    一様に1つ選びます。置ける数字が1つも無い場合は、制約を無視して
    1〜9 から一様に選びます（必ず全マスが埋まるようにするため）。

    Parameters
    ----------
    puzzle : numpy.ndarray
        問題盤面。書き換えません。
    rng : random.Random
        乱数生成器。

    Returns
    -------
    numpy.ndarray
        全マスが埋まった新しい盤面。
    """
    board = copy_grid(puzzle)
    for r, c in free_cells(puzzle):
        candidates = possible_values(board, r, c)
        if candidates:
            board[r, c] = rng.choice(candidates)
        else:
            board[r, c] = rng.choice(FALLBACK_VALUES)
    return board


def create_initial_population(
    puzzle: Grid,
    population_size: int,
    rng: random.Random,
) -> List[Individual]:
    """
    初期個体群を生成します。

    :func:`random_fill` で埋めた盤面を population_size 個作ります。
    並び順は生成順のままです（ソートは呼び出し側で行います）。
    """
    logger.info("[GA] Creating initial population (size=%d)...", population_size)

    population = [
        Individual.from_grid(random_fill(puzzle, rng))
        for _ in range(population_size)
    ]

    logger.debug(
        "[GA] Initial population ready: best=%d",
        min(ind.fitness for ind in population),
    )
    return population
