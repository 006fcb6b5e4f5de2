# -*- coding: utf-8 -*-
"""
Genetic Algorithm（遺伝的アルゴリズム）で数独を解くモジュールです。

世代ごとの流れ
--------------
1. 初期個体群を作る（空きマスを貪欲にランダムに埋めた盤面を P 個）
2. fitness の小さい順に並べる（同じ fitness なら元の順番のまま）
3. 先頭の fitness が 0 なら完成（収束）として終了
4. そうでなければ、上位 P/2 個をそのまま次世代に残し（エリート保存）、
   残りはトーナメント選択 → 交叉 → 突然変異 で作った子で埋める
5. 世代数の上限 G に達するまで 2 に戻る

上限に達しても解が見つからない場合は例外を出さず、
最終世代で最も良い盤面（違反を含む）を返します。
呼び出し側で fitness を見て「解けたかどうか」を判断してください。
"""

from __future__ import annotations

import random
from typing import List, Optional

from ..config import GAConfig
from ..grid.parser import BoardLike, normalize_grid
from ..logging_utils import get_logger
from ..types import GenerationStats, Grid, SearchResult
from .operators import crossover, mutate, tournament_selection
from .population import Individual, create_initial_population

logger = get_logger()


def rank_population(population: List[Individual]) -> List[Individual]:
    """fitness の昇順に並べた新しいリストを返します（安定ソート）。"""
    return sorted(population, key=lambda ind: ind.fitness)


def breed_next_generation(
    ranked: List[Individual],
    puzzle: Grid,
    config: GAConfig,
    rng: random.Random,
) -> List[Individual]:
    """
    並べ替え済みの個体群から次世代の個体群を作ります。

    上位 config.elite_size 個はそのまま引き継ぎ、残りは
    2回のトーナメント選択で選んだ親を交叉・突然変異させた子で埋めます。
    """
    population_size = config.population_size

    # エリート保存
    next_population = list(ranked[:config.elite_size])

    while len(next_population) < population_size:
        parent1 = tournament_selection(ranked, rng, config.tournament_size)
        parent2 = tournament_selection(ranked, rng, config.tournament_size)
        child = crossover(parent1.grid, parent2.grid, puzzle, rng)
        mutate(child, puzzle, config.mutation_rate, rng)
        next_population.append(Individual.from_grid(child))

    return next_population


def _stats(generation: int, ranked: List[Individual]) -> GenerationStats:
    return GenerationStats(
        generation=generation,
        best_fitness=ranked[0].fitness,
        mean_fitness=sum(ind.fitness for ind in ranked) / len(ranked),
    )


def genetic_algorithm(
    puzzle: BoardLike,
    config: GAConfig,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Genetic Algorithm によって数独の解を探索します。

    Parameters
    ----------
    puzzle : numpy.ndarray または 2次元リストなど
        問題盤面（9x9、空きマスは 0）。書き換えません。
        :func:`normalize_grid` で 9x9 の int8 配列に変換してから使います。
    config : GAConfig
        個体数・突然変異率・世代数などのパラメータ。
    rng : random.Random, optional
        乱数生成器。すべての演算子がこれ1つを共有します。
        省略した場合はシードなしで新しく作ります。

    Returns
    -------
    SearchResult
        最良個体の盤面・fitness・世代数・収束したかどうか・世代ごとの統計。
    """
    # 2次元リストのままだと空きマスの判定ができないので、必ず配列に揃える
    puzzle = normalize_grid(puzzle)

    if rng is None:
        rng = random.Random()

    if config.mutation_rate > 1:
        logger.warning(
            "[GA] mutation_rate=%.3f is above 1: every free cell mutates in every child",
            config.mutation_rate,
        )

    population = create_initial_population(puzzle, config.population_size, rng)
    history: List[GenerationStats] = []

    logger.info(
        "[GA] Starting evolution: population=%d, mutation_rate=%.3f, generations=%d",
        config.population_size, config.mutation_rate, config.max_generations,
    )

    generation = 0
    while True:
        ranked = rank_population(population)
        stats = _stats(generation, ranked)
        history.append(stats)

        if ranked[0].fitness == 0:
            logger.info("[GA] Solution found at generation %d", generation)
            return SearchResult(
                grid=ranked[0].grid,
                fitness=0,
                generations=generation,
                converged=True,
                history=history,
            )

        if generation >= config.max_generations:
            break

        # 進捗ログ
        if config.log_interval > 0 and generation % config.log_interval == 0:
            logger.info(
                "[GA] Generation %d/%d: best=%d, avg=%.3f",
                generation, config.max_generations,
                stats.best_fitness, stats.mean_fitness,
            )

        population = breed_next_generation(ranked, puzzle, config, rng)
        generation += 1

    logger.info(
        "[GA] Maximum generations reached (%d). Best fitness: %d",
        config.max_generations, ranked[0].fitness,
    )
    return SearchResult(
        grid=ranked[0].grid,
        fitness=ranked[0].fitness,
        generations=generation,
        converged=False,
        history=history,
    )


def solve(
    puzzle: BoardLike,
    config: GAConfig,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    数独を解き、最良個体の盤面だけを返します。

    返り値が正解とは限りません（世代上限に達した場合）。
    正解かどうかは :func:`sudoku_solver.eval.validation.is_correct_solved` などで確認してください。
    """
    return genetic_algorithm(puzzle, config, rng).grid
