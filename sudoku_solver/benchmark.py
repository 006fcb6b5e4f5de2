# -*- coding: utf-8 -*-
"""
難易度ごとに問題をまとめて解き、時間と正解数を集計するモジュールです。

1. 難易度に対応する問題を CSV から読み込む
2. 1問ずつ遺伝的アルゴリズムで解き、かかった時間を測る
3. 厳密チェック（is_correct_solved）で正解かどうかを判定する
4. 1問1行の集計表（pandas.DataFrame）を返す
"""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Optional

import pandas as pd

from .config import DEFAULT_PUZZLES_PATH, DIFFICULTY_PRESETS, GAConfig
from .dataset.loader import load_puzzles
from .eval.validation import is_correct_solved
from .ga.engine import genetic_algorithm
from .logging_utils import get_logger
from .postprocess.render_result import format_grid

logger = get_logger()

SUMMARY_COLUMNS = ["puzzle_id", "solved", "fitness", "generations", "seconds"]


def resolve_config(level: str, config: Optional[GAConfig] = None) -> GAConfig:
    """config が無ければ難易度のプリセットを返します。"""
    if config is not None:
        return config
    if level not in DIFFICULTY_PRESETS:
        known = ", ".join(DIFFICULTY_PRESETS)
        raise ValueError(f"No preset for difficulty {level!r} (known: {known})")
    return DIFFICULTY_PRESETS[level]


def solve_and_report(
    level: str,
    config: Optional[GAConfig] = None,
    print_board: bool = False,
    seed: Optional[int] = None,
    path: str | Path = DEFAULT_PUZZLES_PATH,
) -> pd.DataFrame:
    """
    指定した難易度の問題をすべて解き、結果の集計表を返します。

    Parameters
    ----------
    level : str
        "Easy" / "Medium" / "Hard" / "Very Hard" など、CSV の difficulty 列の値。
    config : GAConfig, optional
        探索パラメータ。省略時は難易度のプリセットを使います。
    print_board : bool
        True なら問題と結果の盤面をログに出します。
    seed : int, optional
        乱数シード。指定すると全問で1つの乱数生成器を共有し、結果を再現できます。
    path : str or Path
        問題 CSV のパス。

    Returns
    -------
    pandas.DataFrame
        puzzle_id, solved, fitness, generations, seconds 列を持つ集計表。
    """
    config = resolve_config(level, config)
    df = load_puzzles(path)
    puzzles = df[df["difficulty"] == level]
    if puzzles.empty:
        raise ValueError(f"No puzzles for difficulty {level!r} in {path}")

    rng = random.Random(seed)

    logger.info(
        "=== %s: %d puzzles (population=%d, mutation_rate=%.3f, generations=%d) ===",
        level, len(puzzles),
        config.population_size, config.mutation_rate, config.max_generations,
    )

    rows = []
    for i, (puzzle_id, grid) in enumerate(zip(puzzles["puzzle_id"], puzzles["grid"]), start=1):
        logger.info("Solving %s puzzle %d (%s)", level, i, puzzle_id)
        if print_board:
            logger.info("Initial puzzle:\n%s", format_grid(grid))

        start = time.perf_counter()
        result = genetic_algorithm(grid, config, rng)
        seconds = time.perf_counter() - start

        solved = is_correct_solved(result.grid)
        if print_board:
            logger.info("Result:\n%s", format_grid(result.grid))
        if solved:
            logger.info("Board %d is solved correctly! (%.3f s)", i, seconds)
        else:
            logger.info(
                "Board %d has incorrect solution: fitness=%d (%.3f s)",
                i, result.fitness, seconds,
            )

        rows.append({
            "puzzle_id": puzzle_id,
            "solved": solved,
            "fitness": result.fitness,
            "generations": result.generations,
            "seconds": seconds,
        })

    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    logger.info(
        "Solved %d out of %d %s puzzles. Total time: %.3f s",
        int(summary["solved"].sum()), len(summary), level, summary["seconds"].sum(),
    )
    return summary
