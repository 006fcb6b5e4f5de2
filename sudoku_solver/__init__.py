# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

api_proto/local_api.py や main.py などから:

    from sudoku_solver import solve_puzzle

と呼び出されることを想定しています。

ここでは、盤面（DataFrame / 2次元リスト / 81文字の文字列）を受け取り、
1. 盤面の正規化
2. 遺伝的アルゴリズムによる探索
3. 厳密チェックと表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

import random
import time
from typing import Any, Dict, Optional

from .config import DIFFICULTY_PRESETS, ConfigurationError, GAConfig
from .ga.engine import genetic_algorithm, solve
from .grid.parser import BoardLike, normalize_grid
from .logging_utils import get_logger
from .postprocess.render_result import build_result
from .types import SearchResult

__all__ = [
    "ConfigurationError",
    "DIFFICULTY_PRESETS",
    "GAConfig",
    "SearchResult",
    "genetic_algorithm",
    "solve",
    "solve_puzzle",
]

logger = get_logger()


def solve_puzzle(
    board: BoardLike,
    config: Optional[GAConfig] = None,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    数独を解くメイン関数。
    """
    config = config or GAConfig()

    logger.info("=== solve_puzzle() START ===")

    # 1) 盤面の正規化
    puzzle = normalize_grid(board)
    logger.info("Puzzle has %d blank cells.", int((puzzle == 0).sum()))

    # 2) 探索
    start = time.perf_counter()
    result = genetic_algorithm(puzzle, config, random.Random(seed))
    seconds = time.perf_counter() - start

    # 3) 表示用の結果
    output = build_result(puzzle, result, config, seconds=seconds)
    if not output["solved"]:
        logger.warning(
            "No solution found within %d generations (best fitness=%d)",
            config.max_generations, result.fitness,
        )

    logger.info("=== solve_puzzle() END (%.3f s) ===", seconds)
    return output
