# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from ..config import GAConfig
from ..eval.validation import is_correct_solved
from ..ga.operators import preserves_fixed_cells
from ..types import Grid, SearchResult


def format_grid(grid: Grid) -> str:
    """
    盤面を「数字をスペース区切りにした 9 行」の文字列にします。

    例::

        5 3 4 6 7 8 9 1 2
        6 7 2 1 9 5 3 4 8
        ...
    """
    return "\n".join(" ".join(str(int(v)) for v in line) for line in np.asarray(grid))


def build_result(
    puzzle: Grid,
    result: SearchResult,
    config: GAConfig,
    seconds: Optional[float] = None,
) -> Dict[str, Any]:
    """
    探索結果を JSON にそのまま変換できる dict にまとめます。

    "solved" は fitness ではなく :func:`is_correct_solved` による厳密チェックの結果です。
    """
    return {
        "solved_board": np.asarray(result.grid).tolist(),  # ★ numpy 配列を返さない
        "solved": is_correct_solved(result.grid),
        "fitness": int(result.fitness),
        "generations": int(result.generations),
        "converged": bool(result.converged),
        "fixed_cells_preserved": preserves_fixed_cells(result.grid, puzzle),
        "seconds": seconds,
        "config": config.to_dict(),
    }
