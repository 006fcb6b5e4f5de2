# sudoku_solver/eval/validation.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Iterable

from ..config import GRID_SIZE, SUBGRID_SIZE
from ..grid.board import column, row, subgrid
from ..types import Grid


def is_valid_set(line: Iterable[int]) -> bool:
    """
    1本の行（列・ブロック）が 1〜9 のちょうど並べ替えになっているかを判定する。
    0 や範囲外の値、重複が1つでもあれば False。
    """
    seen = set()
    for value in line:
        value = int(value)
        if value < 1 or value > GRID_SIZE:
            return False
        if value in seen:
            return False
        seen.add(value)
    return len(seen) == GRID_SIZE


def is_correct_solved(grid: Grid) -> bool:
    """
    盤面が数独の正解になっているかを厳密に確認する。

    fitness（重複の個数）とは別のチェックで、
    全ての行・列・ブロックが 1〜9 の並べ替えかどうかだけを見る。
    """
    if getattr(grid, "shape", None) != (GRID_SIZE, GRID_SIZE):
        return False

    for i in range(GRID_SIZE):
        if not is_valid_set(row(grid, i)):
            return False
        if not is_valid_set(column(grid, i)):
            return False

    for br in range(SUBGRID_SIZE):
        for bc in range(SUBGRID_SIZE):
            if not is_valid_set(subgrid(grid, br, bc)):
                return False

    return True
