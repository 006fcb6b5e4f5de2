# -*- coding: utf-8 -*-
"""
数独の盤面（9x9 の numpy 配列）を読み取るための関数をまとめたモジュールです。

主な役割:
- 行・列・ブロック（3x3）の取り出し
- 「このマスにこの数字を置いても行・列・ブロックで重複しないか」の判定
- 置ける数字（候補）の列挙
- 問題盤面から固定マス／空きマスを求める

ここにある関数はすべて読み取り専用で、渡された盤面を書き換えません。
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import EMPTY, GRID_SIZE, SUBGRID_SIZE
from ..types import CellCoord, Grid

# 盤面の dtype（0〜9 しか入らないので int8 で十分）
GRID_DTYPE = np.int8


def _readonly(values: np.ndarray) -> np.ndarray:
    view = values.view()
    view.flags.writeable = False
    return view


def row(grid: Grid, r: int) -> np.ndarray:
    """r 行目の 9 個の値を読み取り専用で返します。"""
    return _readonly(grid[r, :])


def column(grid: Grid, c: int) -> np.ndarray:
    """c 列目の 9 個の値を読み取り専用で返します。"""
    return _readonly(grid[:, c])


def subgrid(grid: Grid, br: int, bc: int) -> np.ndarray:
    """
    ブロック (br, bc) の 9 個の値を返します。

    br, bc はブロック単位の番号（0〜2）です。
    並び順はブロック内の行優先（1行目の3マス → 2行目 → 3行目）です。
    """
    top = br * SUBGRID_SIZE
    left = bc * SUBGRID_SIZE
    block = grid[top:top + SUBGRID_SIZE, left:left + SUBGRID_SIZE]
    return _readonly(block.reshape(GRID_SIZE))


def _peer_counts(grid: Grid, r: int, c: int) -> np.ndarray:
    """
    (r, c) と同じ行・列・ブロックにある各数字の出現回数を数えます。

    (r, c) 自身は行・列・ブロックの 3 か所で数えられてしまうので、
    最後にその分を差し引きます。
    """
    top = r - r % SUBGRID_SIZE
    left = c - c % SUBGRID_SIZE
    peers = np.concatenate((
        grid[r, :],
        grid[:, c],
        grid[top:top + SUBGRID_SIZE, left:left + SUBGRID_SIZE].ravel(),
    ))
    counts = np.bincount(peers, minlength=GRID_SIZE + 1)
    counts[grid[r, c]] -= 3
    return counts


def is_valid_placement(grid: Grid, value: int, r: int, c: int) -> bool:
    """
    (r, c) に value を置いたとき、行・列・ブロックで重複しないかを判定します。

    判定は「今の盤面」に対して行います。盤面がすでに矛盾を含んでいても
    そのまま使うので、厳密な制約チェックではなく貪欲な目安です。
    (r, c) 自身の値は見ません。

    Parameters
    ----------
    grid : numpy.ndarray
        判定に使う盤面。
    value : int
        置きたい数字（1〜9）。
    r, c : int
        マスの座標。

    Returns
    -------
    bool
        重複がなければ True。
    """
    if not 1 <= value <= GRID_SIZE:
        raise ValueError(f"value must be in 1..{GRID_SIZE}, got {value}")
    return bool(_peer_counts(grid, r, c)[value] == 0)


def possible_values(grid: Grid, r: int, c: int) -> List[int]:
    """
    (r, c) に置ける数字を小さい順に返します。

    :func:`is_valid_placement` が True になる 1〜9 の数字の一覧です。
    """
    counts = _peer_counts(grid, r, c)
    return [int(v) for v in np.flatnonzero(counts[1:] == 0) + 1]


def copy_grid(grid: Grid) -> Grid:
    """元の盤面と配列を共有しない、独立したコピーを返します。"""
    return np.array(grid, dtype=GRID_DTYPE, copy=True)


def fixed_mask(puzzle: Grid) -> np.ndarray:
    """問題盤面で最初から数字が入っている（固定）マスを True にしたマスクです。"""
    return puzzle != EMPTY


def free_cells(puzzle: Grid) -> List[CellCoord]:
    """問題盤面の空きマスの座標を行優先の順番で返します。"""
    return [(int(r), int(c)) for r, c in np.argwhere(puzzle == EMPTY)]
