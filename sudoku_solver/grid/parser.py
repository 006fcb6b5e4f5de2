# -*- coding: utf-8 -*-
"""
いろいろな形式の盤面を内部表現（9x9 の numpy 配列）に正規化するモジュールです。

主な役割:
- pandas.DataFrame / 2次元リスト / 81文字の文字列 を numpy 配列に変換
- 各セルの値を 0〜9 の整数に正規化（空きマスは 0）
"""

from __future__ import annotations

import math
from typing import Any, Sequence, Union

import numpy as np
import pandas as pd

from ..config import EMPTY, GRID_SIZE
from ..types import Grid
from .board import GRID_DTYPE

# 空きマスとして扱う文字
BLANK_CHARS = {"", "0", ".", "_", "?", "-"}

BoardLike = Union[Grid, pd.DataFrame, Sequence[Sequence[Any]], str]


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を 0〜9 の整数に変換します。

    変換ルール
    ----------
    - None / NaN / 空文字 / "." / "?" など: 0（空きマス）
    - 数字（int でも "7" のような文字列でも可）: その値
    - それ以外: ValueError
    """
    if x is None:
        return EMPTY
    if isinstance(x, float) and math.isnan(x):
        return EMPTY

    s = str(x).strip()
    if s in BLANK_CHARS:
        return EMPTY

    # 3.0 のような float 表記（CSV 読み込み時にありがち）
    if isinstance(x, (float, np.floating)) and float(x).is_integer():
        s = str(int(x))

    if not s.isdigit():
        raise ValueError(f"Invalid cell value: {x!r}")

    value = int(s)
    if not 0 <= value <= GRID_SIZE:
        raise ValueError(f"Cell value out of range 0..{GRID_SIZE}: {x!r}")
    return value


def parse_puzzle_string(text: str) -> Grid:
    """
    "530070000600195000..." のような 81 文字の文字列を盤面に変換します。

    空白・改行・区切りの "|" や "," は無視します。
    """
    chars = [ch for ch in text if not ch.isspace() and ch not in "|,+"]
    if len(chars) != GRID_SIZE * GRID_SIZE:
        raise ValueError(
            f"Puzzle string must contain {GRID_SIZE * GRID_SIZE} cells, got {len(chars)}"
        )
    values = [normalize_cell(ch) for ch in chars]
    return np.array(values, dtype=GRID_DTYPE).reshape(GRID_SIZE, GRID_SIZE)


def normalize_grid(board: BoardLike) -> Grid:
    """
    盤面データを 9x9 の numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Parameters
    ----------
    board : DataFrame, numpy.ndarray, 2次元リスト, または str
        入力の盤面データ。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9), dtype = int8 の配列。入力とは独立したコピーです。
    """
    if isinstance(board, str):
        return parse_puzzle_string(board)

    if isinstance(board, pd.DataFrame):
        raw = board.to_numpy(dtype=object)
    else:
        raw = np.asarray(board, dtype=object)

    if raw.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(
            f"Board must be {GRID_SIZE}x{GRID_SIZE}, got shape {raw.shape}"
        )

    grid = np.empty((GRID_SIZE, GRID_SIZE), dtype=GRID_DTYPE)
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            grid[i, j] = normalize_cell(raw[i, j])

    return grid


def grid_to_string(grid: Grid) -> str:
    """盤面を 81 文字の文字列（空きマスは 0）に変換します。"""
    return "".join(str(int(v)) for v in np.asarray(grid).ravel())
