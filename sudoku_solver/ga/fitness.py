# -*- coding: utf-8 -*-
"""
盤面の評価（fitness）を計算するモジュールです。

fitness は「ルール違反（重複）の個数」で、小さいほど良い盤面です。
- 各行・各列・各ブロックについて、左から順に見ていき
  「すでに同じ行（列・ブロック）で出てきた数字」が現れるたびに 1 を加えます。
- 0（空きマス）は重複として数えません。

すべての行・列・ブロックが 1〜9 の並べ替えになっているときに限り 0 になります。
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..config import GRID_SIZE, SUBGRID_SIZE
from ..types import Grid


def count_duplicates(line: Iterable[int]) -> int:
    """
    1本の行（列・ブロック）に含まれる重複の個数を返します。

    例: [5, 3, 5, 0, 0, 3, 5] → 3（2回目・3回目の 5 と 2回目の 3）
    """
    seen = set()
    duplicates = 0
    for value in line:
        if value == 0:
            continue
        if value in seen:
            duplicates += 1
        seen.add(value)
    return duplicates


def _line_duplicates(counts: np.ndarray) -> int:
    # counts[..., v] は値 v+1 の出現回数。2回目以降の出現を数える
    return int(np.clip(counts - 1, 0, None).sum())


def fitness(grid: Grid) -> int:
    """
    盤面全体の重複の個数（27本の行・列・ブロックの合計）を返します。

    :func:`count_duplicates` を 27 回呼ぶのと同じ結果ですが、
    numpy でまとめて数えています。
    """
    g = np.asarray(grid)
    # one_hot[r, c, v] は「(r, c) の値が v+1 かどうか」
    one_hot = g[:, :, None] == np.arange(1, GRID_SIZE + 1)

    rows = one_hot.sum(axis=1)
    cols = one_hot.sum(axis=0)
    blocks = (
        one_hot.reshape(SUBGRID_SIZE, SUBGRID_SIZE, SUBGRID_SIZE, SUBGRID_SIZE, GRID_SIZE)
        .sum(axis=(1, 3))
    )

    return _line_duplicates(rows) + _line_duplicates(cols) + _line_duplicates(blocks)
