# -*- coding: utf-8 -*-
"""
難易度別の問題データ（CSV）を読み込むモジュールです。

今回の仕様：
- CSV に必ず 'puzzle_id', 'difficulty', 'puzzle' 列がある
- 'puzzle' は 81 文字の文字列（空きマスは 0 または .）

戻り値：
- puzzle_id  : 問題の識別子
- difficulty : "Easy" / "Medium" / "Hard" / "Very Hard"
- puzzle     : 元の文字列
- grid       : 9x9 の numpy 配列
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from ..config import DEFAULT_PUZZLES_PATH
from ..grid.parser import parse_puzzle_string
from ..types import Grid

REQUIRED_COLUMNS = ("puzzle_id", "difficulty", "puzzle")


def load_puzzles(path: str | Path = DEFAULT_PUZZLES_PATH) -> pd.DataFrame:
    """
    問題 CSV を読み込み、統一フォーマットの DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        'puzzle_id', 'difficulty', 'puzzle', 'grid' 列を持つ DataFrame。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle CSV not found: {p}")

    # 先頭の 0 が落ちないように文字列として読む
    df = pd.read_csv(p, encoding="utf-8-sig", dtype=str, comment="#")

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Puzzle CSV is missing columns: {missing}")

    # 同じ puzzle_id は最初の1件だけ使う
    df = df.drop_duplicates(subset=["puzzle_id"], keep="first")

    df["difficulty"] = df["difficulty"].str.strip()
    df["puzzle"] = df["puzzle"].str.strip()
    df["grid"] = df["puzzle"].apply(parse_puzzle_string)

    # index を 0 から振り直しておくと扱いやすい
    df = df.reset_index(drop=True)

    return df


def list_difficulties(path: str | Path = DEFAULT_PUZZLES_PATH) -> List[str]:
    """CSV に含まれる難易度の一覧（出現順）を返します。"""
    df = load_puzzles(path)
    return list(dict.fromkeys(df["difficulty"]))


def get_puzzles(difficulty: str, path: str | Path = DEFAULT_PUZZLES_PATH) -> List[Grid]:
    """
    指定した難易度の問題盤面を、ファイルに書かれた順番で返します。
    """
    df = load_puzzles(path)
    selected = df[df["difficulty"] == difficulty]
    if selected.empty:
        known = ", ".join(dict.fromkeys(df["difficulty"]))
        raise ValueError(f"Unknown difficulty {difficulty!r} (known: {known})")
    return list(selected["grid"])
