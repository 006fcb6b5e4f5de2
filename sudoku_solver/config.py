# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 盤面のサイズ
- 遺伝的アルゴリズムの既定パラメータ（個体数・突然変異率・世代数）
- 難易度ごとのプリセット
- 問題データ CSV の場所
などを簡単に変更できます。

探索中に書き換えられる「グローバルな可変パラメータ」は持たず、
1回の solve ごとに :class:`GAConfig`（変更不可の値オブジェクト）を渡します。
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

# ==== 盤面関連 =============================================================

# 盤面の一辺のマス数
GRID_SIZE: int = 9

# ブロック（3x3 のサブグリッド）の一辺のマス数
SUBGRID_SIZE: int = 3

# 空きマスを表す値
EMPTY: int = 0

# ==== 問題データ関連 =======================================================

# 難易度別の問題 CSV（puzzle_id, difficulty, puzzle 列）
DEFAULT_PUZZLES_PATH: Path = Path(__file__).resolve().parent / "data" / "puzzles.csv"

# ==== Genetic Algorithm 関連 ============================================

# Genetic Algorithm の個体数
GA_POPULATION_SIZE: int = 50

# Genetic Algorithm の突然変異率（空きマスごとの確率）
GA_MUTATION_RATE: float = 0.1

# Genetic Algorithm の世代数
GA_GENERATIONS: int = 200

# トーナメント選択で抽選する個体数（復元抽出）
GA_TOURNAMENT_SIZE: int = 5

# 何世代ごとに進捗ログを出すか
GA_LOG_INTERVAL: int = 10


class ConfigurationError(ValueError):
    """GAConfig に意味のない値が渡されたときに送出される例外です。"""


@dataclass(frozen=True)
class GAConfig:
    """
    遺伝的アルゴリズム 1 回分の探索パラメータです。

    frozen=True なので、探索中に値が変わることはありません。

    Attributes
    ----------
    population_size : int
        1世代あたりの個体数 P（1 以上）。
    mutation_rate : float
        空きマスごとの突然変異確率。1 を超える値も受け付けますが、
        その場合はすべての空きマスが毎回変異します。
    max_generations : int
        世代数の上限 G。0 の場合は初期個体群の最良個体をそのまま返します。
    tournament_size : int
        トーナメント選択の抽選数。
    log_interval : int
        進捗ログの間隔（世代数）。0 以下ならログを出しません。
    """

    population_size: int = GA_POPULATION_SIZE
    mutation_rate: float = GA_MUTATION_RATE
    max_generations: int = GA_GENERATIONS
    tournament_size: int = GA_TOURNAMENT_SIZE
    log_interval: int = GA_LOG_INTERVAL

    def __post_init__(self) -> None:
        if self.population_size <= 0:
            raise ConfigurationError(
                f"population_size must be positive, got {self.population_size}"
            )
        if self.max_generations < 0:
            raise ConfigurationError(
                f"max_generations must be >= 0, got {self.max_generations}"
            )
        if not math.isfinite(self.mutation_rate) or self.mutation_rate < 0:
            raise ConfigurationError(
                f"mutation_rate must be a finite value >= 0, got {self.mutation_rate}"
            )
        if self.tournament_size <= 0:
            raise ConfigurationError(
                f"tournament_size must be positive, got {self.tournament_size}"
            )

    @property
    def elite_size(self) -> int:
        """次世代にそのまま残す上位個体数（P の半分、切り捨て）。"""
        return self.population_size // 2

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ==== 難易度プリセット =====================================================
# "Very Hard" の突然変異率 1.6 は過去の実験で使われていた値をそのまま残しています。
# 1 を超えるため、実質的に毎回すべての空きマスが変異します。

DIFFICULTY_PRESETS: Dict[str, GAConfig] = {
    "Easy": GAConfig(population_size=50, mutation_rate=0.1, max_generations=200),
    "Medium": GAConfig(population_size=200, mutation_rate=0.2, max_generations=300),
    "Hard": GAConfig(population_size=500, mutation_rate=0.4, max_generations=300),
    "Very Hard": GAConfig(population_size=1000, mutation_rate=1.6, max_generations=50),
}
