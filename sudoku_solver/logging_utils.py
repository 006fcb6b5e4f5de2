# -*- coding: utf-8 -*-
"""
sudoku_solver のログ出力の設定を行うモジュールです。

GA は世代ごとに進捗ログを出すので、まとめて何問も解くときは
:func:`set_log_level` で WARNING などに上げると出力が静かになります。
"""

from __future__ import annotations

import logging
from typing import Optional, Union

# sudoku_solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_LOG_LEVEL = logging.INFO

# CLI の --log-level で選べる名前
LOG_LEVEL_NAMES = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    name = level.upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {level!r}")
    return logging.getLevelName(name)


def get_logger(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    sudoku_solver 全体で共通して使う logger を返します。

    handler がまだ無ければ、標準エラー出力に DEFAULT_LOG_FORMAT で出すように
    設定します（レベルは INFO）。level を渡した場合はそのレベルに変更します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(DEFAULT_LOG_LEVEL)

    if level is not None:
        logger.setLevel(_to_level(level))

    return logger


def set_log_level(level: Union[int, str]) -> int:
    """共通 logger のレベルを変更し、変更前のレベルを返します。"""
    logger = get_logger()
    previous = logger.level
    logger.setLevel(_to_level(level))
    return previous
