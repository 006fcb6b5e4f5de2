"""Shared fixtures for the sudoku_solver tests."""

import random

import numpy as np
import pytest

from sudoku_solver.grid.parser import parse_puzzle_string

# Classic easy puzzle and its unique solution.
EASY_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# One blank per row, column and block: every blank has exactly one candidate.
NEAR_SOLVED_BLANKS = [(0, 0), (1, 3), (2, 6), (3, 1), (4, 4), (5, 7), (6, 2), (7, 5), (8, 8)]


@pytest.fixture
def easy_puzzle():
    return parse_puzzle_string(EASY_PUZZLE)


@pytest.fixture
def easy_solution():
    return parse_puzzle_string(EASY_SOLUTION)


@pytest.fixture
def near_solved_puzzle(easy_solution):
    puzzle = easy_solution.copy()
    for r, c in NEAR_SOLVED_BLANKS:
        puzzle[r, c] = 0
    return puzzle


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture
def random_full_grids(rng):
    """Twenty 9x9 grids of random digits 1-9 (almost never valid solutions)."""
    return [
        np.array([[rng.randint(1, 9) for _ in range(9)] for _ in range(9)], dtype=np.int8)
        for _ in range(20)
    ]
