"""Tests for individuals and greedy random fill."""

import random

import numpy as np

from sudoku_solver.ga.fitness import fitness
from sudoku_solver.ga.operators import preserves_fixed_cells
from sudoku_solver.ga.population import Individual, create_initial_population, random_fill


class TestRandomFill:

    def test_fills_every_cell(self, easy_puzzle, rng):
        board = random_fill(easy_puzzle, rng)
        assert board.shape == (9, 9)
        assert ((board >= 1) & (board <= 9)).all()

    def test_preserves_fixed_cells(self, easy_puzzle, rng):
        for _ in range(10):
            assert preserves_fixed_cells(random_fill(easy_puzzle, rng), easy_puzzle)

    def test_does_not_touch_puzzle(self, easy_puzzle, rng):
        before = easy_puzzle.copy()
        random_fill(easy_puzzle, rng)
        assert (easy_puzzle == before).all()

    def test_single_candidates_are_forced(self, near_solved_puzzle, easy_solution, rng):
        assert (random_fill(near_solved_puzzle, rng) == easy_solution).all()

    def test_same_seed_same_fill(self, easy_puzzle):
        a = random_fill(easy_puzzle, random.Random(7))
        b = random_fill(easy_puzzle, random.Random(7))
        assert (a == b).all()

    def test_fallback_when_no_candidate(self, rng):
        puzzle = np.zeros((9, 9), dtype=np.int8)
        puzzle[0, 1:] = [1, 2, 3, 4, 5, 6, 7, 8]
        puzzle[1, 0] = 9
        # (0, 0) sees 1-8 in its row and 9 in its column.
        board = random_fill(puzzle, rng)
        assert 1 <= board[0, 0] <= 9
        assert preserves_fixed_cells(board, puzzle)
        assert (board != 0).all()


class TestIndividual:

    def test_from_grid_scores(self, easy_solution):
        ind = Individual.from_grid(easy_solution.copy())
        assert ind.fitness == 0

    def test_from_grid_swapped_cells(self, easy_solution):
        grid = easy_solution.copy()
        grid[0, 0], grid[0, 1] = grid[0, 1], grid[0, 0]
        ind = Individual.from_grid(grid)
        assert ind.fitness == fitness(grid) == 2

    def test_initial_population(self, easy_puzzle, rng):
        population = create_initial_population(easy_puzzle, 12, rng)
        assert len(population) == 12
        for ind in population:
            assert ind.fitness == fitness(ind.grid)
            assert preserves_fixed_cells(ind.grid, easy_puzzle)
        # No two individuals share a grid array.
        assert len({id(ind.grid) for ind in population}) == 12
