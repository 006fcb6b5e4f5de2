"""Tests for the fitness evaluator."""

from sudoku_solver.eval.validation import is_correct_solved
from sudoku_solver.ga.fitness import count_duplicates, fitness
from sudoku_solver.grid.board import column, row, subgrid


def reference_fitness(grid):
    total = 0
    for i in range(9):
        total += count_duplicates(row(grid, i).tolist())
        total += count_duplicates(column(grid, i).tolist())
    for br in range(3):
        for bc in range(3):
            total += count_duplicates(subgrid(grid, br, bc).tolist())
    return total


class TestCountDuplicates:

    def test_no_duplicates(self):
        assert count_duplicates([1, 2, 3, 4, 5, 6, 7, 8, 9]) == 0

    def test_repeated_values(self):
        assert count_duplicates([5, 3, 5, 0, 0, 3, 5]) == 3

    def test_zeros_are_ignored(self):
        assert count_duplicates([0] * 9) == 0
        assert count_duplicates([0, 4, 0, 4]) == 1


class TestFitness:

    def test_solution_scores_zero(self, easy_solution):
        assert fitness(easy_solution) == 0

    def test_all_ones(self, easy_solution):
        grid = easy_solution.copy()
        grid[:, :] = 1
        assert fitness(grid) == 3 * 9 * 8

    def test_swap_in_row(self, easy_solution):
        grid = easy_solution.copy()
        grid[0, 0], grid[0, 1] = grid[0, 1], grid[0, 0]
        # The row and block stay permutations; columns 0 and 1 each gain one duplicate.
        assert fitness(grid) == 2

    def test_matches_line_by_line_count(self, random_full_grids, easy_puzzle):
        for grid in random_full_grids + [easy_puzzle]:
            assert fitness(grid) == reference_fitness(grid)

    def test_zero_iff_valid_solution(self, random_full_grids, easy_solution):
        for grid in random_full_grids + [easy_solution]:
            assert (fitness(grid) == 0) == is_correct_solved(grid)

    def test_is_pure(self, easy_puzzle):
        before = easy_puzzle.copy()
        assert fitness(easy_puzzle) == fitness(easy_puzzle)
        assert (easy_puzzle == before).all()
