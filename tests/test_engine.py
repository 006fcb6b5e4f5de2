"""Tests for the generational loop and the solve entry point."""

import logging
import random

import numpy as np
import pytest

from sudoku_solver.config import GAConfig
from sudoku_solver.eval.validation import is_correct_solved
from sudoku_solver.ga.engine import breed_next_generation, genetic_algorithm, rank_population, solve
from sudoku_solver.ga.fitness import fitness
from sudoku_solver.ga.operators import preserves_fixed_cells
from sudoku_solver.ga.population import Individual, create_initial_population

SMALL = GAConfig(population_size=10, mutation_rate=0.1, max_generations=5)


class TestRanking:

    def test_ascending_and_stable(self):
        grids = [np.full((9, 9), i, dtype=np.int8) for i in range(5)]
        population = [Individual(grid=g, fitness=f) for g, f in zip(grids, (3, 1, 3, 0, 1))]
        ranked = rank_population(population)
        assert [ind.fitness for ind in ranked] == [0, 1, 1, 3, 3]
        assert ranked[1] is population[1] and ranked[2] is population[4]
        assert ranked[3] is population[0] and ranked[4] is population[2]


class TestBreeding:

    def test_elites_then_children(self, easy_puzzle, rng):
        config = GAConfig(population_size=9, mutation_rate=0.2, max_generations=1)
        ranked = rank_population(create_initial_population(easy_puzzle, 9, rng))

        next_population = breed_next_generation(ranked, easy_puzzle, config, rng)

        assert len(next_population) == 9
        assert config.elite_size == 4
        for elite, kept in zip(ranked[:4], next_population[:4]):
            assert kept is elite
        for child in next_population[4:]:
            assert all(child is not ind for ind in ranked)
            assert child.fitness == fitness(child.grid)
            assert preserves_fixed_cells(child.grid, easy_puzzle)

    def test_population_of_one(self, easy_puzzle, rng):
        config = GAConfig(population_size=1, mutation_rate=0.1, max_generations=1)
        ranked = create_initial_population(easy_puzzle, 1, rng)
        next_population = breed_next_generation(ranked, easy_puzzle, config, rng)
        assert len(next_population) == 1
        assert next_population[0] is not ranked[0]


class TestGeneticAlgorithm:

    def test_converges_immediately_when_forced(self, near_solved_puzzle, easy_solution, rng):
        result = genetic_algorithm(near_solved_puzzle, SMALL, rng)
        assert result.converged
        assert result.fitness == 0
        assert result.generations == 0
        assert (result.grid == easy_solution).all()

    def test_zero_generations_returns_best_initial(self, easy_puzzle):
        config = GAConfig(population_size=15, mutation_rate=0.1, max_generations=0)
        expected = rank_population(create_initial_population(easy_puzzle, 15, random.Random(99)))[0]

        result = genetic_algorithm(easy_puzzle, config, random.Random(99))

        assert result.generations == 0
        assert len(result.history) == 1
        assert result.fitness == expected.fitness
        assert (result.grid == expected.grid).all()

    def test_budget_and_fixed_cells(self, easy_puzzle, rng):
        result = genetic_algorithm(easy_puzzle, SMALL, rng)
        assert result.generations <= SMALL.max_generations
        assert result.grid.shape == (9, 9)
        assert preserves_fixed_cells(result.grid, easy_puzzle)
        assert result.fitness == fitness(result.grid)
        assert result.converged == (result.fitness == 0)
        assert len(result.history) == result.generations + 1

    def test_history_best_never_worsens(self, easy_puzzle, rng):
        # Elites survive unchanged, so the best fitness can only go down.
        result = genetic_algorithm(easy_puzzle, SMALL, rng)
        best = [stats.best_fitness for stats in result.history]
        assert best == sorted(best, reverse=True)

    def test_same_seed_same_result(self, easy_puzzle):
        a = genetic_algorithm(easy_puzzle, SMALL, random.Random(5))
        b = genetic_algorithm(easy_puzzle, SMALL, random.Random(5))
        assert (a.grid == b.grid).all()
        assert a.fitness == b.fitness and a.generations == b.generations

    def test_puzzle_is_not_mutated(self, easy_puzzle, rng):
        before = easy_puzzle.copy()
        genetic_algorithm(easy_puzzle, SMALL, rng)
        assert (easy_puzzle == before).all()

    def test_high_mutation_rate_warns(self, easy_puzzle, rng, caplog):
        config = GAConfig(population_size=4, mutation_rate=1.6, max_generations=1)
        with caplog.at_level(logging.WARNING, logger="sudoku_solver"):
            result = genetic_algorithm(easy_puzzle, config, rng)
        assert any("mutation_rate" in rec.getMessage() for rec in caplog.records)
        assert preserves_fixed_cells(result.grid, easy_puzzle)


class TestSolve:

    def test_returns_grid(self, near_solved_puzzle, rng):
        grid = solve(near_solved_puzzle, SMALL, rng)
        assert isinstance(grid, np.ndarray)
        assert is_correct_solved(grid)

    def test_without_rng(self, easy_puzzle):
        grid = solve(easy_puzzle, GAConfig(population_size=4, mutation_rate=0.1, max_generations=2))
        assert preserves_fixed_cells(grid, easy_puzzle)

    def test_nested_list_puzzle(self, easy_puzzle, rng):
        grid = solve(easy_puzzle.tolist(), SMALL, rng)
        assert isinstance(grid, np.ndarray)
        assert (grid != 0).all()
        assert preserves_fixed_cells(grid, easy_puzzle)

    def test_nested_list_matches_array(self, easy_puzzle):
        a = genetic_algorithm(easy_puzzle.tolist(), SMALL, random.Random(8))
        b = genetic_algorithm(easy_puzzle, SMALL, random.Random(8))
        assert (a.grid == b.grid).all()
        assert a.fitness == b.fitness == fitness(a.grid)

    def test_wrong_shape_rejected(self, easy_puzzle, rng):
        with pytest.raises(ValueError):
            solve(easy_puzzle.tolist()[:8], SMALL, rng)


@pytest.mark.slow
def test_easy_puzzle_converges_over_seeds(easy_puzzle):
    config = GAConfig(population_size=50, mutation_rate=0.1, max_generations=200, log_interval=0)
    runs = 6
    solved = sum(
        genetic_algorithm(easy_puzzle, config, random.Random(seed)).converged
        for seed in range(runs)
    )
    assert solved / runs >= 0.5
