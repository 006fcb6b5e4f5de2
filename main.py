"""
main.py

数独の遺伝的アルゴリズム solver をコマンドラインから動かすスクリプト
- 難易度を指定して CSV の問題をまとめて解く（時間と正解数を集計）
- --puzzle で 81 文字の問題を1問だけ解く
"""
import argparse
import sys

from sudoku_solver import ConfigurationError, GAConfig, solve_puzzle
from sudoku_solver.benchmark import resolve_config, solve_and_report
from sudoku_solver.config import DIFFICULTY_PRESETS
from sudoku_solver.logging_utils import LOG_LEVEL_NAMES, get_logger, set_log_level
from sudoku_solver.postprocess.render_result import format_grid

logger = get_logger()


def build_parser():
    parser = argparse.ArgumentParser(description="Genetic algorithm Sudoku solver")
    parser.add_argument("--level", default="Easy", choices=list(DIFFICULTY_PRESETS),
                        help="difficulty tier to solve (uses its preset unless overridden)")
    parser.add_argument("--puzzle", help="single 81-character puzzle (0 or . for blanks)")
    parser.add_argument("--population-size", type=int)
    parser.add_argument("--mutation-rate", type=float)
    parser.add_argument("--max-generations", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--print-board", action="store_true")
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVEL_NAMES,
                        help="verbosity of the per-generation progress log")
    return parser


def config_from_args(args):
    """プリセットをベースに、指定された引数だけ上書きする"""
    base = resolve_config(args.level)
    return GAConfig(
        population_size=args.population_size if args.population_size is not None else base.population_size,
        mutation_rate=args.mutation_rate if args.mutation_rate is not None else base.mutation_rate,
        max_generations=args.max_generations if args.max_generations is not None else base.max_generations,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_log_level(args.log_level)

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.puzzle:
        try:
            result = solve_puzzle(args.puzzle, config=config, seed=args.seed)
        except ValueError as e:
            logger.error("Invalid puzzle: %s", e)
            return 2
        print(format_grid(result["solved_board"]))
        print(f"solved={result['solved']} fitness={result['fitness']} "
              f"generations={result['generations']} seconds={result['seconds']:.3f}")
        return 0 if result["solved"] else 1

    summary = solve_and_report(args.level, config=config,
                               print_board=args.print_board, seed=args.seed)
    print(summary.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
