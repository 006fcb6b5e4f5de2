from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver import DIFFICULTY_PRESETS, GAConfig, solve_puzzle
from sudoku_solver.config import GA_GENERATIONS, GA_MUTATION_RATE, GA_POPULATION_SIZE
from sudoku_solver.logging_utils import get_logger

logger = get_logger()

app = FastAPI()

class SolveRequest(BaseModel):
    board: list[list[int]] # 9x9, 0 = blank
    population_size: int = GA_POPULATION_SIZE
    mutation_rate: float = GA_MUTATION_RATE
    max_generations: int = GA_GENERATIONS
    seed: Optional[int] = None

@app.post("/api/solve")
def api_solve(request: SolveRequest) -> Dict[str, Any]:
    """
    Solver API endpoint.
    Receives grid data (2D array) and GA parameters, runs the genetic solver.
    """
    try:
        config = GAConfig(
            population_size=request.population_size,
            mutation_rate=request.mutation_rate,
            max_generations=request.max_generations,
        )
        return solve_puzzle(request.board, config=config, seed=request.seed)
    except ValueError as e:
        # 盤面の形式不正・パラメータ不正（ConfigurationError を含む）
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected solver failure")
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/api/presets")
def api_presets() -> Dict[str, Any]:
    """
    Difficulty presets (population size, mutation rate, generations).
    """
    return {level: cfg.to_dict() for level, cfg in DIFFICULTY_PRESETS.items()}
