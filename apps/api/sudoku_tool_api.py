# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI
from pydantic import BaseModel, Field
from typing import List, Dict

from solver.sudoku_tools import sanity_check, compute_candidates_tool, solve_puzzle

app = FastAPI(title="Sudoku Solver Tool API")

class PuzzleModel(BaseModel):
    puzzle: str = Field(..., description="81-cell line: '1'-'9' givens, '0' or '.' blanks, other chars ignored")

class SolveResponse(BaseModel):
    solved: bool
    board: str
    debug: str
    elapsed: float
    guesses: int
    dead_ends: int

class CandidatesResponse(BaseModel):
    candidates: Dict[str, List[int]]

class SanityRequest(BaseModel):
    original: str
    current: str

@app.post("/solve", response_model=SolveResponse)
def api_solve(payload: PuzzleModel):
    return solve_puzzle(payload.puzzle)

@app.post("/compute_candidates", response_model=CandidatesResponse)
def api_cands(payload: PuzzleModel):
    return compute_candidates_tool(payload.puzzle)

@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    return sanity_check(payload.original, payload.current)
