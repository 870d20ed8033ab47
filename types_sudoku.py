# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class SolveResult(TypedDict):
    """Outcome of solving one puzzle line, as returned by the tool & API layers."""

    solved: bool  # authoritative check: every group holds 9 distinct digits
    board: str  # 81 chars, '.' for cells that are not fixed
    debug: str  # 81 chars, unfixed cells encoded as chr(ord('A') + count)
    elapsed: float  # seconds spent constructing + solving
    guesses: int  # branch attempts made by the search
    dead_ends: int  # branches whose assignment failed immediately


class Issue(TypedDict, total=False):
    """A single problem reported by sanity_check."""

    type: str  # 'given_overwritten', 'duplicate' or 'incomplete'
    cell: str  # for given_overwritten, e.g. 'r4c7'
    given: int
    found: int
    unit: str  # for duplicate, e.g. 'r1', 'c5', 'b9'
    digits: list[int]
    cells: list[str]
    count: int  # for incomplete, number of unfixed cells


class TimingSummary(TypedDict):
    """Batch statistics printed by the CLI after a run."""

    problems: int
    total: float  # wall time of the whole run
    solve: float  # sum of per-puzzle timings
    avg: float  # total / problems
    max: float
    min: float
