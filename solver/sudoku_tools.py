"""Tool-friendly helpers around the core Board: solve a puzzle line, list candidates after propagation, sanity-check a result against its givens, and summarize batch timings. Everything returns plain dicts so the CLI and API can serialize them directly."""

from __future__ import annotations

# sudoku_tools.py
import time
from typing import Dict, List, Optional

from types_sudoku import Grid, Issue, SolveResult, TimingSummary

from .solver_core import BLANKS, CELLS, DOMAIN, GROUPS, Board, SearchStats, cell_to_key, grid_to_line  # noqa: F401


def line_to_grid(line: str) -> Grid:
    """Classify characters the way Board does; short lines are padded with blanks."""
    vals: List[int] = []
    for ch in line:
        if len(vals) >= CELLS:
            break
        if "1" <= ch <= "9":
            vals.append(int(ch))
        elif ch in BLANKS:
            vals.append(0)
    vals += [0] * (CELLS - len(vals))
    return [vals[r * DOMAIN:(r + 1) * DOMAIN] for r in range(DOMAIN)]


def solve_puzzle(line: str) -> SolveResult:
    """Build, solve and verify one puzzle line."""
    stats = SearchStats()
    t0 = time.perf_counter()
    board = Board(line)
    board.solve(stats)
    elapsed = time.perf_counter() - t0
    return {
        "solved": board.is_solved_debug(),
        "board": board.to_line(),
        "debug": board.debug_string(),
        "elapsed": elapsed,
        "guesses": stats.guesses,
        "dead_ends": stats.dead_ends,
    }


def compute_candidates_tool(line: str) -> Dict:
    """Candidates left for each unfixed cell after the initial propagation. Returns {'candidates': {'r1c3': [1, 2], ...}}."""
    return {"candidates": Board(line).candidates()}


def _duplicates(vals: List[int]) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def _unit_name(g: int) -> str:
    # groups alternate row/col for the first 18 ids, then boxes
    if g < 2 * DOMAIN:
        return f"{'rc'[g % 2]}{g // 2 + 1}"
    return f"b{g - 2 * DOMAIN + 1}"


def sanity_check(original: str, current: str) -> Dict:
    """Report givens that changed, digits repeated in a unit, and unfixed cells."""
    given = [v for row in line_to_grid(original) for v in row]
    found = [v for row in line_to_grid(current) for v in row]
    issues: List[Issue] = []

    for i in range(CELLS):
        if given[i] != 0 and found[i] not in (0, given[i]):
            issues.append({"type": "given_overwritten", "cell": cell_to_key(i),
                           "given": given[i], "found": found[i]})

    for g, cells in enumerate(GROUPS):
        dups = _duplicates([found[i] for i in cells])
        if dups:
            issues.append({"type": "duplicate", "unit": _unit_name(g), "digits": sorted(dups),
                           "cells": [cell_to_key(i) for i in cells if found[i] in dups]})

    blanks = found.count(0)
    if blanks:
        issues.append({"type": "incomplete", "count": blanks})
    return {"ok": len(issues) == 0, "issues": issues}


def summarize_timings(timings: List[float], total: Optional[float] = None) -> TimingSummary:
    """Aggregate per-puzzle timings. `total` is the wall time of the run (defaults to the sum)."""
    solve = sum(timings)
    if total is None:
        total = solve
    n = len(timings)
    return {
        "problems": n,
        "total": total,
        "solve": solve,
        "avg": total / n if n else 0.0,
        "max": max(timings) if timings else 0.0,
        "min": min(timings) if timings else 0.0,
    }

