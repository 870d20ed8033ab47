"""Batch solver: read one puzzle per line, solve each, report impossible puzzles and timing statistics."""

# solve_cli.py
# - Reads puzzles from a file or stdin ('-'), one 81-cell line each
# - Builds a Board per line, runs propagation + search, times it
# - Prints "Impossible Problem." for puzzles that fail the full group check
# - Ends with solved count and total/solve/avg/max/min timings
#
# Usage:
#   python -m apps.cli.solve_cli puzzles.txt --progress
#   cat puzzles.txt | python -m apps.cli.solve_cli - --show
#   python -m apps.cli.solve_cli --config run.yaml

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

import yaml
from tqdm import tqdm

from apps.cli.config import resolve_config
from solver.solver_core import Board, SearchStats
from solver.sudoku_tools import sanity_check, summarize_timings


def ts() -> str:
    # Local time timestamp for logs
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", flush=True)


def read_puzzles(source: str) -> List[str]:
    """Raw lines from a path, or from stdin when source is '-'."""
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        lines = path.read_text(encoding="utf-8").splitlines()
    return lines


def run(cfg, lines: List[str]) -> int:
    quiet = bool(cfg.quiet)
    puzzles = [ln for ln in lines if ln.strip()]
    log(f"Loaded {len(puzzles):,} puzzle(s) from {cfg.input}", quiet=quiet)
    skipped = len(lines) - len(puzzles)
    if skipped:
        log(f"Skipped {skipped:,} blank line(s)", quiet=quiet)

    start = time.perf_counter()
    timings: List[float] = []
    impossible = 0

    for n, line in enumerate(tqdm(puzzles, desc="[solve] puzzles", unit="puzzle", disable=not cfg.progress), 1):
        stats = SearchStats()
        t0 = time.perf_counter()
        board = Board(line)
        board.solve(stats)
        took = time.perf_counter() - t0
        timings.append(took)

        if not board.is_solved_debug():
            impossible += 1
            print("Impossible Problem.")
            print(f"Took {took} seconds.")
        if cfg.show:
            print(board.to_line())
        if cfg.debug:
            print(board.debug_string())
            log(f"puzzle {n}: guesses={stats.guesses}, dead_ends={stats.dead_ends}", quiet=quiet)
        if cfg.verify:
            report = sanity_check(line, board.to_line())
            if not report["ok"]:
                print(f"[verify] puzzle {n}: {report['issues']}")

    summary = summarize_timings(timings, time.perf_counter() - start)
    print(f"Solved {summary['problems']} Sudoku boards.")
    if timings:
        print(f"Total Time: {summary['total']}")
        print(f"Solve Time: {summary['solve']}")
        print(f"Avg Time:   {summary['avg']}")
        print(f"Max Time:   {summary['max']}")
        print(f"Min Time:   {summary['min']}")
    return 1 if impossible else 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve 9x9 Sudoku puzzles, one 81-cell line per puzzle.")
    ap.add_argument("input", nargs="?", default=None, help="Puzzle file, or '-' for stdin (default: -).")
    ap.add_argument("--config", type=str, default=None, help="Optional YAML file with defaults for these flags.")
    ap.add_argument("--progress", action="store_true", default=None, help="Show a progress bar.")
    ap.add_argument("--quiet", action="store_true", default=None, help="Suppress status logs.")
    ap.add_argument("--show", action="store_true", default=None, help="Print each solved board as one line.")
    ap.add_argument("--debug", action="store_true", default=None,
                    help="Print candidate-count encoded boards and search counters.")
    ap.add_argument("--verify", action="store_true", default=None,
                    help="Check each result against its givens and the unit rules.")
    args = ap.parse_args(argv)

    try:
        cfg = resolve_config(
            args.config,
            input=args.input,
            progress=args.progress,
            quiet=args.quiet,
            show=args.show,
            debug=args.debug,
            verify=args.verify,
        )
        lines = read_puzzles(str(cfg.input))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    return run(cfg, lines)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
