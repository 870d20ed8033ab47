"""Core Sudoku engine: per-cell candidate sets, the shared row/column/box topology, and a Board that propagates eliminations and backtracks on the most constrained cell."""

# solver_core.py
# Constraint propagation + search:
# - CandidateSet: 9-bit mask of digits still possible for a cell
# - topology: 27 groups (rows, cols, boxes) and the groups each cell belongs to
# - Board: assign/remove with cascading singles, hidden singles via group counts,
#   depth-first search on the cell with the fewest candidates
# Digits are 0-indexed internally (0..8 for 1..9). Cells are 0..80, row-major.

from __future__ import annotations

from dataclasses import dataclass

from types_sudoku import Candidates, Grid

DOMAIN = 9
CELLS = DOMAIN * DOMAIN
BLANKS = "0."


class CandidateSet:
    """Digits still possible for one cell, stored as a bit mask."""

    __slots__ = ("_bits",)

    FULL = (1 << DOMAIN) - 1

    def __init__(self, bits: int = FULL):
        self._bits = bits

    def count_remaining(self) -> int:
        return bin(self._bits).count("1")

    def contains(self, digit: int) -> bool:
        return bool(self._bits >> digit & 1)

    def eliminate(self, digit: int) -> None:
        self._bits &= ~(1 << digit)

    def clear(self) -> None:
        self._bits = 0

    def sole_value(self) -> int:
        """Lowest remaining digit; only meaningful when count_remaining() == 1."""
        for d in range(DOMAIN):
            if self.contains(d):
                return d
        return DOMAIN

    def digits(self) -> list[int]:
        return [d for d in range(DOMAIN) if self.contains(d)]

    def copy(self) -> CandidateSet:
        return CandidateSet(self._bits)

    def __eq__(self, other):
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self):
        return f"CandidateSet({[d + 1 for d in self.digits()]})"


def build_topology() -> tuple[tuple[tuple[int, ...], ...], tuple[tuple[int, ...], ...]]:
    """Return (groups, membership). Groups are row 0, col 0, row 1, col 1, ... then the 9 boxes."""
    groups: list[tuple[int, ...]] = []
    for r in range(DOMAIN):
        groups.append(tuple(DOMAIN * r + c for c in range(DOMAIN)))
        groups.append(tuple(DOMAIN * c + r for c in range(DOMAIN)))
    for r0 in range(0, DOMAIN, 3):
        for c0 in range(0, DOMAIN, 3):
            groups.append(tuple(DOMAIN * r + c for r in range(r0, r0 + 3) for c in range(c0, c0 + 3)))

    membership: list[list[int]] = [[] for _ in range(CELLS)]
    for g, cells in enumerate(groups):
        for cell in cells:
            membership[cell].append(g)
    return tuple(groups), tuple(tuple(m) for m in membership)


# Built once per process, shared read-only by every Board.
GROUPS, MEMBERSHIP = build_topology()


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def cell_to_key(cell: int) -> str:
    return rc_to_key(cell // DOMAIN + 1, cell % DOMAIN + 1)


def grid_to_line(grid: Grid) -> str:
    return "".join(str(v) if v else "." for row in grid for v in row)


@dataclass
class SearchStats:
    """Instrumentation counters for one solve."""

    guesses: int = 0
    dead_ends: int = 0


class Board:
    """81 candidate sets plus per-group remaining counts for every digit.

    Building a Board from a puzzle line runs the initial wave of assignments.
    A contradiction found while building is not raised: the board is left
    infeasible and solve()/is_solved_debug() report it.
    """

    def __init__(self, line: str = ""):
        self._cells = [CandidateSet() for _ in range(CELLS)]
        self._counts = [[DOMAIN] * DOMAIN for _ in GROUPS]

        i = 0
        for ch in line:
            if i >= CELLS:
                break
            if "1" <= ch <= "9":
                d = ord(ch) - ord("1")
                if not self._cells[i].contains(d):
                    # given clashes with an earlier given
                    self._cells[i].clear()
                    return
                if not self.assign(i, d):
                    return
                i += 1
            elif ch in BLANKS:
                i += 1

    @classmethod
    def from_grid(cls, grid: Grid) -> Board:
        return cls(grid_to_line(grid))

    def copy(self) -> Board:
        other = Board.__new__(Board)
        other._cells = [c.copy() for c in self._cells]
        other._counts = [row[:] for row in self._counts]
        return other

    def _adopt(self, other: Board) -> None:
        self._cells = other._cells
        self._counts = other._counts

    # ----------------------------
    # Inspection
    # ----------------------------
    def cell(self, i: int) -> CandidateSet:
        return self._cells[i]

    def group_count(self, group: int, digit: int) -> int:
        return self._counts[group][digit]

    def is_solved(self) -> bool:
        return all(c.count_remaining() == 1 for c in self._cells)

    def is_solved_debug(self) -> bool:
        """is_solved() plus a full recount of every row, column and box."""
        if not self.is_solved():
            return False
        for cells in GROUPS:
            if len({self._cells[i].sole_value() for i in cells}) != DOMAIN:
                return False
        return True

    def smallest(self) -> int:
        """Index of the first unfixed cell with the fewest candidates, or CELLS if none."""
        best = DOMAIN + 1
        best_i = CELLS
        for i, c in enumerate(self._cells):
            n = c.count_remaining()
            if n == 1:
                continue
            if n < best:
                best = n
                best_i = i
        return best_i

    # ----------------------------
    # Propagation
    # ----------------------------
    def assign(self, cell: int, digit: int) -> bool:
        """Fix `cell` to `digit` by removing every other candidate. False on contradiction."""
        if not self._cells[cell].contains(digit):
            raise ValueError(f"digit {digit + 1} is not a candidate of {cell_to_key(cell)}")
        for d in range(DOMAIN):
            if d == digit:
                continue
            if not self.remove(cell, d):
                return False
        return True

    def remove(self, cell: int, digit: int) -> bool:
        """Eliminate `digit` from `cell` and cascade. False on contradiction."""
        c = self._cells[cell]
        if not c.contains(digit):
            return True
        c.eliminate(digit)
        n = c.count_remaining()
        if n == 0:
            return False
        if n == 1:
            # naked single: no peer may keep this value
            sole = c.sole_value()
            for g in MEMBERSHIP[cell]:
                for other in GROUPS[g]:
                    if other == cell:
                        continue
                    if not self.remove(other, sole):
                        return False

        # hidden single: a group with one place left for `digit` gets it assigned
        for g in MEMBERSHIP[cell]:
            self._counts[g][digit] -= 1
            left = self._counts[g][digit]
            if left == 0:
                return False
            if left != 1:
                continue
            home = next((x for x in GROUPS[g] if self._cells[x].contains(digit)), None)
            if home is None:
                # count went stale during the cascade above; nowhere left for digit
                return False
            if not self.assign(home, digit):
                return False
        return True

    # ----------------------------
    # Search
    # ----------------------------
    def solve(self, stats: SearchStats | None = None) -> bool:
        """Complete the board by propagation + backtracking. On success this board holds the solution."""
        if stats is None:
            stats = SearchStats()
        result = self._search(stats)
        if result is None:
            return False
        self._adopt(result)
        return True

    def _search(self, stats: SearchStats) -> Board | None:
        if self.is_solved():
            return self
        i = self.smallest()
        for d in self._cells[i].digits():
            stats.guesses += 1
            trial = self.copy()
            if not trial.assign(i, d):
                stats.dead_ends += 1
                continue
            solved = trial._search(stats)
            if solved is not None:
                return solved
        return None

    # ----------------------------
    # Output
    # ----------------------------
    def to_line(self) -> str:
        return "".join(
            str(c.sole_value() + 1) if c.count_remaining() == 1 else "." for c in self._cells
        )

    def debug_string(self) -> str:
        out = []
        for c in self._cells:
            n = c.count_remaining()
            out.append(str(c.sole_value() + 1) if n == 1 else chr(ord("A") + n))
        return "".join(out)

    def to_grid(self) -> Grid:
        vals = [c.sole_value() + 1 if c.count_remaining() == 1 else 0 for c in self._cells]
        return [vals[r * DOMAIN:(r + 1) * DOMAIN] for r in range(DOMAIN)]

    def candidates(self) -> Candidates:
        cand = {}
        for i, c in enumerate(self._cells):
            if c.count_remaining() != 1:
                cand[cell_to_key(i)] = [d + 1 for d in c.digits()]
        return cand

    def __str__(self):
        return self.to_line()
