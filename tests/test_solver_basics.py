# tests/test_solver_basics.py
from solver.solver_core import Board, SearchStats
from solver.sudoku_tools import sanity_check


def test_reference_puzzle_solves(reference, reference_solution):
    b = Board(reference)
    assert b.solve()
    assert b.is_solved_debug()
    assert b.to_line() == reference_solution


def test_hard_puzzle_needs_search(hard):
    stats = SearchStats()
    b = Board(hard)
    assert not b.is_solved()
    assert b.solve(stats)
    assert b.is_solved_debug()
    assert stats.guesses >= 1
    assert stats.dead_ends <= stats.guesses
    assert sanity_check(hard, b.to_line())["ok"]


def test_blank_board_gets_a_valid_completion():
    b = Board("." * 81)
    assert b.solve()
    assert b.is_solved_debug()


def test_zero_blanks_same_as_dots(reference):
    zeros = reference.replace(".", "0")
    assert Board(zeros).to_line() == Board(reference).to_line()


def test_solving_is_deterministic(hard):
    first = Board(hard)
    second = Board(hard)
    assert first.solve() and second.solve()
    assert first.to_line() == second.to_line()
    blank_a, blank_b = Board(""), Board("")
    blank_a.solve()
    blank_b.solve()
    assert blank_a.to_line() == blank_b.to_line()


def test_solve_on_solved_board_is_a_no_op(reference_solution):
    stats = SearchStats()
    b = Board(reference_solution)
    assert b.solve(stats)
    assert stats.guesses == 0
    assert b.to_line() == reference_solution


def test_failed_solve_leaves_board_unsolved():
    b = Board("11")
    assert not b.solve()
    assert not b.is_solved_debug()
    assert "." in b.to_line()
