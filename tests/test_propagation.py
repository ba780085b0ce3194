"""
End-to-end tests for the row/column propagation Board.

Row masks use bit c for column c, so the row "1011" (cells 0, 2, 3 full)
is 0b1101.
"""

import pytest

from nonogram import solve
from nonogram.config import MAX_CANDIDATES_PER_LINE, PLACEMENT_CACHE_SIZE
from nonogram.csp.candidates import _placements, count_candidates
from nonogram.csp.propagation import Board, check_candidate_budget
from nonogram.errors import (
    CandidateLimitExceeded,
    ConstraintCountMismatch,
    DimensionOverflow,
    InvalidConstraint,
)
from nonogram.types import (
    COL_PHASE,
    CONTRADICTION,
    ROW_PHASE,
    SOLVED,
    STUCK,
    Constraints,
    Dimensions,
)


EXAMPLE_ROWS = [[2, 2], [4], [1], [2, 1], [1]]
EXAMPLE_COLS = [[1, 2], [2, 1], [1, 1], [2, 1], [2]]
EXAMPLE_GRID = [
    [1, 1, 0, 1, 1],
    [0, 1, 1, 1, 1],
    [1, 0, 0, 0, 0],
    [1, 1, 0, 1, 0],
    [0, 0, 1, 0, 0],
]


def _board(rows, cols, dims=None):
    return Board(Constraints.from_lists(rows, cols), dims)


def test_solvable_4x2():
    board = _board([[1, 2], [3]], [[2], [1], [2], [1]], Dimensions(rows=2, cols=4))
    result = board.solve()

    assert result.status == SOLVED
    assert result.known == [0b1111, 0b1111]
    # row 0 = "1011", row 1 = "1110"
    assert result.filled == [0b1101, 0b0111]
    assert result.grid() == [[1, 0, 1, 1], [1, 1, 1, 0]]


def test_contradiction_2x2():
    # row 0 [2] fills column 0, which must be empty
    result = _board([[2], []], [[], [1]]).solve()

    assert result.status == CONTRADICTION
    assert result.filled == [0, 0]
    assert result.known == [0, 0]
    assert result.message


def test_unsatisfiable_line_is_a_contradiction():
    result = _board([[3], [1]], [[1], [1]]).solve()
    assert result.status == CONTRADICTION


def test_ambiguous_board_is_stuck():
    # two diagonal solutions
    result = _board([[1], [1]], [[1], [1]]).solve()

    assert result.status == STUCK
    assert result.known == [0, 0]
    assert result.passes == 1
    assert result.cell(0, 0) is None


def test_example_5x5():
    result = solve(EXAMPLE_ROWS, EXAMPLE_COLS)

    assert result.status == SOLVED
    assert result.grid() == EXAMPLE_GRID


def test_plus_shape_3x3():
    result = solve([[1], [3], [1]], [[1], [3], [1]])
    assert result.grid() == [[0, 1, 0], [1, 1, 1], [0, 1, 0]]


def test_full_32x32_board():
    result = solve([[32]] * 32, [[32]] * 32)

    assert result.status == SOLVED
    assert result.filled == [0xFFFFFFFF] * 32


def test_known_only_grows_and_candidates_only_shrink():
    board = _board(EXAMPLE_ROWS, EXAMPLE_COLS)
    prev_filled, prev_known = board.snapshot()
    prev_rows, prev_cols = board.candidate_counts()

    while board.run_pass() is None:
        filled, known = board.snapshot()
        rows, cols = board.candidate_counts()

        for r in range(5):
            assert prev_known[r] & ~known[r] == 0
            assert prev_filled[r] & ~filled[r] == 0
            assert filled[r] & ~known[r] == 0
        assert all(a >= b for a, b in zip(prev_rows, rows))
        assert all(a >= b for a, b in zip(prev_cols, cols))

        prev_filled, prev_known = filled, known
        prev_rows, prev_cols = rows, cols

    assert board.status == SOLVED


def test_extra_pass_after_solved_changes_nothing():
    board = _board(EXAMPLE_ROWS, EXAMPLE_COLS)
    board.solve()
    before = board.snapshot()

    board.run_phase(ROW_PHASE)
    board.run_phase(COL_PHASE)

    assert board.snapshot() == before
    # terminal boards report their status without running again
    assert board.run_pass() == SOLVED


def test_result_requires_terminal_state():
    board = _board(EXAMPLE_ROWS, EXAMPLE_COLS)
    with pytest.raises(RuntimeError):
        board.result()


def test_dimension_overflow():
    with pytest.raises(DimensionOverflow):
        _board([[]], [[]] * 33)
    with pytest.raises(DimensionOverflow):
        _board([], [[1]])


def test_constraint_count_mismatch():
    with pytest.raises(ConstraintCountMismatch):
        _board([[1]], [[1]], Dimensions(rows=2, cols=1))
    with pytest.raises(ConstraintCountMismatch):
        _board([[1]], [[1]], Dimensions(rows=1, cols=3))


def test_invalid_run_length():
    with pytest.raises(InvalidConstraint):
        _board([[0]], [[1]])


def test_candidate_limit_is_checked_at_construction():
    with pytest.raises(CandidateLimitExceeded):
        Board(Constraints.from_lists([[1]], [[1]] * 8), max_candidates=4)


def test_row_broken_by_column_phase_is_a_contradiction():
    # both columns fill the single row as "11", which breaks its [1]
    result = solve([[1]], [[1], [1]])

    assert result.status == CONTRADICTION
    assert result.passes == 1
    assert result.known == [0]


def test_default_line_limit_rejects_the_worst_32_cell_line():
    worst = [1] * 9
    assert count_candidates(32, worst) > MAX_CANDIDATES_PER_LINE

    with pytest.raises(CandidateLimitExceeded):
        solve([worst] * 4, [[1]] * 32)


def test_board_budget_is_checked_before_enumeration():
    constraints = Constraints.from_lists([[1]] * 4, [[1]] * 4)

    # 8 lines of 4 candidates each
    assert check_candidate_budget(constraints, Dimensions(rows=4, cols=4)) == 32
    with pytest.raises(CandidateLimitExceeded):
        Board(constraints, max_board_candidates=31)
    Board(constraints, max_board_candidates=32)


def test_placement_cache_is_bounded():
    assert _placements.cache_info().maxsize == PLACEMENT_CACHE_SIZE
