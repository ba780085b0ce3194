"""
Tests for line consensus, the compatibility filter and BitLineState.
"""

import pytest

from nonogram.csp.candidates import generate_candidates
from nonogram.csp.consensus import consensus, filter_candidates, is_compatible
from nonogram.csp.line_state import BitLineState
from nonogram.errors import ContradictionError


def test_consensus_of_overlapping_block():
    # [3] on 4 cells: 0111 / 1110 -> the middle two cells are always full
    cands = generate_candidates(4, [3])
    forced_filled, certain = consensus(cands, 4)

    assert forced_filled == 0b0110
    assert certain == 0b0110


def test_consensus_without_overlap_learns_nothing():
    forced_filled, certain = consensus(generate_candidates(4, [2]), 4)
    assert forced_filled == 0
    assert certain == 0


def test_consensus_of_empty_constraint_is_all_empty():
    forced_filled, certain = consensus(generate_candidates(5, []), 5)
    assert forced_filled == 0
    assert certain == 0b11111


def test_consensus_reports_forced_empty_cells():
    # 1100 / 0110 -> cell 1 full, cell 3 empty
    forced_filled, certain = consensus({0b0011, 0b0110}, 4)
    assert forced_filled == 0b0010
    assert certain == 0b1010


def test_consensus_of_empty_set_is_a_contradiction():
    with pytest.raises(ContradictionError):
        consensus(set(), 4)


def test_is_compatible():
    # known: cells 0 and 2, filled: cell 0
    assert is_compatible(0b0001, 0b0001, 0b0101)
    assert is_compatible(0b1011, 0b0001, 0b0101)
    assert not is_compatible(0b0100, 0b0001, 0b0101)  # cell 0 empty, cell 2 full
    assert not is_compatible(0b0101, 0b0001, 0b0101)  # cell 2 must be empty
    # nothing known: everything fits
    assert is_compatible(0b1111, 0, 0)


def test_filter_candidates_discards_contradicting_placements():
    cands = generate_candidates(4, [2])
    # cell 0 known empty
    assert filter_candidates(cands, 0, 0b0001) == {0b0110, 0b1100}
    # cell 3 known full
    assert filter_candidates(cands, 0b1000, 0b1000) == {0b1100}
    # nothing known: a copy of the input
    assert filter_candidates(cands, 0, 0) == set(cands)


def test_line_state_consensus_and_merge():
    state = BitLineState(4, filled=0, known=0b0001)
    remaining = state.filter(generate_candidates(4, [2]))
    agreed = state.consensus(remaining)

    assert agreed == BitLineState(4, filled=0b0100, known=0b0101)

    merged = state.merge(agreed)
    assert merged.filled == 0b0100
    assert merged.known == 0b0101
    assert merged.known_count == 2
    assert not merged.is_complete


def test_line_state_merge_conflict():
    a = BitLineState(3, filled=0b001, known=0b001)
    b = BitLineState(3, filled=0b000, known=0b001)
    with pytest.raises(ContradictionError):
        a.merge(b)


def test_line_state_rejects_filled_outside_known():
    with pytest.raises(ValueError):
        BitLineState(3, filled=0b010, known=0b001)
    with pytest.raises(ValueError):
        BitLineState(3, filled=0, known=0b1000)


class _EmptyLineOnly(BitLineState):
    def is_compatible(self, candidate):
        return candidate == 0


def test_line_state_filter_goes_through_is_compatible():
    state = BitLineState(4, filled=0b1000, known=0b1001)
    cands = generate_candidates(4, [2])
    assert state.filter(cands) == {c for c in cands if state.is_compatible(c)}

    # overriding is_compatible alone changes what filter() keeps
    assert _EmptyLineOnly(3).filter({0, 0b001, 0b011}) == {0}
