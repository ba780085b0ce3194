"""
Tests for single-line candidate generation (stars-and-bars placements).

Bit i of a candidate corresponds to cell i of the line.
"""

import pytest

from nonogram.csp.candidates import (
    count_candidates,
    free_slack,
    generate_candidates,
    runs_from_mask,
)
from nonogram.errors import CandidateLimitExceeded, InvalidConstraint


def test_empty_constraint_yields_single_empty_line():
    cands = generate_candidates(5, [])
    assert cands == frozenset({0})


def test_exact_fit_yields_single_full_line():
    cands = generate_candidates(5, [5])
    assert cands == frozenset({0b11111})


def test_minimal_fit_has_one_separator():
    # full, empty, full
    cands = generate_candidates(3, [1, 1])
    assert cands == frozenset({0b101})


def test_slack_is_distributed_over_every_start():
    cands = generate_candidates(4, [2])
    assert cands == frozenset({0b0011, 0b0110, 0b1100})


def test_unsatisfiable_constraint_yields_empty_set():
    assert generate_candidates(2, [3]) == frozenset()
    assert generate_candidates(4, [2, 2]) == frozenset()
    assert count_candidates(4, [2, 2]) == 0


@pytest.mark.parametrize(
    "length,constraint",
    [
        (5, []),
        (5, [1]),
        (7, [2, 1]),
        (10, [3, 1, 2]),
        (12, [1, 1, 1, 1]),
        (32, [5, 10, 3]),
    ],
)
def test_every_candidate_reproduces_its_constraint(length, constraint):
    cands = generate_candidates(length, constraint)

    assert len(cands) == count_candidates(length, constraint)
    for mask in cands:
        assert mask < (1 << length)
        assert runs_from_mask(length, mask) == tuple(constraint), \
            f"{mask:0{length}b} does not reproduce {constraint}"


def test_count_matches_binomial():
    # free = 10 - (2 + 1 + 1) = 6, n = 2 -> comb(8, 2)
    assert free_slack(10, [2, 1]) == 6
    assert count_candidates(10, [2, 1]) == 28


def test_zero_run_length_is_rejected():
    with pytest.raises(InvalidConstraint):
        generate_candidates(5, [1, 0, 2])


def test_candidate_limit_is_enforced():
    with pytest.raises(CandidateLimitExceeded):
        generate_candidates(4, [2], max_candidates=2)

    # 上限ちょうどは許可される
    assert len(generate_candidates(4, [2], max_candidates=3)) == 3


def test_runs_from_mask():
    assert runs_from_mask(6, 0b000000) == ()
    assert runs_from_mask(6, 0b111111) == (6,)
    # cells: 1 1 0 1 0 1
    assert runs_from_mask(6, 0b101011) == (2, 1, 1)
