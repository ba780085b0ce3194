"""
Tests for converting SolveResult into numpy / pandas / JSON-ready values.
"""

import json

import numpy as np

from nonogram import solve
from nonogram.postprocess.export_result import UNKNOWN, build_result, to_array, to_frame


def test_to_array_solved():
    result = solve([[1, 2], [3]], [[2], [1], [2], [1]])
    arr = to_array(result)

    assert arr.dtype == np.int8
    assert arr.shape == (2, 4)
    assert arr.tolist() == [[1, 0, 1, 1], [1, 1, 1, 0]]


def test_to_array_marks_unknown_cells():
    result = solve([[1], [1]], [[1], [1]])
    arr = to_array(result)

    assert (arr == UNKNOWN).all()


def test_to_frame():
    result = solve([[1], [3], [1]], [[1], [3], [1]])
    frame = to_frame(result)

    assert frame.shape == (3, 3)
    assert frame.index.name == "row"
    assert frame.columns.name == "col"
    assert frame.loc[1].tolist() == [1, 1, 1]
    assert frame[0].tolist() == [0, 1, 0]


def test_build_result_is_json_serializable():
    result = solve([[2], []], [[], [1]])
    raw = build_result(result)

    assert raw["status"] == "contradiction"
    assert raw["shape"] == (2, 2)
    assert raw["dimensions"] == "2x2"
    assert raw["grid"] == [[-1, -1], [-1, -1]]
    json.dumps(raw)
