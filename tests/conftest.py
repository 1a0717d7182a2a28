"""Shared pytest fixtures for mapgeom tests."""

import tempfile
from pathlib import Path

import pytest

from mapgeom import utils


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def quiet():
    """Reset verbose printing after every test."""
    original_verbose = utils.VERBOSE
    yield
    utils.VERBOSE = original_verbose


@pytest.fixture
def sample_multi_polygon():
    """Provide a multipolygon with a holed polygon and a plain one."""
    return [
        [
            [[0, 0], [10, 0], [10, 10], [0, 10]],
            [[2, 2], [4, 2], [4, 4], [2, 4]],
        ],
        [
            [[-20.5, 40.25], [-15.0, 40.25], [-15.0, 45.0]],
        ],
    ]


@pytest.fixture
def sample_multi_line():
    """Provide a multiline of two disjoint strokes."""
    return [
        [[0, 0], [1, 1], [2, 0]],
        [[100, -45], [120, -50]],
    ]
