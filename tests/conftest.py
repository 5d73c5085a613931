"""Shared fixtures for the archipelago test suite."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest
from numpy.random import Generator

from archipelago.grid.grid import Grid
from archipelago.session.config import SessionConfig

GridFactory = Callable[..., Grid]


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """An all-water 8x8 grid."""
    return Grid(rows=8, cols=8)


@pytest.fixture
def make_grid() -> GridFactory:
    """Build a grid from text rows where ``#`` is land and ``.`` is water."""

    def _make(*rows: str, include_diagonal: bool = False) -> Grid:
        mask = [[ch == "#" for ch in row] for row in rows]
        return Grid.from_array(mask, include_diagonal=include_diagonal)

    return _make


@pytest.fixture
def default_config() -> SessionConfig:
    """Default session config (no YAML file needed)."""
    return SessionConfig()
