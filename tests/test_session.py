"""Tests for archipelago.session — config loading and the grid session."""

from pathlib import Path

import numpy as np

from archipelago.grid.cell import Label, State
from archipelago.session.config import SessionConfig
from archipelago.session.session import GridSession


class TestSessionConfig:
    """Tests for YAML config loading."""

    def test_defaults(self) -> None:
        cfg = SessionConfig()
        assert cfg.seed == 42
        assert cfg.rows == 8
        assert cfg.cols == 8
        assert cfg.include_diagonal is False

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("rows: 5\ncols: 6\ninclude_diagonal: true\n")
        cfg = SessionConfig.from_yaml(yaml_file)
        assert cfg.rows == 5
        assert cfg.cols == 6
        assert cfg.include_diagonal is True
        assert cfg.seed == 42

    def test_from_empty_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert SessionConfig.from_yaml(yaml_file) == SessionConfig()

    def test_default_file_loads(self) -> None:
        path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
        cfg = SessionConfig.from_yaml(path)
        assert cfg.rows == 8


class TestGridSession:
    """Tests for the session controller."""

    def test_initialises_empty(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        assert session.grid.rows == default_config.rows
        assert session.island_count == 0
        assert session.lake_count == 0

    def test_toggle_recounts(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        assert session.toggle_cell(2, 2) is State.LAND
        assert session.island_count == 1
        session.toggle_cell(2, 2)
        assert session.island_count == 0

    def test_ring_makes_a_lake(self) -> None:
        session = GridSession(config=SessionConfig(rows=3, cols=3))
        session.reverse()
        assert session.island_count == 1
        assert session.lake_count == 0
        session.set_cell_state(1, 1, State.WATER)
        assert session.lake_count == 1

    def test_diagonal_toggle(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        session.set_cell_state(0, 0, State.LAND)
        session.set_cell_state(1, 1, State.LAND)
        assert session.island_count == 2
        session.set_include_diagonal(True)
        assert session.island_count == 1

    def test_clear(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        session.reverse()
        session.clear()
        assert session.grid.to_array().sum() == 0
        assert session.island_count == 0

    def test_random_start_is_seeded(self) -> None:
        cfg = SessionConfig(seed=7, land_fraction=0.5)
        a = GridSession(config=cfg)
        b = GridSession(config=cfg)
        assert np.array_equal(a.grid.to_array(), b.grid.to_array())
        assert a.island_count == b.island_count
        assert a.grid.to_array().sum() > 0

    def test_randomize(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        session.randomize(1.0)
        assert session.island_count == 1

    def test_edges(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        session.toggle_cell(3, 3)
        assert len(session.edges()) == 4

    def test_shoreline_cached_until_refresh(self, default_config: SessionConfig) -> None:
        session = GridSession(config=default_config)
        session.toggle_cell(3, 3)
        cached = session.shoreline
        # Reading edges does not rerun a pass over the grid
        session.grid.get(0, 0).label = Label.ISLAND
        assert session.edges() is cached
        assert session.grid.get(0, 0).label is Label.ISLAND
        session.toggle_cell(3, 4)
        assert session.shoreline is not cached
        assert len(session.shoreline) == 6
