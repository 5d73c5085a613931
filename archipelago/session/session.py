"""GridSession — the controller a front end talks to.

Owns the grid and keeps the island and lake counts in step with it.  Every
mutation goes through the session, which recounts immediately afterwards,
so a renderer only ever has to read ``island_count`` and ``lake_count``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from archipelago.grid.cell import State
from archipelago.grid.grid import Grid
from archipelago.grid.shoreline import Edge, shoreline_edges
from archipelago.session.config import SessionConfig

logger = logging.getLogger(__name__)


@dataclass
class GridSession:
    """An editable map plus its current counts.

    Attributes:
        config: Loaded session configuration.
        grid: The land/water grid.
        rng: Seeded random generator for new maps.
        island_count: Islands found by the last refresh.
        lake_count: Lakes found by the last refresh.
        shoreline: Coast and lakeshore edges from the last refresh.
    """

    config: SessionConfig
    grid: Grid = field(init=False)
    rng: Generator = field(init=False)
    island_count: int = field(init=False, default=0)
    lake_count: int = field(init=False, default=0)
    shoreline: list[Edge] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        """Build the grid and RNG from config, then count."""
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = Grid(
            rows=self.config.rows,
            cols=self.config.cols,
            include_diagonal=self.config.include_diagonal,
        )
        if self.config.land_fraction > 0:
            self.grid.randomize(self.rng, self.config.land_fraction)
        self.refresh()

    def refresh(self) -> None:
        """Recount islands and lakes and rebuild the shoreline."""
        self.island_count = self.grid.count_islands()
        self.lake_count = self.grid.count_lakes()
        self.shoreline = shoreline_edges(self.grid)
        logger.info(
            "islands=%d lakes=%d (diagonal=%s)",
            self.island_count,
            self.lake_count,
            self.grid.include_diagonal,
        )

    def toggle_cell(self, row: int, col: int) -> State:
        """Flip one cell between land and water and recount."""
        state = self.grid.toggle_cell(row, col)
        logger.info("cell (%d, %d) -> %s", row, col, state.name.lower())
        self.refresh()
        return state

    def set_cell_state(self, row: int, col: int, state: State | int) -> None:
        """Set one cell to land or water and recount."""
        self.grid.set_cell_state(row, col, state)
        self.refresh()

    def set_include_diagonal(self, include_diagonal: bool) -> None:
        """Switch adjacency mode and recount."""
        self.grid.toggle_adjacency_mode(include_diagonal)
        logger.info("diagonal adjacency %s", "on" if include_diagonal else "off")
        self.refresh()

    def clear(self) -> None:
        """Flood the whole map and recount."""
        self.grid.clear()
        logger.info("map cleared")
        self.refresh()

    def reverse(self) -> None:
        """Swap land and water everywhere and recount."""
        self.grid.reverse()
        logger.info("map reversed")
        self.refresh()

    def randomize(self, land_fraction: float | None = None) -> None:
        """Deal a new random map and recount.

        Args:
            land_fraction: Chance each cell is land.  Defaults to the
                configured fraction, or 0.4 if that is zero.
        """
        if land_fraction is None:
            land_fraction = self.config.land_fraction or 0.4
        self.grid.randomize(self.rng, land_fraction)
        logger.info("new random map (land_fraction=%.2f)", land_fraction)
        self.refresh()

    def edges(self) -> list[Edge]:
        """Return the shoreline computed by the last refresh."""
        return self.shoreline
