"""Config — load session parameters from YAML files.

Grid size, adjacency, the starting map and display settings live in YAML
and are parsed into a typed dataclass here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class SessionConfig:
    """Top-level session configuration.

    Attributes:
        seed: RNG seed for reproducible random maps.
        rows: Number of grid rows.
        cols: Number of grid columns.
        include_diagonal: Whether diagonal land contact joins islands.
        land_fraction: Chance each cell starts as land (0 = all water).
        cell_size: Pixel size per grid cell in the UI.
        fps: Target UI frame rate.
    """

    seed: int = 42
    rows: int = 8
    cols: int = 8
    include_diagonal: bool = False
    land_fraction: float = 0.0
    cell_size: int = 48
    fps: int = 30

    @classmethod
    def from_yaml(cls, path: str | Path) -> SessionConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SessionConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            rows=data.get("rows", cls.rows),
            cols=data.get("cols", cls.cols),
            include_diagonal=data.get("include_diagonal", cls.include_diagonal),
            land_fraction=data.get("land_fraction", cls.land_fraction),
            cell_size=data.get("cell_size", cls.cell_size),
            fps=data.get("fps", cls.fps),
        )
