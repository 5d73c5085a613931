"""Cell — a single square of the land/water grid.

A cell's ``state`` belongs to whoever edits the map.  ``visited`` and
``label`` are scratch fields owned by ``Grid.find_groups``: they are reset
at the start of every pass and only mean something right after one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class State(IntEnum):
    """What the cell is made of."""

    WATER = 0
    LAND = 1

    @property
    def flipped(self) -> State:
        return State.WATER if self is State.LAND else State.LAND


class Label(Enum):
    """Classification written back by the last group-finding pass."""

    UNKNOWN = "unknown"
    ISLAND = "island"
    LAKE = "lake"


@dataclass
class Cell:
    """A single square in the grid.

    Attributes:
        row: Row index (zero-based).
        col: Column index (zero-based).
        state: Land or water.
        visited: Set while a group-finding pass has reached this cell.
        label: Group kind assigned by the last pass.
    """

    row: int
    col: int
    state: State = State.WATER
    visited: bool = False
    label: Label = Label.UNKNOWN

    @property
    def is_land(self) -> bool:
        return self.state == State.LAND

    @property
    def is_water(self) -> bool:
        return self.state == State.WATER
