"""Group rules — the predicate sets that turn group-finding into counting.

``Grid.find_groups`` is generic: it is told which cells belong to a group,
how to judge a finished group, which neighbours are adjacent, and what to
label the survivors.  A ``GroupRule`` bundles those four choices.  Islands
and lakes are the two rules the grid ships with.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archipelago.grid.cell import Cell, Label
from archipelago.grid.directions import AdjacencyMode

if TYPE_CHECKING:
    from archipelago.grid.grid import Grid

IncludeTest = Callable[[Cell], bool]
ValidityTest = Callable[["Grid", Cell], bool]


def is_land(cell: Cell) -> bool:
    return cell.is_land


def is_water(cell: Cell) -> bool:
    return cell.is_water


def always_valid(grid: Grid, cell: Cell) -> bool:
    return True


def is_enclosed(grid: Grid, cell: Cell) -> bool:
    """Return True if ``cell`` has all four perpendicular neighbours.

    Only cells away from the grid boundary pass, so a water group judged
    by a boundary cell is open water rather than a lake.
    """
    return len(grid.neighbors(cell, AdjacencyMode.PERPENDICULAR)) == 4


@dataclass(frozen=True)
class GroupRule:
    """Everything ``Grid.find_groups`` needs to count one kind of group.

    Attributes:
        include_test: Whether a cell may join a group.
        validity_test: Judges a finished group from its representative
            (last-added) cell.
        mode: Adjacency used while flood filling.
        label: Written onto every member of an accepted group.
    """

    include_test: IncludeTest
    validity_test: ValidityTest
    mode: AdjacencyMode
    label: Label

    @classmethod
    def islands(cls, include_diagonal: bool = False) -> GroupRule:
        """Connected land; diagonal contact joins islands when enabled."""
        mode = AdjacencyMode.ALL if include_diagonal else AdjacencyMode.PERPENDICULAR
        return cls(is_land, always_valid, mode, Label.ISLAND)

    @classmethod
    def lakes(cls, include_diagonal: bool = False) -> GroupRule:
        """Connected water that does not reach the grid boundary.

        Adjacency is the inverse of the island rule.  If land connects
        diagonally, water separated by that diagonal must stay apart, and
        vice versa.
        """
        mode = AdjacencyMode.PERPENDICULAR if include_diagonal else AdjacencyMode.ALL
        return cls(is_water, is_enclosed, mode, Label.LAKE)
