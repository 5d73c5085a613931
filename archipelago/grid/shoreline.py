"""Shoreline — the outline drawn around land.

Each land cell contributes one edge per perpendicular side that does not
face other land.  Sides facing a lake are lakeshore; everything else
(open water or the map boundary) is coast.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from archipelago.grid.cell import Cell, Label
from archipelago.grid.directions import Direction

if TYPE_CHECKING:
    from archipelago.grid.grid import Grid


class EdgeKind(Enum):
    """What lies on the far side of a shoreline edge."""

    COAST = "coast"
    LAKESHORE = "lakeshore"


@dataclass(frozen=True)
class Edge:
    """One side of a land cell that borders something other than land.

    Attributes:
        row: Row of the land cell.
        col: Column of the land cell.
        direction: Which side of the cell the edge lies on.
        kind: Coast or lakeshore.
    """

    row: int
    col: int
    direction: Direction
    kind: EdgeKind


def _is_land(cell: Cell) -> bool:
    return cell.is_land


def _is_lake(cell: Cell) -> bool:
    return cell.label is Label.LAKE


def shoreline_edges(grid: Grid) -> list[Edge]:
    """Return every shoreline edge of ``grid`` in row-major order.

    Runs ``grid.count_lakes()`` first so lake labels are current; any
    island labels from an earlier pass are cleared as a result.
    """
    grid.count_lakes()

    edges: list[Edge] = []
    for cell in grid:
        if not cell.is_land:
            continue
        for direction in Direction.perpendicular():
            if grid.has_neighbor(cell, direction, _is_land):
                continue
            kind = (
                EdgeKind.LAKESHORE
                if grid.has_neighbor(cell, direction, _is_lake)
                else EdgeKind.COAST
            )
            edges.append(Edge(cell.row, cell.col, direction, kind))
    return edges
