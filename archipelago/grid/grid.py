"""Grid — the land/water map and its connected-group search.

The Grid owns a rectangular table of cells and provides the spatial
queries (bounds, neighbours, row-major iteration) that the group finder
is built from.  ``find_groups`` is the one generic algorithm; counting
islands and lakes are two rule sets fed into it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from archipelago.grid.cell import Cell, Label, State
from archipelago.grid.directions import AdjacencyMode, Direction
from archipelago.grid.errors import InvalidSizeError, OutOfBoundsError
from archipelago.grid.rules import GroupRule, IncludeTest, ValidityTest

if TYPE_CHECKING:
    from numpy.random import Generator

logger = logging.getLogger(__name__)


@dataclass
class Grid:
    """A fixed-size 2D grid of land and water cells.

    Attributes:
        rows: Number of rows (≥ 1).
        cols: Number of columns (≥ 1).
        include_diagonal: If True, diagonally touching land joins one
            island (and lakes fill perpendicular-only).
        cells: 2D list of Cell objects indexed as ``cells[row][col]``.
    """

    rows: int
    cols: int
    include_diagonal: bool = False
    cells: list[list[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate every cell as unvisited, unlabelled water."""
        if self.rows < 1 or self.cols < 1:
            msg = f"grid must be at least 1x1, got {self.rows}x{self.cols}"
            raise InvalidSizeError(msg)
        self.cells = [
            [Cell(row=row, col=col) for col in range(self.cols)]
            for row in range(self.rows)
        ]

    @classmethod
    def from_array(cls, mask: ArrayLike, *, include_diagonal: bool = False) -> Grid:
        """Build a grid from a 2D array where non-zero means land.

        Raises:
            InvalidSizeError: If ``mask`` is not 2D or has an empty axis.
        """
        arr = np.asarray(mask)
        if arr.ndim != 2:
            msg = f"mask must be 2D, got {arr.ndim}D"
            raise InvalidSizeError(msg)
        grid = cls(rows=arr.shape[0], cols=arr.shape[1], include_diagonal=include_diagonal)
        for cell in grid:
            if arr[cell.row, cell.col]:
                cell.state = State.LAND
        return grid

    def to_array(self) -> NDArray[np.int8]:
        """Return cell states as a ``(rows, cols)`` array of 0/1."""
        return np.array(
            [[int(cell.state) for cell in row] for row in self.cells],
            dtype=np.int8,
        )

    # ------------------------------------------------------------------
    # Spatial queries
    # ------------------------------------------------------------------

    def exists(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        if not self.exists(row, col):
            msg = f"({row}, {col}) out of bounds for {self.rows}x{self.cols}"
            raise OutOfBoundsError(msg)
        return self.cells[row][col]

    def neighbor(self, cell: Cell, direction: Direction | str) -> Cell | None:
        """Return the neighbour of ``cell`` in ``direction``, if any.

        Args:
            cell: Origin cell.
            direction: A Direction or its token (``"up"``, ``"ll"``, ...).

        Returns:
            The adjacent cell, or None if it would fall outside the grid.

        Raises:
            InvalidDirectionError: If ``direction`` is not recognised.
        """
        d = Direction.parse(direction)
        row, col = cell.row + d.d_row, cell.col + d.d_col
        return self.cells[row][col] if self.exists(row, col) else None

    def has_neighbor(
        self,
        cell: Cell,
        direction: Direction | str,
        test: Callable[[Cell], bool],
    ) -> bool:
        """Return True if a neighbour exists in ``direction`` and passes ``test``."""
        nbr = self.neighbor(cell, direction)
        return False if nbr is None else test(nbr)

    def neighbors(self, cell: Cell, mode: AdjacencyMode | str) -> list[Cell]:
        """Return the in-bounds neighbours of ``cell``.

        Order is fixed: up, down, left, right, then (for ``ALL``) up-right,
        up-left, down-right, down-left.

        Raises:
            InvalidAdjacencyModeError: If ``mode`` is not recognised.
        """
        perpendicular_only = AdjacencyMode.parse(mode) is AdjacencyMode.PERPENDICULAR
        result: list[Cell] = []
        for d in Direction:
            if perpendicular_only and d.is_diagonal:
                continue
            nbr = self.neighbor(cell, d)
            if nbr is not None:
                result.append(nbr)
        return result

    def next_cell(self, cell: Cell) -> Cell | None:
        """Return the cell after ``cell`` in row-major order, or None at the end."""
        if cell.col < self.cols - 1:
            return self.cells[cell.row][cell.col + 1]
        if cell.row < self.rows - 1:
            return self.cells[cell.row + 1][0]
        return None

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def for_each(self, visitor: Callable[[Cell], object]) -> None:
        """Apply ``visitor`` to every cell in row-major order."""
        for cell in self:
            visitor(cell)

    # ------------------------------------------------------------------
    # Mutation surface
    # ------------------------------------------------------------------

    def set_cell_state(self, row: int, col: int, state: State | int) -> None:
        """Set one cell to land or water.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
            ValueError: If ``state`` is not 0/1 or a State.
        """
        self.get(row, col).state = State(state)

    def toggle_cell(self, row: int, col: int) -> State:
        """Flip one cell between land and water and return its new state."""
        cell = self.get(row, col)
        cell.state = State(cell.state).flipped
        return cell.state

    def toggle_adjacency_mode(self, include_diagonal: bool) -> None:
        """Set whether diagonal land contact joins islands."""
        self.include_diagonal = include_diagonal

    def clear(self) -> None:
        """Turn every cell into water."""
        for cell in self:
            cell.state = State.WATER

    def reverse(self) -> None:
        """Swap land and water everywhere."""
        for cell in self:
            cell.state = State(cell.state).flipped

    def randomize(self, rng: Generator, land_fraction: float = 0.4) -> None:
        """Make each cell land with probability ``land_fraction``.

        Args:
            rng: Seeded random generator.
            land_fraction: Probability (0.0-1.0) that a cell becomes land.
        """
        draws = rng.random((self.rows, self.cols)) < land_fraction
        for cell in self:
            cell.state = State.LAND if draws[cell.row, cell.col] else State.WATER

    # ------------------------------------------------------------------
    # Group finding
    # ------------------------------------------------------------------

    def reset_traversal_state(self) -> None:
        """Clear ``visited`` and ``label`` on every cell."""
        for cell in self:
            cell.visited = False
            cell.label = Label.UNKNOWN

    def find_groups(
        self,
        include_test: IncludeTest,
        validity_test: ValidityTest,
        mode: AdjacencyMode | str,
        label: Label,
    ) -> int:
        """Count connected groups of cells passing ``include_test``.

        Cells are swept in row-major order.  Every unvisited cell that
        passes ``include_test`` seeds a depth-first flood fill over
        ``mode`` neighbours.  A neighbour is marked visited the first time
        it is seen, whether or not it joins the group, so excluded cells
        stop the fill and are never looked at again.

        When the fill is done, ``validity_test`` is asked once about the
        last cell added to the group.  A rejected group is dropped
        unlabelled; an accepted one is counted and every member receives
        ``label``.

        Args:
            include_test: Whether a cell may belong to a group.
            validity_test: Judges the finished group by its last member.
            mode: Adjacency used while filling.
            label: Label written onto members of accepted groups.

        Returns:
            Number of accepted groups.
        """
        mode = AdjacencyMode.parse(mode)
        self.reset_traversal_state()

        count = 0
        rejected = 0
        for cell in self:
            if cell.visited:
                continue
            cell.visited = True
            if not include_test(cell):
                continue

            members = self._fill(cell, include_test, mode)
            if not validity_test(self, members[-1]):
                rejected += 1
                continue
            count += 1
            for member in members:
                member.label = label

        logger.debug(
            "found %d %s group(s) (%d rejected) in %dx%d grid, %s adjacency",
            count,
            label.value,
            rejected,
            self.rows,
            self.cols,
            mode.value,
        )
        return count

    def _fill(
        self,
        start: Cell,
        include_test: IncludeTest,
        mode: AdjacencyMode,
    ) -> list[Cell]:
        """Collect the group reachable from ``start`` in depth-first order.

        Each frame on the stack holds the not-yet-examined neighbours of
        one member, consumed from the end of the ``neighbors`` list.
        """
        members = [start]
        stack = [self.neighbors(start, mode)]
        while stack:
            pending = stack[-1]
            if not pending:
                stack.pop()
                continue
            nbr = pending.pop()
            if nbr.visited:
                continue
            nbr.visited = True
            if include_test(nbr):
                members.append(nbr)
                stack.append(self.neighbors(nbr, mode))
        return members

    def classify(self, rule: GroupRule) -> int:
        """Run ``find_groups`` with the predicates bundled in ``rule``."""
        return self.find_groups(
            rule.include_test,
            rule.validity_test,
            rule.mode,
            rule.label,
        )

    def count_islands(self) -> int:
        """Count islands and label their cells ``Label.ISLAND``."""
        return self.classify(GroupRule.islands(self.include_diagonal))

    def count_lakes(self) -> int:
        """Count enclosed lakes and label their cells ``Label.LAKE``."""
        return self.classify(GroupRule.lakes(self.include_diagonal))
