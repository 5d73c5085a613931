"""Compass directions and adjacency modes.

Each of the eight directions carries a fixed ``(d_row, d_col)`` offset and
a category (perpendicular or diagonal).  Declaration order is the order in
which ``Grid.neighbors`` enumerates them.
"""

from __future__ import annotations

from enum import Enum

from archipelago.grid.errors import InvalidAdjacencyModeError, InvalidDirectionError


class DirectionType(Enum):
    """Whether a direction shares an edge or only a corner with its cell."""

    PERPENDICULAR = "perpendicular"
    DIAGONAL = "diagonal"


class AdjacencyMode(Enum):
    """Which neighbours count as adjacent when building groups."""

    PERPENDICULAR = "perpendicular"
    ALL = "all"

    @classmethod
    def parse(cls, mode: AdjacencyMode | str) -> AdjacencyMode:
        """Return ``mode`` as an AdjacencyMode.

        Raises:
            InvalidAdjacencyModeError: If ``mode`` is not a known mode.
        """
        if isinstance(mode, cls):
            return mode
        for member in cls:
            if member.value == mode:
                return member
        msg = f"{mode!r} is not an adjacency mode; must be 'perpendicular' or 'all'"
        raise InvalidAdjacencyModeError(msg)


class Direction(Enum):
    """The eight compass directions.

    Attributes:
        token: Short name used by callers (``"up"``, ``"ur"``, ...).
        d_row: Row offset of the neighbour.
        d_col: Column offset of the neighbour.
        kind: Perpendicular or diagonal.
    """

    UP = ("up", -1, 0, DirectionType.PERPENDICULAR)
    DOWN = ("down", 1, 0, DirectionType.PERPENDICULAR)
    LEFT = ("left", 0, -1, DirectionType.PERPENDICULAR)
    RIGHT = ("right", 0, 1, DirectionType.PERPENDICULAR)
    UP_RIGHT = ("ur", -1, 1, DirectionType.DIAGONAL)
    UP_LEFT = ("ul", -1, -1, DirectionType.DIAGONAL)
    DOWN_RIGHT = ("lr", 1, 1, DirectionType.DIAGONAL)
    DOWN_LEFT = ("ll", 1, -1, DirectionType.DIAGONAL)

    def __init__(
        self,
        token: str,
        d_row: int,
        d_col: int,
        kind: DirectionType,
    ) -> None:
        self.token = token
        self.d_row = d_row
        self.d_col = d_col
        self.kind = kind

    @property
    def is_diagonal(self) -> bool:
        return self.kind is DirectionType.DIAGONAL

    @classmethod
    def parse(cls, direction: Direction | str) -> Direction:
        """Return ``direction`` as a Direction.

        Accepts a member, its short token, or a hyphenated long name such
        as ``"up-right"``.

        Raises:
            InvalidDirectionError: If the token is not one of the eight.
        """
        if isinstance(direction, cls):
            return direction
        found = _BY_TOKEN.get(direction) if isinstance(direction, str) else None
        if found is None:
            tokens = ", ".join(f"'{d.token}'" for d in cls)
            msg = f"{direction!r} is an invalid direction; must be one of {tokens}"
            raise InvalidDirectionError(msg)
        return found

    @classmethod
    def perpendicular(cls) -> list[Direction]:
        """Return the four edge-sharing directions in enumeration order."""
        return [d for d in cls if not d.is_diagonal]


_BY_TOKEN: dict[str, Direction] = {d.token: d for d in Direction}
_BY_TOKEN.update({d.name.lower().replace("_", "-"): d for d in Direction})
