"""Pygame 2D front end for archipelago.

Draws the land/water grid with its shoreline and a side panel of counts.
Clicking a cell flips it; the session recounts and the next frame shows
the result.  All state lives in the session: the renderer only reads it
and forwards input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from archipelago.session.session import GridSession

from archipelago.grid.directions import Direction
from archipelago.grid.shoreline import Edge, EdgeKind

# Colour palette
_BG = (25, 25, 25)
_LAND = (238, 238, 238)
_WATER = (102, 102, 102)
_TEXT = (200, 200, 200)

_EDGE_COLOURS: dict[EdgeKind, tuple[int, int, int]] = {
    EdgeKind.COAST: (0, 255, 0),
    EdgeKind.LAKESHORE: (0, 0, 255),
}

# Cells are drawn at this fraction of their slot, leaving a gap between them
_FILL_RATIO = 0.7


def pixel_to_cell(
    px: int,
    py: int,
    cell_size: int,
    rows: int,
    cols: int,
) -> tuple[int, int] | None:
    """Map a window pixel to ``(row, col)``, or None outside the grid."""
    if px < 0 or py < 0:
        return None
    row, col = py // cell_size, px // cell_size
    if row >= rows or col >= cols:
        return None
    return row, col


def edge_line(
    edge: Edge,
    cell_size: int,
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return the pixel end points of ``edge`` on the drawn cell square."""
    inset = cell_size * (1 - _FILL_RATIO) / 2
    left = edge.col * cell_size + inset
    top = edge.row * cell_size + inset
    right = left + cell_size * _FILL_RATIO
    bottom = top + cell_size * _FILL_RATIO

    if edge.direction is Direction.UP:
        return (left, top), (right, top)
    if edge.direction is Direction.DOWN:
        return (left, bottom), (right, bottom)
    if edge.direction is Direction.LEFT:
        return (left, top), (left, bottom)
    return (right, top), (right, bottom)


class PygameRenderer:
    """Renders a GridSession into a Pygame window and feeds it input.

    Attributes:
        session: The session to display and edit.
        cell_size: Pixel size of each grid slot.
        screen: The Pygame display surface.
    """

    def __init__(self, session: GridSession, cell_size: int = 48) -> None:
        """Initialise the renderer.

        Args:
            session: The session to render.
            cell_size: Pixel width/height per grid slot.
        """
        self.session = session
        self.cell_size = cell_size

        grid = session.grid
        self._panel_width = 220
        self._win_w = grid.cols * cell_size + self._panel_width
        self._win_h = max(grid.rows * cell_size, 260)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Archipelago")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            self.clock.tick(fps)
            self._handle_events()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                grid = self.session.grid
                pos = pixel_to_cell(*event.pos, self.cell_size, grid.rows, grid.cols)
                if pos is not None:
                    self.session.toggle_cell(*pos)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_d:
                    self.session.set_include_diagonal(
                        not self.session.grid.include_diagonal,
                    )
                elif event.key == pygame.K_c:
                    self.session.clear()
                elif event.key == pygame.K_r:
                    self.session.reverse()
                elif event.key == pygame.K_n:
                    self.session.randomize()

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_cells()
        self._draw_edges()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_cells(self) -> None:
        """Draw each cell as an inset square coloured by state."""
        cs = self.cell_size
        inset = cs * (1 - _FILL_RATIO) / 2
        side = cs * _FILL_RATIO
        for cell in self.session.grid:
            colour = _LAND if cell.is_land else _WATER
            pygame.draw.rect(
                self.screen,
                colour,
                (cell.col * cs + inset, cell.row * cs + inset, side, side),
            )

    def _draw_edges(self) -> None:
        """Outline land: green along coast, blue along lakes."""
        width = max(2, self.cell_size // 12)
        for edge in self.session.shoreline:
            start, end = edge_line(edge, self.cell_size)
            pygame.draw.line(self.screen, _EDGE_COLOURS[edge.kind], start, end, width)

    def _draw_info_panel(self) -> None:
        """Draw counts and controls on the right side of the window."""
        panel_x = self.session.grid.cols * self.cell_size + 10
        y = 10

        lines = [
            f"Islands: {self.session.island_count}",
            f"Lakes:   {self.session.lake_count}",
            f"Diagonals: {'ON' if self.session.grid.include_diagonal else 'OFF'}",
            "",
            "--- Controls ---",
            "click: flip cell",
            "D: toggle diagonals",
            "C: clear",
            "R: reverse",
            "N: new random map",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
