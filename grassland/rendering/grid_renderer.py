"""pygame rendering of the grid world.

The renderer only reads the world; it is meant to be driven from an
observer callback or a display loop, never from inside a tick.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pygame

from grassland.math_utils import Vector2d
from grassland.world import GridWorld

Color = Tuple[int, int, int]

BACKGROUND_COLOR: Color = (181, 160, 108)
EQUATOR_COLOR: Color = (150, 170, 90)
GRASS_COLOR: Color = (60, 160, 60)
ANIMAL_FULL_COLOR: Color = (120, 60, 20)
ANIMAL_WEAK_COLOR: Color = (235, 205, 170)
TEXT_COLOR: Color = (20, 20, 20)
STATS_PANEL_HEIGHT = 24


def energy_color(energy: int, full_energy: int) -> Color:
    """Blend from pale (starving) to dark brown (at or above full energy)."""
    ratio = 1.0 if full_energy <= 0 else max(0.0, min(1.0, energy / full_energy))
    return tuple(  # type: ignore[return-value]
        int(weak + (full - weak) * ratio)
        for weak, full in zip(ANIMAL_WEAK_COLOR, ANIMAL_FULL_COLOR)
    )


class GridRenderer:
    """Draws a GridWorld onto a pygame surface.

    Attributes:
        screen: Surface to draw on
        cell_size: Edge length of one cell in pixels
        font: Optional font for the stats line (no text when None)
    """

    def __init__(
        self,
        screen: pygame.Surface,
        cell_size: int = 24,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.screen = screen
        self.cell_size = cell_size
        self.font = font

    @staticmethod
    def surface_size(world: GridWorld, cell_size: int, with_stats: bool = True) -> Tuple[int, int]:
        """Pixel size needed to draw ``world`` at ``cell_size``."""
        height = world.boundary.height * cell_size
        if with_stats:
            height += STATS_PANEL_HEIGHT
        return world.boundary.width * cell_size, height

    def cell_rect(self, world: GridWorld, position: Vector2d) -> pygame.Rect:
        """Screen rectangle of a cell; row 0 of the map is at the bottom."""
        bounds = world.boundary
        col = position.x - bounds.lower_left.x
        row = bounds.upper_right.y - position.y
        return pygame.Rect(col * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size)

    def draw(self, world: GridWorld, stats: Any = None) -> None:
        """Draw ground, equator band, grass and animals."""
        self.screen.fill(BACKGROUND_COLOR)

        if world.equator is not None:
            for position in world.equator.iter_positions():
                pygame.draw.rect(self.screen, EQUATOR_COLOR, self.cell_rect(world, position))

        inset = max(1, self.cell_size // 6)
        for grass in world.grasses:
            rect = self.cell_rect(world, grass.position).inflate(-inset, -inset)
            pygame.draw.rect(self.screen, GRASS_COLOR, rect)

        full_energy = world.energy_parameters.energy_to_full
        radius = max(1, self.cell_size // 2 - inset)
        for position in world.boundary.iter_positions():
            occupants = world.k_winners(position, 1)
            if occupants:
                color = energy_color(occupants[0].energy, full_energy)
                pygame.draw.circle(
                    self.screen, color, self.cell_rect(world, position).center, radius
                )

        if stats is not None and self.font is not None:
            self.draw_stats(world, stats)

    def draw_stats(self, world: GridWorld, stats: Any) -> None:
        lines: List[str] = [
            f"Day {stats.day}",
            f"Alive {stats.alive_count}",
            f"Dead {stats.dead_count}",
            f"Grass {stats.grass_count}",
            f"Avg energy {stats.average_energy:.1f}",
        ]
        text_surface = self.font.render("  |  ".join(lines), True, TEXT_COLOR)
        top = world.boundary.height * self.cell_size + 4
        self.screen.blit(text_surface, (4, top))
