"""Axis-aligned rectangle collision between lawn entities.

Rectangles are centred on entity coordinates.  Zombie sprites sit
``row_offset`` units below the plant row they walk along, so both zombie
call sites shift the zombie up by that offset before testing.  The two
call sites differ in rectangle size: plant vs zombie is cell vs cell,
pea vs zombie is pea vs cell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lawn.config import Settings, settings

if TYPE_CHECKING:
    from .world import Position, Zombie

Size = tuple[float, float]


def overlaps(size_a: Size, size_b: Size, pos_a: Position, pos_b: Position) -> bool:
    """True if two centred rectangles strictly intersect (touching edges do not)."""
    (wa, ha), (wb, hb) = size_a, size_b
    dx = abs(pos_a[0] - pos_b[0])
    dy = abs(pos_a[1] - pos_b[1])
    return 2 * dx < wa + wb and 2 * dy < ha + hb


def _zombie_row(coords: Position, cfg: Settings) -> Position:
    x, y = coords
    return (x, y - cfg.row_offset)


def plant_zombie_collide(
    zombie_coords: Position,
    plant_coords: Position,
    config: Settings | None = None,
) -> bool:
    """Is the zombie standing on the plant's cell?"""
    cfg = config or settings
    cell = (cfg.cell_width, cfg.cell_height)
    return overlaps(cell, cell, _zombie_row(zombie_coords, cfg), plant_coords)


def pea_zombie_collide(
    pea_coords: Position,
    zombie_coords: Position,
    config: Settings | None = None,
) -> bool:
    """Does the pea touch the zombie?"""
    cfg = config or settings
    return overlaps(
        (cfg.pea_size, cfg.pea_size),
        (cfg.cell_width, cfg.cell_height),
        pea_coords,
        _zombie_row(zombie_coords, cfg),
    )


def in_line_of_sight(
    plant_coords: Position,
    zombie: Zombie,
    config: Settings | None = None,
) -> bool:
    """Can a shooter at *plant_coords* see *zombie*?

    Same row (exact y match after the row offset) and the zombie has
    already entered the lawn.  Zombies behind the plant count as seen.
    """
    cfg = config or settings
    zx, zy = zombie.coords
    return plant_coords[1] == zy - cfg.row_offset and zx < cfg.right_boundary
