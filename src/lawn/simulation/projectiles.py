"""Projectile Update — peas and plant-grown suns, dispatched by plant role.

Per plant, per tick:

  shooter       move peas -> drop peas past the right boundary or touching
                a zombie -> fire / hold / reset the timer
  sun producer  count down; on expiry add a sun next to the plant
  static        unchanged

Zombies are read from the pre-tick snapshot, never from Zombie Update's
output, so a pea that hits a zombie is consumed here while the same hit is
credited as damage over in ``zombies.py``.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from lawn.config import Settings, settings

from .collision import in_line_of_sight, pea_zombie_collide
from .kinds import PLANT_STATS, PlantRole, ProjectileKind
from .world import Plant, Projectile, World


def move_pea(dt: float, pea: Projectile, config: Settings | None = None) -> Projectile:
    """Advance a pea along +x by ``dt * pea_speed``."""
    cfg = config or settings
    x, y = pea.coords
    return Projectile(ProjectileKind.PEA, (x + dt * cfg.pea_speed, y))


def move_peas(dt: float, plant: Plant, config: Settings | None = None) -> Plant:
    return replace(
        plant,
        projectiles=tuple(move_pea(dt, pr, config) for pr in plant.projectiles),
    )


def prune_peas(world: World, plant: Plant, config: Settings | None = None) -> Plant:
    """Drop peas that left the lawn or hit any zombie."""
    cfg = config or settings

    def keep(pr: Projectile) -> bool:
        if pr.coords[0] >= cfg.right_boundary:
            return False
        return not any(
            pea_zombie_collide(pr.coords, z.coords, cfg) for z in world.zombies
        )

    return replace(plant, projectiles=tuple(pr for pr in plant.projectiles if keep(pr)))


def shoot(dt: float, world: World, plant: Plant, config: Settings | None = None) -> Plant:
    """Fire a pea if a zombie is in sight and the timer has run out.

    With nothing in sight the timer is forced to 0 so the plant fires
    immediately once a zombie walks into its row.
    """
    cfg = config or settings
    if not any(in_line_of_sight(plant.coords, z, cfg) for z in world.zombies):
        return replace(plant, seconds=0.0)

    seconds = plant.seconds - dt
    if seconds > 0:
        return replace(plant, seconds=seconds)

    x, y = plant.coords
    pea = Projectile(ProjectileKind.PEA, (x + cfg.pea_spawn_offset, y))
    logger.debug(f"{plant.kind.value} at {plant.coords} fired pea at {pea.coords}")
    return replace(
        plant,
        projectiles=(pea,) + plant.projectiles,
        seconds=PLANT_STATS[plant.kind].period,
    )


def send_sun(dt: float, plant: Plant, config: Settings | None = None) -> Plant:
    """Count down a sun producer and grow a sun when the timer expires."""
    cfg = config or settings
    seconds = plant.seconds - dt
    if seconds > 0:
        return replace(plant, seconds=seconds)

    x, y = plant.coords
    ox, oy = cfg.plant_sun_offset
    sun = Projectile(ProjectileKind.SUN, (x + ox, y + oy))
    logger.debug(f"{plant.kind.value} at {plant.coords} produced sun")
    return replace(
        plant,
        projectiles=(sun,) + plant.projectiles,
        seconds=PLANT_STATS[plant.kind].period,
    )


def update_projectile(
    dt: float, world: World, plant: Plant, config: Settings | None = None
) -> Plant:
    role = PLANT_STATS[plant.kind].role
    if role is PlantRole.SHOOTER:
        plant = move_peas(dt, plant, config)
        plant = prune_peas(world, plant, config)
        return shoot(dt, world, plant, config)
    if role is PlantRole.SUN_PRODUCER:
        return send_sun(dt, plant, config)
    return plant


def update_projectiles(
    dt: float,
    world: World,
    plants: tuple[Plant, ...] | None = None,
    config: Settings | None = None,
) -> tuple[Plant, ...]:
    """Run the projectile step for *plants* (default: the world's plants)."""
    if plants is None:
        plants = world.plants
    return tuple(update_projectile(dt, world, p, config) for p in plants)
