"""Zombie Update — pea damage, removal, then bite or walk.

Pipeline per tick (all reads come from the pre-tick snapshot):

  1. shoot   zombies sharing exact coordinates form a group; only the
             first-seen member of each group takes pea damage.  Every pea
             of every shooter is advanced by ``dt`` and, if it overlaps,
             adds that shooter's strength.  Hits sum; they are not capped.
  2. delete  zombies with ``damage >= health`` are removed.
  3. act     a zombie standing on any plant cell bites (timer countdown),
             otherwise it walks ``dt * speed`` toward -x.

Grouping exists because several zombies can be stacked on one spot and
must still die one after the other.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from lawn.config import Settings, settings

from .collision import pea_zombie_collide, plant_zombie_collide
from .kinds import PLANT_STATS, ZOMBIE_STATS, PlantRole
from .projectiles import move_pea
from .world import Position, World, Zombie


def attack_zombie(dt: float, world: World, zombie: Zombie, config: Settings | None = None) -> Zombie:
    """Add the damage of every shooter pea that will overlap *zombie* after moving."""
    damage = zombie.damage
    for plant in world.plants:
        stats = PLANT_STATS[plant.kind]
        if stats.role is not PlantRole.SHOOTER:
            continue
        for pr in plant.projectiles:
            moved = move_pea(dt, pr, config)
            if pea_zombie_collide(moved.coords, zombie.coords, config):
                damage += stats.strength
    if damage == zombie.damage:
        return zombie
    return replace(zombie, damage=damage)


def shoot_zombies(
    dt: float,
    world: World,
    zombies: tuple[Zombie, ...],
    config: Settings | None = None,
) -> tuple[Zombie, ...]:
    """Apply pea damage to the first zombie seen at each distinct position."""
    seen: set[Position] = set()
    result = []
    for z in zombies:
        if z.coords in seen:
            result.append(z)
            continue
        seen.add(z.coords)
        result.append(attack_zombie(dt, world, z, config))
    return tuple(result)


def delete_zombies(zombies: tuple[Zombie, ...]) -> tuple[Zombie, ...]:
    """Remove zombies whose damage reached their health."""
    survivors = []
    for z in zombies:
        if z.alive:
            survivors.append(z)
        else:
            logger.debug(f"{z.kind.value} zombie at {z.coords} eliminated ({z.damage} damage)")
    return tuple(survivors)


def bite_plant(dt: float, zombie: Zombie, config: Settings | None = None) -> Zombie:
    """Count down the bite timer; restart it once it runs out."""
    cfg = config or settings
    seconds = zombie.seconds - dt
    if seconds <= 0:
        return replace(zombie, seconds=cfg.bite_reset)
    return replace(zombie, seconds=seconds)


def move_zombie(dt: float, zombie: Zombie) -> Zombie:
    x, y = zombie.coords
    return replace(zombie, coords=(x - dt * ZOMBIE_STATS[zombie.kind].speed, y))


def update_zombie(dt: float, world: World, zombie: Zombie, config: Settings | None = None) -> Zombie:
    """Bite if standing on any plant, otherwise walk."""
    if any(plant_zombie_collide(zombie.coords, p.coords, config) for p in world.plants):
        return bite_plant(dt, zombie, config)
    return move_zombie(dt, zombie)


def update_zombies(dt: float, world: World, config: Settings | None = None) -> tuple[Zombie, ...]:
    """Next frame's zombie list, computed from the *world* snapshot."""
    cfg = config or settings
    zombies = shoot_zombies(dt, world, world.zombies, cfg)
    zombies = delete_zombies(zombies)
    return tuple(update_zombie(dt, world, z, cfg) for z in zombies)
