"""Plant Update — projectiles, zombie bites, removal of eaten plants."""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from lawn.config import Settings, settings

from .collision import plant_zombie_collide
from .kinds import ZOMBIE_STATS
from .projectiles import update_projectiles
from .world import Plant, World, Zombie


def bite_lands(dt: float, zombie: Zombie, plant: Plant, config: Settings | None = None) -> bool:
    """Does *zombie* bite *plant* during this tick?

    Reads the zombie's pre-tick timer: the bite lands on the tick where
    Zombie Update resets that timer.
    """
    if not plant_zombie_collide(zombie.coords, plant.coords, config):
        return False
    return zombie.seconds - dt <= 0


def attack_plant(dt: float, world: World, plant: Plant, config: Settings | None = None) -> Plant:
    """Apply every bite landing on *plant* this tick; damage from several zombies sums."""
    damage = plant.damage
    for z in world.zombies:
        if bite_lands(dt, z, plant, config):
            damage += ZOMBIE_STATS[z.kind].strength
    if damage == plant.damage:
        return plant
    return replace(plant, damage=damage)


def delete_plants(plants: tuple[Plant, ...]) -> tuple[Plant, ...]:
    """Remove plants whose damage exceeds their health (damage == health survives)."""
    survivors = []
    for p in plants:
        if p.alive:
            survivors.append(p)
        else:
            logger.debug(f"{p.kind.value} at {p.coords} eaten ({p.damage} damage)")
    return tuple(survivors)


def update_plants(dt: float, world: World, config: Settings | None = None) -> tuple[Plant, ...]:
    """Next frame's plant list, computed from the *world* snapshot."""
    cfg = config or settings
    plants = update_projectiles(dt, world, world.plants, cfg)
    plants = tuple(attack_plant(dt, world, p, cfg) for p in plants)
    return delete_plants(plants)
