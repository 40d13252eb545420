"""Simulation subsystem — per-frame lawn update (zombies, plants, suns, cards)."""
from .cards import update_card, update_cards
from .collision import in_line_of_sight, overlaps, pea_zombie_collide, plant_zombie_collide
from .engine import advance, run
from .kinds import (
    PLANT_STATS,
    ZOMBIE_STATS,
    PlantKind,
    PlantRole,
    PlantStats,
    ProjectileKind,
    ZombieKind,
    ZombieStats,
)
from .plants import update_plants
from .projectiles import update_projectiles
from .suns import update_suns
from .world import (
    Card,
    Plant,
    Position,
    Projectile,
    SunFall,
    World,
    Zombie,
    new_card,
    new_plant,
    new_world,
    new_zombie,
)
from .zombies import update_zombies

__all__ = [
    "Card",
    "PLANT_STATS",
    "Plant",
    "PlantKind",
    "PlantRole",
    "PlantStats",
    "Position",
    "Projectile",
    "ProjectileKind",
    "SunFall",
    "World",
    "ZOMBIE_STATS",
    "Zombie",
    "ZombieKind",
    "ZombieStats",
    "advance",
    "in_line_of_sight",
    "new_card",
    "new_plant",
    "new_world",
    "new_zombie",
    "overlaps",
    "pea_zombie_collide",
    "plant_zombie_collide",
    "run",
    "update_card",
    "update_cards",
    "update_plants",
    "update_projectiles",
    "update_suns",
    "update_zombies",
]
