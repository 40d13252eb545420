"""Entity kinds and their constant stat tables.

Every zombie and plant is a flat record tagged with a kind; behaviour that
differs between kinds is looked up here rather than encoded in a class
hierarchy.  Adding a kind means adding an enum member and one table row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ZombieKind(str, Enum):
    """Types of zombie in a wave."""

    BASIC = "Basic"
    BUCKETHEAD = "Buckethead"


class PlantKind(str, Enum):
    """Types of plant the player can put on the lawn."""

    PEASHOOTER = "PeasShooter"
    SUNFLOWER = "Sunflower"
    WALLNUT = "Wallnut"


class ProjectileKind(str, Enum):
    """What a plant (or the sky) emits."""

    PEA = "Pea"
    SUN = "Sun"


class PlantRole(str, Enum):
    """How a plant kind treats its projectiles each tick."""

    SHOOTER = "shooter"
    SUN_PRODUCER = "sun_producer"
    STATIC = "static"


@dataclass(frozen=True)
class ZombieStats:
    speed: float     # units/second toward -x
    health: int      # damage needed to remove the zombie
    strength: int    # damage dealt per bite


@dataclass(frozen=True)
class PlantStats:
    health: int
    strength: int         # damage per pea (0 for non-shooters)
    period: float         # seconds between peas / suns
    starter_timer: float  # action timer of a freshly planted plant
    cost: int             # money needed to plant from a card
    cooldown: float       # card cooldown after planting
    role: PlantRole


ZOMBIE_STATS: dict[ZombieKind, ZombieStats] = {
    ZombieKind.BASIC:      ZombieStats(speed=10.0, health=200,  strength=100),
    ZombieKind.BUCKETHEAD: ZombieStats(speed=10.0, health=1300, strength=100),
}

PLANT_STATS: dict[PlantKind, PlantStats] = {
    PlantKind.PEASHOOTER: PlantStats(
        health=300, strength=20, period=1.5, starter_timer=0.0,
        cost=100, cooldown=5.0, role=PlantRole.SHOOTER,
    ),
    PlantKind.SUNFLOWER: PlantStats(
        health=300, strength=0, period=24.0, starter_timer=7.0,
        cost=50, cooldown=5.0, role=PlantRole.SUN_PRODUCER,
    ),
    PlantKind.WALLNUT: PlantStats(
        health=4000, strength=0, period=1.0, starter_timer=1.0,
        cost=50, cooldown=5.0, role=PlantRole.STATIC,
    ),
}
