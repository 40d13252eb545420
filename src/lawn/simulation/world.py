"""World snapshot and the entity records it is made of.

Architecture
------------
Every record is a frozen dataclass and every collection is a tuple, so a
World handed to the update functions is a read-only snapshot.  The next
frame is built with ``dataclasses.replace`` and fresh tuples; nothing is
mutated in place and two snapshots may safely share unchanged entities.

Entities carry no ids.  A zombie or plant is identified across frames only
by its position in the list and its coordinates, which is why the update
functions preserve list order.

Serialisation:
  ``World.to_dict()`` / ``World.from_dict()`` round-trip every field for
  the save/load collaborator.  Kinds are rebuilt through enum
  construction, so unknown kinds are rejected with ``ValueError`` before a
  World ever reaches the update functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from lawn.config import Settings, settings

from .kinds import (
    PLANT_STATS,
    ZOMBIE_STATS,
    PlantKind,
    ProjectileKind,
    ZombieKind,
)

Position = tuple[float, float]


def _pos(raw: Any) -> Position:
    return (float(raw[0]), float(raw[1]))


@dataclass(frozen=True)
class Projectile:
    """A pea in flight or a sun waiting to be collected."""

    kind: ProjectileKind
    coords: Position

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "coords": list(self.coords)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Projectile:
        return cls(kind=ProjectileKind(data["kind"]), coords=_pos(data["coords"]))


@dataclass(frozen=True)
class Zombie:
    """A single attacker walking toward -x."""

    kind: ZombieKind
    coords: Position
    damage: int = 0        # damage received so far
    seconds: float = 0.0   # time left until the next bite

    @property
    def alive(self) -> bool:
        return self.damage < ZOMBIE_STATS[self.kind].health

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "coords": list(self.coords),
            "damage": self.damage,
            "seconds": self.seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Zombie:
        return cls(
            kind=ZombieKind(data["kind"]),
            coords=_pos(data["coords"]),
            damage=int(data.get("damage", 0)),
            seconds=float(data.get("seconds", 0.0)),
        )


@dataclass(frozen=True)
class Plant:
    """A defender occupying one lawn cell.

    ``projectiles`` holds the peas a shooter has in flight, or the suns a
    sunflower has produced and not yet had collected.
    """

    kind: PlantKind
    coords: Position
    damage: int = 0
    projectiles: tuple[Projectile, ...] = ()
    seconds: float = 0.0   # time left until the next pea / sun

    @property
    def alive(self) -> bool:
        return self.damage <= PLANT_STATS[self.kind].health

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "coords": list(self.coords),
            "damage": self.damage,
            "projectiles": [p.to_dict() for p in self.projectiles],
            "seconds": self.seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Plant:
        return cls(
            kind=PlantKind(data["kind"]),
            coords=_pos(data["coords"]),
            damage=int(data.get("damage", 0)),
            projectiles=tuple(
                Projectile.from_dict(p) for p in data.get("projectiles", [])
            ),
            seconds=float(data.get("seconds", 0.0)),
        )


@dataclass(frozen=True)
class Card:
    """A seed card in the picker bar."""

    plant_kind: PlantKind
    coords: Position
    active: bool = False   # currently chosen by the player
    seconds: float = 0.0   # cooldown left before the card can be used

    @property
    def ready(self) -> bool:
        return self.seconds == 0

    @property
    def cost(self) -> int:
        return PLANT_STATS[self.plant_kind].cost

    def use(self) -> Card:
        """Return this card deselected with its cooldown restarted."""
        return replace(
            self, active=False, seconds=PLANT_STATS[self.plant_kind].cooldown
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "plant_kind": self.plant_kind.value,
            "coords": list(self.coords),
            "active": self.active,
            "seconds": self.seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Card:
        return cls(
            plant_kind=PlantKind(data["plant_kind"]),
            coords=_pos(data["coords"]),
            active=bool(data.get("active", False)),
            seconds=float(data.get("seconds", 0.0)),
        )


@dataclass(frozen=True)
class SunFall:
    """Suns falling from the sky plus time left until the next one."""

    suns: tuple[Projectile, ...] = ()
    seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "suns": [s.to_dict() for s in self.suns],
            "seconds": self.seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SunFall:
        return cls(
            suns=tuple(Projectile.from_dict(s) for s in data.get("suns", [])),
            seconds=float(data.get("seconds", 0.0)),
        )


@dataclass(frozen=True)
class World:
    """Complete game snapshot at the start of a tick."""

    zombies: tuple[Zombie, ...] = ()
    plants: tuple[Plant, ...] = ()
    cards: tuple[Card, ...] = ()
    sky: SunFall = field(default_factory=SunFall)
    over: bool = False     # set by the game rules outside the core
    time: float = 0.0      # seconds since the level started
    money: int = 0
    level: int = 1
    stage: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "zombies": [z.to_dict() for z in self.zombies],
            "plants": [p.to_dict() for p in self.plants],
            "cards": [c.to_dict() for c in self.cards],
            "sky": self.sky.to_dict(),
            "over": self.over,
            "time": self.time,
            "money": self.money,
            "level": self.level,
            "stage": self.stage,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> World:
        """Build a World from ``to_dict`` output.

        Raises:
            KeyError: If a required entity field is missing.
            ValueError: If a kind name is unknown.
        """
        return cls(
            zombies=tuple(Zombie.from_dict(z) for z in data.get("zombies", [])),
            plants=tuple(Plant.from_dict(p) for p in data.get("plants", [])),
            cards=tuple(Card.from_dict(c) for c in data.get("cards", [])),
            sky=SunFall.from_dict(data.get("sky", {})),
            over=bool(data.get("over", False)),
            time=float(data.get("time", 0.0)),
            money=int(data.get("money", 0)),
            level=int(data.get("level", 1)),
            stage=int(data.get("stage", 1)),
        )


# --------------------------------------------------------------------------
# Factories used by level setup and the planting handler
# --------------------------------------------------------------------------

def new_zombie(kind: ZombieKind, coords: Position) -> Zombie:
    return Zombie(kind=kind, coords=coords)


def new_plant(kind: PlantKind, coords: Position) -> Plant:
    """A freshly planted plant with its kind's starting action timer."""
    return Plant(kind=kind, coords=coords, seconds=PLANT_STATS[kind].starter_timer)


def new_card(plant_kind: PlantKind, coords: Position) -> Card:
    return Card(plant_kind=plant_kind, coords=coords)


def new_world(
    zombies: tuple[Zombie, ...] = (),
    plants: tuple[Plant, ...] = (),
    cards: tuple[Card, ...] = (),
    money: int = 0,
    level: int = 1,
    stage: int = 1,
    config: Settings | None = None,
) -> World:
    """Start-of-level World; the sky sun timer starts at a full interval."""
    cfg = config or settings
    return World(
        zombies=tuple(zombies),
        plants=tuple(plants),
        cards=tuple(cards),
        sky=SunFall(suns=(), seconds=cfg.sky_sun_interval),
        money=money,
        level=level,
        stage=stage,
    )
