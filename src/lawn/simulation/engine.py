"""Frame step — one tick of the whole lawn.

Architecture
------------
``advance(dt, world)`` is the only entry point the game loop needs.  It
runs the four updates against the *same* snapshot:

  update_zombies  -> zombies
  update_plants   -> plants (peas and plant suns included)
  update_suns     -> sky
  update_cards    -> cards

and assembles the next World from their results.  No update sees another
update's output, so the order they run in does not matter and the result
is deterministic for a given (dt, world).

Zombies and plants read each other's pre-tick lists.  A pea that hits is
therefore removed by Plant Update and credited by Zombie Update in the
same tick, and a bite lands on the tick where the zombie's timer resets.

Fields the core does not own (``over``, ``money``, ``level``, ``stage``)
are carried over unchanged; game-over rules and sun collection belong to
the caller.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from lawn.config import Settings, settings

from .cards import update_cards
from .plants import update_plants
from .suns import update_suns
from .world import World
from .zombies import update_zombies


def advance(dt: float, world: World, config: Settings | None = None) -> World:
    """Return the World one tick of *dt* seconds after *world*.

    Raises:
        ValueError: If *dt* is negative.
    """
    if dt < 0:
        raise ValueError(f"dt must be non-negative, got {dt}")
    cfg = config or settings

    zombies = update_zombies(dt, world, cfg)
    plants = update_plants(dt, world, cfg)
    sky = update_suns(dt, world, cfg)
    cards = update_cards(dt, world)

    if len(zombies) != len(world.zombies) or len(plants) != len(world.plants):
        logger.debug(
            f"t={world.time + dt:.2f}: zombies {len(world.zombies)} -> {len(zombies)}, "
            f"plants {len(world.plants)} -> {len(plants)}"
        )

    return replace(
        world,
        zombies=zombies,
        plants=plants,
        cards=cards,
        sky=sky,
        time=world.time + dt,
    )


def run(world: World, dt: float, ticks: int, config: Settings | None = None) -> World:
    """Advance *world* by *ticks* fixed steps of *dt* (headless play-through)."""
    for _ in range(ticks):
        world = advance(dt, world, config)
    return world
