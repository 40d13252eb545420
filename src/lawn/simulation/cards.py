"""Card Update — seed card cooldowns."""

from __future__ import annotations

from dataclasses import replace

from .world import Card, World


def update_card(dt: float, card: Card) -> Card:
    """Count the cooldown down, stopping at exactly 0.

    A card never restarts its own cooldown; ``Card.use()`` does that when
    the player plants from it.
    """
    seconds = card.seconds - dt
    if seconds <= 0:
        return replace(card, seconds=0.0)
    return replace(card, seconds=seconds)


def update_cards(dt: float, world: World) -> tuple[Card, ...]:
    return tuple(update_card(dt, c) for c in world.cards)
