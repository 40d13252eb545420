"""Sun Update — suns dropping from the sky on a fixed interval.

Independent of sunflowers.  Sky suns are only spawned here; moving them
down the screen and collecting them for money is done by the caller.
"""

from __future__ import annotations

from loguru import logger

from lawn.config import Settings, settings

from .kinds import ProjectileKind
from .world import Projectile, SunFall, World


def update_suns(dt: float, world: World, config: Settings | None = None) -> SunFall:
    """Prepend a sky sun when the countdown expires, otherwise count down."""
    cfg = config or settings
    sky = world.sky
    seconds = sky.seconds - dt
    if seconds > 0:
        return SunFall(suns=sky.suns, seconds=seconds)

    sun = Projectile(ProjectileKind.SUN, cfg.sky_sun_position)
    logger.debug(f"Sky sun spawned at {sun.coords}")
    return SunFall(suns=(sun,) + sky.suns, seconds=cfg.sky_sun_interval)
