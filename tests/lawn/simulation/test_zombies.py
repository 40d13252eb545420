"""Unit tests for Zombie Update: pea damage, removal, biting and walking."""

from __future__ import annotations

import pytest

from lawn.config import Settings
from lawn.simulation.kinds import PlantKind, ProjectileKind, ZOMBIE_STATS, ZombieKind
from lawn.simulation.world import Plant, Projectile, World, Zombie
from lawn.simulation.zombies import (
    bite_plant,
    delete_zombies,
    move_zombie,
    shoot_zombies,
    update_zombies,
)

pytestmark = pytest.mark.unit

CFG = Settings()


def _shooter(peas: list[tuple[float, float]], coords=(100.0, 80.0)) -> Plant:
    return Plant(
        kind=PlantKind.PEASHOOTER,
        coords=coords,
        projectiles=tuple(Projectile(ProjectileKind.PEA, p) for p in peas),
        seconds=1.0,
    )


# --------------------------------------------------------------------------
# Walking
# --------------------------------------------------------------------------

class TestMovement:
    def test_basic_zombie_walks_left_on_empty_lawn(self):
        world = World(zombies=(Zombie(ZombieKind.BASIC, (500.0, 0.0)),))
        (z,) = update_zombies(1.0, world, CFG)
        assert z.coords == pytest.approx((500.0 - ZOMBIE_STATS[ZombieKind.BASIC].speed, 0.0))
        assert z.damage == 0

    @pytest.mark.parametrize("dt", [0.0, 0.1, 0.5, 3.0])
    def test_move_is_linear_in_dt(self, dt):
        z = Zombie(ZombieKind.BUCKETHEAD, (700.0, 160.0))
        moved = move_zombie(dt, z)
        assert moved.coords[0] == pytest.approx(700.0 - dt * ZOMBIE_STATS[ZombieKind.BUCKETHEAD].speed)
        assert moved.coords[1] == 160.0

    def test_zombie_on_plant_does_not_walk(self):
        plant = Plant(kind=PlantKind.WALLNUT, coords=(300.0, 80.0), seconds=1.0)
        z = Zombie(ZombieKind.BASIC, (320.0, 160.0), seconds=0.5)
        world = World(zombies=(z,), plants=(plant,))
        (after,) = update_zombies(0.2, world, CFG)
        assert after.coords == (320.0, 160.0)
        assert after.seconds == pytest.approx(0.3)

    def test_zombie_in_other_row_walks_past_plant(self):
        plant = Plant(kind=PlantKind.WALLNUT, coords=(300.0, 180.0), seconds=1.0)
        z = Zombie(ZombieKind.BASIC, (320.0, 160.0))
        (after,) = update_zombies(1.0, World(zombies=(z,), plants=(plant,)), CFG)
        assert after.coords == pytest.approx((310.0, 160.0))


# --------------------------------------------------------------------------
# Biting timer
# --------------------------------------------------------------------------

class TestBiteTimer:
    def test_counts_down(self):
        z = bite_plant(0.25, Zombie(ZombieKind.BASIC, (0.0, 0.0), seconds=1.0), CFG)
        assert z.seconds == pytest.approx(0.75)

    def test_resets_to_one_second_when_expired(self):
        z = bite_plant(0.5, Zombie(ZombieKind.BASIC, (0.0, 0.0), seconds=0.2), CFG)
        assert z.seconds == 1.0

    def test_resets_at_exactly_zero(self):
        z = bite_plant(0.5, Zombie(ZombieKind.BASIC, (0.0, 0.0), seconds=0.5), CFG)
        assert z.seconds == 1.0

    def test_reset_value_comes_from_settings(self):
        cfg = Settings(bite_reset=2.5)
        z = bite_plant(1.0, Zombie(ZombieKind.BASIC, (0.0, 0.0), seconds=0.0), cfg)
        assert z.seconds == 2.5


# --------------------------------------------------------------------------
# Pea damage
# --------------------------------------------------------------------------

class TestPeaDamage:
    def test_pea_hit_after_moving(self):
        world = World(
            zombies=(Zombie(ZombieKind.BASIC, (200.0, 160.0)),),
            plants=(_shooter([(150.0, 80.0)]),),
        )
        (z,) = update_zombies(0.2, world, CFG)
        assert z.damage == 20

    def test_pea_that_will_not_reach_zombie_does_no_damage(self):
        world = World(
            zombies=(Zombie(ZombieKind.BASIC, (400.0, 160.0)),),
            plants=(_shooter([(150.0, 80.0)]),),
        )
        (z,) = update_zombies(0.2, world, CFG)
        assert z.damage == 0

    def test_overlapping_peas_sum(self):
        world = World(
            zombies=(Zombie(ZombieKind.BUCKETHEAD, (300.0, 160.0)),),
            plants=(
                _shooter([(295.0, 80.0), (300.0, 80.0)]),
                _shooter([(305.0, 80.0)], coords=(0.0, 80.0)),
            ),
        )
        (z,) = shoot_zombies(0.0, world, world.zombies, CFG)
        assert z.damage == 60

    def test_sun_producers_deal_no_damage(self):
        sunflower = Plant(
            kind=PlantKind.SUNFLOWER,
            coords=(100.0, 80.0),
            projectiles=(Projectile(ProjectileKind.SUN, (300.0, 80.0)),),
            seconds=5.0,
        )
        world = World(zombies=(Zombie(ZombieKind.BASIC, (300.0, 160.0)),), plants=(sunflower,))
        (z,) = shoot_zombies(0.0, world, world.zombies, CFG)
        assert z.damage == 0


class TestGroupedShot:
    def test_only_first_of_stacked_zombies_is_hit(self):
        stacked = (
            Zombie(ZombieKind.BASIC, (300.0, 160.0)),
            Zombie(ZombieKind.BASIC, (300.0, 160.0)),
        )
        world = World(zombies=stacked, plants=(_shooter([(290.0, 80.0)]),))
        first, second = update_zombies(0.1, world, CFG)
        assert first.damage == 20
        assert second.damage == 0
        # Both still walk independently
        assert first.coords == second.coords == pytest.approx((299.0, 160.0))

    def test_distinct_positions_are_hit_separately(self):
        zs = (
            Zombie(ZombieKind.BASIC, (300.0, 160.0)),
            Zombie(ZombieKind.BASIC, (310.0, 160.0)),
        )
        world = World(zombies=zs, plants=(_shooter([(305.0, 80.0)]),))
        a, b = shoot_zombies(0.0, world, world.zombies, CFG)
        assert a.damage == 20
        assert b.damage == 20

    def test_first_seen_rule_ignores_adjacency(self):
        zs = (
            Zombie(ZombieKind.BASIC, (300.0, 160.0)),
            Zombie(ZombieKind.BASIC, (600.0, 160.0)),
            Zombie(ZombieKind.BASIC, (300.0, 160.0)),
        )
        world = World(zombies=zs, plants=(_shooter([(300.0, 80.0)]),))
        a, b, c = shoot_zombies(0.0, world, world.zombies, CFG)
        assert (a.damage, b.damage, c.damage) == (20, 0, 0)

    def test_stacked_zombies_die_one_at_a_time(self):
        stacked = (
            Zombie(ZombieKind.BASIC, (300.0, 160.0), damage=180),
            Zombie(ZombieKind.BASIC, (300.0, 160.0), damage=180),
        )
        world = World(zombies=stacked, plants=(_shooter([(300.0, 80.0)]),))
        remaining = update_zombies(0.0, world, CFG)
        assert len(remaining) == 1
        assert remaining[0].damage == 180


# --------------------------------------------------------------------------
# Removal threshold
# --------------------------------------------------------------------------

class TestRemoval:
    def test_damage_equal_to_health_removes(self):
        health = ZOMBIE_STATS[ZombieKind.BASIC].health
        assert delete_zombies((Zombie(ZombieKind.BASIC, (0.0, 0.0), damage=health),)) == ()

    def test_damage_one_below_health_survives(self):
        health = ZOMBIE_STATS[ZombieKind.BASIC].health
        z = Zombie(ZombieKind.BASIC, (0.0, 0.0), damage=health - 1)
        assert delete_zombies((z,)) == (z,)

    def test_killing_hit_removes_in_same_tick(self):
        world = World(
            zombies=(Zombie(ZombieKind.BASIC, (300.0, 160.0), damage=180),),
            plants=(_shooter([(300.0, 80.0)]),),
        )
        assert update_zombies(0.0, world, CFG) == ()

    def test_hit_leaving_one_hp_survives(self):
        world = World(
            zombies=(Zombie(ZombieKind.BASIC, (300.0, 160.0), damage=179),),
            plants=(_shooter([(300.0, 80.0)]),),
        )
        (z,) = update_zombies(0.0, world, CFG)
        assert z.damage == 199

    def test_order_of_survivors_is_preserved(self):
        zs = (
            Zombie(ZombieKind.BASIC, (900.0, 160.0)),
            Zombie(ZombieKind.BASIC, (300.0, 160.0), damage=500),
            Zombie(ZombieKind.BUCKETHEAD, (700.0, 260.0)),
        )
        result = update_zombies(0.0, World(zombies=zs), CFG)
        assert [z.coords for z in result] == [(900.0, 160.0), (700.0, 260.0)]
