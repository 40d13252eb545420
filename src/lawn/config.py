"""Configuration management using Pydantic settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Field geometry and timing constants loaded from environment variables.

    Per-kind stats (speed, health, strength, fire period) are static data
    in ``lawn.simulation.kinds``; only board-wide constants live here.
    """

    model_config = SettingsConfigDict(
        env_prefix="LAWN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Collision rectangles (centred on entity coordinates)
    cell_width: float = 80.0
    cell_height: float = 100.0
    pea_size: float = 20.0

    # Zombie sprites are drawn 80 units above the plant row they walk
    row_offset: float = 80.0

    # Peas live and zombies are visible while x < right_boundary
    right_boundary: float = 1000.0

    # Projectiles
    pea_speed: float = 250.0        # units/second along +x
    pea_spawn_offset: float = 40.0  # new pea at (plant.x + offset, plant.y)
    plant_sun_offset: tuple[float, float] = (70.0, -25.0)

    # Suns falling from the sky
    sky_sun_position: tuple[float, float] = (90.0, -25.0)
    sky_sun_interval: float = 10.0  # seconds between sky suns

    # Zombie bite timer restarts at this value after each bite
    bite_reset: float = 1.0


settings = Settings()
