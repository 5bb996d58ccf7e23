"""Simulation settings and their validation."""

from dataclasses import dataclass

from config import boids as config


class ConfigurationError(ValueError):
    """Raised when simulation parameters cannot describe a valid run."""


@dataclass(frozen=True)
class SimulationSettings:
    """
    Parameters fixed for the lifetime of one simulation run.

    Attributes:
        max_x: World width; positions wrap to [0, max_x]
        max_y: World height; positions wrap to [0, max_y]
        max_velocity: Speed limit and target speed of steering
        max_force: Magnitude cap for cohesion and separation steering
        perception_radius: Neighbors must be strictly closer than this
        flock_size: Number of boids
        tick_rate: Ticks per second for the paced loop
    """
    max_x: float = 1024.0
    max_y: float = 768.0
    max_velocity: float = 5.0
    max_force: float = 1.0
    perception_radius: float = 100.0
    flock_size: int = 400
    tick_rate: float = 60.0

    @classmethod
    def from_config(cls) -> "SimulationSettings":
        """Build settings from the defaults in ``config/boids.py``."""
        return cls(
            max_x=float(config.WINDOW["width"]),
            max_y=float(config.WINDOW["height"]),
            max_velocity=float(config.FLOCK["max_velocity"]),
            max_force=float(config.FLOCK["max_force"]),
            perception_radius=float(config.FLOCK["perception_radius"]),
            flock_size=int(config.FLOCK["count"]),
            tick_rate=float(config.SIMULATION["tick_rate"]),
        )

    @property
    def tick_period(self) -> float:
        """Seconds between tick starts."""
        return 1.0 / self.tick_rate

    def validate(self) -> "SimulationSettings":
        """
        Check every parameter, failing fast before any tick runs.

        Returns:
            self, so construction sites can chain the call

        Raises:
            ConfigurationError: if any parameter is out of range
        """
        if not self.max_x > 0 or not self.max_y > 0:
            raise ConfigurationError(
                f"World bounds must be positive, got {self.max_x} x {self.max_y}"
            )
        if not self.perception_radius > 0:
            raise ConfigurationError(
                f"Perception radius must be positive, got {self.perception_radius}"
            )
        if self.flock_size <= 0:
            raise ConfigurationError(
                f"Flock size must be at least 1, got {self.flock_size}"
            )
        if self.max_velocity < 0:
            raise ConfigurationError(
                f"Max velocity cannot be negative, got {self.max_velocity}"
            )
        if self.max_force < 0:
            raise ConfigurationError(
                f"Max force cannot be negative, got {self.max_force}"
            )
        if not self.tick_rate > 0:
            raise ConfigurationError(
                f"Tick rate must be positive, got {self.tick_rate}"
            )
        return self
