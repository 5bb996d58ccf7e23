"""Individual boid record with position, velocity, and acceleration."""

from dataclasses import dataclass, field

import numpy as np

from .vector import Vector2


@dataclass(frozen=True)
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Boids are value copies read out of a ``Flock``; mutating the flock
    never changes a ``Boid`` already handed out.

    Attributes:
        position: 2D position in world units
        velocity: 2D velocity in world units per tick
        acceleration: steering accumulated for the next integration
    """
    position: Vector2 = field(default_factory=Vector2.zero)
    velocity: Vector2 = field(default_factory=Vector2.zero)
    acceleration: Vector2 = field(default_factory=Vector2.zero)

    @classmethod
    def from_rows(cls, position: np.ndarray, velocity: np.ndarray,
                  acceleration: np.ndarray) -> "Boid":
        """Build a boid from three length-2 array rows."""
        return cls(
            Vector2(float(position[0]), float(position[1])),
            Vector2(float(velocity[0]), float(velocity[1])),
            Vector2(float(acceleration[0]), float(acceleration[1])),
        )

    @property
    def speed(self) -> float:
        return self.velocity.length
