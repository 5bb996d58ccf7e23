"""2D boids flocking simulation core."""

from .vector import Vector2
from .boid import Boid
from .flock import Flock
from .settings import ConfigurationError, SimulationSettings
from .controller import SimulationController, SimulationState
from .steering import alignment, cohesion, combined_steering, separation

__all__ = [
    "Vector2",
    "Boid",
    "Flock",
    "ConfigurationError",
    "SimulationSettings",
    "SimulationController",
    "SimulationState",
    "alignment",
    "cohesion",
    "separation",
    "combined_steering",
]
