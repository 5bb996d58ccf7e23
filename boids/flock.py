"""Flock storage - fixed-size, index-stable arrays of boid state."""

from typing import Iterator, Optional

import numpy as np

from config import boids as config
from .boid import Boid
from .settings import ConfigurationError


def _as_state_array(values, name: str) -> np.ndarray:
    """Copy ``values`` into a fresh C-contiguous (N, 2) float64 array."""
    array = np.array(values, dtype=np.float64, copy=True, order="C")
    if array.ndim != 2 or array.shape[1] != 2:
        raise ConfigurationError(f"{name} must have shape (N, 2), got {array.shape}")
    return array


class Flock:
    """
    An ordered, fixed-length collection of boids.

    State lives in three contiguous (N, 2) arrays so the numba kernels can
    work on the whole flock at once. Row ``i`` of every array belongs to
    boid ``i`` for the entire run; boids are never added or removed.
    """

    def __init__(self, positions, velocities, accelerations=None):
        self.positions = _as_state_array(positions, "positions")
        self.velocities = _as_state_array(velocities, "velocities")
        if accelerations is None:
            self.accelerations = np.zeros_like(self.positions)
        else:
            self.accelerations = _as_state_array(accelerations, "accelerations")

        self.num_boids = len(self.positions)
        if self.num_boids == 0:
            raise ConfigurationError("A flock needs at least one boid")
        if len(self.velocities) != self.num_boids or len(self.accelerations) != self.num_boids:
            raise ConfigurationError(
                f"State arrays disagree on flock size: {len(self.positions)} positions, "
                f"{len(self.velocities)} velocities, {len(self.accelerations)} accelerations"
            )

    @classmethod
    def random(
        cls,
        num_boids: int,
        max_x: float,
        max_y: float,
        seed: Optional[int] = None,
    ) -> "Flock":
        """
        Create a flock with randomized state.

        Positions are uniform over the world; velocity and acceleration
        components are uniform in a symmetric range around zero.

        Args:
            num_boids: Number of boids (must be positive)
            max_x: World width
            max_y: World height
            seed: Optional seed for a reproducible flock
        """
        if num_boids <= 0:
            raise ConfigurationError(f"Flock size must be at least 1, got {num_boids}")

        rng = np.random.default_rng(seed)
        velocity_span = config.FLOCK["initial_velocity"]
        acceleration_span = config.FLOCK["initial_acceleration"]

        positions = rng.random((num_boids, 2)) * np.array([max_x, max_y])
        velocities = (rng.random((num_boids, 2)) - 0.5) * velocity_span
        accelerations = (rng.random((num_boids, 2)) - 0.5) * acceleration_span

        print(f"[Flock] Initialized {num_boids:,} boids in {max_x:g}x{max_y:g}")
        return cls(positions, velocities, accelerations)

    def __len__(self) -> int:
        return self.num_boids

    def __getitem__(self, index: int) -> Boid:
        if not 0 <= index < self.num_boids:
            raise IndexError(f"Boid index {index} out of range for flock of {self.num_boids}")
        return Boid.from_rows(
            self.positions[index], self.velocities[index], self.accelerations[index]
        )

    def __iter__(self) -> Iterator[Boid]:
        for i in range(self.num_boids):
            yield self[i]

    def snapshot(self) -> np.ndarray:
        """Read-only copy of all positions, one (x, y) row per boid."""
        positions = self.positions.copy()
        positions.setflags(write=False)
        return positions
