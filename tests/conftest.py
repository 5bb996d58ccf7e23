"""Shared fixtures for the simulation tests."""

import pytest

from boids import Flock, SimulationController, SimulationSettings


@pytest.fixture
def make_settings():
    """Factory for settings with small-world defaults."""
    def _make(**overrides):
        values = dict(
            max_x=1024.0,
            max_y=768.0,
            max_velocity=5.0,
            max_force=1.0,
            perception_radius=100.0,
            flock_size=2,
            tick_rate=1000.0,
        )
        values.update(overrides)
        return SimulationSettings(**values)
    return _make


@pytest.fixture
def make_controller(make_settings):
    """Factory for a controller around a fixed flock state."""
    def _make(positions, velocities, accelerations=None, **overrides):
        flock = Flock(positions, velocities, accelerations)
        settings = make_settings(flock_size=len(flock), **overrides)
        return SimulationController(settings=settings, flock=flock)
    return _make


@pytest.fixture
def pair_flock():
    """Two boids approaching each other along the x-axis."""
    return Flock([[0.0, 0.0], [10.0, 0.0]], [[1.0, 0.0], [-1.0, 0.0]])
