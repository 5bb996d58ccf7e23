"""Tests for flock storage and boid value copies."""

import numpy as np
import pytest

from boids import Boid, ConfigurationError, Flock, Vector2


class TestConstruction:
    """Flocks are built from fixed state or randomized."""

    def test_fixed_state(self, pair_flock):
        assert len(pair_flock) == 2
        assert pair_flock[1].position == Vector2(10.0, 0.0)
        assert pair_flock[1].velocity == Vector2(-1.0, 0.0)

    def test_acceleration_defaults_to_zero(self, pair_flock):
        assert all(boid.acceleration == Vector2.zero() for boid in pair_flock)

    def test_input_is_copied(self):
        positions = np.array([[1.0, 2.0]])
        flock = Flock(positions, [[0.0, 0.0]])
        positions[0, 0] = 99.0
        assert flock[0].position == Vector2(1.0, 2.0)

    def test_empty_flock_rejected(self):
        with pytest.raises(ConfigurationError):
            Flock(np.zeros((0, 2)), np.zeros((0, 2)))

    def test_mismatched_sizes_rejected(self):
        with pytest.raises(ConfigurationError):
            Flock([[0.0, 0.0], [1.0, 1.0]], [[0.0, 0.0]])

    def test_wrong_shape_rejected(self):
        with pytest.raises(ConfigurationError):
            Flock([[0.0, 0.0, 0.0]], [[0.0, 0.0, 0.0]])


class TestRandomFlock:
    """Randomized initial state."""

    def test_positions_inside_world(self):
        flock = Flock.random(400, 1024.0, 768.0, seed=1)
        assert len(flock) == 400
        assert np.all(flock.positions[:, 0] >= 0) and np.all(flock.positions[:, 0] < 1024.0)
        assert np.all(flock.positions[:, 1] >= 0) and np.all(flock.positions[:, 1] < 768.0)

    def test_velocity_and_acceleration_ranges(self):
        flock = Flock.random(400, 1024.0, 768.0, seed=2)
        assert np.all(np.abs(flock.velocities) <= 5.0)
        assert np.all(np.abs(flock.accelerations) <= 0.25)

    def test_seed_is_reproducible(self):
        a = Flock.random(50, 100.0, 100.0, seed=3)
        b = Flock.random(50, 100.0, 100.0, seed=3)
        assert np.array_equal(a.positions, b.positions)
        assert np.array_equal(a.velocities, b.velocities)
        assert np.array_equal(a.accelerations, b.accelerations)

    def test_zero_size_rejected(self):
        with pytest.raises(ConfigurationError):
            Flock.random(0, 100.0, 100.0)


class TestAccess:
    """Index identity and read-only views."""

    def test_getitem_returns_value_copy(self, pair_flock):
        boid = pair_flock[0]
        assert isinstance(boid, Boid)
        pair_flock.positions[0] = [50.0, 50.0]
        assert boid.position == Vector2(0.0, 0.0)
        assert pair_flock[0].position == Vector2(50.0, 50.0)

    def test_index_out_of_range(self, pair_flock):
        with pytest.raises(IndexError):
            pair_flock[2]
        with pytest.raises(IndexError):
            pair_flock[-1]

    def test_iteration_is_index_ordered(self, pair_flock):
        xs = [boid.position.x for boid in pair_flock]
        assert xs == [0.0, 10.0]

    def test_snapshot_is_read_only_copy(self, pair_flock):
        snap = pair_flock.snapshot()
        assert not snap.flags.writeable
        with pytest.raises(ValueError):
            snap[0, 0] = 1.0
        pair_flock.positions[0, 0] = 7.0
        assert snap[0, 0] == 0.0

    def test_speed(self):
        flock = Flock([[0.0, 0.0]], [[3.0, 4.0]])
        assert flock[0].speed == 5.0
