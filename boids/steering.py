"""Steering rules and per-tick physics - Numba JIT kernels over flock arrays."""

import math

import numpy as np
from numba import njit, prange

from .vector import Vector2


# ============================================================================
# NUMBA JIT-COMPILED STEERING RULES (single boid against the whole flock)
# ============================================================================

@njit(cache=True, nogil=True)
def clamp_magnitude(x: float, y: float, limit: float):
    """Shrink (x, y) to ``limit`` if it is longer; never stretches."""
    mag = math.hypot(x, y)
    if mag > limit:
        return x / mag * limit, y / mag * limit
    return x, y


@njit(cache=True, nogil=True)
def alignment_kernel(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    perception_radius: float,
    max_velocity: float
):
    """Steer toward the average heading of neighbors (self included)."""
    px = positions[i, 0]
    py = positions[i, 1]
    sum_x, sum_y = 0.0, 0.0
    total = 0
    others = 0

    for j in range(positions.shape[0]):
        dist = math.hypot(px - positions[j, 0], py - positions[j, 1])
        if dist < perception_radius:
            sum_x += velocities[j, 0]
            sum_y += velocities[j, 1]
            total += 1
            if j != i:
                others += 1

    if others == 0:
        return 0.0, 0.0

    avg_x = sum_x / total
    avg_y = sum_y / total
    avg_mag = math.hypot(avg_x, avg_y)
    if avg_mag > 0:
        avg_x = avg_x / avg_mag * max_velocity
        avg_y = avg_y / avg_mag * max_velocity

    # Alignment is not clamped to max_force
    return avg_x - velocities[i, 0], avg_y - velocities[i, 1]


@njit(cache=True, nogil=True)
def cohesion_kernel(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    perception_radius: float,
    max_velocity: float,
    max_force: float
):
    """Steer toward the center of mass of neighbors (self included)."""
    px = positions[i, 0]
    py = positions[i, 1]
    sum_x, sum_y = 0.0, 0.0
    total = 0
    others = 0

    for j in range(positions.shape[0]):
        dist = math.hypot(positions[j, 0] - px, positions[j, 1] - py)
        if dist < perception_radius:
            sum_x += positions[j, 0]
            sum_y += positions[j, 1]
            total += 1
            if j != i:
                others += 1

    if others == 0:
        return 0.0, 0.0

    to_x = sum_x / total - px
    to_y = sum_y / total - py
    to_mag = math.hypot(to_x, to_y)
    if to_mag > 0:
        to_x = to_x / to_mag * max_velocity
        to_y = to_y / to_mag * max_velocity

    return clamp_magnitude(to_x - velocities[i, 0], to_y - velocities[i, 1], max_force)


@njit(cache=True, nogil=True)
def separation_kernel(
    i: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    perception_radius: float,
    max_velocity: float,
    max_force: float
):
    """Steer away from every neighbor at a different position."""
    px = positions[i, 0]
    py = positions[i, 1]
    sum_x, sum_y = 0.0, 0.0
    total = 0

    for j in range(positions.shape[0]):
        ox = positions[j, 0]
        oy = positions[j, 1]
        # Self-exclusion is by position: coincident boids never repel
        if ox == px and oy == py:
            continue
        dist = math.hypot(ox - px, oy - py)
        if dist < perception_radius:
            sum_x += (px - ox) / dist
            sum_y += (py - oy) / dist
            total += 1

    if total == 0:
        return 0.0, 0.0

    avg_x = sum_x / total
    avg_y = sum_y / total
    avg_mag = math.hypot(avg_x, avg_y)
    if avg_mag > 0:
        avg_x = avg_x / avg_mag * max_velocity
        avg_y = avg_y / avg_mag * max_velocity

    return clamp_magnitude(avg_x - velocities[i, 0], avg_y - velocities[i, 1], max_force)


# ============================================================================
# NUMBA JIT-COMPILED FLOCK-WIDE PHASES
# ============================================================================

@njit(parallel=True, cache=True, nogil=True)
def compute_steering(
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    perception_radius: float,
    max_velocity: float,
    max_force: float,
    num_boids: int
):
    """Add alignment, cohesion and separation into every boid's acceleration.

    ``positions`` and ``velocities`` are only read; each iteration writes
    its own row of ``accelerations``.
    """
    for i in prange(num_boids):
        ax, ay = alignment_kernel(i, positions, velocities, perception_radius, max_velocity)
        cx, cy = cohesion_kernel(
            i, positions, velocities, perception_radius, max_velocity, max_force
        )
        sx, sy = separation_kernel(
            i, positions, velocities, perception_radius, max_velocity, max_force
        )
        accelerations[i, 0] += ax + cx + sx
        accelerations[i, 1] += ay + cy + sy


@njit(parallel=True, cache=True, nogil=True)
def integrate(
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    max_velocity: float,
    num_boids: int
):
    """Move by the old velocity, then apply and consume acceleration."""
    for i in prange(num_boids):
        positions[i, 0] += velocities[i, 0]
        positions[i, 1] += velocities[i, 1]

        velocities[i, 0] += accelerations[i, 0]
        velocities[i, 1] += accelerations[i, 1]

        speed = math.hypot(velocities[i, 0], velocities[i, 1])
        if speed > max_velocity:
            velocities[i, 0] = velocities[i, 0] / speed * max_velocity
            velocities[i, 1] = velocities[i, 1] / speed * max_velocity

        accelerations[i, 0] = 0.0
        accelerations[i, 1] = 0.0


@njit(parallel=True, cache=True, nogil=True)
def wrap_positions(
    positions: np.ndarray,
    max_x: float,
    max_y: float,
    num_boids: int
):
    """Toroidal wrap: leaving one edge re-enters at the opposite edge value."""
    for i in prange(num_boids):
        if positions[i, 0] > max_x:
            positions[i, 0] = 0.0
        elif positions[i, 0] < 0.0:
            positions[i, 0] = max_x

        if positions[i, 1] > max_y:
            positions[i, 1] = 0.0
        elif positions[i, 1] < 0.0:
            positions[i, 1] = max_y


def warmup_numba():
    """Pre-compile the kernels so the first real tick is not a stall."""
    n = 8
    pos = np.random.rand(n, 2).astype(np.float64) * 10
    vel = np.random.rand(n, 2).astype(np.float64)
    acc = np.zeros((n, 2), dtype=np.float64)

    compute_steering(pos, vel, acc, 5.0, 5.0, 1.0, n)
    integrate(pos, vel, acc, 5.0, n)
    wrap_positions(pos, 10.0, 10.0, n)


# ============================================================================
# PER-BOID RULES AS VECTORS
# ============================================================================

def alignment(flock, index: int, settings) -> Vector2:
    """Alignment steering for boid ``index`` against the current flock."""
    x, y = alignment_kernel(
        index, flock.positions, flock.velocities,
        float(settings.perception_radius), float(settings.max_velocity)
    )
    return Vector2(x, y)


def cohesion(flock, index: int, settings) -> Vector2:
    """Cohesion steering for boid ``index``, capped at ``max_force``."""
    x, y = cohesion_kernel(
        index, flock.positions, flock.velocities,
        float(settings.perception_radius), float(settings.max_velocity),
        float(settings.max_force)
    )
    return Vector2(x, y)


def separation(flock, index: int, settings) -> Vector2:
    """Separation steering for boid ``index``, capped at ``max_force``."""
    x, y = separation_kernel(
        index, flock.positions, flock.velocities,
        float(settings.perception_radius), float(settings.max_velocity),
        float(settings.max_force)
    )
    return Vector2(x, y)


def combined_steering(flock, index: int, settings) -> Vector2:
    """Sum of all three rules, as Phase A adds it into acceleration."""
    return (
        alignment(flock, index, settings)
        + cohesion(flock, index, settings)
        + separation(flock, index, settings)
    )
