"""Simulation controller - owns the flock and drives barrier-phased ticks."""

import threading
import time
from enum import Enum
from typing import List, Optional

import numpy as np

from config import boids as config
from .boid import Boid
from .flock import Flock
from .settings import ConfigurationError, SimulationSettings
from .steering import compute_steering, integrate, warmup_numba, wrap_positions


class SimulationState(Enum):
    """Lifecycle of a controller. STOPPED is terminal."""
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class SimulationController:
    """
    Advances a flock one tick at a time.

    Every tick runs three flock-wide phases in order, each finishing for
    all boids before the next begins:

        A. behavior  - steering from a snapshot of the tick-start state
        B. integrate - position, velocity, speed clamp, acceleration reset
        C. wrap      - toroidal boundary

    A tick holds the flock lock for its whole duration, so ``snapshot()``
    only ever sees complete ticks.
    """

    def __init__(
        self,
        settings: Optional[SimulationSettings] = None,
        flock: Optional[Flock] = None,
        seed: Optional[int] = None,
    ):
        self.settings = (settings or SimulationSettings.from_config()).validate()

        if flock is None:
            if seed is None:
                seed = config.SIMULATION["seed"]
            flock = Flock.random(
                self.settings.flock_size, self.settings.max_x, self.settings.max_y, seed=seed
            )
        elif len(flock) != self.settings.flock_size:
            raise ConfigurationError(
                f"Flock has {len(flock)} boids but settings expect {self.settings.flock_size}"
            )
        self._flock = flock

        self._state = SimulationState.IDLE
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.tick_count = 0

        warmup_numba()

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def num_boids(self) -> int:
        return self._flock.num_boids

    # === Phases ===
    # The public phase methods take the flock lock; ``step`` holds it once
    # and calls the unlocked versions.

    def apply_behavior(self):
        """Phase A: accumulate steering into every boid's acceleration."""
        with self._lock:
            self._apply_behavior()

    def reposition(self):
        """Phase B: integrate and clamp every boid."""
        with self._lock:
            self._reposition()

    def wrap(self):
        """Phase C: wrap every boid back into the world."""
        with self._lock:
            self._wrap()

    def _apply_behavior(self):
        flock = self._flock
        s = self.settings
        # Rules read a frozen copy; only accelerations are written
        positions = flock.positions.copy()
        velocities = flock.velocities.copy()
        compute_steering(
            positions,
            velocities,
            flock.accelerations,
            float(s.perception_radius),
            float(s.max_velocity),
            float(s.max_force),
            flock.num_boids
        )

    def _reposition(self):
        flock = self._flock
        integrate(
            flock.positions,
            flock.velocities,
            flock.accelerations,
            float(self.settings.max_velocity),
            flock.num_boids
        )

    def _wrap(self):
        flock = self._flock
        wrap_positions(
            flock.positions,
            float(self.settings.max_x),
            float(self.settings.max_y),
            flock.num_boids
        )

    def step(self):
        """Run one complete tick."""
        if self._state is SimulationState.STOPPED:
            raise RuntimeError("Simulation has been stopped")

        with self._lock:
            self._apply_behavior()
            self._reposition()
            self._wrap()
            self.tick_count += 1

    # === Lifecycle ===

    def _check_can_run(self):
        if self._state is SimulationState.STOPPED:
            raise RuntimeError("Simulation has been stopped")
        if self._state is SimulationState.RUNNING:
            raise RuntimeError("Simulation already running")

    def run(self, max_ticks: Optional[int] = None):
        """
        Tick at ``settings.tick_rate`` on the calling thread until stopped.

        The controller returns to IDLE when ``max_ticks`` is reached.

        Args:
            max_ticks: Return after this many ticks (None runs until stop())

        Raises:
            RuntimeError: if the controller is already running or stopped
        """
        self._check_can_run()

        self._state = SimulationState.RUNNING
        try:
            self._loop(max_ticks)
        finally:
            if self._state is SimulationState.RUNNING:
                self._state = SimulationState.IDLE

    def _loop(self, max_ticks: Optional[int] = None):
        """Paced tick loop; the only simulation clock.

        The wait between ticks is cooperative; a tick that overruns its
        period delays the next one and nothing is caught up.
        """
        period = self.settings.tick_period
        ticks = 0

        while not self._stop_event.is_set():
            if max_ticks is not None and ticks >= max_ticks:
                break

            started = time.perf_counter()
            self.step()
            ticks += 1

            elapsed = time.perf_counter() - started
            self._stop_event.wait(max(0.0, period - elapsed))

    def start(self):
        """Run the paced loop on a background thread."""
        self._check_can_run()

        self._state = SimulationState.RUNNING
        self._thread = threading.Thread(target=self._loop, name="boids-sim", daemon=True)
        self._thread.start()
        print(f"[Sim] Running {self.num_boids:,} boids at {self.settings.tick_rate:g} ticks/s")

    def stop(self, timeout: Optional[float] = None):
        """Halt ticking after the in-flight tick completes. Safe to call twice."""
        if self._state is SimulationState.STOPPED:
            return

        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
        self._state = SimulationState.STOPPED
        print(f"[Sim] Stopped after {self.tick_count:,} ticks")

    # === Read access ===

    def snapshot(self) -> np.ndarray:
        """Read-only copy of positions as of the last complete tick."""
        with self._lock:
            return self._flock.snapshot()

    def boids(self) -> List[Boid]:
        """Value copies of every boid as of the last complete tick."""
        with self._lock:
            return list(self._flock)
