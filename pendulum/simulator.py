"""
Simulation driver: owns the state and steps it on scheduled frames
"""

import logging
import math
from dataclasses import replace
from enum import Enum
from typing import Callable, Optional, Tuple
import numpy as np

from pendulum.controller import PIDController
from pendulum.dynamics import CartPoleDynamics
from pendulum.integrator import rk4_step
from pendulum.params import ControllerGains, PhysicalParameters, SimulationSettings
from pendulum.recorder import TrajectoryRecorder
from pendulum.scheduling import ManualScheduler, Scheduler
from pendulum.state import SimulationState

logger = logging.getLogger(__name__)

Renderer = Callable[[SimulationState, float], None]
FallenListener = Callable[[SimulationState], None]


class SimulationStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FALLEN = "fallen"


class PendulumSimulator:
    """Runs the PID-controlled cart-pole one scheduled frame at a time"""

    def __init__(
        self,
        params: Optional[PhysicalParameters] = None,
        gains: Optional[ControllerGains] = None,
        settings: Optional[SimulationSettings] = None,
        scheduler: Optional[Scheduler] = None,
        renderer: Optional[Renderer] = None,
        on_fallen: Optional[FallenListener] = None,
    ) -> None:
        """
        Initialize simulator

        Args:
            params: Physical parameters, fixed for the lifetime of the simulator
            gains: Controller gains; the same object is read on every control step
            settings: Driver settings (sub-steps, track limit, fall angle, ...)
            scheduler: Frame scheduler; a ManualScheduler is created if omitted
            renderer: Receives (state, last applied force) after every frame
            on_fallen: Called once when the pendulum falls
        """
        self.params = params if params is not None else PhysicalParameters()
        self.gains = gains if gains is not None else ControllerGains()
        self.settings = settings if settings is not None else SimulationSettings()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.renderer = renderer
        self.on_fallen = on_fallen

        self.dynamics = CartPoleDynamics(self.params)
        self.controller = PIDController(self.gains, self.settings)

        self.status = SimulationStatus.IDLE
        self.state = SimulationState.initial(self.settings.initial_angle)
        self.last_force = 0.0

    @property
    def is_running(self) -> bool:
        """Whether frames are currently advancing the state"""
        return self.status is SimulationStatus.RUNNING

    def start(self) -> None:
        """Begin or resume stepping; ignored once the pendulum has fallen"""
        if self.status is not SimulationStatus.IDLE:
            return
        self.status = SimulationStatus.RUNNING
        logger.debug("Simulation started at t=%.2fs", self.state.time)
        self.scheduler.request_frame(self.tick)

    def pause(self) -> None:
        """Stop stepping, keeping the current state"""
        if self.status is not SimulationStatus.RUNNING:
            return
        self.status = SimulationStatus.IDLE
        self.scheduler.cancel()
        logger.debug("Simulation paused at t=%.2fs", self.state.time)

    def reset(self) -> None:
        """Return to rest at the configured initial angle"""
        self.scheduler.cancel()
        self.status = SimulationStatus.IDLE
        self.state = SimulationState.initial(self.settings.initial_angle)
        self.last_force = 0.0
        logger.debug("Simulation reset to theta=%.1f°", self.settings.initial_angle_deg)
        self._emit()

    def set_gains(self, kp: float, ki: float, kd: float) -> None:
        """Update the controller gains; the next control step uses them"""
        self.gains.kp = kp
        self.gains.ki = ki
        self.gains.kd = kd

    def set_initial_angle(self, degrees: float) -> None:
        """
        Set the angle used at the next reset

        While idle the current pendulum angle is also moved to it so the
        display previews the starting pose.

        Args:
            degrees: Initial pendulum angle from upright (degrees)
        """
        self.settings.initial_angle_deg = degrees
        if self.status is SimulationStatus.IDLE:
            self.state = replace(self.state, theta=self.settings.initial_angle)
            self.last_force = 0.0
            self._emit()

    def tick(self) -> None:
        """Advance one display frame: sub-steps, cart clamp, fall check, render"""
        if self.status is not SimulationStatus.RUNNING:
            return

        state = self.state
        u = self.last_force
        for _ in range(self.settings.steps_per_tick):
            u = self.controller.compute_control(state)
            state = rk4_step(self.dynamics, state, u, self.params.dt)

        self.state = self._clamp_cart(state)
        self.last_force = u

        if self.state.has_fallen(self.settings.fall_angle):
            self.status = SimulationStatus.FALLEN
            logger.info(
                "Pendulum fell at t=%.2fs (theta=%.1f°)",
                self.state.time,
                math.degrees(self.state.theta),
            )
            if self.on_fallen is not None:
                self.on_fallen(self.state)

        self._emit()

        if self.status is SimulationStatus.RUNNING:
            self.scheduler.request_frame(self.tick)

    def simulate(self, duration: float = 5.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Run from reset without a host, until duration elapses or the pendulum falls

        Args:
            duration: Simulated time (s)

        Returns:
            Tuple of (time_array, state_history, force_history), one row per
            frame including the reset state at t=0
        """
        recorder = TrajectoryRecorder()
        renderer = self.renderer

        def record(state: SimulationState, force: float) -> None:
            recorder(state, force)
            if renderer is not None:
                renderer(state, force)

        self.renderer = record
        try:
            self.reset()
            self.start()
            # Tolerance for accumulated floating point error in time
            while self.is_running and self.state.time < duration - 1e-9:
                self.tick()
            self.pause()
        finally:
            # A fall ends the loop with the next frame still requested
            self.scheduler.cancel()
            self.renderer = renderer

        return recorder.as_arrays()

    def _clamp_cart(self, state: SimulationState) -> SimulationState:
        """Stop the cart at the end of the track (inelastic wall)"""
        limit = self.settings.track_limit
        if abs(state.x) > limit:
            return replace(state, x=math.copysign(limit, state.x), x_dot=0.0)
        return state

    def _emit(self) -> None:
        if self.renderer is not None:
            self.renderer(self.state, self.last_force)
