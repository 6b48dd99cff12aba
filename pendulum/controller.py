"""
PID controller with actuator saturation
"""

from typing import Optional

from pendulum.params import ControllerGains, SimulationSettings
from pendulum.state import SimulationState


class PIDController:
    """Maps pendulum angle, rate and integral error to a bounded cart force"""

    def __init__(self, gains: ControllerGains, settings: Optional[SimulationSettings] = None) -> None:
        """
        Initialize controller

        Args:
            gains: PID gains, shared with whoever adjusts them at runtime
            settings: Driver settings; force_limit is read on every evaluation
        """
        self.gains = gains
        self.settings = settings if settings is not None else SimulationSettings()

    @property
    def force_limit(self) -> float:
        """Actuator saturation bound (N)"""
        return self.settings.force_limit

    def compute_control(self, state: SimulationState) -> float:
        """
        Control law u = Kp*theta + Ki*integral + Kd*theta_dot, hard-clamped

        Args:
            state: Current simulation state

        Returns:
            Force applied to the cart (N), within [-force_limit, force_limit]
        """
        gains = self.gains
        limit = self.force_limit
        u = gains.kp * state.theta + gains.ki * state.integral + gains.kd * state.theta_dot
        return max(-limit, min(limit, u))

    def is_saturated(self, u: float) -> bool:
        """Whether a force sits on the actuator bound"""
        return abs(u) >= self.force_limit
