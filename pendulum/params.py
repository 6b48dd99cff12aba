"""
Physical parameters and simulation configuration
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalParameters:
    """Physical parameters of the cart-pole system"""

    cart_mass: float = 1.0  # kg (M)
    pendulum_mass: float = 0.1  # kg (m)
    length: float = 0.5  # m (l, pivot to pendulum mass)
    gravity: float = 9.81  # m/s²
    dt: float = 0.01  # s, fixed integration step
    friction: float = 0.1  # N·s/m, cart friction coefficient

    def __post_init__(self) -> None:
        """Validate parameters"""
        for name in ("cart_mass", "pendulum_mass", "length", "gravity", "dt"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.friction < 0:
            raise ValueError(f"friction must be non-negative, got {self.friction}")

    @property
    def total_mass(self) -> float:
        """Cart plus pendulum mass (kg)"""
        return self.cart_mass + self.pendulum_mass


@dataclass
class ControllerGains:
    """PID gains, adjustable at any time while the simulation runs"""

    kp: float = 50.0
    ki: float = 0.0
    kd: float = 20.0


@dataclass
class SimulationSettings:
    """Driver configuration"""

    steps_per_tick: int = 2  # physics steps per rendered frame
    track_limit: float = 2.5  # m, cart is stopped at |x| = track_limit
    fall_angle: float = math.pi / 2  # rad, pendulum counts as fallen beyond this
    force_limit: float = 50.0  # N, actuator saturation
    initial_angle_deg: float = 10.0  # degrees

    def __post_init__(self) -> None:
        """Validate settings"""
        if self.steps_per_tick < 1:
            raise ValueError(f"steps_per_tick must be at least 1, got {self.steps_per_tick}")
        for name in ("track_limit", "fall_angle", "force_limit"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @property
    def initial_angle(self) -> float:
        """Initial pendulum angle (rad)"""
        return math.radians(self.initial_angle_deg)
