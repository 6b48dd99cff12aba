"""
Simulation state representation
"""

from dataclasses import dataclass
import numpy as np


@dataclass
class SimulationState:
    """State of the cart and pendulum"""

    x: float  # Cart position (m)
    x_dot: float  # Cart velocity (m/s)
    theta: float  # Pendulum angle from upright (rad)
    theta_dot: float  # Angular velocity (rad/s)
    integral: float = 0.0  # Accumulated angle error for the PID integral term
    time: float = 0.0  # Elapsed simulation time (s)

    @classmethod
    def initial(cls, theta: float) -> "SimulationState":
        """State at reset: everything at rest except the pendulum angle"""
        return cls(x=0.0, x_dot=0.0, theta=theta, theta_dot=0.0, integral=0.0, time=0.0)

    def mechanical(self) -> np.ndarray:
        """Mechanical state vector [x, x_dot, theta, theta_dot]"""
        return np.array([self.x, self.x_dot, self.theta, self.theta_dot])

    def as_array(self) -> np.ndarray:
        """Full state as [x, x_dot, theta, theta_dot, integral, time]"""
        return np.array([self.x, self.x_dot, self.theta, self.theta_dot, self.integral, self.time])

    def has_fallen(self, fall_angle: float) -> bool:
        """Whether the pendulum is tilted beyond fall_angle (rad)"""
        return abs(self.theta) > fall_angle
