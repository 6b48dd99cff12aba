"""
Cart-pole equations of motion
"""

import numpy as np

from pendulum.params import PhysicalParameters


class CartPoleDynamics:
    """Nonlinear dynamics of a cart with an inverted pendulum pivoted on top"""

    def __init__(self, params: PhysicalParameters) -> None:
        """
        Initialize dynamics calculator

        Args:
            params: Physical parameters of the system
        """
        self.params = params

    def calculate_derivatives(self, state: np.ndarray, u: float) -> np.ndarray:
        """
        System dynamics: d(state)/dt = f(state, u)

        Args:
            state: [x, x_dot, theta, theta_dot]
            u: Horizontal force on the cart (N)

        Returns:
            [x_dot, x_ddot, theta_dot, theta_ddot]
        """
        _, x_dot, theta, theta_dot = state
        p = self.params
        m, l, g = p.pendulum_mass, p.length, p.gravity

        sin_theta = np.sin(theta)
        cos_theta = np.cos(theta)
        # Positive for any positive masses
        denom = p.total_mass - m * cos_theta**2

        # Force terms shared by both accelerations
        drive = u - p.friction * x_dot + m * l * theta_dot**2 * sin_theta

        x_ddot = (drive - m * g * sin_theta * cos_theta) / denom
        theta_ddot = (p.total_mass * g * sin_theta - cos_theta * drive) / (l * denom)

        return np.array([x_dot, x_ddot, theta_dot, theta_ddot])

    def total_energy(self, state: np.ndarray) -> float:
        """
        Mechanical energy of the system, with the pivot height as zero potential

        Args:
            state: [x, x_dot, theta, theta_dot]

        Returns:
            Kinetic plus potential energy (J)
        """
        _, x_dot, theta, theta_dot = state
        p = self.params
        m, l = p.pendulum_mass, p.length

        kinetic = (
            0.5 * p.total_mass * x_dot**2
            + m * l * x_dot * theta_dot * np.cos(theta)
            + 0.5 * m * l**2 * theta_dot**2
        )
        potential = m * p.gravity * l * np.cos(theta)
        return float(kinetic + potential)
