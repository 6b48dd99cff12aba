"""
Unit tests for cart-pole dynamics calculations.

Tests CartPoleDynamics.calculate_derivatives, which returns the time
derivatives of [x, x_dot, theta, theta_dot] for a given applied force.
"""

import numpy as np
import pytest

from pendulum import CartPoleDynamics, PhysicalParameters


class TestDynamics:
    """Test suite for dynamics calculations"""

    @pytest.fixture
    def params(self) -> PhysicalParameters:
        """Create default physical parameters for testing"""
        return PhysicalParameters()

    @pytest.fixture
    def dynamics(self, params: PhysicalParameters) -> CartPoleDynamics:
        return CartPoleDynamics(params)

    def test_state_vector_size(self, dynamics: CartPoleDynamics) -> None:
        """Test that the derivative has four elements"""
        derivative = dynamics.calculate_derivatives(np.zeros(4), 0.0)

        assert derivative.shape == (4,)

    def test_upright_equilibrium_is_fixed_point(self, dynamics: CartPoleDynamics) -> None:
        """Test that upright at rest with no force has zero accelerations"""
        derivative = dynamics.calculate_derivatives(np.zeros(4), 0.0)

        assert np.all(derivative == 0.0)

    def test_equilibrium_independent_of_cart_position(self, dynamics: CartPoleDynamics) -> None:
        """Test that the cart position does not enter the dynamics"""
        derivative = dynamics.calculate_derivatives(np.array([1.7, 0.0, 0.0, 0.0]), 0.0)

        assert np.all(derivative == 0.0)

    def test_position_derivatives_are_velocities(self, dynamics: CartPoleDynamics) -> None:
        """Test that dx/dt = x_dot and dtheta/dt = theta_dot"""
        state = np.array([0.3, 1.5, 0.2, -0.7])

        derivative = dynamics.calculate_derivatives(state, 5.0)

        assert derivative[0] == 1.5
        assert derivative[2] == -0.7

    def test_force_on_upright_pendulum(self, dynamics: CartPoleDynamics) -> None:
        """Test accelerations from a unit force with the pendulum upright at rest"""
        # denom = M + m - m = M = 1.0
        derivative = dynamics.calculate_derivatives(np.zeros(4), 1.0)

        assert abs(derivative[1] - 1.0) < 1e-12  # x_ddot = u / M
        assert abs(derivative[3] - (-2.0)) < 1e-12  # theta_ddot = -u / (l * M)

    def test_friction_opposes_cart_velocity(self, dynamics: CartPoleDynamics) -> None:
        """Test that friction decelerates a moving cart and tips the pendulum back"""
        derivative = dynamics.calculate_derivatives(np.array([0.0, 1.0, 0.0, 0.0]), 0.0)

        assert abs(derivative[1] - (-0.1)) < 1e-12
        assert abs(derivative[3] - 0.2) < 1e-12

    def test_gravity_topples_tilted_pendulum(self, dynamics: CartPoleDynamics) -> None:
        """Test that a tilted pendulum accelerates away from upright"""
        derivative = dynamics.calculate_derivatives(np.array([0.0, 0.0, 0.1, 0.0]), 0.0)

        assert derivative[3] > 0  # falls further in the same direction
        assert derivative[1] < 0  # reaction pushes the cart the other way

    def test_dynamics_antisymmetric_in_angle(self, dynamics: CartPoleDynamics) -> None:
        """Test that mirroring the state mirrors the accelerations"""
        state = np.array([0.0, 0.4, 0.3, -1.2])

        forward = dynamics.calculate_derivatives(state, 7.0)
        mirrored = dynamics.calculate_derivatives(-state, -7.0)

        assert np.allclose(forward, -mirrored)

    def test_matches_closed_form(self, params: PhysicalParameters, dynamics: CartPoleDynamics) -> None:
        """Test the accelerations against the closed-form equations at a generic state"""
        x_dot, theta, theta_dot, u = 0.5, 0.4, -1.1, 3.0
        M, m, l, g, b = params.cart_mass, params.pendulum_mass, params.length, params.gravity, params.friction
        s, c = np.sin(theta), np.cos(theta)
        denom = M + m - m * c**2
        expected_x_ddot = (u - b * x_dot + m * l * theta_dot**2 * s - m * g * s * c) / denom
        expected_theta_ddot = ((M + m) * g * s - c * (u - b * x_dot + m * l * theta_dot**2 * s)) / (l * denom)

        derivative = dynamics.calculate_derivatives(np.array([0.0, x_dot, theta, theta_dot]), u)

        assert abs(derivative[1] - expected_x_ddot) < 1e-12
        assert abs(derivative[3] - expected_theta_ddot) < 1e-12

    def test_heavier_cart_accelerates_less(self) -> None:
        """Test that the same force accelerates a heavier cart less"""
        light = CartPoleDynamics(PhysicalParameters(cart_mass=1.0))
        heavy = CartPoleDynamics(PhysicalParameters(cart_mass=4.0))

        a_light = light.calculate_derivatives(np.zeros(4), 10.0)[1]
        a_heavy = heavy.calculate_derivatives(np.zeros(4), 10.0)[1]

        assert a_light > a_heavy > 0


class TestEnergy:
    """Test suite for the mechanical energy helper"""

    def test_energy_upright_at_rest(self) -> None:
        """Test that potential energy at upright is m*g*l"""
        params = PhysicalParameters()
        dynamics = CartPoleDynamics(params)

        energy = dynamics.total_energy(np.zeros(4))

        assert abs(energy - params.pendulum_mass * params.gravity * params.length) < 1e-12

    def test_energy_hanging_at_rest(self) -> None:
        """Test that hanging straight down is the minimum potential energy"""
        params = PhysicalParameters()
        dynamics = CartPoleDynamics(params)

        energy = dynamics.total_energy(np.array([0.0, 0.0, np.pi, 0.0]))

        assert abs(energy + params.pendulum_mass * params.gravity * params.length) < 1e-12

    def test_cart_kinetic_energy(self) -> None:
        """Test that a rigidly translating system carries ½(M+m)v² of kinetic energy"""
        params = PhysicalParameters()
        dynamics = CartPoleDynamics(params)
        upright = dynamics.total_energy(np.zeros(4))

        energy = dynamics.total_energy(np.array([0.0, 2.0, 0.0, 0.0]))

        assert abs(energy - upright - 0.5 * params.total_mass * 4.0) < 1e-12
