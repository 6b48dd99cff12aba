"""
Fixed-step Runge-Kutta integration
"""

from pendulum.dynamics import CartPoleDynamics
from pendulum.state import SimulationState


def rk4_step(
    dynamics: CartPoleDynamics, state: SimulationState, u: float, dt: float
) -> SimulationState:
    """
    Advance the state by one step of classical 4th-order Runge-Kutta

    The force is held constant across the four stages. The PID integral is
    accumulated outside the RK4 vector with a plain Euler update on the
    pre-step angle, which the tuned gains depend on.

    Args:
        dynamics: Equations of motion
        state: Current state (not modified)
        u: Force applied to the cart (N)
        dt: Time step (s)

    Returns:
        New state after dt
    """
    y = state.mechanical()
    f = dynamics.calculate_derivatives

    k1 = f(y, u)
    k2 = f(y + k1 * dt / 2, u)
    k3 = f(y + k2 * dt / 2, u)
    k4 = f(y + k3 * dt, u)

    x, x_dot, theta, theta_dot = y + (k1 + 2 * k2 + 2 * k3 + k4) * dt / 6

    return SimulationState(
        x=float(x),
        x_dot=float(x_dot),
        theta=float(theta),
        theta_dot=float(theta_dot),
        integral=state.integral + state.theta * dt,
        time=state.time + dt,
    )
