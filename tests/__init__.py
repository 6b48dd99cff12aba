"""
Test suite for the Inverted Pendulum PID Simulation.

This package contains unit tests organized by component:
- test_params.py: Tests for configuration dataclasses
- test_controller.py: Tests for the saturated PID law
- test_dynamics.py: Tests for the cart-pole equations of motion
- test_integrator.py: Tests for the RK4 step
- test_simulation.py: Tests for the driver state machine
- test_analysis.py: Tests for response analysis
- test_render.py: Tests for the plotly display figures
- test_integration.py: Integration tests for the gain sweep workflow
"""
