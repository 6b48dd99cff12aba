"""
Inverted Pendulum PID Simulation

This package simulates an inverted pendulum on a cart, stabilised by a
saturated PID controller and integrated with fixed-step RK4.
"""

from pendulum.params import ControllerGains, PhysicalParameters, SimulationSettings
from pendulum.state import SimulationState
from pendulum.controller import PIDController
from pendulum.dynamics import CartPoleDynamics
from pendulum.integrator import rk4_step
from pendulum.scheduling import ManualScheduler, Scheduler
from pendulum.recorder import TrajectoryRecorder
from pendulum.simulator import PendulumSimulator, SimulationStatus
from pendulum.analysis import ResponseAnalyzer
from pendulum.scenarios import run_gain_sweep

__all__ = [
    "ControllerGains",
    "PhysicalParameters",
    "SimulationSettings",
    "SimulationState",
    "PIDController",
    "CartPoleDynamics",
    "rk4_step",
    "ManualScheduler",
    "Scheduler",
    "TrajectoryRecorder",
    "PendulumSimulator",
    "SimulationStatus",
    "ResponseAnalyzer",
    "run_gain_sweep",
]
