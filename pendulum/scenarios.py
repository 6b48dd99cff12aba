"""
Gain sweep over repeated offline runs
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from pendulum.analysis import ResponseAnalyzer
from pendulum.params import ControllerGains, PhysicalParameters, SimulationSettings
from pendulum.simulator import PendulumSimulator

logger = logging.getLogger(__name__)

GainSet = Tuple[float, float, float]


def run_gain_sweep(
    gain_sets: Iterable[GainSet],
    duration: float = 5.0,
    initial_angle_deg: float = 10.0,
    params: Optional[PhysicalParameters] = None,
) -> Dict[GainSet, Dict[str, Any]]:
    """
    Run one simulation per (Kp, Ki, Kd) gain set

    Args:
        gain_sets: Gain triples to simulate
        duration: Maximum simulated time per run (s)
        initial_angle_deg: Initial pendulum angle (degrees)
        params: Physical parameters shared by every run

    Returns:
        Dictionary with results for each gain set
    """
    params = params if params is not None else PhysicalParameters()
    results: Dict[GainSet, Dict[str, Any]] = {}

    for kp, ki, kd in gain_sets:
        settings = SimulationSettings(initial_angle_deg=initial_angle_deg)
        simulator = PendulumSimulator(
            params,
            ControllerGains(kp=kp, ki=ki, kd=kd),
            settings,
        )
        t, state, forces = simulator.simulate(duration)
        analysis = ResponseAnalyzer(settings).analyze(t, state, forces)
        logger.info(
            "Gains Kp=%g Ki=%g Kd=%g: %s",
            kp,
            ki,
            kd,
            "fell" if analysis["has_fallen"] else "upright",
        )

        results[(kp, ki, kd)] = {
            "time": t,
            "state": state,
            "force": forces,
            "analysis": analysis,
            "simulator": simulator,
        }

    return results
