"""
Closed-loop response analysis
"""

import math
from typing import Any, Dict, Optional
import numpy as np
from scipy.integrate import trapezoid

from pendulum.params import SimulationSettings


class ResponseAnalyzer:
    """Summarises a recorded run: stability, settling, control effort and wall contact"""

    def __init__(self, settings: SimulationSettings, settle_band_deg: float = 1.0) -> None:
        """
        Initialize response analyzer

        Args:
            settings: Driver settings the run was made with
            settle_band_deg: Angle band counted as settled (degrees)
        """
        self.settings = settings
        self.settle_band = math.radians(settle_band_deg)

    def analyze(self, t: np.ndarray, state: np.ndarray, forces: np.ndarray) -> Dict[str, Any]:
        """
        Analyze a recorded trajectory

        Args:
            t: Time array [N]
            state: State history [N x 6] (x, x_dot, theta, theta_dot, integral, time)
            forces: Applied force history [N]

        Returns:
            Dictionary with analysis results
        """
        if len(t) == 0:
            raise ValueError("Cannot analyze an empty trajectory")

        x = state[:, 0]
        theta = state[:, 2]
        theta_dot = state[:, 3]
        abs_theta = np.abs(theta)

        has_fallen = bool(np.any(abs_theta > self.settings.fall_angle))
        settling_time = self._settling_time(t, abs_theta)

        # Integral metrics need at least two samples
        if len(t) > 1:
            iae = float(trapezoid(abs_theta, t))
            control_effort = float(trapezoid(forces**2, t))
        else:
            iae = 0.0
            control_effort = 0.0

        # Each full oscillation reverses the angular velocity twice
        # Zero rate (e.g. the rest state at reset) is not a reversal
        signs = np.sign(theta_dot)
        signs = signs[signs != 0]
        sign_changes = int(np.sum(signs[1:] != signs[:-1]))
        oscillation_frequency = float(sign_changes / (2 * t[-1])) if t[-1] > 0 else 0.0

        at_wall = np.abs(x) >= self.settings.track_limit
        wall_hits = int(at_wall[0]) + int(np.sum(at_wall[1:] & ~at_wall[:-1]))

        saturated = np.abs(forces) >= self.settings.force_limit

        return {
            "angle_max": float(np.max(abs_theta)),
            "angle_final": float(theta[-1]),
            "cart_max": float(np.max(np.abs(x))),
            "max_force": float(np.max(np.abs(forces))),
            "saturation_fraction": float(np.mean(saturated)),
            "settling_time": settling_time,
            "iae": iae,
            "control_effort": control_effort,
            "oscillation_frequency": oscillation_frequency,
            "wall_hits": wall_hits,
            "has_fallen": has_fallen,
            "is_stable": not has_fallen and settling_time is not None,
        }

    def _settling_time(self, t: np.ndarray, abs_theta: np.ndarray) -> Optional[float]:
        """First time after which the angle stays inside the settle band"""
        outside = np.nonzero(abs_theta > self.settle_band)[0]
        if len(outside) == 0:
            return float(t[0])
        last_outside = outside[-1]
        if last_outside == len(t) - 1:
            return None
        return float(t[last_outside + 1])
