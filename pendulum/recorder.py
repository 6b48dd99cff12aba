"""
Trajectory recording
"""

from typing import List, Tuple
import numpy as np

from pendulum.state import SimulationState


class TrajectoryRecorder:
    """Renderer that stores every emitted frame for later analysis"""

    def __init__(self) -> None:
        self.states: List[np.ndarray] = []
        self.forces: List[float] = []

    def __call__(self, state: SimulationState, force: float) -> None:
        self.states.append(state.as_array())
        self.forces.append(float(force))

    def __len__(self) -> int:
        return len(self.states)

    def clear(self) -> None:
        self.states.clear()
        self.forces.clear()

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Recorded trajectory as arrays

        Returns:
            Tuple of (time_array [N], state_history [N x 6], force_history [N]).
            State columns are x, x_dot, theta, theta_dot, integral, time.
        """
        if not self.states:
            return np.zeros(0), np.zeros((0, 6)), np.zeros(0)
        states = np.vstack(self.states)
        return states[:, 5].copy(), states, np.array(self.forces)
