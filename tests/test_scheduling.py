"""
Unit tests for the frame scheduler and trajectory recorder.
"""

import numpy as np

from pendulum import ManualScheduler, SimulationState, TrajectoryRecorder


class TestManualScheduler:
    """Test suite for ManualScheduler"""

    def test_fire_without_request(self) -> None:
        """Test that firing with nothing scheduled does nothing"""
        scheduler = ManualScheduler()

        assert not scheduler.pending
        assert not scheduler.fire()
        assert scheduler.frames_fired == 0

    def test_fire_runs_callback_once(self) -> None:
        """Test that a requested frame runs exactly once"""
        scheduler = ManualScheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append(1))

        assert scheduler.fire()
        assert not scheduler.fire()
        assert calls == [1]

    def test_callback_can_request_next_frame(self) -> None:
        """Test the per-frame callback idiom of rescheduling from inside the frame"""
        scheduler = ManualScheduler()
        calls = []

        def frame() -> None:
            calls.append(1)
            if len(calls) < 3:
                scheduler.request_frame(frame)

        scheduler.request_frame(frame)
        while scheduler.fire():
            pass

        assert len(calls) == 3
        assert scheduler.frames_fired == 3

    def test_cancel_drops_request(self) -> None:
        """Test that a cancelled frame never runs"""
        scheduler = ManualScheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append(1))

        scheduler.cancel()

        assert not scheduler.fire()
        assert calls == []


class TestTrajectoryRecorder:
    """Test suite for TrajectoryRecorder"""

    def test_empty_recorder(self) -> None:
        """Test the array shapes of an empty recording"""
        t, state, forces = TrajectoryRecorder().as_arrays()

        assert t.shape == (0,)
        assert state.shape == (0, 6)
        assert forces.shape == (0,)

    def test_records_frames(self) -> None:
        """Test that emitted frames become rows in column order"""
        recorder = TrajectoryRecorder()
        recorder(SimulationState(x=1.0, x_dot=2.0, theta=3.0, theta_dot=4.0, integral=5.0, time=0.0), 1.5)
        recorder(SimulationState(x=0.0, x_dot=0.0, theta=0.0, theta_dot=0.0, integral=0.0, time=0.02), -2.0)

        t, state, forces = recorder.as_arrays()

        assert len(recorder) == 2
        assert np.array_equal(t, [0.0, 0.02])
        assert np.array_equal(state[0], [1.0, 2.0, 3.0, 4.0, 5.0, 0.0])
        assert np.array_equal(forces, [1.5, -2.0])

    def test_clear(self) -> None:
        """Test that clearing discards recorded frames"""
        recorder = TrajectoryRecorder()
        recorder(SimulationState.initial(0.1), 0.0)

        recorder.clear()

        assert len(recorder) == 0
