"""
Frame scheduling collaborators

The driver never owns a loop. It asks a scheduler for the next frame and the
host decides when that frame happens (a browser animation frame, a dashboard
interval timer, or a test calling ``fire``).
"""

from typing import Callable, Optional, Protocol


FrameCallback = Callable[[], None]


class Scheduler(Protocol):
    """Host-provided per-frame callback service"""

    def request_frame(self, callback: FrameCallback) -> None:
        """Schedule a single call of ``callback`` on the next frame"""
        ...

    def cancel(self) -> None:
        """Drop the pending frame request, if any"""
        ...


class ManualScheduler:
    """Scheduler whose frames are fired explicitly by the host"""

    def __init__(self) -> None:
        self._callback: Optional[FrameCallback] = None
        self.frames_fired = 0

    @property
    def pending(self) -> bool:
        """Whether a frame has been requested and not yet fired"""
        return self._callback is not None

    def request_frame(self, callback: FrameCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def fire(self) -> bool:
        """
        Run the pending frame callback

        Returns:
            True if a callback ran, False if nothing was scheduled
        """
        callback = self._callback
        if callback is None:
            return False
        # Cleared first so the callback can request the next frame
        self._callback = None
        self.frames_fired += 1
        callback()
        return True
