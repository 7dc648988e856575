"""
Frame timing helpers.
"""

from .config import NOMINAL_FPS


FRAME_DURATION_MS = 1000 / NOMINAL_FPS


def normalize_elapsed(elapsed_ms: float, frame_ms: float = FRAME_DURATION_MS) -> float:
    """
    Express elapsed time as a multiple of the nominal frame duration.

    Returns about 1.0 at 60 FPS and about 2.0 at 30 FPS.
    """
    return elapsed_ms / frame_ms


class FrameClock:
    """
    Turns a stream of monotonically increasing timestamps into deltas.
    """

    def __init__(self, start_ms: float, frame_ms: float = FRAME_DURATION_MS):
        """
        Initialize the clock.

        Args:
            start_ms: Timestamp the first sample is measured from
            frame_ms: Nominal frame duration in milliseconds
        """
        self.previous_ms = start_ms
        self.frame_ms = frame_ms

    def sample(self, timestamp_ms: float) -> float:
        """
        Record a timestamp.

        Args:
            timestamp_ms: Current time in milliseconds

        Returns:
            Time since the previous sample, in nominal frames
        """
        elapsed = timestamp_ms - self.previous_ms
        self.previous_ms = timestamp_ms
        return normalize_elapsed(elapsed, self.frame_ms)
