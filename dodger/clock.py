import time


class FrameClock:
    """Turns monotonic time samples (seconds) into clamped frame deltas.

    The first sample, or a frame with no measurable time, yields the default
    delta. Long gaps such as a minimised window are capped at max_dt.
    """

    def __init__(self, max_dt=0.033, default_dt=0.016, source=time.monotonic):
        self.max_dt = max_dt
        self.default_dt = default_dt
        self.source = source
        self.last = None

    def reset(self):
        self.last = None

    def sample(self, now=None):
        if now is None:
            now = self.source()
        dt = self.default_dt if self.last is None else now - self.last
        self.last = now
        if dt == 0:
            dt = self.default_dt
        return max(0.0, min(self.max_dt, dt))
