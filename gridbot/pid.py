"""PID controller driven by a millisecond clock."""

from __future__ import annotations

import math
import time
from typing import Callable


def _millis() -> int:
    return int(time.monotonic() * 1000)


def _clamp(value: float, low: float, high: float) -> float:
    # NaN passes through unchanged, as comparisons with it are false.
    if value < low:
        return low
    if value > high:
        return high
    return value


class PIDController:
    """Proportional-integral-derivative controller with clamped output.

    Time steps are measured in milliseconds from ``clock``.
    """

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        min_output: float,
        max_output: float,
        clamp_i: float,
        clock: Callable[[], int] = _millis,
    ) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.min_output = min_output
        self.max_output = max_output
        self.clamp_i = clamp_i
        self._clock = clock
        self._previous_error = 0.0
        self._accumulated_error = 0.0
        self._prev_time = clock()

    def update(self, value: float, target_value: float) -> float:
        """Return the clamped control output for the current measurement."""
        error = target_value - value
        now = self._clock()
        dt = now - self._prev_time
        self._prev_time = now

        proportional = self.kp * error

        self._accumulated_error = _clamp(
            self._accumulated_error + error * dt, -self.clamp_i, self.clamp_i
        )
        integral = self.ki * self._accumulated_error

        de = error - self._previous_error
        if dt:
            rate = de / dt
        else:
            rate = math.nan if de == 0 else math.copysign(math.inf, de)
        derivative = self.kd * rate

        self._previous_error = error
        return _clamp(proportional + integral + derivative, self.min_output, self.max_output)