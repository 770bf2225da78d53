"""Wheel-encoder odometry with optional gyro heading."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

PI = 3.14159
CALIBRATION_SAMPLES = 100


@dataclass(frozen=True)
class Pose:
    """Robot position and heading."""

    x: float
    y: float
    theta: float


def _truncating_div(total: int, divisor: int) -> int:
    quotient = abs(total) // divisor
    return quotient if total >= 0 else -quotient


class Odometry:
    """Accumulates a pose from encoder counts.

    If ``gyro`` is given it is a callable returning the raw z-axis rate;
    its bias is estimated from CALIBRATION_SAMPLES readings at construction
    and the heading is then integrated from it instead of the encoders.
    """

    def __init__(
        self,
        dia_left: float,
        dia_right: float,
        wheel_base: float,
        counts_left: int,
        counts_right: int,
        gear_ratio: int,
        gyro: Optional[Callable[[], int]] = None,
    ) -> None:
        self.dia_left = dia_left
        self.dia_right = dia_right
        self.wheel_base = wheel_base
        self.counts_left = counts_left
        self.counts_right = counts_right
        self.gear_ratio = gear_ratio
        self._gyro = gyro
        self._gyro_bias = 0
        self._prev_left = 0
        self._prev_right = 0
        self._x = 0.0
        self._y = 0.0
        self._theta = 0.0
        if gyro is not None:
            total = sum(int(gyro()) for _ in range(CALIBRATION_SAMPLES))
            self._gyro_bias = _truncating_div(total, CALIBRATION_SAMPLES)

    @property
    def pose(self) -> Pose:
        return Pose(self._x, self._y, self._theta)

    def update(self, left_counts: int, right_counts: int) -> Pose:
        """Integrate new cumulative encoder counts and return the pose."""
        per_count_left = PI * self.dia_left / (self.counts_left * self.gear_ratio)
        per_count_right = PI * self.dia_right / (self.counts_right * self.gear_ratio)
        d_left = (left_counts - self._prev_left) * per_count_left
        d_right = (right_counts - self._prev_right) * per_count_right
        distance = (d_left + d_right) / 2.0

        if self._gyro is not None:
            self._theta += self._gyro() - self._gyro_bias
        else:
            self._theta += (d_right - d_left) / self.wheel_base

        self._x += distance * math.cos(self._theta)
        self._y += distance * math.sin(self._theta)

        self._prev_left = left_counts
        self._prev_right = right_counts
        return self.pose