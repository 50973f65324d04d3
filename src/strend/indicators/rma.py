"""Incremental Wilder moving average (RMA)."""
from __future__ import annotations

from strend.indicators.base import check_period


class WilderMovingAverage:
    """Wilder's exponential smoothing, seeded with a running mean.

    For the first ``period`` values the output is the arithmetic mean of what
    has been seen so far.  After that each value is folded in as::

        avg = prev_avg * (1 - alpha) + value * alpha,   alpha = 1 / period

    Drop-in replacement for `SimpleMovingAverage` as the Supertrend volatility
    smoother.
    """

    def __init__(self, period: int) -> None:
        self.period = check_period(period)
        self._alpha: float = 1.0 / period
        self.reset()

    def next(self, value: float) -> float:
        if self._count < self.period:
            # Seed phase: cumulative mean.
            self._count += 1
            self._sum += value
            self._avg = self._sum / self._count
        else:
            self._avg = self._avg * (1.0 - self._alpha) + value * self._alpha
        return self._avg

    def reset(self) -> None:
        self._count: int = 0
        self._sum: float = 0.0
        self._avg: float = 0.0
