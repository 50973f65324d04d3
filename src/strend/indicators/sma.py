"""Incremental simple moving average over a fixed window."""
from __future__ import annotations

from collections import deque

from strend.indicators.base import check_period


class SimpleMovingAverage:
    """Arithmetic mean of the last ``period`` values.

    Feed one value at a time via `next()`.  Unlike a warm-up style SMA this
    reports the partial mean while the window is still filling, so the k-th
    call returns the mean of ``min(k, period)`` values and a result is
    available from the very first input.

    Parameters
    ----------
    period : int
        Window length, must be >= 1.
    """

    def __init__(self, period: int) -> None:
        self.period = check_period(period)
        self._window: deque[float] = deque(maxlen=period)

    @property
    def count(self) -> int:
        """Number of values currently held in the window."""
        return len(self._window)

    def next(self, value: float) -> float:
        # deque(maxlen=...) evicts the oldest value once full.
        self._window.append(value)
        return sum(self._window) / len(self._window)

    def reset(self) -> None:
        self._window.clear()
