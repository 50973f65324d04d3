"""Incremental True Range."""
from __future__ import annotations

from strend.models import HighLowClose


class TrueRange:
    """True Range of each bar relative to the previous close.

    The first bar has no previous close, so its true range is simply
    ``high - low``.
    """

    def __init__(self) -> None:
        self.reset()

    def next(self, bar: HighLowClose) -> float:
        high, low = bar.high, bar.low
        if self._prev_close is None:
            tr = high - low
        else:
            tr = max(
                high - low,
                abs(high - self._prev_close),
                abs(low - self._prev_close),
            )
        self._prev_close = bar.close
        return tr

    def reset(self) -> None:
        self._prev_close: float | None = None
