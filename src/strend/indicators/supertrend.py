"""Incremental Supertrend(10, 3) over a smoothed True Range."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from strend.indicators.base import InvalidParameter, StreamingTransform, check_period
from strend.indicators.sma import SimpleMovingAverage
from strend.indicators.true_range import TrueRange
from strend.models import Bar, HighLowClose, SupertrendOutput, Trend

logger = logging.getLogger(__name__)


class Supertrend:
    """Streaming Supertrend indicator.

    Feed one bar at a time via `next()` (or `update()` with plain prices).  A
    result is produced from the very first bar: the volatility smoother reports
    a partial mean until its window fills, and the first bar always opens an
    uptrend with the raw bands.

    Each result is a ``SupertrendOutput(band_up, band_down, trend)`` where
    *band_up* is the support band ``hl2 - multiplier * volatility``, *band_down*
    the resistance band ``hl2 + multiplier * volatility`` and *trend* is
    ``Trend.UP`` (1) or ``Trend.DOWN`` (-1).

    Parameters
    ----------
    period : int
        True Range smoothing window (default 10).
    multiplier : float
        Band distance in volatility multiples (default 3.0).
    true_range : StreamingTransform, optional
        Replacement True Range stage; defaults to `TrueRange`.
    smoother : StreamingTransform, optional
        Replacement volatility smoother; defaults to
        ``SimpleMovingAverage(period)``.
    """

    NAME = "Supertrend"

    def __init__(
        self,
        period: int = 10,
        multiplier: float = 3.0,
        true_range: Optional[StreamingTransform[HighLowClose, float]] = None,
        smoother: Optional[StreamingTransform[float, float]] = None,
    ) -> None:
        if smoother is None:
            smoother = SimpleMovingAverage(period)
        else:
            check_period(period)
        # `not >` also rejects NaN.
        if not multiplier > 0:
            raise InvalidParameter(f"multiplier must be > 0, got {multiplier}")
        self._period = period
        self._multiplier = float(multiplier)
        self._tr = true_range if true_range is not None else TrueRange()
        self._smoother = smoother
        self._init_state()

    def __str__(self) -> str:
        return self.NAME

    def __repr__(self) -> str:
        return f"{self.NAME}(period={self._period}, multiplier={self._multiplier})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def period(self) -> int:
        return self._period

    @property
    def multiplier(self) -> float:
        return self._multiplier

    @property
    def step_index(self) -> int:
        """Number of bars processed since construction or the last reset."""
        return self._step_index

    @property
    def is_ready(self) -> bool:
        return self._prev_trend is not None

    @property
    def value(self) -> SupertrendOutput | None:
        """Return the last computed result, or None before the first bar."""
        if self._prev_trend is None:
            return None
        return SupertrendOutput(self._prev_up, self._prev_down, self._prev_trend)

    def next(self, bar: HighLowClose) -> SupertrendOutput:
        """Ingest one bar and return ``(band_up, band_down, trend)``."""
        close = bar.close
        hl2 = (bar.high + bar.low) / 2.0

        # TR smoothed by the configured average stands in for ATR.
        tr = self._tr.next(bar)
        volatility = self._smoother.next(tr)

        basic_up = hl2 - self._multiplier * volatility
        basic_down = hl2 + self._multiplier * volatility

        if self._prev_trend is None:
            return self._commit(basic_up, basic_down, Trend.UP, close)

        # ----------------------------------------------------------
        # Ratchet: support only rises, resistance only falls, until
        # the previous close broke through the band.
        # ----------------------------------------------------------
        if self._prev_close <= self._prev_up:
            final_up = basic_up
        else:
            final_up = max(basic_up, self._prev_up)

        if self._prev_close >= self._prev_down:
            final_down = basic_down
        else:
            final_down = min(basic_down, self._prev_down)

        # ----------------------------------------------------------
        # Direction: flip only when close crosses the opposite band
        # of the previous bar.
        # ----------------------------------------------------------
        trend = self._prev_trend
        if trend == Trend.DOWN and close > self._prev_down:
            trend = Trend.UP
        elif trend == Trend.UP and close < self._prev_up:
            trend = Trend.DOWN

        if trend != self._prev_trend:
            logger.debug(
                f"{self.NAME} flip to {trend.name} at step {self._step_index} "
                f"(close={close:.4f})"
            )

        return self._commit(final_up, final_down, trend, close)

    def update(self, high: float, low: float, close: float) -> SupertrendOutput:
        """Convenience wrapper around `next()` taking plain prices."""
        return self.next(Bar(high=high, low=low, close=close))

    def feed(self, bars: Iterable[HighLowClose]) -> list[SupertrendOutput]:
        """Feed bars in chronological order and collect every result."""
        return [self.next(bar) for bar in bars]

    def reset(self) -> None:
        """Clear all internal state so the indicator can be reused."""
        self._init_state()
        self._tr.reset()
        self._smoother.reset()
        logger.debug(f"{self!r} reset")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _init_state(self) -> None:
        self._step_index: int = 0
        self._prev_close: float = math.nan
        self._prev_up: float = math.nan
        self._prev_down: float = math.nan
        self._prev_trend: Trend | None = None

    def _commit(
        self, band_up: float, band_down: float, trend: Trend, close: float,
    ) -> SupertrendOutput:
        self._prev_up = band_up
        self._prev_down = band_down
        self._prev_trend = trend
        self._prev_close = close
        self._step_index += 1
        return SupertrendOutput(band_up, band_down, trend)
