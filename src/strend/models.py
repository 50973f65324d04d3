"""Core domain models."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import NamedTuple, Optional, Protocol


class HighLowClose(Protocol):
    """Anything a bar-driven indicator can read: high, low and close prices."""

    @property
    def high(self) -> float: ...

    @property
    def low(self) -> float: ...

    @property
    def close(self) -> float: ...


class Trend(IntEnum):
    UP = 1
    DOWN = -1


@dataclass(frozen=True)
class Bar:
    high: float
    low: float
    close: float
    timestamp: Optional[datetime] = None


class SupertrendOutput(NamedTuple):
    band_up: float      # Support band: mid - multiplier * volatility
    band_down: float    # Resistance band: mid + multiplier * volatility
    trend: Trend

    @property
    def value(self) -> float:
        """The active band: support in an uptrend, resistance in a downtrend."""
        return self.band_up if self.trend == Trend.UP else self.band_down
