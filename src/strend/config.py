"""YAML config loader → dataclasses."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from strend.indicators.base import InvalidParameter
from strend.indicators.rma import WilderMovingAverage
from strend.indicators.sma import SimpleMovingAverage
from strend.indicators.supertrend import Supertrend

logger = logging.getLogger(__name__)

SMOOTHERS = {
    "sma": SimpleMovingAverage,
    "wilder": WilderMovingAverage,
}


@dataclass
class SupertrendConfig:
    period: int = 10
    multiplier: float = 3.0
    smoothing: str = "sma"   # Key into SMOOTHERS


def _setting(section: dict, key: str, default):
    """Environment override first, then the YAML value; null counts as unset."""
    env_val = os.getenv(f"STREND_{key.upper()}")
    if env_val:
        return env_val
    val = section.get(key)
    return default if val is None else val


def _parse_period(val) -> int:
    try:
        period = float(val)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"period must be an integer, got {val!r}") from exc
    if not period.is_integer():
        raise InvalidParameter(f"period must be an integer, got {val!r}")
    return int(period)


def _parse_multiplier(val) -> float:
    try:
        return float(val)
    except (TypeError, ValueError) as exc:
        raise InvalidParameter(f"multiplier must be a number, got {val!r}") from exc


def load_config(config_path: str | Path = "config/default_config.yaml") -> SupertrendConfig:
    """Load YAML config and apply STREND_* environment overrides.

    Values that cannot be read as a whole-number period or a numeric
    multiplier raise `InvalidParameter`.  Range checks happen when the
    indicator is built.
    """
    load_dotenv()

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    st = raw.get("supertrend") or {}
    config = SupertrendConfig(
        period=_parse_period(_setting(st, "period", 10)),
        multiplier=_parse_multiplier(_setting(st, "multiplier", 3.0)),
        smoothing=str(_setting(st, "smoothing", "sma")).lower(),
    )
    logger.info(
        f"Loaded {config_path}: period={config.period}, "
        f"multiplier={config.multiplier}, smoothing={config.smoothing}"
    )
    return config


def build_supertrend(config: SupertrendConfig) -> Supertrend:
    """Construct a Supertrend with the configured volatility smoother."""
    try:
        smoother_cls = SMOOTHERS[config.smoothing]
    except KeyError:
        raise InvalidParameter(
            f"smoothing must be one of {sorted(SMOOTHERS)}, got {config.smoothing!r}"
        ) from None
    return Supertrend(
        period=config.period,
        multiplier=config.multiplier,
        smoother=smoother_cls(config.period),
    )
