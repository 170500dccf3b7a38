"""
Risk Configuration - risk assessment configuration management

Loads and manages the thresholds and tuning parameters of the risk engine.

## Threshold reference

| Threshold          | Default | Used by                                        |
|--------------------|---------|------------------------------------------------|
| high_risk          | 70      | reduce_exposure rule, volatility alert, level  |
| medium_risk        | 40      | monitor (liquidity) rule, risk level           |
| low_risk           | 20      | risk level                                     |
| critical_il        | 15      | hedge rule, critical IL alert                  |
| warning_il         | 10      | reserved for presentation                      |
| max_concentration  | 40      | diversify rule, concentration alert            |
| min_liquidity      | 10000   | reserved for presentation (USD)                |

Sources, highest precedence first:
1. update_risk_thresholds() at runtime
2. YAML file from $LP_RISK_CONFIG or config/risk/thresholds.yaml
3. dataclass defaults
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "LP_RISK_CONFIG"


class RiskConfigError(ValueError):
    """Invalid risk configuration."""


@dataclass(frozen=True)
class RiskThresholds:
    """Risk thresholds. Immutable: updates build a new instance."""

    high_risk: float = 70.0
    medium_risk: float = 40.0
    low_risk: float = 20.0
    critical_il: float = 15.0
    warning_il: float = 10.0
    max_concentration: float = 40.0
    min_liquidity: float = 10000.0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass
class VolatilitySettings:
    """Volatility lookup settings."""

    default: float = 0.20  # fallback when a pair lookup fails
    lookup_timeout: float = 5.0  # seconds, for the whole fan-out
    max_workers: int = 8


@dataclass
class StatisticsSettings:
    """Portfolio statistics settings."""

    var_confidence: float = 0.95


def validate_thresholds(values: Mapping[str, Any]) -> dict[str, float]:
    """Validate threshold values.

    Args:
        values: Threshold name -> value

    Returns:
        The same values converted to float

    Raises:
        RiskConfigError: Unknown name, non-numeric, non-finite or negative value
    """
    if not isinstance(values, Mapping):
        raise RiskConfigError(f"Risk thresholds must be a mapping, got {values!r}")

    known = {f.name for f in fields(RiskThresholds)}
    validated: dict[str, float] = {}

    for name, value in values.items():
        if name not in known:
            raise RiskConfigError(f"Unknown risk threshold: {name}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RiskConfigError(f"Risk threshold {name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise RiskConfigError(f"Risk threshold {name} must be finite, got {value}")
        if value < 0:
            raise RiskConfigError(f"Risk threshold {name} must be non-negative, got {value}")
        validated[name] = float(value)

    return validated


def _setting(section: str, values: Mapping[str, Any], name: str, default: float) -> float:
    """Read one numeric setting, rejecting non-numeric and non-finite values."""
    value = values.get(name, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RiskConfigError(f"{section}.{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise RiskConfigError(f"{section}.{name} must be finite, got {value}")
    return float(value)


def merge_thresholds(
    current: RiskThresholds,
    partial: Mapping[str, Any],
) -> RiskThresholds:
    """Merge a partial update over the current thresholds.

    Args:
        current: Current thresholds
        partial: Threshold name -> new value

    Returns:
        New RiskThresholds

    Raises:
        RiskConfigError: If any value in partial is invalid
    """
    validated = validate_thresholds(partial)
    return replace(current, **validated)


@dataclass
class RiskConfig:
    """Risk engine configuration.

    The thresholds attribute is replaced as a whole on update, so a reader
    holding a reference always sees one consistent set.
    """

    thresholds: RiskThresholds = field(default_factory=RiskThresholds)
    volatility: VolatilitySettings = field(default_factory=VolatilitySettings)
    statistics: StatisticsSettings = field(default_factory=StatisticsSettings)

    def update_thresholds(self, partial: Mapping[str, Any]) -> RiskThresholds:
        """Merge a partial update into the thresholds.

        Raises:
            RiskConfigError: If any value is invalid. Thresholds stay unchanged.
        """
        self.thresholds = merge_thresholds(self.thresholds, partial)
        logger.info(f"Risk thresholds updated: {dict(partial)}")
        return self.thresholds

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RiskConfig":
        """Load configuration from a YAML file"""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RiskConfig":
        """Create configuration from a dict

        Raises:
            RiskConfigError: If thresholds or settings are invalid
        """
        config = cls()

        if "thresholds" in data:
            config.thresholds = merge_thresholds(config.thresholds, data["thresholds"] or {})

        if "volatility" in data:
            v = data["volatility"] or {}
            if not isinstance(v, Mapping):
                raise RiskConfigError(f"volatility must be a mapping, got {v!r}")
            max_workers = _setting("volatility", v, "max_workers", config.volatility.max_workers)
            if max_workers != int(max_workers):
                raise RiskConfigError(f"volatility.max_workers must be an integer, got {max_workers}")
            config.volatility = VolatilitySettings(
                default=_setting("volatility", v, "default", config.volatility.default),
                lookup_timeout=_setting(
                    "volatility", v, "lookup_timeout", config.volatility.lookup_timeout
                ),
                max_workers=int(max_workers),
            )
            if config.volatility.default < 0:
                raise RiskConfigError("volatility.default must be non-negative")
            if config.volatility.lookup_timeout <= 0:
                raise RiskConfigError("volatility.lookup_timeout must be positive")
            if config.volatility.max_workers < 1:
                raise RiskConfigError("volatility.max_workers must be at least 1")

        if "statistics" in data:
            s = data["statistics"] or {}
            if not isinstance(s, Mapping):
                raise RiskConfigError(f"statistics must be a mapping, got {s!r}")
            confidence = _setting(
                "statistics", s, "var_confidence", config.statistics.var_confidence
            )
            if not 0 < confidence < 1:
                raise RiskConfigError(
                    f"statistics.var_confidence must be in (0, 1), got {confidence}"
                )
            config.statistics = StatisticsSettings(var_confidence=confidence)

        return config

    @classmethod
    def load(cls) -> "RiskConfig":
        """Load the default configuration

        Uses $LP_RISK_CONFIG (a .env file is honoured), then
        config/risk/thresholds.yaml, then dataclass defaults.
        """
        load_dotenv()
        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            return cls.from_yaml(env_path)

        config_file = Path(__file__).parent.parent.parent.parent / "config" / "risk" / "thresholds.yaml"
        if config_file.exists():
            return cls.from_yaml(config_file)
        return cls()
