"""
Configuration Management

- RiskConfig: thresholds and engine settings
- RiskThresholds: immutable threshold set
- RiskConfigError: rejected configuration
"""

from lp_risk.business.config.risk_config import (
    RiskConfig,
    RiskConfigError,
    RiskThresholds,
    StatisticsSettings,
    VolatilitySettings,
)

__all__ = [
    "RiskConfig",
    "RiskConfigError",
    "RiskThresholds",
    "StatisticsSettings",
    "VolatilitySettings",
]
