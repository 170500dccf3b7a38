"""Volatility calculations."""

from lp_risk.engine.volatility.historical import DAYS_PER_YEAR, calc_hv, calc_log_returns

__all__ = ["DAYS_PER_YEAR", "calc_hv", "calc_log_returns"]
