"""Calculation Engine Layer.

Pure calculations over liquidity positions. Outputs records consumed by the
business layer.

Architecture:
- models/: Position, risk and stress-test records, enums
- volatility/: Historical volatility (HV) from price series
- portfolio/: Portfolio statistics (HHI, diversification, Sharpe, drawdown, VaR)
- risk/: Risk factors, IL analysis, composite scoring, stress tests
"""
