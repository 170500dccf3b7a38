"""Portfolio risk assessment for concentrated-liquidity positions.

Layers:
- engine/: pure calculations (models, volatility, statistics, scoring, IL)
- business/: configuration, threshold checks and the assessment pipeline
- data/: volatility source contract and providers
"""

__version__ = "0.1.0"
