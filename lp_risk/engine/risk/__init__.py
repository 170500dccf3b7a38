"""Risk calculations.

- factors: RiskFactorCollector (volatility fan-out, market regime, HHI)
- impermanent_loss: ImpermanentLossAnalyzer (current and projected IL)
- scoring: Composite risk score (score)
- stress: Fixed-scenario stress tests
"""

from lp_risk.engine.risk.factors import (
    DEFAULT_CORRELATION,
    DEFAULT_VOLATILITY,
    RiskFactorCollector,
    classify_market_conditions,
    fetch_pair_volatilities,
)
from lp_risk.engine.risk.impermanent_loss import (
    ImpermanentLossAnalyzer,
    calc_impermanent_loss,
    predict_il,
)
from lp_risk.engine.risk.scoring import RISK_WEIGHTS, score
from lp_risk.engine.risk.stress import STRESS_SCENARIOS, run_all_stress_tests, run_stress_test

__all__ = [
    "DEFAULT_CORRELATION",
    "DEFAULT_VOLATILITY",
    "RiskFactorCollector",
    "classify_market_conditions",
    "fetch_pair_volatilities",
    "ImpermanentLossAnalyzer",
    "calc_impermanent_loss",
    "predict_il",
    "RISK_WEIGHTS",
    "score",
    "STRESS_SCENARIOS",
    "run_stress_test",
    "run_all_stress_tests",
]
