import logging
from typing import Any, Dict, List

from .analyzer import projected_income
from .schemas import InputSnapshot, ScenarioResult

logger = logging.getLogger(__name__)

EXTRA_MONTHLY_SAVINGS = 500.0
EXTRA_WORKING_YEARS = 2


def generate_default_scenarios() -> List[Dict[str, Any]]:
    return [
        {"name": "scenario1", "extra_monthly_savings": EXTRA_MONTHLY_SAVINGS, "extra_years": 0},
        {"name": "scenario2", "extra_monthly_savings": 0.0, "extra_years": EXTRA_WORKING_YEARS},
    ]


def scenarios(snapshot: InputSnapshot) -> ScenarioResult:
    """Extra annual retirement income from saving more or retiring later.

    Each delta is measured against the baseline projection and floored at zero.
    """
    years = snapshot.years_to_retirement
    if years <= 0:
        return ScenarioResult(scenario1=0.0, scenario2=0.0)

    baseline = projected_income(snapshot, snapshot.monthly_savings, years)
    deltas = {}
    for d in generate_default_scenarios():
        income = projected_income(
            snapshot,
            snapshot.monthly_savings + d["extra_monthly_savings"],
            years + d["extra_years"],
        )
        delta = income - baseline
        # inf - inf is nan when both projections overflow; nan > 0 is False.
        deltas[d["name"]] = delta if delta > 0 else 0.0
    logger.debug(f"Scenario deltas vs baseline {baseline:.2f}: {deltas}")
    return ScenarioResult(**deltas)
