import logging
from typing import Optional

from .engine import future_value
from .schemas import InputSnapshot, ProjectionResult
from .utils import safe_div

logger = logging.getLogger(__name__)

WITHDRAWAL_RATE = 0.04
CAUTION_FACTOR = 0.75

STATUS_MESSAGES = {
    "on-track": "You're on track to meet your retirement goals!",
    "caution": "You're close to your goal but may need to save more.",
    "behind": "Consider increasing your savings to meet your retirement goals.",
    "error": "Retirement age must be greater than current age",
}


def projected_income(snapshot: InputSnapshot, monthly_savings: float, years: float) -> float:
    """Annual income at the fixed withdrawal rate from a projected balance."""
    savings = future_value(snapshot.current_savings, monthly_savings, snapshot.pre_retirement_return, years)
    return savings * WITHDRAWAL_RATE


def _classify_status(replacement_percentage: float, replacement_ratio: float) -> str:
    if replacement_percentage >= replacement_ratio:
        return "on-track"
    if replacement_percentage >= replacement_ratio * CAUTION_FACTOR:
        return "caution"
    return "behind"


def _build_result(snapshot: InputSnapshot, total_savings: float, status: Optional[str] = None) -> ProjectionResult:
    annual_income = total_savings * WITHDRAWAL_RATE
    replacement = safe_div(annual_income, snapshot.current_income) * 100
    if status is None:
        status = _classify_status(replacement, snapshot.replacement_ratio)
    return ProjectionResult(
        total_savings=total_savings,
        annual_income=annual_income,
        monthly_income=annual_income / 12,
        replacement_percentage=replacement,
        savings_rate=safe_div(snapshot.monthly_savings * 12, snapshot.current_income) * 100,
        status=status,
        status_message=STATUS_MESSAGES[status],
    )


def project(snapshot: InputSnapshot) -> ProjectionResult:
    years = snapshot.years_to_retirement
    logger.debug(f"Projecting {snapshot} over {years} years")

    if years <= 0:
        # Income is still estimated from today's savings so the page has numbers to show.
        return _build_result(snapshot, snapshot.current_savings, "error")

    total_savings = future_value(
        snapshot.current_savings,
        snapshot.monthly_savings,
        snapshot.pre_retirement_return,
        years,
    )
    result = _build_result(snapshot, total_savings)
    logger.debug(f"Projection result: {result}")
    return result
