import logging
import math
from dataclasses import asdict
from typing import Any, Dict, List

from retirement.analyzer import project
from retirement.schemas import InputSnapshot, ProjectionResult, ScenarioResult
from retirement.utils import normalize
from retirement.whatif import EXTRA_MONTHLY_SAVINGS, EXTRA_WORKING_YEARS, scenarios

from .formatting import format_currency, format_percentage, status_label
from .models import Inputs, Projection, ProjectionRequest, ProjectionResponse, Scenarios

logger = logging.getLogger(__name__)


def _finite_or_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: None if isinstance(v, float) and not math.isfinite(v) else v for k, v in values.items()}


def _deterministic_summary(snapshot: InputSnapshot, result: ProjectionResult, what_if: ScenarioResult) -> str:
    if result.status == "error":
        return "\n".join(
            [
                "Summary:",
                f"- {result.status_message}.",
                f"- Withdrawing 4% of today's savings ({format_currency(result.total_savings)}) "
                f"would give {format_currency(result.annual_income)}/yr.",
            ]
        )

    lines: List[str] = [
        "Summary:",
        f"- In {snapshot.years_to_retirement} years you could have {format_currency(result.total_savings)} saved.",
        f"- A 4% withdrawal gives {format_currency(result.annual_income)}/yr "
        f"({format_currency(result.monthly_income)}/mo), replacing {format_percentage(result.replacement_percentage)} "
        f"of your income against a {format_percentage(snapshot.replacement_ratio)} target.",
        f"- You currently save {format_percentage(result.savings_rate)} of your income.",
        "",
        "What if:",
        f"- Saving {format_currency(EXTRA_MONTHLY_SAVINGS)} more per month adds {format_currency(what_if.scenario1)}/yr.",
        f"- Retiring {EXTRA_WORKING_YEARS} years later adds {format_currency(what_if.scenario2)}/yr.",
        "",
        f"Status: {status_label(result.status)} - {result.status_message}",
    ]
    return "\n".join(lines).strip()


def run_projection(payload: ProjectionRequest) -> ProjectionResponse:
    snapshot = normalize(payload.model_dump())
    result = project(snapshot)
    what_if = scenarios(snapshot)
    logger.info(
        f"Projection for age {snapshot.current_age}->{snapshot.retirement_age}: "
        f"status={result.status} annual_income={result.annual_income:.2f}"
    )

    return ProjectionResponse(
        input=Inputs(**asdict(snapshot)),
        result=Projection(**_finite_or_none(asdict(result))),
        scenarios=Scenarios(**_finite_or_none(asdict(what_if))),
        status_label=status_label(result.status),
        summary=_deterministic_summary(snapshot, result, what_if),
    )
