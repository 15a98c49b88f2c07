from dataclasses import dataclass


@dataclass(frozen=True)
class InputSnapshot:
    current_age: int = 35
    retirement_age: int = 65
    current_income: float = 75000.0
    current_savings: float = 100000.0
    monthly_savings: float = 1000.0
    pre_retirement_return: float = 7.0
    # Accepted and carried through, but no result depends on these yet.
    post_retirement_return: float = 4.0
    inflation_rate: float = 2.5
    replacement_ratio: float = 80.0

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age


@dataclass
class ProjectionResult:
    total_savings: float
    annual_income: float
    monthly_income: float
    replacement_percentage: float
    savings_rate: float
    status: str
    status_message: str


@dataclass
class ScenarioResult:
    scenario1: float
    scenario2: float

# Results are returned as dataclasses; callers use dataclasses.asdict for plain dicts.
