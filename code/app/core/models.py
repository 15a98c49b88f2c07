from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

# Raw form values are passed through untouched; normalize() decides what is usable.
RawNumber = Optional[Any]


class ProjectionRequest(BaseModel):
    current_age: RawNumber = None
    retirement_age: RawNumber = None
    current_income: RawNumber = None
    current_savings: RawNumber = None
    monthly_savings: RawNumber = None
    pre_retirement_return: RawNumber = None
    post_retirement_return: RawNumber = None
    inflation_rate: RawNumber = None
    replacement_ratio: RawNumber = None


class Inputs(BaseModel):
    current_age: int = Field(ge=0)
    retirement_age: int = Field(ge=0)
    current_income: float = Field(ge=0)
    current_savings: float = Field(ge=0)
    monthly_savings: float = Field(ge=0)
    pre_retirement_return: float = Field(ge=0)
    post_retirement_return: float = Field(ge=0)
    inflation_rate: float = Field(ge=0)
    replacement_ratio: float = Field(ge=0)


# Amounts too large to represent are reported as null.
class Projection(BaseModel):
    total_savings: Optional[float]
    annual_income: Optional[float]
    monthly_income: Optional[float]
    replacement_percentage: Optional[float]
    savings_rate: Optional[float]
    status: Literal["on-track", "caution", "behind", "error"]
    status_message: str


class Scenarios(BaseModel):
    scenario1: Optional[float] = Field(ge=0)
    scenario2: Optional[float] = Field(ge=0)


class ProjectionResponse(BaseModel):
    input: Inputs
    result: Projection
    scenarios: Scenarios
    status_label: str
    summary: str
