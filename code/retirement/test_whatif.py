import pytest

from retirement.engine import future_value
from retirement.schemas import InputSnapshot
from retirement.whatif import generate_default_scenarios, scenarios


def test_default_scenarios_present():
    names = [d["name"] for d in generate_default_scenarios()]
    assert names == ["scenario1", "scenario2"]


def test_scenario_deltas_match_formula():
    out = scenarios(InputSnapshot())
    baseline = future_value(100000, 1000, 7, 30) * 0.04
    assert out.scenario1 == pytest.approx(future_value(100000, 1500, 7, 30) * 0.04 - baseline)
    assert out.scenario2 == pytest.approx(future_value(100000, 1000, 7, 32) * 0.04 - baseline)
    assert out.scenario1 > 0
    assert out.scenario2 > 0


def test_no_years_left_gives_zero_deltas():
    out = scenarios(InputSnapshot(current_age=66, retirement_age=65))
    assert out.scenario1 == 0
    assert out.scenario2 == 0


def test_zero_growth_retire_later_only_adds_contributions():
    out = scenarios(InputSnapshot(current_savings=0, monthly_savings=100, pre_retirement_return=0))
    assert out.scenario1 == pytest.approx(500 * 360 * 0.04)
    assert out.scenario2 == pytest.approx(100 * 24 * 0.04)


def test_deltas_never_negative():
    for snapshot in [
        InputSnapshot(monthly_savings=0, current_savings=0, pre_retirement_return=0),
        InputSnapshot(current_income=0),
        InputSnapshot(current_age=0, retirement_age=1),
    ]:
        out = scenarios(snapshot)
        assert out.scenario1 >= 0
        assert out.scenario2 >= 0


def test_overflowing_projections_report_zero_deltas():
    for snapshot in [
        InputSnapshot(pre_retirement_return=100000),
        InputSnapshot(current_age=0, retirement_age=100000),
    ]:
        out = scenarios(snapshot)
        assert out.scenario1 == 0
        assert out.scenario2 == 0
