import math


def future_value(present_value: float, periodic_payment: float, annual_rate_percent: float, years: float) -> float:
    """Grow a lump sum plus end-of-month contributions under monthly compounding.

    Horizons or rates too large for a float give ``math.inf`` instead of raising.
    """
    if years <= 0:
        return present_value
    monthly_rate = annual_rate_percent / 100.0 / 12.0
    num_periods = years * 12
    if monthly_rate == 0:
        return present_value + periodic_payment * num_periods
    try:
        growth = (1 + monthly_rate) ** num_periods
    except OverflowError:
        growth = math.inf
    # Zero terms stay zero: 0 * inf would be nan.
    fv_lump_sum = present_value * growth if present_value > 0 else 0.0
    fv_annuity = periodic_payment * (growth - 1) / monthly_rate if periodic_payment > 0 else 0.0
    return fv_lump_sum + fv_annuity
