SAMPLE_REQUEST = {
    "current_age": 35,
    "retirement_age": 65,
    "current_income": 75000,
    "current_savings": 100000,
    "monthly_savings": 1000,
    "pre_retirement_return": 7,
    "post_retirement_return": 4,
    "inflation_rate": 2.5,
    "replacement_ratio": 80,
}

LATE_START_REQUEST = {
    "current_age": "52",
    "retirement_age": "62",
    "current_income": "98000",
    "current_savings": "40000",
    "monthly_savings": "600",
    "pre_retirement_return": "6",
    "replacement_ratio": "70",
}
