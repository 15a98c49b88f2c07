import math

STATUS_LABELS = {
    "on-track": "On Track",
    "caution": "Caution",
    "behind": "Behind Goal",
    "error": "Check Inputs",
}


def _usable(value: float) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        return 0.0
    return value


def format_currency(value: float) -> str:
    return f"${_usable(value):,.0f}"


def format_percentage(value: float) -> str:
    return f"{_usable(value):.1f}%"


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, "Calculating...")
