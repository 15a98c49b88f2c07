import logging
import math
from dataclasses import fields
from typing import Any, Mapping, Optional

from .schemas import InputSnapshot

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = {f.name: f.default for f in fields(InputSnapshot)}
INTEGER_FIELDS = {"current_age", "retirement_age"}


def safe_div(a: float, b: float, default: float = 0.0) -> float:
    if b <= 0:
        return default
    return a / b


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize(raw: Optional[Mapping[str, Any]]) -> InputSnapshot:
    """Build an InputSnapshot from loosely typed input.

    Missing, non-numeric and non-finite values take the field default;
    negative numbers are clamped to zero. Ages are truncated to whole years.
    """
    raw = raw or {}
    values = {}
    for name, default in DEFAULT_INPUTS.items():
        number = _to_number(raw.get(name))
        if number is None:
            if raw.get(name) is not None:
                logger.debug(f"Unusable value for {name}: {raw.get(name)!r}, using default {default}")
            number = default
        number = max(0.0, number)
        values[name] = int(number) if name in INTEGER_FIELDS else float(number)
    return InputSnapshot(**values)
