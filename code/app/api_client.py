import logging
import os
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

RETIREMENT_API_URL = os.getenv("RETIREMENT_API_URL", "")
RETIREMENT_API_TIMEOUT = float(os.getenv("RETIREMENT_API_TIMEOUT", "5"))
RETIREMENT_API_HEALTH_TIMEOUT = float(os.getenv("RETIREMENT_API_HEALTH_TIMEOUT", "1.0"))


def _base_url(base_url: Optional[str] = None) -> str:
    base = (base_url if base_url is not None else RETIREMENT_API_URL).strip().rstrip("/")
    if base.endswith("/project"):
        base = base[: -len("/project")]
    return base


def api_configured(base_url: Optional[str] = None) -> bool:
    return bool(_base_url(base_url))


def check_api_online(base_url: Optional[str] = None, timeout: Optional[float] = None) -> bool:
    base = _base_url(base_url)
    if not base:
        return False
    health_timeout = timeout if timeout is not None else RETIREMENT_API_HEALTH_TIMEOUT
    try:
        resp = requests.get(f"{base}/health", timeout=health_timeout)
    except requests.RequestException as e:
        logger.warning(f"Projection API health check failed: {e}")
        return False
    return resp.ok


def fetch_projection(payload: Dict[str, Any], base_url: Optional[str] = None) -> Dict[str, Any]:
    """POST raw inputs to the projection service and return the decoded response."""
    base = _base_url(base_url)
    if not base:
        raise RuntimeError("Missing RETIREMENT_API_URL. Set the environment variable to use the projection API.")
    try:
        resp = requests.post(f"{base}/project", json=payload, timeout=RETIREMENT_API_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Projection API request failed: {e}")
        raise RuntimeError(f"Projection API request failed: {e}") from e
    return resp.json()
