# streamlit_app.py
import logging
import os
from typing import Any, Dict

import streamlit as st

from app.api_client import api_configured, check_api_online, fetch_projection
from app.core.formatting import format_currency, format_percentage
from app.core.models import ProjectionRequest
from app.core.pipeline import run_projection
from retirement.utils import DEFAULT_INPUTS

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

FIELDS = [
    ("current_age", "Current age", 1),
    ("retirement_age", "Retirement age", 1),
    ("current_income", "Current annual income ($)", 1000.0),
    ("current_savings", "Current savings ($)", 1000.0),
    ("monthly_savings", "Monthly savings ($)", 50.0),
    ("pre_retirement_return", "Return before retirement (%)", 0.1),
    ("post_retirement_return", "Return in retirement (%)", 0.1),
    ("inflation_rate", "Inflation rate (%)", 0.1),
    ("replacement_ratio", "Income replacement target (%)", 1.0),
]

STATUS_RENDERERS = {
    "on-track": st.success,
    "caution": st.warning,
    "behind": st.error,
    "error": st.error,
}

# --- Streamlit UI ----------------------------------------------------------
st.set_page_config(page_title="Retirement Income Calculator", layout="wide")
st.title("Retirement Income Calculator")

with st.sidebar:
    st.header("Your details")
    values: Dict[str, Any] = {}
    for name, label, step in FIELDS:
        default = DEFAULT_INPUTS[name]
        values[name] = st.number_input(label, min_value=type(step)(0), value=type(step)(default), step=step, key=name)
    st.markdown("---")
    use_api = st.checkbox("Use projection API", value=api_configured(), disabled=not api_configured())
    if use_api and not check_api_online():
        st.caption("Projection API is unreachable; results are computed locally.")


def compute(values: Dict[str, Any], use_api: bool) -> Dict[str, Any]:
    if use_api:
        try:
            return fetch_projection(values)
        except RuntimeError as e:
            logger.warning(f"Falling back to local projection: {e}")
    return run_projection(ProjectionRequest(**values)).model_dump()


response = compute(values, use_api)
result = response["result"]
what_if = response["scenarios"]

col1, col2, col3 = st.columns(3)
col1.metric("Total savings at retirement", format_currency(result["total_savings"]))
col2.metric("Annual retirement income", format_currency(result["annual_income"]))
col3.metric("Monthly retirement income", format_currency(result["monthly_income"]))

col4, col5 = st.columns(2)
col4.metric("Income replacement", format_percentage(result["replacement_percentage"]))
col5.metric("Savings rate", format_percentage(result["savings_rate"]))

st.subheader(f"Goal status: {response['status_label']}")
STATUS_RENDERERS.get(result["status"], st.info)(result["status_message"])

st.subheader("What if")
col6, col7 = st.columns(2)
col6.metric("Save $500 more per month", f"+{format_currency(what_if['scenario1'])}/yr")
col7.metric("Retire 2 years later", f"+{format_currency(what_if['scenario2'])}/yr")

with st.expander("Projection JSON"):
    st.json(response)
