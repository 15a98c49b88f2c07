from unittest.mock import MagicMock, patch

import pytest
import requests

from app import api_client
from app.core.sample_payloads import SAMPLE_REQUEST


def test_base_url_strips_project_path():
    assert api_client._base_url("http://localhost:8000/project/") == "http://localhost:8000"
    assert api_client.api_configured("") is False
    assert api_client.api_configured("http://localhost:8000") is True


@patch("app.api_client.requests.post")
def test_fetch_projection(mock_post):
    mock_resp = MagicMock()
    mock_resp.json.return_value = {"status_label": "On Track"}
    mock_post.return_value = mock_resp

    out = api_client.fetch_projection(SAMPLE_REQUEST, base_url="http://localhost:8000")

    assert out == {"status_label": "On Track"}
    args, kwargs = mock_post.call_args
    assert args[0] == "http://localhost:8000/project"
    assert kwargs["json"] == SAMPLE_REQUEST


@patch("app.api_client.requests.post")
def test_fetch_projection_wraps_transport_errors(mock_post):
    mock_post.side_effect = requests.ConnectionError("refused")
    with pytest.raises(RuntimeError, match="refused"):
        api_client.fetch_projection(SAMPLE_REQUEST, base_url="http://localhost:8000")


@patch("app.api_client.requests.post")
def test_fetch_projection_raises_on_http_error(mock_post):
    mock_resp = MagicMock()
    mock_resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    mock_post.return_value = mock_resp
    with pytest.raises(RuntimeError):
        api_client.fetch_projection(SAMPLE_REQUEST, base_url="http://localhost:8000")


def test_fetch_projection_requires_url():
    with pytest.raises(RuntimeError, match="RETIREMENT_API_URL"):
        api_client.fetch_projection(SAMPLE_REQUEST, base_url="")


@patch("app.api_client.requests.get")
def test_check_api_online(mock_get):
    mock_get.return_value = MagicMock(ok=True)
    assert api_client.check_api_online("http://localhost:8000") is True
    mock_get.side_effect = requests.Timeout("slow")
    assert api_client.check_api_online("http://localhost:8000") is False
    assert api_client.check_api_online("") is False
