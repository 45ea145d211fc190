from unittest.mock import MagicMock, patch

import requests

from overpass_places.collectors.overpass.api_client import OverpassAPIClient


@patch("overpass_places.collectors.overpass.api_client.requests.post")
def test_post_returns_body(mock_post):
    mock_resp = MagicMock()
    mock_resp.text = '{"elements": []}'
    mock_resp.raise_for_status.return_value = None
    mock_post.return_value = mock_resp

    client = OverpassAPIClient()
    assert client.post("[out:json];") == '{"elements": []}'

    _, kwargs = mock_post.call_args
    assert kwargs["data"] == {"data": "[out:json];"}
    assert kwargs["timeout"] == client.timeout
    assert kwargs["headers"]["User-Agent"] == client.config.api.user_agent


@patch("overpass_places.collectors.overpass.api_client.requests.post")
def test_post_timeout_returns_empty(mock_post):
    mock_post.side_effect = requests.exceptions.Timeout()
    assert OverpassAPIClient().post("q") == ""


@patch("overpass_places.collectors.overpass.api_client.requests.post")
def test_post_http_error_returns_empty(mock_post):
    error_resp = MagicMock()
    error_resp.status_code = 429
    mock_resp = MagicMock()
    mock_resp.raise_for_status.side_effect = requests.exceptions.HTTPError(response=error_resp)
    mock_post.return_value = mock_resp
    assert OverpassAPIClient().post("q") == ""
    assert mock_post.call_count == 1


@patch("overpass_places.collectors.overpass.api_client.requests.post")
def test_post_connection_error_returns_empty(mock_post):
    mock_post.side_effect = requests.exceptions.ConnectionError("refused")
    assert OverpassAPIClient().post("q") == ""
