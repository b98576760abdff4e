import logging
from unittest.mock import MagicMock

import pytest
import requests

from routing.directions_client import CollaboratorError, DirectionsClient

from conftest import EQUATOR_POLYLINE, route_with


def make_client(payload=None, status_error=None, get_error=None):
    response = MagicMock()
    response.json.return_value = payload
    if status_error is not None:
        response.raise_for_status.side_effect = status_error

    session = MagicMock()
    if get_error is not None:
        session.get.side_effect = get_error
    else:
        session.get.return_value = response

    client = DirectionsClient(api_key="test-key", base_url="https://maps.example.com/", timeout=3, session=session)
    return client, session


def test_fetch_routes_returns_routes_and_sends_expected_request():
    routes = [route_with(EQUATOR_POLYLINE)]
    client, session = make_client({"status": "OK", "routes": routes})

    assert client.fetch_routes("Lisbon", "Porto") == routes

    session.get.assert_called_once_with(
        "https://maps.example.com/maps/api/directions/json",
        params={"origin": "Lisbon", "destination": "Porto", "key": "test-key"},
        timeout=3,
    )


def test_fetch_routes_formats_coordinates():
    client, session = make_client({"status": "OK", "routes": []})

    client.fetch_routes({"lat": 38.7223, "lng": -9.1393}, [41.1579, -8.6291])

    params = session.get.call_args.kwargs["params"]
    assert params["origin"] == "38.7223,-9.1393"
    assert params["destination"] == "41.1579,-8.6291"


@pytest.mark.parametrize("status", ["ZERO_RESULTS", "NOT_FOUND"])
def test_fetch_routes_empty_statuses_return_no_routes(status):
    client, _ = make_client({"status": status, "routes": []})

    assert client.fetch_routes("a", "b") == []


@pytest.mark.parametrize("status", ["REQUEST_DENIED", "OVER_QUERY_LIMIT", "INVALID_REQUEST", "UNKNOWN_ERROR"])
def test_fetch_routes_error_statuses_raise(status):
    client, _ = make_client({"status": status, "error_message": "nope"})

    with pytest.raises(CollaboratorError):
        client.fetch_routes("a", "b")


def test_fetch_routes_network_failure_raises():
    client, _ = make_client(get_error=requests.ConnectionError("connection refused"))

    with pytest.raises(CollaboratorError):
        client.fetch_routes("a", "b")


def test_fetch_routes_timeout_raises():
    client, _ = make_client(get_error=requests.Timeout("read timed out"))

    with pytest.raises(CollaboratorError):
        client.fetch_routes("a", "b")


def test_fetch_routes_http_error_raises():
    client, _ = make_client({"status": "OK"}, status_error=requests.HTTPError("503 Server Error"))

    with pytest.raises(CollaboratorError):
        client.fetch_routes("a", "b")


def test_fetch_routes_non_json_body_raises():
    client, _ = make_client()
    client.session.get.return_value.json.side_effect = ValueError("Expecting value")

    with pytest.raises(CollaboratorError):
        client.fetch_routes("a", "b")


def test_missing_api_key_raises(monkeypatch):
    monkeypatch.setattr("routing.directions_client.MAPS_API_KEY", None)

    with pytest.raises(ValueError):
        DirectionsClient(session=MagicMock())


def test_request_failure_log_does_not_contain_the_api_key(caplog):
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError(
        "HTTPConnectionPool(host='127.0.0.1', port=9): Max retries exceeded with url: "
        "/maps/api/directions/json?origin=a&destination=b&key=SECRET-KEY-123"
    )
    client = DirectionsClient(api_key="SECRET-KEY-123", base_url="http://127.0.0.1:9", session=session)

    with caplog.at_level(logging.ERROR, logger="routing.directions_client"):
        with pytest.raises(CollaboratorError) as excinfo:
            client.fetch_routes("a", "b")

    assert "Directions request failed" in caplog.text
    assert "SECRET-KEY-123" not in caplog.text
    assert "SECRET-KEY-123" not in str(excinfo.value)
