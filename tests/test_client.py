"""
Tests for the requests based API client.

The HTTP session is mocked; the tests check the URLs and parameters
the client sends and how responses and failures are reported.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from safety_alerts_client import SafetyAlertsAPI, emails_for_cities


def make_response(status_code, body=None, url="http://testserver"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return SafetyAlertsAPI(base_url="http://localhost:8080/", session=session, timeout=5)


class TestRequests:

    def test_success(self, api, session):
        session.request.return_value = make_response(200, ["841-874-6512"])
        data, error = api.phone_alert(3)
        assert data == ["841-874-6512"]
        assert error is None
        session.request.assert_called_once_with(
            method="GET",
            url="http://localhost:8080/api/v1/phoneAlert",
            params={"firestation": 3},
            json=None,
            timeout=5,
        )

    def test_no_content(self, api, session):
        session.request.return_value = make_response(204)
        assert api.delete_fire_station("1 Main St") == (None, None)

    def test_http_error_detail(self, api, session):
        session.request.return_value = make_response(404, {"detail": "No child found at this address"})
        data, error = api.child_alert("1 Nowhere")
        assert data is None
        assert error == {"status_code": 404, "message": "No child found at this address"}

    def test_connection_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("connection refused")
        data, error = api.fire("1509 Culver St")
        assert data is None
        assert error["status_code"] is None
        assert "connection refused" in error["message"]

    def test_flood_joins_station_numbers(self, api, session):
        session.request.return_value = make_response(200, {})
        api.flood([1, 2])
        assert session.request.call_args.kwargs["params"] == {"stations": "1,2"}

    def test_person_info_quotes_last_name(self, api, session):
        session.request.return_value = make_response(200, [])
        api.person_info("Van Dyke")
        assert session.request.call_args.kwargs["url"].endswith("/personInfolastName/Van%20Dyke")

    def test_create_fire_station_body(self, api, session):
        session.request.return_value = make_response(201, {"address": "1 Main St", "station": 5})
        api.create_fire_station("1 Main St", 5)
        assert session.request.call_args.kwargs["method"] == "POST"
        assert session.request.call_args.kwargs["json"] == {"address": "1 Main St", "station": 5}

    def test_custom_prefix(self, session):
        api = SafetyAlertsAPI(base_url="http://host", api_prefix="", session=session)
        session.request.return_value = make_response(200, [])
        api.community_email("Culver")
        assert session.request.call_args.kwargs["url"] == "http://host/communityEmail"


def test_emails_for_cities(api, session):
    session.request.side_effect = [
        make_response(200, ["a@email.com", "b@email.com"]),
        make_response(404, {"detail": "No resident found in this city"}),
        make_response(200, ["b@email.com", "c@email.com"]),
    ]
    assert emails_for_cities(api, ["Culver", "Paris", "Seaside"]) == ["a@email.com", "b@email.com", "c@email.com"]
