"""
Tests for the ``requests``-based API client.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from automytee_client import AutomyteeAPI


def make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    response.reason = "Reason"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return AutomyteeAPI(base_url="https://automytee.example/", session=session, timeout=3)


def test_success_unwraps_data(api, session):
    session.request.return_value = make_response(200, {"success": True, "data": [{"id": "1"}]})

    contacts, error = api.list_contacts()

    assert error is None
    assert contacts == [{"id": "1"}]
    session.request.assert_called_once_with(
        method="GET",
        url="https://automytee.example/api/v1/contacts",
        json=None,
        timeout=3,
    )


def test_status_change_sends_put(api, session):
    session.request.return_value = make_response(200, {"success": True, "data": {"status": "read"}})

    data, error = api.set_contact_status("abc", "read")

    assert error is None
    assert data == {"status": "read"}
    _, kwargs = session.request.call_args
    assert kwargs["method"] == "PUT"
    assert kwargs["url"].endswith("/api/v1/contacts/abc")
    assert kwargs["json"] == {"status": "read"}


def test_error_envelope_is_returned_as_error(api, session):
    details = [{"field": "title", "rule": "required", "message": "Please provide a project title"}]
    session.request.return_value = make_response(
        400, {"success": False, "error": "Please provide a project title", "details": details}
    )

    data, error = api.create_project({})

    assert data is None
    assert error == {"status_code": 400, "message": "Please provide a project title", "details": details}


def test_non_json_error(api, session):
    session.request.return_value = make_response(502, text="Bad gateway")

    projects, error = api.list_projects()

    assert projects == []
    assert error["status_code"] == 502
    assert error["message"] == "Bad gateway"


def test_network_failure_has_no_status(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    data, error = api.delete_project("abc")

    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_delete_returns_empty_object(api, session):
    session.request.return_value = make_response(200, {"success": True, "data": {}})

    data, error = api.delete_contact("abc")

    assert (data, error) == ({}, None)
