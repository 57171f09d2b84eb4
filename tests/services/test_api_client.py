# -*- coding: utf-8 -*-
"""
Tests for ProjectsApiClient with the HTTP layer patched out.
"""
import json

import pytest
import requests

from services.api_client import ApiConfig, ProjectsApiClient
from services.exceptions import ApiException, NetworkException


class FakeResponse:

    def __init__(self, status_code=200, data=None, text=None, content=b""):
        self.status_code = status_code
        self._data = data
        self.text = text if text is not None else ("" if data is None else json.dumps(data))
        self.content = content

    def json(self):
        if self._data is None:
            return json.loads(self.text)
        return self._data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def client():
    return ProjectsApiClient(ApiConfig(
        base_url="http://api.test/api/", timeout=5, verify_ssl=True,
        access_token="tok", refresh_token="ref",
    ))


@pytest.fixture
def http(monkeypatch):
    """Queue responses and record requests."""
    state = {"responses": [], "requests": []}

    def fake_request(**kwargs):
        state["requests"].append(kwargs)
        response = state["responses"].pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(requests, "request", fake_request)
    return state


class TestRequests:

    def test_json_request(self, client, http):
        http["responses"].append(FakeResponse(201, {"id": 7}))
        result = client.create_project({"internal_code": "M13"})

        sent = http["requests"][0]
        assert result == {"id": 7}
        assert sent["method"] == "POST"
        assert sent["url"] == "http://api.test/api/projects/"
        assert sent["json"] == {"internal_code": "M13"}
        assert sent["files"] is None
        assert sent["headers"]["Authorization"] == "Bearer tok"
        assert sent["headers"]["Content-Type"] == "application/json"

    def test_multipart_request_has_no_json_content_type(self, client, http):
        http["responses"].append(FakeResponse(200, {"id": 3}))
        parts = client.build_multipart({"a": 1, "skip": None, "flag": True})
        client.update_resource(12, "contract", 3, files=parts)

        sent = http["requests"][0]
        assert sent["url"] == "http://api.test/api/projects/12/contract/3/"
        assert sent["json"] is None
        assert sent["files"] == [("a", (None, "1")), ("flag", (None, "true"))]
        assert "Content-Type" not in sent["headers"]

    def test_paginated_list(self, client, http):
        http["responses"].append(FakeResponse(200, {"results": [{"id": 1}], "count": 1}))
        assert client.list_resource(5, "license") == [{"id": 1}]

    def test_empty_body(self, client, http):
        http["responses"].append(FakeResponse(204))
        assert client.update_project(5, {}) == {}

    def test_exact_internal_code_filter(self, client, http):
        http["responses"].append(FakeResponse(200, [
            {"id": 1, "internal_code": "M13"}, {"id": 2, "internal_code": "M135"},
        ]))
        assert [p["id"] for p in client.find_projects_by_internal_code("M13")] == [1]
        assert http["requests"][0]["params"] == {"internal_code": "M13"}


class TestErrors:

    def test_http_error(self, client, http):
        http["responses"].append(FakeResponse(400, {"internal_code": ["exists"]}))
        with pytest.raises(ApiException) as exc_info:
            client.create_resource(1, "siteplan", payload={})
        assert exc_info.value.status_code == 400
        assert exc_info.value.response_data == {"internal_code": ["exists"]}
        assert exc_info.value.context == "siteplan"

    def test_non_json_error_body(self, client, http):
        http["responses"].append(FakeResponse(500, text="<html>oops</html>"))
        with pytest.raises(ApiException) as exc_info:
            client.get_project(1)
        assert exc_info.value.response_data == {"detail": "<html>oops</html>"}

    def test_connection_error(self, client, http):
        http["responses"].append(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(NetworkException):
            client.list_projects()

    def test_refresh_and_retry_once(self, client, http):
        http["responses"].extend([
            FakeResponse(401, {"detail": "expired"}),
            FakeResponse(200, {"access": "new", "refresh": "ref2"}),
            FakeResponse(200, {"id": 4}),
        ])
        assert client.get_project(4) == {"id": 4}
        assert client.access_token == "new"
        assert client.refresh_token == "ref2"
        assert http["requests"][1]["json"] == {"refresh": "ref"}
        assert http["requests"][2]["headers"]["Authorization"] == "Bearer new"

    def test_failed_refresh_raises_unauthorized(self, client, http):
        http["responses"].extend([
            FakeResponse(401, {"detail": "expired"}),
            FakeResponse(401, {"detail": "bad refresh"}),
        ])
        with pytest.raises(ApiException) as exc_info:
            client.get_project(4)
        assert exc_info.value.is_unauthorized


class TestFiles:

    def test_file_url(self, client):
        assert client.build_file_url("/media/a b.pdf") == "http://api.test/api/files/media/a%20b.pdf"
        assert client.build_file_url("https://cdn/x.pdf") == "https://cdn/x.pdf"
        assert client.build_file_url("") == ""

    def test_fetch_file(self, client, http):
        http["responses"].append(FakeResponse(200, content=b"%PDF"))
        assert client.fetch_file("media/a.pdf") == b"%PDF"
        assert http["requests"][0]["headers"]["Accept"] == "*/*"

    def test_fetch_file_requires_path(self, client):
        with pytest.raises(ValueError):
            client.fetch_file("")
