# -*- coding: utf-8 -*-
"""
Shared fixtures.

The HTTP layer is replaced by FakeApiClient, which keeps records in memory
and remembers every call.
"""
import json
import os
import sys
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import Config
from services.exceptions import ApiException

JSON_PARTS = ("owners", "attachments", "extensions")


class FakeApiClient:
    """In-memory stand-in for ProjectsApiClient."""

    def __init__(self):
        self.projects = []
        self.records = {}  # (project_id, resource) -> [record]
        self.calls = []
        self.next_project_id = 100
        self.next_record_id = 1
        self.fail_create_project = None
        self.fail_create = {}  # resource -> exception
        self.fail_update = {}
        self.project_response = None

    # Projects

    def list_projects(self, params=None):
        self.calls.append(("list_projects", params))
        return list(self.projects)

    def find_projects_by_internal_code(self, internal_code):
        self.calls.append(("find_projects_by_internal_code", internal_code))
        return [p for p in self.projects if p.get("internal_code") == internal_code]

    def create_project(self, payload):
        self.calls.append(("create_project", payload))
        if self.fail_create_project is not None:
            raise self.fail_create_project
        if self.project_response is not None:
            return self.project_response
        project = dict(payload, id=self.next_project_id)
        self.next_project_id += 1
        self.projects.append(project)
        return project

    def update_project(self, project_id, payload):
        self.calls.append(("update_project", project_id, payload))
        return dict(payload, id=project_id)

    # Sub-resources

    def list_resource(self, project_id, resource):
        self.calls.append(("list_resource", project_id, resource))
        return list(self.records.get((project_id, resource), []))

    def create_resource(self, project_id, resource, payload=None, files=None):
        self.calls.append(("create_resource", project_id, resource, payload, files))
        if resource in self.fail_create:
            raise self.fail_create[resource]
        record = dict(payload or {})
        record.update(self._text_parts(files))
        record["id"] = self.next_record_id
        self.next_record_id += 1
        self.records.setdefault((project_id, resource), []).append(record)
        return record

    def update_resource(self, project_id, resource, record_id, payload=None, files=None):
        self.calls.append(("update_resource", project_id, resource, record_id, payload, files))
        if resource in self.fail_update:
            raise self.fail_update[resource]
        record = dict(payload or {})
        record.update(self._text_parts(files))
        record["id"] = record_id
        return record

    @staticmethod
    def _text_parts(files):
        """Echo text parts back like the server does (JSON parts decoded)."""
        record = {}
        for name, part in files or []:
            if part[0] is not None:
                continue
            value = part[1]
            if name in JSON_PARTS:
                value = json.loads(value)
            record[name] = value
        return record

    def call_names(self):
        return [call[0] for call in self.calls]


def parts_dict(parts):
    """Multipart list -> {name: value} for text parts, {name: filename} for binaries."""
    result = {}
    for name, part in parts:
        result[name] = part[1] if part[0] is None else part[0]
    return result


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Keep drafts out of the real data directory."""
    monkeypatch.setattr(Config, "DATA_DIR", tmp_path)
    return tmp_path


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def api_error():
    def _make(status_code=400, response_data=None, context=None):
        return ApiException("request failed", status_code=status_code,
                            response_data=response_data or {}, context=context)
    return _make


@pytest.fixture
def as_parts():
    return parts_dict
