"""
Employee Admin Test Configuration - pytest fixtures

This module provides:
- FakeEmployeeResource: an in-memory stand-in for the employee REST resource,
  served through httpx.MockTransport and recording every request it receives
- Fixtures for the resource client, the admin component and the web app

RUNNING TESTS:
# Run all tests
pytest tests/ -v
"""

import json
import random

import httpx
import pytest
from fastapi.testclient import TestClient

from employee_admin.admin import EmployeeAdminClient
from employee_admin.api_client import ResourceClient
from employee_admin.config import Settings
from employee_admin.main import create_app

API_URL = "http://resource.test/employees"


class FakeEmployeeResource:
    """In-memory employee collection answering like a JSON Server resource."""

    def __init__(self, employees=None):
        self.employees = [dict(e) for e in (employees or [])]
        self.requests = []
        self.next_id = max([e["id"] for e in self.employees if isinstance(e["id"], int)] or [0]) + 1
        # method -> exception raised instead of answering
        self.failures = {}
        # method -> raw response returned instead of the normal answer
        self.overrides = {}

    @property
    def calls(self):
        """(method, path) for every request received, in order."""
        return [(r.method, r.url.path) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method in self.failures:
            raise self.failures[request.method]
        if request.method in self.overrides:
            return self.overrides[request.method]

        parts = request.url.path.rstrip("/").split("/")
        item_id = parts[2] if len(parts) > 2 else None

        if request.method == "GET" and item_id is None:
            return httpx.Response(200, json=self.employees)
        if request.method == "POST" and item_id is None:
            body = json.loads(request.content)
            body["id"] = self.next_id
            self.next_id += 1
            self.employees.append(body)
            return httpx.Response(201, json=body)

        index = self._index(item_id)
        if index is None:
            return httpx.Response(404, json={})
        if request.method == "PUT":
            body = json.loads(request.content)
            body["id"] = self.employees[index]["id"]
            self.employees[index] = body
            return httpx.Response(200, json=body)
        if request.method == "DELETE":
            self.employees.pop(index)
            return httpx.Response(200, json={})
        return httpx.Response(405)

    def _index(self, item_id):
        for i, employee in enumerate(self.employees):
            if str(employee["id"]) == item_id:
                return i
        return None

    def json_body(self, index):
        return json.loads(self.requests[index].content)


@pytest.fixture
def employees():
    return [
        {"id": 1, "first_name": "John", "last_name": "Doe", "department": "Sales", "salary": 50000},
        {"id": 2, "first_name": "Jane", "last_name": "Smith", "department": "Marketing", "salary": 62000},
        {"id": 7, "first_name": "Bob", "last_name": "Johnson", "department": "IT", "salary": 71000},
    ]


@pytest.fixture
def fake_resource(employees):
    return FakeEmployeeResource(employees)


@pytest.fixture
def resource_client(fake_resource):
    return ResourceClient(API_URL, transport=httpx.MockTransport(fake_resource.handler))


@pytest.fixture
def admin(resource_client):
    return EmployeeAdminClient(resource_client, rng=random.Random(1234))


@pytest.fixture
def settings():
    return Settings(API_URL=API_URL, _env_file=None)


@pytest.fixture
def app(settings, resource_client):
    return create_app(settings=settings, resource=resource_client)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
