"""Tests for the HTTP API using FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from achgen.api.app import create_app
from achgen.core.config import AppSettings
from achgen.core.exceptions import FileStoreError
from tests.fakes import MemoryFileStore

ACME_PAYLOAD = {
    "originatorName": "Acme Inc",
    "originatorRouting": "021000021",
    "companyId": "1234567890",
    "destinationRouting": "021000021",
    "destinationBankName": "Test Bank",
    "effectiveDate": "2025-01-15",
    "batchDescription": "PAYROLL",
    "entries": [{
        "receiverName": "John Doe",
        "receiverRouting": "021000021",
        "receiverAccount": "123456789",
        "amount": 100.00,
        "individualId": "EMP001",
    }],
}


class FailingFileStore(MemoryFileStore):
    def write(self, path, data, content_type="application/octet-stream"):
        raise FileStoreError("bucket unavailable")


@pytest.fixture
def file_store():
    return MemoryFileStore()


@pytest.fixture
def client(file_store):
    with TestClient(create_app(settings=AppSettings(), file_store=file_store)) as c:
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_ready(client):
    body = client.get("/ready").json()
    assert body["status"] == "healthy"
    assert body["service"] == "AchFileService"


class TestValidate:
    def test_clean_batch(self, client):
        resp = client.post("/ach/validate", json=ACME_PAYLOAD)
        assert resp.status_code == 200
        assert resp.json() == {"valid": True, "issues": []}

    def test_reports_errors(self, client):
        payload = {**ACME_PAYLOAD, "entries": [{**ACME_PAYLOAD["entries"][0], "amount": -5}]}
        body = client.post("/ach/validate", json=payload).json()
        assert body["valid"] is False
        assert body["issues"][0]["field"] == "entries[0].amount"
        assert body["issues"][0]["severity"] == "error"

    def test_warning_keeps_batch_valid(self, client):
        payload = {**ACME_PAYLOAD, "entries": [{**ACME_PAYLOAD["entries"][0], "amount": 2000000}]}
        body = client.post("/ach/validate", json=payload).json()
        assert body["valid"] is True
        assert [issue["severity"] for issue in body["issues"]] == ["warning"]


class TestGenerateFile:
    def test_creates_and_archives_file(self, client, file_store):
        resp = client.post("/ach/files", json=ACME_PAYLOAD)
        assert resp.status_code == 201
        body = resp.json()
        lines = body["content"].split("\n")
        assert len(lines) == 10
        assert all(len(line) == 94 for line in lines)
        assert body["totals"]["total_debit_cents"] == 10000
        assert file_store.list_files("ach/2025-01-15/") == [body["path"]]

    def test_blocking_issues_return_422(self, client, file_store):
        payload = {**ACME_PAYLOAD, "originatorRouting": "123456789"}
        resp = client.post("/ach/files", json=payload)
        assert resp.status_code == 422
        assert [issue["field"] for issue in resp.json()["issues"]] == ["originatorRouting"]
        assert file_store.list_files("") == []

    def test_storage_failure_returns_502(self):
        app = create_app(settings=AppSettings(), file_store=FailingFileStore())
        with TestClient(app) as client:
            resp = client.post("/ach/files", json=ACME_PAYLOAD)
        assert resp.status_code == 502
