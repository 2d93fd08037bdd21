"""
Error handling and edge case tests.

- Error body shape for 4xx responses
- Storage failures surface as 500 without leaking internals
- Unexpected exceptions are caught by the general handler
- Startup aborts when schema creation fails
"""

import pytest
import uuid
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

import main
from test_fixtures import API, client, db_session, make_menu_payload
from app.exceptions import ConstraintViolationError
from repositories import MenuItemRepository


def test_error_body_shape(db_session):
    r = client.get(f"{API}/{uuid.uuid4()}")

    body = r.json()
    assert body["success"] is False
    assert set(body["error"]) >= {"code", "message"}
    assert "timestamp" in body


def test_validation_details_are_field_reason_pairs(db_session):
    r = client.post(API, json=make_menu_payload(name="  ", price=0))

    details = r.json()["error"]["details"]
    assert all(set(d) == {"field", "reason"} for d in details)
    assert [d["field"] for d in details] == ["name", "price"]


def test_non_json_body_returns_400(db_session):
    r = client.post(API, content=b"not json", headers={"content-type": "application/json"})
    assert r.status_code == 400


def test_wrong_list_type_returns_400(db_session):
    r = client.post(API, json=make_menu_payload(ingredients="tortilla"))
    assert r.status_code == 400


def _store_down(*args, **kwargs):
    raise OperationalError("SELECT secret FROM menu_items", {}, Exception("database is locked"))


def test_storage_failure_on_list_returns_500_without_details(db_session):
    with patch.object(Session, "query", _store_down):
        r = client.get(API)

    assert r.status_code == 500
    text = r.text
    assert "locked" not in text
    assert "secret" not in text
    assert r.json()["error"]["code"] == "STORAGE_FAILURE"


def test_storage_failure_on_get_returns_storage_failure(db_session):
    with patch.object(Session, "get", _store_down):
        r = client.get(f"{API}/{uuid.uuid4()}")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "STORAGE_FAILURE"


def test_storage_failure_on_health_check(db_session):
    with patch.object(Session, "scalar", _store_down):
        r = client.get("/health-check")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "STORAGE_FAILURE"


def test_storage_failure_on_duplicate_check_blocks_create(db_session):
    with patch.object(Session, "query", _store_down):
        r = client.post(API, json=make_menu_payload())

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "STORAGE_FAILURE"
    assert client.get(API).json() == []


def test_constraint_violation_on_write_returns_500(db_session):
    def rejecting(self, item):
        raise ConstraintViolationError("CHECK constraint failed: ck_menu_items_price_positive")

    with patch.object(MenuItemRepository, "create", rejecting):
        r = client.post(API, json=make_menu_payload())

    assert r.status_code == 500
    assert "ck_menu_items" not in r.text
    assert r.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


def test_unexpected_exception_returns_generic_500(db_session):
    safe_client = TestClient(main.app, raise_server_exceptions=False)

    def explode(self):
        raise RuntimeError("connection string with password=hunter2")

    with patch.object(MenuItemRepository, "get_all", explode):
        r = safe_client.get(API)

    assert r.status_code == 500
    assert "hunter2" not in r.text


def test_startup_fails_when_schema_cannot_be_created(monkeypatch):
    def fail():
        raise RuntimeError("disk full")

    monkeypatch.setattr(main, "init_database", fail)

    with pytest.raises(Exception):
        with TestClient(main.app):
            pass
