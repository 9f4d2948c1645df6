import json
from datetime import datetime, timezone

import pytest
from pymongo.errors import WriteError

VALID = {"name": "A", "email": "a@b.com", "message": "Hello there, world"}


def post_json(client, body, content_type="application/json"):
    return client.post("/sendForm", content=json.dumps(body), headers={"Content-Type": content_type})


def test_submit_form_persists_with_server_timestamp(client, db):
    before = datetime.now(timezone.utc)
    r = post_json(client, VALID)
    after = datetime.now(timezone.utc)

    assert r.status_code == 201
    assert r.json() == {"message": "Form submitted successfully"}

    docs = db["forms"].docs
    assert len(docs) == 1
    stored = docs[0]
    assert {k: stored[k] for k in ("name", "email", "message")} == VALID
    assert before <= stored["submittedDateTime"] <= after


def test_client_timestamp_is_ignored(client, db):
    body = {**VALID, "submittedDateTime": "1999-01-01T00:00:00Z", "admin": True}
    assert post_json(client, body).status_code == 201
    stored = db["forms"].docs[0]
    assert isinstance(stored["submittedDateTime"], datetime)
    assert stored["submittedDateTime"].year != 1999
    assert "admin" not in stored


def test_response_does_not_expose_inserted_id(client):
    body = post_json(client, VALID).json()
    assert "id" not in body and "_id" not in body


@pytest.mark.parametrize(
    "content_type",
    ["text/plain", "application/json; charset=utf-8", "application/x-www-form-urlencoded", "APPLICATION/JSON"],
)
def test_rejects_wrong_content_type(client, db, content_type):
    r = post_json(client, VALID, content_type=content_type)
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid Content-Type. Expected application/json."}
    assert db["forms"].docs == []


def test_wrong_content_type_checked_before_body(client):
    r = client.post("/sendForm", content=b"{not json", headers={"Content-Type": "text/plain"})
    assert r.json()["message"].startswith("Invalid Content-Type")


def test_rejects_invalid_json(client, db):
    r = client.post("/sendForm", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid JSON format."}
    assert db["forms"].docs == []


def test_rejects_empty_body(client):
    r = client.post("/sendForm", content=b"", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid JSON format."}


@pytest.mark.parametrize(
    "body",
    [
        {"email": "a@b.com", "message": "hi"},
        {"name": "A", "message": "hi"},
        {"name": "A", "email": "a@b.com"},
        {"name": "", "email": "a@b.com", "message": "hi"},
        {"name": "A", "email": "a@b.com", "message": ""},
        {"name": None, "email": "a@b.com", "message": "hi"},
        ["A", "a@b.com", "hi"],
        "hello",
    ],
)
def test_rejects_missing_fields(client, db, body):
    r = post_json(client, body)
    assert r.status_code == 400
    assert r.json() == {"message": "Missing required fields: name, email, message."}
    assert db["forms"].docs == []


def test_email_format_is_not_checked(client, db):
    assert post_json(client, {**VALID, "email": "not-an-email"}).status_code == 201
    assert db["forms"].docs[0]["email"] == "not-an-email"


def test_insert_failure_is_500(failing_client):
    r = post_json(failing_client(WriteError("disk full")), VALID)
    assert r.status_code == 500
    assert r.json() == {"message": "Error adding data", "error": "disk full"}
