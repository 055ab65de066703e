import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from formguard.main import app
from formguard.settings import settings
from formguard.core import messages as msg
from formguard.store.form_registry import form_registry

client = TestClient(app)

VALID = [
    ("fullName", "John Doe"),
    ("email", "john@example.com"),
    ("password", "LongEnough1!"),
    ("confirmPassword", "LongEnough1!"),
]


@pytest.fixture(autouse=True)
def fast_forms():
    form_registry.clear()
    with patch.object(settings, "SUBMIT_DELAY_SEC", 0.01), \
         patch.object(settings, "API_KEY", ""), \
         patch.object(settings, "LOG_FIELD_EVENTS", False):
        yield
    form_registry.clear()


def _new_form():
    resp = client.post("/api/forms")
    assert resp.status_code == 201
    return resp.json()


def test_root_and_health():
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["status"] == "ok"


def test_create_form_returns_initial_state():
    body = _new_form()
    assert body["status"] == "success"
    assert body["instructions"] == [
        {"op": "renderProgress", "percent": 0},
        {"op": "renderSubmitState", "eligible": False, "pending": False},
    ]
    assert body["snapshot"]["progress"] == 0
    assert body["snapshot"]["fields"]["email"] == {"isValid": False, "touched": False, "phase": "untouched"}


def test_input_returns_render_instructions():
    form_id = _new_form()["formId"]
    resp = client.post(f"/api/forms/{form_id}/input", json={"field": "fullName", "value": "John3"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["instructions"][0] == {
        "op": "renderField",
        "field": "fullName",
        "isValid": False,
        "touched": True,
        "message": msg.NAME_NO_NUMBERS,
        "messageType": "error",
    }
    assert body["snapshot"]["fields"]["fullName"]["phase"] == "touched-invalid"


def test_full_flow_submit_and_reset():
    form_id = _new_form()["formId"]
    for field, value in VALID:
        client.post(f"/api/forms/{form_id}/input", json={"field": field, "value": value})
        resp = client.post(f"/api/forms/{form_id}/blur", json={"field": field, "value": value})
    assert resp.json()["snapshot"]["submitEligible"] is True
    assert resp.json()["snapshot"]["progress"] == 100

    resp = client.post(f"/api/forms/{form_id}/submit")
    body = resp.json()
    assert body["outcome"] == "accepted"
    ops = [i["op"] for i in body["instructions"]]
    assert ops == ["renderSubmitState", "submitAccepted", "renderSubmitState"]

    resp = client.post(f"/api/forms/{form_id}/reset")
    body = resp.json()
    assert body["instructions"][0] == {"op": "reset"}
    assert body["snapshot"]["progress"] == 0
    assert all(not f["touched"] for f in body["snapshot"]["fields"].values())


def test_submit_rejected_on_incomplete_form():
    form_id = _new_form()["formId"]
    resp = client.post(f"/api/forms/{form_id}/submit")
    body = resp.json()
    assert body["outcome"] == "rejected"
    assert body["instructions"] == [{"op": "submitRejected", "reason": msg.SUBMIT_REJECTED_REASON}]


def test_focus_reports_cleared():
    form_id = _new_form()["formId"]
    resp = client.post(f"/api/forms/{form_id}/focus", json={"field": "email"})
    assert resp.json()["cleared"] is True
    assert resp.json()["instructions"] == [{"op": "clearField", "field": "email"}]


def test_unknown_form_is_404():
    assert client.post("/api/forms/nope/input", json={"field": "email", "value": "x"}).status_code == 404
    assert client.get("/api/forms/nope").status_code == 404
    assert client.delete("/api/forms/nope").status_code == 404


def test_unknown_field_is_422():
    form_id = _new_form()["formId"]
    resp = client.post(f"/api/forms/{form_id}/input", json={"field": "username", "value": "x"})
    assert resp.status_code == 422


def test_get_and_close_form():
    form_id = _new_form()["formId"]
    resp = client.get(f"/api/forms/{form_id}")
    assert resp.status_code == 200
    assert resp.json()["instructions"] == []
    assert client.delete(f"/api/forms/{form_id}").json() == {"status": "success", "formId": form_id}
    assert client.get(f"/api/forms/{form_id}").status_code == 404


def test_validate_preview():
    resp = client.post("/api/validate", json={"field": "password", "value": "Abc12345"})
    body = resp.json()
    assert body["isValid"] is False
    assert body["message"] == msg.PASSWORD_WEAK
    assert body["strength"] == {"score": 4, "tier": "good"}

    resp = client.post("/api/validate", json={"field": "confirmPassword", "value": "x", "passwordValue": "x"})
    assert resp.json()["isValid"] is True
    assert resp.json()["strength"] is None


def test_api_key_enforced_when_configured():
    with patch.object(settings, "API_KEY", "secret"):
        assert client.post("/api/forms").status_code == 401
        assert client.post("/api/forms", headers={"x-api-key": "secret"}).status_code == 201
