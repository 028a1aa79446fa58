"""Health probe and the shared error response shape."""

from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from vetclinic.main import run


def test_health_reports_database(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "ok"}


def test_store_failure_becomes_generic_500(client, lookups):
    db_down = OperationalError("SELECT", {}, Exception("db down"))
    with patch("sqlalchemy.orm.Session.execute", side_effect=db_down):
        resp = client.get("/api/pets/pet-types")

    assert resp.status_code == 500
    assert resp.json() == {"error": "internal_error", "message": "Error fetching pet types"}


def test_malformed_body_is_400(client):
    resp = client.post("/api/pets", json={"name": "Rex", "type_id": "not-a-number", "owner_id": 1})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "validation_error"
    assert "type_id" in body["message"]


def test_launcher_serves_app_on_configured_address():
    with patch("vetclinic.main.uvicorn.run") as serve:
        run()

    serve.assert_called_once_with("vetclinic.main:app", host="0.0.0.0", port=5000, log_config=None)
