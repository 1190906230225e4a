import json
import logging

from fastapi.testclient import TestClient

from attendance_api.app.main import create_app


def _write_raw(data_file, text):
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text(text, encoding="utf-8")


def test_health_returns_fixed_payload(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Server is running"}


def test_health_ignores_broken_storage(client, data_file):
    _write_raw(data_file, "not json")

    assert client.get("/api/health").status_code == 200


def test_list_is_empty_without_data_file(client, data_file):
    response = client.get("/api/records")

    assert response.status_code == 200
    assert response.json() == []
    assert not data_file.exists()


def test_check_in_scenario(client):
    created = client.post("/api/records", json={"name": "Asha Rao"})

    assert created.status_code == 201
    record = created.json()
    assert record["userName"] == "Asha Rao"
    assert record["userId"] == "asha-rao"
    assert isinstance(record["timestamp"], int)
    assert isinstance(record["loginDate"], str) and record["loginDate"]
    assert isinstance(record["loginTime"], str) and record["loginTime"]

    assert client.get("/api/records").json() == [record]

    deleted = client.delete(f"/api/records/{record['timestamp']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Record deleted successfully"}

    assert client.get("/api/records").json() == []


def test_create_trims_name_and_persists(client, data_file):
    response = client.post("/api/records", json={"name": "   Jane   Doe "})

    assert response.status_code == 201
    assert response.json()["userName"] == "Jane   Doe"
    assert response.json()["userId"] == "jane-doe"
    assert json.loads(data_file.read_text(encoding="utf-8")) == [response.json()]


def test_list_keeps_insertion_order(client):
    names = ["Charlie", "alice", "Bob"]
    for name in names:
        client.post("/api/records", json={"name": name})

    assert [r["userName"] for r in client.get("/api/records").json()] == names


def test_create_rejects_blank_or_missing_name(client):
    for body in ({"name": ""}, {"name": "   "}, {}, {"name": None}):
        response = client.post("/api/records", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Name is required"}

    assert client.get("/api/records").json() == []


def test_create_rejects_missing_or_malformed_body(client):
    assert client.post("/api/records").status_code == 400
    assert client.post("/api/records", json={"name": 123}).status_code == 400
    response = client.post(
        "/api/records",
        content="{broken",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()
    assert client.get("/api/records").json() == []


def test_delete_unknown_timestamp_is_not_found(client):
    client.post("/api/records", json={"name": "Asha Rao"})

    response = client.delete("/api/records/123")

    assert response.status_code == 404
    assert response.json() == {"error": "Record not found"}
    assert len(client.get("/api/records").json()) == 1


def test_delete_non_numeric_timestamp_is_bad_request(client):
    client.post("/api/records", json={"name": "Asha Rao"})

    for segment in ("abc", "12abc", "1.5"):
        response = client.delete(f"/api/records/{segment}")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid timestamp"}

    assert len(client.get("/api/records").json()) == 1


def test_delete_removes_only_target(client):
    first = client.post("/api/records", json={"name": "One"}).json()
    second = client.post("/api/records", json={"name": "Two"}).json()

    assert client.delete(f"/api/records/{first['timestamp']}").status_code == 200
    assert client.get("/api/records").json() == [second]


def test_storage_errors_become_500(client, data_file):
    _write_raw(data_file, "{oops")

    listed = client.get("/api/records")
    assert listed.status_code == 500
    assert listed.json() == {"error": "Failed to read records"}

    created = client.post("/api/records", json={"name": "Asha Rao"})
    assert created.status_code == 500
    assert created.json() == {"error": "Failed to create record"}

    deleted = client.delete("/api/records/1")
    assert deleted.status_code == 500
    assert deleted.json() == {"error": "Failed to delete record"}

    assert data_file.read_text(encoding="utf-8") == "{oops"


def test_cross_origin_requests_are_allowed(client):
    response = client.get("/api/records", headers={"Origin": "http://192.168.1.20:3000"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_preflight_for_delete_is_allowed(client):
    response = client.options(
        "/api/records/1",
        headers={
            "Origin": "http://192.168.1.20:3000",
            "Access-Control-Request-Method": "DELETE",
        },
    )

    assert response.status_code == 200
    assert "DELETE" in response.headers["access-control-allow-methods"]


def test_delete_overlong_timestamp_is_bad_request(client):
    response = client.delete("/api/records/" + "1" * 5000)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid timestamp"}


def test_non_object_records_become_operation_500s(client, data_file):
    _write_raw(data_file, "[1, 2]")

    assert client.get("/api/records").json() == {"error": "Failed to read records"}
    assert client.post("/api/records", json={"name": "Asha Rao"}).json() == {"error": "Failed to create record"}
    assert client.delete("/api/records/1").json() == {"error": "Failed to delete record"}
    assert client.delete("/api/records/1").status_code == 500


def test_startup_logs_address_and_data_file(app_settings, data_file, caplog):
    caplog.set_level(logging.INFO)

    with TestClient(create_app(app_settings)):
        pass

    assert "Server running on http://127.0.0.1:5050" in caplog.text
    assert f"Data stored in: {data_file}" in caplog.text
    assert "Server stopped" in caplog.text
