from __future__ import annotations

from datetime import date, timedelta


def test_company_crud_and_search(client, seed, login):
    login("admin@example.com")

    created = client.post("/api/companies", json={"company_name": "Acme Norte", "company_status": "active"})
    assert created.status_code == 201
    company_id = created.get_json()["id"]
    assert created.get_json()["company_status"] == "ACTIVE"

    found = client.get("/api/companies?search=acme").get_json()
    assert [c["company_name"] for c in found["companies"]] == ["Acme Norte"]
    assert (found["total"], found["page"], found["pageSize"], found["totalPages"]) == (1, 1, 10, 1)

    renamed = client.put(f"/api/companies?id={company_id}", json={"company_name": "Acme Sur"})
    assert renamed.get_json()["company_name"] == "Acme Sur"

    deleted = client.delete("/api/companies", json={"id": company_id})
    assert deleted.status_code == 200
    assert deleted.get_json() == {"message": "Empresa eliminada correctamente"}


def test_pagination_envelope(client, seed, login):
    login("admin@example.com")
    for i in range(12):
        client.post("/api/incidents", json={"incident_code": f"X{i:02d}", "incident_name": f"Extra {i}"})

    body = client.get("/api/incidents?page=2&pageSize=5").get_json()

    assert body["total"] == 13
    assert body["totalPages"] == 3
    assert len(body["incidents"]) == 5
    assert client.get("/api/incidents?page=abc").status_code == 400


def test_required_fields_are_validated(client, seed, login):
    login("admin@example.com")

    assert client.post("/api/companies", json={}).status_code == 400
    assert client.post("/api/offices", json={"office_name": "Sin empresa"}).status_code == 400
    assert client.post("/api/employees", json={"office_id": seed.office_a, "employee_code": -3}).status_code == 400


def test_put_without_id_is_rejected(client, seed, login):
    login("admin@example.com")

    assert client.put("/api/companies", json={"company_name": "x"}).status_code == 400


def test_delete_missing_record_is_not_found(client, seed, login):
    login("admin@example.com")

    assert client.delete("/api/offices?id=999").status_code == 404


def test_delete_referenced_record_is_conflict(client, seed, login):
    login("admin@example.com")

    resp = client.delete(f"/api/offices?id={seed.office_a}")

    assert resp.status_code == 409
    assert "message" in resp.get_json()


def test_duplicate_employee_code_in_office_is_conflict(client, seed, login):
    login("admin@example.com")
    payload = {
        "office_id": seed.office_a,
        "employee_code": 1001,
        "employee_name": "Otra Ana",
        "employee_type": "CONFIANZA",
    }

    assert client.post("/api/employees", json=payload).status_code == 409
    assert client.post("/api/employees", json={**payload, "office_id": seed.office_b}).status_code == 201


def test_employee_list_is_scoped(client, seed, login):
    login("casino@example.com")

    body = client.get("/api/employees").get_json()

    assert [e["employee_code"] for e in body["employees"]] == [2001]
    assert client.get("/api/employees?search=2001").get_json()["total"] == 1


def test_casino_role_cannot_manage_catalogs(client, seed, login):
    login("casino@example.com")

    assert client.get("/api/companies").status_code == 403
    assert client.post("/api/incidents", json={"incident_code": "N", "incident_name": "N"}).status_code == 403


def test_user_management(client, seed, login):
    login("admin@example.com")

    created = client.post(
        "/api/users",
        json={
            "user_name": "Nuevo",
            "user_email": "Nuevo@Example.com",
            "user_password": "clave123",
            "user_role": "ENCARGADO_CASINO",
            "company_id": seed.company_id,
            "office_ids": [seed.office_a],
        },
    )
    assert created.status_code == 201
    body = created.get_json()
    assert body["user_email"] == "nuevo@example.com"
    assert body["office_ids"] == [seed.office_a]
    assert "password_hash" not in body

    duplicate = client.post(
        "/api/users",
        json={"user_name": "Otro", "user_email": "nuevo@example.com", "user_password": "clave123", "user_role": "ENCARGADO_CASINO"},
    )
    assert duplicate.status_code == 409

    me = client.get("/api/auth/me").get_json()["user"]
    assert client.delete(f"/api/users?id={me['id']}").status_code == 400


def test_only_super_admin_sees_users(client, seed, login):
    login("rrhh@example.com")

    assert client.get("/api/users").status_code == 403


def test_period_dates_must_be_ordered(client, seed, login):
    login("admin@example.com")

    resp = client.post(
        "/api/periods",
        json={"period_name": "Mal", "period_start": "2024-08-31", "period_end": "2024-08-01"},
    )
    assert resp.status_code == 400


def test_current_period(client, seed, login):
    login("casino@example.com")
    assert client.get("/api/periods/current").status_code == 404
    client.post("/api/auth/logout")

    login("admin@example.com")
    today = date.today()
    client.post(
        "/api/periods",
        json={
            "period_name": "Actual",
            "period_start": (today - timedelta(days=3)).isoformat(),
            "period_end": (today + timedelta(days=3)).isoformat(),
        },
    )

    resp = client.get("/api/periods/current")
    assert resp.status_code == 200
    assert resp.get_json()["period_name"] == "Actual"


def test_dashboard_pages_follow_permissions(client, seed, login):
    login("casino@example.com")

    assert client.get("/").status_code == 200
    assert client.get("/movimientos").status_code == 200
    assert client.get("/employees?search=bruno").status_code == 200
    assert client.get("/companies").status_code == 403
    assert client.get("/generate-disk").status_code == 403


def test_dashboard_renders_for_user_without_offices(client, seed, login):
    login("zona@example.com")

    assert client.get("/").status_code == 200


def test_unknown_api_route_is_json_404(client, seed, login):
    login("admin@example.com")

    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert "message" in resp.get_json()
