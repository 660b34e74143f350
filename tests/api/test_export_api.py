from __future__ import annotations

import io

from openpyxl import load_workbook


def _add_movement(client, seed, employee_id):
    resp = client.post(
        "/api/movements",
        json={
            "period_id": seed.period,
            "employee_id": employee_id,
            "incident_id": seed.incident,
            "incidence_date": "2024-07-10",
        },
    )
    assert resp.status_code == 201


def test_counts_cover_every_requested_period(client, seed, login):
    login("admin@example.com")
    _add_movement(client, seed, seed.employee_a)

    resp = client.get(f"/api/generate-disk/counts?ids={seed.period},999")

    assert resp.get_json() == {"counts": {str(seed.period): 1, "999": 0}}


def test_csv_download(client, seed, login):
    login("admin@example.com")
    _add_movement(client, seed, seed.employee_a)
    _add_movement(client, seed, seed.employee_b)

    resp = client.get(f"/api/generate-disk/download?periodId={seed.period}")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert resp.data.decode("utf-8").splitlines() == [
        "nombre_periodo,codigo_empleado,codigo_incidencia",
        "Julio 2024,1001,FAL",
        "Julio 2024,2001,FAL",
    ]


def test_xlsx_download(client, seed, login):
    login("rrhh@example.com")
    _add_movement(client, seed, seed.employee_a)

    resp = client.get(f"/api/generate-disk/download?periodId={seed.period}&format=xlsx")

    assert resp.status_code == 200
    rows = list(load_workbook(io.BytesIO(resp.data)).active.iter_rows(values_only=True))
    assert rows[1] == ("Julio 2024", 1001, "FAL")


def test_download_needs_period(client, seed, login):
    login("admin@example.com")

    assert client.get("/api/generate-disk/download").status_code == 400
    assert client.get("/api/generate-disk/download?periodId=999").status_code == 404


def test_casino_role_cannot_export(client, seed, login):
    login("casino@example.com")

    assert client.get(f"/api/generate-disk/download?periodId={seed.period}").status_code == 403


def test_export_page_lists_periods(client, seed, login):
    login("zona@example.com")

    resp = client.get("/generate-disk")

    assert resp.status_code == 200
    assert "Julio 2024" in resp.get_data(as_text=True)
