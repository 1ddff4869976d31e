"""Tests for employment endpoints and salary history."""

from httpx import AsyncClient


async def _employment(client: AsyncClient, headers: dict[str, str], **fields) -> dict:
    employee = await client.post("/api/v1/employees", json={"name": "Asha"}, headers=headers)
    response = await client.post(
        "/api/v1/employments",
        json={"employee_id": employee.json()["id"], **fields},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_applies_form_defaults(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    created = await _employment(client, auth_headers, job_title="Clerk", basic=20000)
    assert created["employment_type"] == "full-time"
    assert created["payment_frequency"] == "monthly"
    assert created["payment_mode"] == "bank-transfer"
    assert created["is_it"] is True
    assert created["is_resignation"] is False
    assert created["payable_days"] == 30
    assert created["total_leaves"] == 24
    assert created["salary_credit_date"] == "1st of every month"
    assert created["basic"] == 20000


async def test_create_for_missing_employee_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/api/v1/employments", json={"employee_id": "missing"}, headers=auth_headers
    )
    assert response.status_code == 404


async def test_negative_amount_rejected(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    employee = await client.post("/api/v1/employees", json={"name": "A"}, headers=auth_headers)
    response = await client.post(
        "/api/v1/employments",
        json={"employee_id": employee.json()["id"], "basic": -1},
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_update_and_delete(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    created = await _employment(client, auth_headers, job_title="Clerk")
    url = f"/api/v1/employments/{created['id']}"

    updated = await client.put(url, json={"job_title": "Senior Clerk"}, headers=auth_headers)
    assert updated.json()["job_title"] == "Senior Clerk"
    listed = await client.get("/api/v1/employments", headers=auth_headers)
    assert [e["job_title"] for e in listed.json()] == ["Senior Clerk"]

    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404


async def test_salary_revision_updates_employment(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    created = await _employment(client, auth_headers, basic=20000)
    await client.get(f"/api/v1/employments/{created['id']}", headers=auth_headers)
    history_url = f"/api/v1/employments/{created['id']}/salary-history"

    first = await client.post(
        history_url,
        json={"basic": 22000, "effective_date": "2024-04-01", "note": "Appraisal"},
        headers=auth_headers,
    )
    assert first.status_code == 201, first.text
    assert first.json()["effective_date"] == "2024-04-01"
    await client.post(
        history_url, json={"basic": 25000, "effective_date": "2025-04-01"}, headers=auth_headers
    )

    current = await client.get(f"/api/v1/employments/{created['id']}", headers=auth_headers)
    assert current.json()["basic"] == 25000

    history = await client.get(history_url, headers=auth_headers)
    assert [h["basic"] for h in history.json()] == [25000, 22000]


async def test_salary_revision_requires_basic(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    created = await _employment(client, auth_headers)
    response = await client.post(
        f"/api/v1/employments/{created['id']}/salary-history",
        json={"hra": 100},
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_salary_history_of_missing_employment_returns_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.get(
        "/api/v1/employments/missing/salary-history", headers=auth_headers
    )
    assert response.status_code == 404
