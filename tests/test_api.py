"""Tests API / API tests."""

import pytest


async def _create_car(client, model="Renault Clio", plate="150-TUN-42"):
    resp = await client.post("/api/cars/", json={"model": model, "plate_number": plate})
    assert resp.status_code == 201
    return resp.json()


async def _create_client(client, full_name="Karim Haddad"):
    resp = await client.post("/api/clients/", json={"full_name": full_name, "passport_id": "P77"})
    assert resp.status_code == 201
    return resp.json()


async def _car_status(client, car_id):
    return (await client.get(f"/api/cars/{car_id}")).json()["status"]


@pytest.mark.asyncio
async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "running"


@pytest.mark.asyncio
async def test_api_health(client):
    resp = await client.get("/api/")
    assert resp.status_code == 200
    assert resp.json()["app"] == "Car Rental Manager"
    assert "X-Request-ID" in resp.headers
    assert resp.headers["X-Content-Type-Options"] == "nosniff"


@pytest.mark.asyncio
async def test_create_car(client):
    data = await _create_car(client)
    assert data["model"] == "Renault Clio"
    assert data["status"] == "available"
    assert "id" in data


@pytest.mark.asyncio
async def test_create_car_missing_field(client):
    resp = await client.post("/api/cars/", json={"model": "Renault Clio"})
    assert resp.status_code == 400
    assert resp.json()["field"] == "plate_number"


@pytest.mark.asyncio
async def test_get_missing_car(client):
    resp = await client.get("/api/cars/9999")
    assert resp.status_code == 404
    resp = await client.delete("/api/cars/9999")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_rental_flow(client):
    car = await _create_car(client)
    renter = await _create_client(client)

    resp = await client.post("/api/rentals/", json={
        "car_id": car["id"],
        "client_id": renter["id"],
        "start_date": "2024-06-10",
        "return_date": "2024-06-15",
        "rental_price": "350",
    })
    assert resp.status_code == 201
    rental = resp.json()
    assert rental["status"] == "reserved"
    assert await _car_status(client, car["id"]) == "reserved"

    cars = (await client.get("/api/cars/")).json()
    assert cars[0]["current_rental"]["rental_id"] == rental["id"]

    resp = await client.put(f"/api/rentals/{rental['id']}/status", json={"status": "rented"})
    assert resp.status_code == 200
    assert resp.json()["success"] is True
    assert resp.json()["rental"]["status"] == "rented"
    assert await _car_status(client, car["id"]) == "rented"

    listed = (await client.get("/api/rentals/", params={"status": "rented"})).json()
    assert [r["client_name"] for r in listed] == ["Karim Haddad"]

    resp = await client.put(f"/api/rentals/{rental['id']}/status", json={"status": "returned"})
    assert resp.json()["rental"]["status"] == "returned"
    assert await _car_status(client, car["id"]) == "available"

    report = (await client.get("/api/profits/")).json()
    assert report["total_revenue"] == 350
    assert len(report["rentals"]) == 1


@pytest.mark.asyncio
async def test_create_rental_missing_fields(client):
    car = await _create_car(client)
    resp = await client.post("/api/rentals/", json={"car_id": car["id"], "start_date": "2024-06-10"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "VALIDATION_ERROR"
    assert (await client.get("/api/rentals/")).json() == []
    assert await _car_status(client, car["id"]) == "available"


@pytest.mark.asyncio
async def test_unknown_rental_is_silent(client):
    resp = await client.put("/api/rentals/4242/status", json={"status": "rented"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "rental": None}

    resp = await client.delete("/api/rentals/4242")
    assert resp.status_code == 204


@pytest.mark.asyncio
async def test_delete_rental_frees_car(client):
    car = await _create_car(client)
    renter = await _create_client(client)
    rental = (await client.post("/api/rentals/", json={
        "car_id": car["id"],
        "client_id": renter["id"],
        "start_date": "2024-06-10",
        "return_date": "2024-06-15",
        "rental_price": 100,
    })).json()

    resp = await client.delete(f"/api/rentals/{rental['id']}")
    assert resp.status_code == 204
    assert await _car_status(client, car["id"]) == "available"
    assert (await client.get(f"/api/rentals/{rental['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_manual_status_override(client):
    car = await _create_car(client)
    resp = await client.put(f"/api/cars/{car['id']}/status", json={"status": "reserved"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "reserved"

    resp = await client.put(f"/api/cars/{car['id']}/status", json={"status": "broken"})
    assert resp.status_code == 400

    stats = (await client.get("/api/cars/stats")).json()
    assert stats == {"total": 1, "available": 0, "rented": 0, "reserved": 1}


@pytest.mark.asyncio
async def test_expenses_and_profit(client):
    car = await _create_car(client)
    resp = await client.post("/api/expenses/", json={
        "category": "maintenance",
        "amount": "120.50",
        "expense_date": "2024-06-01",
        "car_id": car["id"],
    })
    assert resp.status_code == 201

    expenses = (await client.get("/api/expenses/")).json()
    assert expenses[0]["plate_number"] == "150-TUN-42"

    report = (await client.get("/api/profits/")).json()
    assert report["total_expenses"] == 120.5
    assert report["total_profit"] == -120.5

    resp = await client.delete(f"/api/expenses/{expenses[0]['id']}")
    assert resp.status_code == 204
    assert (await client.delete(f"/api/expenses/{expenses[0]['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_notifications_for_given_day(client):
    car = await _create_car(client)
    renter = await _create_client(client)
    await client.post("/api/rentals/", json={
        "car_id": car["id"],
        "client_id": renter["id"],
        "start_date": "2024-06-11",
        "return_date": "2024-06-15",
        "rental_price": 100,
    })

    notices = (await client.get("/api/notifications/", params={"today": "2024-06-10"})).json()
    assert len(notices) == 1
    assert notices[0]["type"] == "start_tomorrow"
    assert notices[0]["severity"] == "info"
    assert notices[0]["rental"]["full_name"] == "Karim Haddad"


@pytest.mark.asyncio
async def test_dashboard(client):
    await _create_car(client)
    resp = await client.get("/api/dashboard/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["car_stats"]["total"] == 1
    assert data["total_profit"] == 0


@pytest.mark.asyncio
async def test_client_documents(client):
    renter = await _create_client(client)
    resp = await client.put(f"/api/clients/{renter['id']}/documents", json={"license_image": "dl-77.png"})
    assert resp.status_code == 200
    assert resp.json()["license_image"] == "dl-77.png"
    assert resp.json()["passport_image"] is None


@pytest.mark.asyncio
async def test_audit_log(client):
    car = await _create_car(client)
    await client.put(f"/api/cars/{car['id']}/status", json={"status": "rented"})

    page = (await client.get("/api/audit/", params={"entity_type": "car"})).json()
    assert page["total"] == 2
    assert [log["action"] for log in page["items"]] == ["STATUS", "CREATE"]
    assert page["items"][0]["entity_id"] == car["id"]


@pytest.mark.asyncio
async def test_audit_log_paging(client):
    for i in range(3):
        await _create_car(client, plate=f"PL-{i}")

    resp = await client.get("/api/audit/", params={"limit": -1})
    assert resp.status_code == 422
    assert (await client.get("/api/audit/", params={"limit": 0})).status_code == 422

    page = (await client.get("/api/audit/", params={"limit": 1, "offset": 1})).json()
    assert page["total"] == 3
    assert len(page["items"]) == 1
    assert "PL-1" in page["items"][0]["snapshot"]
