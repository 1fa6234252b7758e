"""Tests API / API tests."""

import asyncio

import pytest

VEHICLE = {
    "name": "我的车",
    "brand": "丰田",
    "model": "凯美瑞",
    "year": 2020,
    "licensePlate": "京a12345",
    "fuelType": "gasoline",
    "tankCapacity": 55,
}


def _record(vehicle_id: str, **overrides) -> dict:
    data = {
        "vehicleId": vehicle_id,
        "date": "2024-01-01",
        "odometer": 1000,
        "fuelAmount": 40,
        "cost": 320.69,
        "actualPayment": 315.50,
        "station": "中石化",
        "location": "北京",
        "fuelType": "92号汽油",
    }
    data.update(overrides)
    return data


async def _create_vehicle(client) -> dict:
    resp = await client.post("/api/vehicles/", json=VEHICLE)
    assert resp.status_code == 201
    return resp.json()


async def test_root(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"
    assert "X-Request-ID" in resp.headers


async def test_login_flow(client):
    resp = await client.get("/api/auth/status")
    assert resp.json() == {"password_set": False}

    resp = await client.post("/api/auth/login", json={"password": "abc"})
    assert resp.status_code == 422

    resp = await client.post("/api/auth/login", json={"password": "abcd"})
    assert resp.status_code == 200
    assert resp.json()["token_type"] == "bearer"

    resp = await client.post("/api/auth/login", json={"password": "zzzz"})
    assert resp.status_code == 401

    resp = await client.get("/api/auth/status")
    assert resp.json() == {"password_set": True}


async def test_routes_require_session(client):
    resp = await client.get("/api/vehicles/")
    assert resp.status_code in (401, 403)

    resp = await client.get("/api/vehicles/", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401


async def test_vehicle_crud(auth_client):
    vehicle = await _create_vehicle(auth_client)
    assert vehicle["licensePlate"] == "京A12345"
    assert "createdAt" in vehicle

    resp = await auth_client.put(f"/api/vehicles/{vehicle['id']}", json={**VEHICLE, "name": "通勤车"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "通勤车"
    assert resp.json()["createdAt"] == vehicle["createdAt"]

    resp = await auth_client.get("/api/vehicles/")
    assert len(resp.json()) == 1

    resp = await auth_client.get("/api/vehicles/missing")
    assert resp.status_code == 404


async def test_vehicle_delete_needs_confirmation(auth_client):
    vehicle = await _create_vehicle(auth_client)
    resp = await auth_client.post("/api/fuel-records/", json=_record(vehicle["id"]))
    assert resp.status_code == 201

    resp = await auth_client.delete(f"/api/vehicles/{vehicle['id']}")
    assert resp.status_code == 409
    assert len((await auth_client.get("/api/fuel-records/")).json()) == 1

    resp = await auth_client.delete(f"/api/vehicles/{vehicle['id']}", params={"confirm": "true"})
    assert resp.status_code == 204
    assert (await auth_client.get("/api/vehicles/")).json() == []
    assert (await auth_client.get("/api/fuel-records/")).json() == []


async def test_record_validation(auth_client):
    resp = await auth_client.post("/api/fuel-records/", json=_record("v1", fuelAmount=0))
    assert resp.status_code == 422
    resp = await auth_client.post("/api/fuel-records/", json=_record("v1", fuelAmount="abc"))
    assert resp.status_code == 422
    resp = await auth_client.post("/api/fuel-records/", json=_record("v1", cost=None))
    assert resp.status_code == 422


async def test_concurrent_record_posts_all_persist(auth_client):
    responses = await asyncio.gather(*(
        auth_client.post("/api/fuel-records/", json=_record("v1", odometer=1000 + i * 100))
        for i in range(5)
    ))
    assert [r.status_code for r in responses] == [201] * 5

    resp = await auth_client.post("/api/fuel-records/", json=_record("v1", odometer=2000))
    assert resp.status_code == 201
    responses = await asyncio.gather(*(
        auth_client.post("/api/fuel-records/", json=_record("v1", odometer=3000 + i))
        for i in range(5)
    ))
    assert all(r.status_code == 201 for r in responses)
    assert len((await auth_client.get("/api/fuel-records/")).json()) == 11


async def test_concurrent_cascade_keeps_other_records(auth_client):
    vehicle = await _create_vehicle(auth_client)
    for i in range(2):
        resp = await auth_client.post("/api/fuel-records/", json=_record(vehicle["id"], odometer=1000 + i))
        assert resp.status_code == 201

    adds = [
        auth_client.post("/api/fuel-records/", json=_record("other", odometer=5000 + i))
        for i in range(4)
    ]
    delete = auth_client.delete(f"/api/vehicles/{vehicle['id']}", params={"confirm": "true"})
    responses = await asyncio.gather(delete, *adds)

    assert responses[0].status_code == 204
    assert all(r.status_code == 201 for r in responses[1:])
    records = (await auth_client.get("/api/fuel-records/")).json()
    assert sorted(r["odometer"] for r in records) == [5000, 5001, 5002, 5003]
    assert (await auth_client.get("/api/vehicles/")).json() == []


async def test_record_crud_and_derived_fields(auth_client):
    resp = await auth_client.post("/api/fuel-records/", json=_record("v1"))
    record = resp.json()
    assert record["pricePerLiter"] == pytest.approx(320.69 / 40)
    assert record["discountedPricePerLiter"] == pytest.approx(315.50 / 40)

    resp = await auth_client.put(
        f"/api/fuel-records/{record['id']}", json=_record("v1", actualPayment=None, cost=300)
    )
    assert resp.status_code == 200
    assert resp.json()["actualPayment"] == 300
    assert resp.json()["createdAt"] == record["createdAt"]

    resp = await auth_client.delete(f"/api/fuel-records/{record['id']}")
    assert resp.status_code == 204
    resp = await auth_client.get(f"/api/fuel-records/{record['id']}")
    assert resp.status_code == 404


async def test_statistics_endpoint(auth_client):
    vehicle = await _create_vehicle(auth_client)
    for day, odometer, fuel in (
        ("2024-01-01", 1000, 20),
        ("2024-01-10", 1400, 30),
        ("2024-01-20", 1390, 25),
        ("2024-01-30", 1800, 40),
    ):
        resp = await auth_client.post(
            "/api/fuel-records/",
            json=_record(vehicle["id"], date=day, odometer=odometer, fuelAmount=fuel),
        )
        assert resp.status_code == 201

    resp = await auth_client.get(f"/api/vehicles/{vehicle['id']}/statistics")
    stats = resp.json()
    assert stats["recordCount"] == 4
    assert stats["totalDistance"] == 800
    assert stats["averageFuelEfficiency"] == pytest.approx(1157.142857, rel=1e-6)
    assert stats["totalSavings"] == pytest.approx(4 * 5.19)
    assert stats["averageCostPerKm"] == pytest.approx(4 * 315.50 / 800)

    resp = await auth_client.get("/api/fuel-records/last", params={"vehicle_id": vehicle["id"]})
    assert resp.json()["odometer"] == 1800


async def test_statistics_empty_vehicle(auth_client):
    vehicle = await _create_vehicle(auth_client)
    resp = await auth_client.get(f"/api/vehicles/{vehicle['id']}/statistics")
    assert resp.json()["recordCount"] == 0
    assert resp.json()["averageFuelEfficiency"] == 0


async def test_image_upload(auth_client):
    record = (await auth_client.post("/api/fuel-records/", json=_record("v1"))).json()
    files = [
        ("files", ("receipt.png", b"\x89PNG\r\n", "image/png")),
        ("files", ("notes.txt", b"hello", "text/plain")),
    ]
    resp = await auth_client.post(f"/api/fuel-records/{record['id']}/images", files=files)
    assert resp.status_code == 200
    images = resp.json()["images"]
    assert len(images) == 1
    assert images[0].startswith("data:image/png;base64,")

    resp = await auth_client.delete(f"/api/fuel-records/{record['id']}/images/0")
    assert resp.json()["images"] == []


async def test_options(auth_client):
    resp = await auth_client.get("/api/fuel-types/")
    assert len(resp.json()) == 5

    resp = await auth_client.post("/api/gas-stations/", json={"name": "  BP  "})
    assert resp.status_code == 201
    station = resp.json()
    assert station["name"] == "BP"

    resp = await auth_client.delete(f"/api/gas-stations/{station['id']}")
    assert resp.status_code == 204
    resp = await auth_client.delete(f"/api/gas-stations/{station['id']}")
    assert resp.status_code == 404


async def test_form_recompute(auth_client):
    form = {"cost": "320", "actualPayment": "300", "fuelAmount": ""}
    resp = await auth_client.post(
        "/api/fuel-records/form", json={"form": form, "field": "fuelAmount", "value": "40"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["form"]["pricePerLiter"] == "8.00"
    assert body["form"]["discountedPricePerLiter"] == "7.50"
    assert body["savingsDisplay"] == "¥20.00"


async def test_derive_preview(auth_client):
    resp = await auth_client.post("/api/fuel-records/derive", json={"fuelAmount": 40, "cost": 300})
    assert resp.json()["pricePerLiter"] == 7.5
    assert resp.json()["displaySavings"] == 0

    resp = await auth_client.post("/api/fuel-records/derive", json={"fuelAmount": 0, "cost": 300})
    assert resp.status_code == 422


async def test_dashboard(auth_client):
    resp = await auth_client.get("/api/dashboard")
    assert resp.json()["selectedVehicleId"] is None

    vehicle = await _create_vehicle(auth_client)
    for i in range(7):
        await auth_client.post(
            "/api/fuel-records/",
            json=_record(vehicle["id"], date=f"2024-01-0{i + 1}", odometer=1000 + i * 300),
        )

    resp = await auth_client.get("/api/dashboard")
    body = resp.json()
    assert body["selectedVehicleId"] == vehicle["id"]
    assert len(body["recentRecords"]) == 5
    assert body["recentRecords"][0]["dateDisplay"] == "2024年1月7日"
    assert body["recentRecords"][0]["costDisplay"] == "¥320.69"
    assert body["cards"][0]["value"] == f"¥{7 * 320.69:,.2f}"
