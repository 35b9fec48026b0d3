from __future__ import annotations

from fastapi.testclient import TestClient


def _create_vendor(client: TestClient, payload: dict) -> dict:
    response = client.post("/api/v1/vendors", json=payload)
    assert response.status_code == 201
    return response.json()["data"]


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_vendor_lifecycle_uses_camel_case(client: TestClient, acme_payload: dict) -> None:
    vendor = _create_vendor(client, acme_payload)
    assert vendor["id"] == 1
    assert vendor["ratings"] == []
    assert "createdAt" in vendor

    fetched = client.get("/api/v1/vendors/1").json()["data"]
    assert fetched == vendor

    listing = client.get("/api/v1/vendors").json()
    assert listing["meta"] == {"total": 1}
    assert listing["data"] == [vendor]


def test_missing_vendor_maps_to_404(client: TestClient) -> None:
    response = client.get("/api/v1/vendors/99")
    assert response.status_code == 404
    assert response.json() == {"error": {"code": "NOT_FOUND", "message": "Vendor not found"}}


def test_empty_vendor_list_maps_to_404(client: TestClient) -> None:
    response = client.get("/api/v1/vendors")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "No vendors found"


def test_invalid_payload_maps_to_422(client: TestClient, acme_payload: dict) -> None:
    response = client.post("/api/v1/vendors", json={**acme_payload, "email": ""})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_PAYLOAD"


def test_service_contract_feedback_flow(client: TestClient, acme_payload: dict) -> None:
    _create_vendor(client, acme_payload)

    service = client.post(
        "/api/v1/services",
        json={"vendorId": 1, "name": "Cleaning", "description": "Office cleaning", "price": 100},
    )
    assert service.status_code == 201
    assert service.json()["data"]["isAvailable"] is True

    contract = client.post(
        "/api/v1/contracts",
        json={"vendorId": 1, "departmentId": 3, "startDate": 10, "endDate": 20, "terms": "Net 30"},
    )
    assert contract.status_code == 201
    assert contract.json()["data"]["isActive"] is True

    for user_id, rating in ((5, 4.0), (6, 5.0)):
        feedback = client.post(
            "/api/v1/feedback",
            json={"vendorId": 1, "userId": user_id, "rating": rating, "comment": "ok"},
        )
        assert feedback.status_code == 201

    assert [s["id"] for s in client.get("/api/v1/vendors/1/services").json()["data"]] == [2]
    assert [c["id"] for c in client.get("/api/v1/vendors/1/contracts").json()["data"]] == [3]
    assert [f["id"] for f in client.get("/api/v1/vendors/1/feedback").json()["data"]] == [4, 5]

    rating = client.get("/api/v1/vendors/1/rating").json()["data"]
    assert rating == {"vendorId": 1, "averageRating": 4.5}


def test_service_for_unknown_vendor(client: TestClient) -> None:
    response = client.post(
        "/api/v1/services",
        json={"vendorId": 99, "name": "Cleaning", "description": "Office cleaning", "price": 100},
    )
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Vendor not found"


def test_rating_without_feedback_is_404(client: TestClient, acme_payload: dict) -> None:
    _create_vendor(client, acme_payload)
    response = client.get("/api/v1/vendors/1/rating")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "No ratings available for this vendor"


def test_rating_capacity_maps_to_409(client: TestClient, acme_payload: dict) -> None:
    _create_vendor(client, acme_payload)
    response = None
    for _ in range(100):
        response = client.post(
            "/api/v1/feedback",
            json={"vendorId": 1, "userId": 5, "rating": 1.5, "comment": "ok"},
        )
        if response.status_code != 201:
            break

    assert response.status_code == 409
    assert response.json() == {
        "error": {"code": "RATING_CAPACITY_EXHAUSTED", "message": "Vendor rating capacity exhausted"}
    }
