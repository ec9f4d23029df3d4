# Request builders shared by the API tests.
# Kept out of conftest so test modules can import them directly.

from __future__ import annotations

from fastapi.testclient import TestClient


def signup_payload(name: str, email: str, password: str = "pw123") -> dict[str, str]:
    return {"name": name, "email": email, "password": password, "confirm_password": password}


def listing_payload(**overrides: str) -> dict[str, str]:
    payload = {
        "address": "Cedar Grove",
        "contact_number": "9876543210",
        "dob": "1990-04-12",
        "service_type": "Plumbing Services",
        "experience": "5 years",
    }
    payload.update(overrides)
    return payload


def bearer(client: TestClient, email: str, password: str = "pw123") -> dict[str, str]:
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
