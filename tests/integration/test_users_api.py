"""Integration tests for the users API.

Tests the complete request flow with a real database, the real Argon2
hasher and the global exception handlers:
1. Create → get → update
2. Error responses for each user error kind
3. Request shape validation
"""

import pytest
from fastapi.testclient import TestClient

from user_identity.main import app
from user_identity.presentation.dependencies import get_user_repository
from tests.fakes.user_repository_fake import FakeUserRepository

pytestmark = pytest.mark.integration

USERS_URL = "/api/v1/users/"

NEW_USER = {
    "email": "Jane@Doe.com",
    "age": 25,
    "password": "SecureP@ss123",
    "first_name": "jane",
    "last_name": "doe",
}


def _create_user(client: TestClient, **overrides) -> dict:
    response = client.post(USERS_URL, json={**NEW_USER, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"
    assert response.json()["environment"] == "test"


def test_create_get_update_flow(client: TestClient):
    """Test create → get → update with a real database."""
    # Step 1: Create a user
    created = _create_user(client)
    assert created["email"] == "jane@doe.com"
    assert created["first_name"] == "Jane"
    assert created["last_name"] == "Doe"
    assert created["age"] == 25
    assert "password" not in created
    assert "password_hash" not in created
    user_id = created["id"]

    # Step 2: Fetch it back
    get_response = client.get(f"{USERS_URL}{user_id}")
    assert get_response.status_code == 200
    assert get_response.json() == created

    # Step 3: Update a subset of fields
    update_response = client.put(
        f"{USERS_URL}{user_id}", json={"age": 26, "last_name": "smith"}
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["age"] == 26
    assert updated["last_name"] == "Smith"
    assert updated["first_name"] == "Jane"
    assert updated["created_at"] == created["created_at"]
    assert updated["updated_at"] > created["updated_at"]


def test_update_password(client: TestClient):
    user_id = _create_user(client)["id"]

    response = client.put(f"{USERS_URL}{user_id}", json={"password": "NewP@ss456"})

    assert response.status_code == 200


def test_create_duplicate_email_returns_409(client: TestClient):
    _create_user(client)

    response = client.post(USERS_URL, json={**NEW_USER, "email": "JANE@doe.com "})

    assert response.status_code == 409
    assert response.json() == {
        "detail": "The user already exists at this address jane@doe.com",
        "error_code": "USER_ALREADY_EXISTS",
    }


@pytest.mark.parametrize(
    "overrides, detail",
    [
        ({"email": "not-an-email"}, "Email format is invalid"),
        ({"age": 12}, "12 is not between 13 and 120"),
        ({"password": "weakpass"}, "Password must contain at least one uppercase letter"),
        ({"first_name": "j4ne"}, "Name format is invalid"),
    ],
)
def test_create_invalid_data_returns_400(client: TestClient, overrides, detail):
    response = client.post(USERS_URL, json={**NEW_USER, **overrides})

    assert response.status_code == 400
    assert response.json() == {"detail": detail, "error_code": "INVALID_USER_DATA"}


def test_create_missing_field_returns_422(client: TestClient):
    """Test that shape errors are reported by the validation handler."""
    body = {key: value for key, value in NEW_USER.items() if key != "password"}

    response = client.post(USERS_URL, json=body)

    assert response.status_code == 422
    data = response.json()
    assert data["error_code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "body.password"


def test_get_missing_user_returns_404(client: TestClient):
    response = client.get(f"{USERS_URL}missing")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "User with ID missing not found",
        "error_code": "USER_NOT_FOUND",
    }


def test_update_missing_user_returns_404(client: TestClient):
    response = client.put(f"{USERS_URL}missing", json={"age": 30})

    assert response.status_code == 404


def test_update_to_taken_email_returns_409(client: TestClient):
    _create_user(client)
    other_id = _create_user(client, email="john@smith.com")["id"]

    response = client.put(f"{USERS_URL}{other_id}", json={"email": "jane@doe.com"})

    assert response.status_code == 409
    assert response.json()["error_code"] == "USER_ALREADY_EXISTS"


def test_update_invalid_age_returns_400(client: TestClient):
    user_id = _create_user(client)["id"]

    response = client.put(f"{USERS_URL}{user_id}", json={"age": 2})

    assert response.status_code == 400
    assert client.get(f"{USERS_URL}{user_id}").json()["age"] == 25


def test_openapi_uses_custom_validation_schema(client: TestClient):
    schema = client.get("/openapi.json").json()

    assert "ValidationErrorResponse" in schema["components"]["schemas"]
    assert "HTTPValidationError" not in schema["components"]["schemas"]


def test_store_failure_returns_500_without_details(client: TestClient):
    """Test that an unknown error is logged but not leaked to the caller."""
    # Arrange
    failing_store = FakeUserRepository(find_error=RuntimeError("connection refused"))
    app.dependency_overrides[get_user_repository] = lambda: failing_store

    # Act
    response = client.get(f"{USERS_URL}some-id")

    # Assert
    assert response.status_code == 500
    assert response.json() == {
        "detail": "An internal server error occurred",
        "error_code": "USER_UNKNOWN_ERROR",
    }
