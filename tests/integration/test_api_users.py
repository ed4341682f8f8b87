"""
Integration tests for /users endpoints.
Runs the full app through TestClient with a fresh in-memory container per test.
"""
import logging
import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from user_api.application.use_cases.user.create_user import CreateUserUseCase
from user_api.application.use_cases.user.get_user import GetUserUseCase
from user_api.application.use_cases.user.list_users import ListUsersUseCase
from user_api.domain.exceptions import UserRepositoryError


@pytest.fixture
def client(container):
    """Create test client backed by a fresh in-memory container."""
    from user_api.main import app

    with patch("user_api.api.v1.user_controller.get_container", return_value=container):
        with TestClient(app) as c:
            yield c


class TestUsersAPI:
    """Tests for /users endpoints"""

    def test_list_empty(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_user(self, client):
        response = client.post("/users", json={"name": "Bob"})
        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id", "name"}
        assert data["name"] == "Bob"
        assert str(uuid.UUID(data["id"])) == data["id"]

    def test_client_supplied_id_is_ignored(self, client):
        response = client.post("/users", json={"id": "mine", "name": "Bob"})
        assert response.status_code == 201
        assert response.json()["id"] != "mine"

    def test_create_then_list_in_order(self, client):
        created = [client.post("/users", json={"name": name}).json() for name in ("Alice", "Bob", "Carol")]
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == created

    def test_create_empty_body_returns_400(self, client):
        response = client.post("/users", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Bad Request", "message": "Name is required", "code": 400}
        assert client.get("/users").json() == []

    def test_create_empty_name_returns_400(self, client):
        client.post("/users", json={"name": "Alice"})
        response = client.post("/users", json={"name": ""})
        assert response.status_code == 400
        assert len(client.get("/users").json()) == 1

    def test_create_malformed_json_returns_400(self, client):
        response = client.post(
            "/users",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == 400

    def test_create_wrong_name_type_returns_400(self, client):
        response = client.post("/users", json={"name": ["Bob"]})
        assert response.status_code == 400

    def test_get_by_query_id(self, client):
        created = client.post("/users", json={"name": "Alice"}).json()
        response = client.get("/users", params={"id": created["id"]})
        assert response.status_code == 200
        assert response.json() == created

    def test_get_by_path_id(self, client):
        created = client.post("/users", json={"name": "Alice"}).json()
        response = client.get(f"/users/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_id_returns_404(self, client):
        response = client.get("/users", params={"id": "does-not-exist"})
        assert response.status_code == 404
        assert response.json() == {
            "error": "Not Found",
            "message": "User does-not-exist not found",
            "code": 404,
        }

        response = client.get("/users/does-not-exist")
        assert response.status_code == 404


class TestUsersAPIFailures:
    """Repository failures surface as 500"""

    @pytest.fixture
    def failing_client(self):
        from user_api.main import app

        use_cases = {
            ListUsersUseCase: AsyncMock(spec=ListUsersUseCase),
            GetUserUseCase: AsyncMock(spec=GetUserUseCase),
            CreateUserUseCase: AsyncMock(spec=CreateUserUseCase),
        }
        mock_container = MagicMock()
        mock_container.get.side_effect = lambda cls: use_cases[cls]

        with patch("user_api.api.v1.user_controller.get_container", return_value=mock_container):
            with TestClient(app, raise_server_exceptions=False) as c:
                yield c, use_cases

    def test_repository_error_returns_500(self, failing_client):
        client, use_cases = failing_client
        list_use_case = use_cases[ListUsersUseCase]
        list_use_case.execute.side_effect = UserRepositoryError("Error listing users: no servers")

        response = client.get("/users")
        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal Server Error",
            "message": "Error listing users: no servers",
            "code": 500,
        }

    def test_unexpected_error_returns_generic_500(self, failing_client):
        client, use_cases = failing_client
        list_use_case = use_cases[ListUsersUseCase]
        list_use_case.execute.side_effect = RuntimeError("secret details")

        response = client.get("/users")
        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"

    def test_get_repository_error_returns_500(self, failing_client):
        client, use_cases = failing_client
        use_cases[GetUserUseCase].execute.side_effect = UserRepositoryError("db down")

        for path in ("/users/u-1", "/users?id=u-1"):
            response = client.get(path)
            assert response.status_code == 500
            assert response.json() == {
                "error": "Internal Server Error",
                "message": "db down",
                "code": 500,
            }

    def test_create_repository_error_returns_500(self, failing_client):
        client, use_cases = failing_client
        use_cases[CreateUserUseCase].execute.side_effect = UserRepositoryError("db down")

        response = client.post("/users", json={"name": "Bob"})
        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal Server Error",
            "message": "db down",
            "code": 500,
        }

    def test_unexpected_error_logs_one_traceback(self, failing_client, caplog):
        client, use_cases = failing_client
        use_cases[ListUsersUseCase].execute.side_effect = RuntimeError("boom")

        with caplog.at_level(logging.ERROR):
            client.get("/users")

        traceback_loggers = [
            record.name
            for record in caplog.records
            if record.exc_info and record.name.startswith("user_api")
        ]
        assert traceback_loggers == ["user_api.api.exception_handlers"]
        assert any(
            record.name == "user_api.api.middleware" and "GET /users failed" in record.getMessage()
            for record in caplog.records
        )
