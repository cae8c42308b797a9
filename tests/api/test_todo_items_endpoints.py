"""API tests for the todo item endpoints.

Tests the complete HTTP request/response cycle through the real app:
- Bearer token -> caller identity (anonymous when missing or invalid)
- Pipeline outcomes -> status codes and RFC 9457 problem details
- Event signal exposed in the HX-Trigger header on mutations

Architecture:
- httpx.AsyncClient over ASGITransport against entitygate.main.app
- get_db_session overridden to a fresh SQLite database per test
"""

import httpx
import pytest
import pytest_asyncio

from entitygate.core.config import settings
from entitygate.core.container import get_db_session, get_jwt_service
from entitygate.main import app

BASE = "/api/v1/todo-items"
SIGNAL_HEADER = settings.event_signal_header


def _auth(user_id: int) -> dict[str, str]:
    token = get_jwt_service().generate_access_token(user_id=user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def client(database):
    async def override_session():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def _create(client, description: str, user_id: int = 7) -> dict:
    response = await client.post(
        BASE, json={"description": description}, headers=_auth(user_id)
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.api
class TestCreateTodoItem:
    async def test_create_returns_201_with_signal(self, client):
        response = await client.post(
            BASE, json={"description": "Buy milk"}, headers=_auth(7)
        )

        assert response.status_code == 201
        assert response.headers[SIGNAL_HEADER] == "TodoItemCreated"
        body = response.json()
        assert body["description"] == "Buy milk"
        assert body["owner_id"] == 7
        assert body["done"] is False

    async def test_anonymous_create_is_401(self, client):
        response = await client.post(BASE, json={"description": "Buy milk"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert SIGNAL_HEADER not in response.headers
        body = response.json()
        assert body["title"] == "Authentication Required"
        assert body["type"].endswith("/errors/unauthenticated")

    async def test_invalid_token_is_treated_as_anonymous(self, client):
        response = await client.post(
            BASE,
            json={"description": "Buy milk"},
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401

    async def test_duplicate_create_is_409(self, client):
        await _create(client, "Buy milk")

        response = await client.post(
            BASE, json={"description": "Buy milk"}, headers=_auth(7)
        )

        assert response.status_code == 409
        assert response.json()["title"] == "Resource Conflict"

    async def test_invalid_body_is_422_problem(self, client):
        response = await client.post(BASE, json={"description": ""}, headers=_auth(7))

        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert body["errors"][0]["field"] == "description"

    async def test_owner_cannot_be_supplied_in_body(self, client):
        response = await client.post(
            BASE, json={"description": "x", "owner_id": 8}, headers=_auth(7)
        )

        assert response.status_code == 422


@pytest.mark.api
class TestReadTodoItem:
    async def test_owner_reads_item(self, client):
        created = await _create(client, "Buy milk")

        response = await client.get(f"{BASE}/{created['id']}", headers=_auth(7))

        assert response.status_code == 200
        assert response.json() == created
        assert SIGNAL_HEADER not in response.headers

    async def test_other_user_gets_403(self, client):
        created = await _create(client, "Buy milk")

        response = await client.get(f"{BASE}/{created['id']}", headers=_auth(8))

        assert response.status_code == 403
        assert response.json()["detail"] == "Not authorized to access this resource"

    async def test_unknown_id_is_403_not_404(self, client):
        response = await client.get(f"{BASE}/999", headers=_auth(8))

        assert response.status_code == 403

    async def test_anonymous_read_is_401(self, client):
        created = await _create(client, "Buy milk")

        response = await client.get(f"{BASE}/{created['id']}")

        assert response.status_code == 401

    async def test_non_integer_id_is_422(self, client):
        response = await client.get(f"{BASE}/abc", headers=_auth(7))

        assert response.status_code == 422

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_id_beyond_key_range_is_422(self, client, method):
        response = await client.request(
            method,
            f"{BASE}/{2**63}",
            json={"description": "Buy milk", "done": False},
            headers=_auth(7),
        )

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Failed"

    @pytest.mark.parametrize("entity_id", [2**63 - 1, 0, -1])
    async def test_never_created_id_in_key_range_is_403(self, client, entity_id):
        response = await client.get(f"{BASE}/{entity_id}", headers=_auth(7))

        assert response.status_code == 403


@pytest.mark.api
class TestUpdateTodoItem:
    async def test_owner_updates_item(self, client):
        created = await _create(client, "Buy milk")

        response = await client.put(
            f"{BASE}/{created['id']}",
            json={"description": "Buy oat milk", "done": True},
            headers=_auth(7),
        )

        assert response.status_code == 200
        assert response.headers[SIGNAL_HEADER] == "TodoItemUpdated"
        assert response.json()["description"] == "Buy oat milk"
        assert response.json()["done"] is True

    async def test_other_user_cannot_update(self, client):
        created = await _create(client, "Buy milk")

        response = await client.put(
            f"{BASE}/{created['id']}",
            json={"description": "hijacked"},
            headers=_auth(8),
        )

        assert response.status_code == 403
        check = await client.get(f"{BASE}/{created['id']}", headers=_auth(7))
        assert check.json()["description"] == "Buy milk"

    async def test_update_into_duplicate_is_409(self, client):
        await _create(client, "Buy milk")
        other = await _create(client, "Walk dog")

        response = await client.put(
            f"{BASE}/{other['id']}", json={"description": "Buy milk"}, headers=_auth(7)
        )

        assert response.status_code == 409


@pytest.mark.api
class TestDeleteTodoItem:
    async def test_delete_then_delete_again(self, client):
        created = await _create(client, "Buy milk")

        first = await client.delete(f"{BASE}/{created['id']}", headers=_auth(7))
        second = await client.delete(f"{BASE}/{created['id']}", headers=_auth(7))

        assert first.status_code == 200
        assert first.headers[SIGNAL_HEADER] == "TodoItemDeleted"
        assert first.json() == created
        assert second.status_code == 403
        assert SIGNAL_HEADER not in second.headers

    async def test_other_user_cannot_delete(self, client):
        created = await _create(client, "Buy milk")

        response = await client.delete(f"{BASE}/{created['id']}", headers=_auth(8))

        assert response.status_code == 403


@pytest.mark.api
class TestListAndDraft:
    async def test_list_returns_only_callers_items(self, client):
        mine = await _create(client, "Buy milk", user_id=7)
        await _create(client, "Walk dog", user_id=8)

        response = await client.get(BASE, headers=_auth(7))

        assert response.status_code == 200
        assert response.json() == [mine]

    async def test_anonymous_list_is_401(self, client):
        response = await client.get(BASE)

        assert response.status_code == 401

    async def test_draft_is_rendered_from_query(self, client):
        response = await client.get(
            f"{BASE}/new", params={"description": "Buy milk"}, headers=_auth(7)
        )

        assert response.status_code == 200
        assert response.json() == {"description": "Buy milk", "done": False}


@pytest.mark.api
class TestTracing:
    async def test_trace_id_header_and_problem_field(self, client):
        response = await client.get(
            f"{BASE}/999", headers={**_auth(8), "X-Trace-Id": "trace-abc"}
        )

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert response.json()["trace_id"] == "trace-abc"

    async def test_trace_id_generated_when_absent(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.headers["X-Trace-Id"]

    async def test_unknown_route_is_problem_details(self, client):
        response = await client.get("/api/v1/unknown")

        assert response.status_code == 404
        assert response.json()["title"] == "Resource Not Found"
