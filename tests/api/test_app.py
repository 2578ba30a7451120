"""
Integration tests for the FastAPI application over HTTP
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from patientgraph import __version__
from patientgraph.api.app import create_app
from patientgraph.config import Settings
from patientgraph.errors import DatabaseUnavailableError


def make_settings(**overrides) -> Settings:
    return Settings(debug=False, log_level="WARNING", **overrides)


@pytest.fixture
def app(database):
    return create_app(database=database, config=make_settings())


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.mark.integration
@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphql_round_trip_over_http(client):
    create = await client.post(
        "/graphql",
        json={
            "query": "mutation Create($n: String!, $e: String!) "
            "{ createPatient(name: $n, email: $e) { id name } }",
            "variables": {"n": "Ada", "e": "ada@example.com"},
        },
    )
    assert create.status_code == 200
    patient_id = create.json()["data"]["createPatient"]["id"]

    fetch = await client.get(
        "/graphql",
        params={"query": f"{{ Patient(id: {patient_id}) {{ id name email }} }}"},
    )

    assert fetch.status_code == 200
    assert fetch.json() == {
        "data": {"Patient": {"id": patient_id, "name": "Ada", "email": "ada@example.com"}}
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_responses_are_pretty_printed(client):
    response = await client.post("/graphql", json={"query": "{ __typename }"})

    assert response.text == json.dumps({"data": {"__typename": "RootQuery"}}, indent=2)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_storage_failure_is_a_well_formed_graphql_error(empty_database):
    app = create_app(database=empty_database, config=make_settings())
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/graphql", json={"query": "{ posts { id } }"})

    assert response.status_code == 200
    body = response.json()
    assert body["data"] == {"posts": None}
    assert body["errors"][0]["extensions"]["code"] == "STORAGE_ERROR"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_graphiql_served_to_browsers(client):
    response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "graphiql" in response.text.lower()


@pytest.mark.asyncio
async def test_graphiql_can_be_disabled(database):
    app = create_app(database=database, config=make_settings(graphiql=False))
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    assert response.status_code != 200 or "graphiql" not in response.text.lower()


@pytest.mark.asyncio
async def test_request_id_header_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


class TestLifespan:
    """Tests for startup and shutdown behavior."""

    @pytest.mark.asyncio
    async def test_startup_fails_without_database(self):
        database = MagicMock()
        database.check_connection = AsyncMock(return_value=(False, "Connection refused"))
        database.dispose = AsyncMock()
        app = create_app(database=database, config=make_settings())

        with pytest.raises(DatabaseUnavailableError, match="Connection refused"):
            async with app.router.lifespan_context(app):
                pass

        database.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_and_shutdown_with_database(self):
        database = MagicMock()
        database.check_connection = AsyncMock(return_value=(True, None))
        database.dispose = AsyncMock()
        app = create_app(database=database, config=make_settings())

        async with app.router.lifespan_context(app):
            database.dispose.assert_not_awaited()

        database.dispose.assert_awaited_once()
