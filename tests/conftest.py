from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import httpx
import pytest
from httpx import AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from senda.config.settings import Settings
from senda.infrastructure.db.base import Base
from senda.infrastructure.db.orm import animal, notification_read, reproduction, user, vaccine  # noqa: F401
from senda.interfaces.client.api_client import SendaClient
from senda.interfaces.http.main import create_app

BASE_URL = "http://testserver"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
            "db_auto_create": False,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


@pytest.fixture()
def register_user(client: AsyncClient) -> Callable[..., Awaitable[dict[str, str]]]:
    """Sign up and log in a fresh account; returns auth headers plus ids."""

    async def _register(email: str = "owner@example.com", password: str = "secret123") -> dict[str, str]:
        signup = await client.post("/api/v1/auth/signup", json={"email": email, "password": password})
        assert signup.status_code == 201, signup.text
        login = await client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        body = login.json()
        return {
            "Authorization": f"Bearer {body['access_token']}",
            "user_id": body["user_id"],
        }

    return _register


@pytest.fixture()
async def auth_headers(register_user) -> dict[str, str]:
    registered = await register_user()
    return {"Authorization": registered["Authorization"]}


@pytest.fixture()
async def api_client(app, client) -> AsyncIterator[SendaClient]:
    """Client-side API wrapper talking to the in-process app, already signed in."""
    transport = httpx.ASGITransport(app=app)
    async with SendaClient(BASE_URL, transport=transport) as senda:
        await senda.signup("client@example.com", "secret123")
        await senda.login("client@example.com", "secret123")
        yield senda


@pytest.fixture()
def animal_payload() -> Callable[..., dict]:
    def _payload(**overrides) -> dict:
        payload = {
            "tag": "SND-001",
            "name": "Lucera",
            "gender": "female",
            "birth_date": "2021-03-10",
            "entry_date": "2022-01-05",
            "breed": "Angus",
            "status": "healthy",
            "ear_tag": "green",
            "weight": "420.5",
            "owner": "Estancia Norte",
            "purpose": "breeding",
            "farm": "La Senda",
            "category": "vaca",
        }
        payload.update(overrides)
        return payload

    return _payload
