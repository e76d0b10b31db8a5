from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from portfolio_cms.data.store import SqlDocumentStore


class TickingClock:
    """Deterministic store clock: each read is one second after the previous."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        self.now += self.step
        self.calls += 1
        return self.now


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path.as_posix()}"


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest_asyncio.fixture
async def store(tmp_path: Path, clock: TickingClock) -> AsyncIterator[SqlDocumentStore]:
    """A document store on a temporary SQLite database."""
    doc_store = SqlDocumentStore.from_url(sqlite_url(tmp_path / "test.db"), clock=clock)
    await doc_store.create_schema()
    yield doc_store
    await doc_store.close()


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the API at a temporary SQLite DB with startup seeding disabled."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    monkeypatch.setenv("PORTFOLIO_SEED_ON_STARTUP", "false")
    return db_path


@pytest.fixture
def client(api_db: Path) -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    from portfolio_cms.api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Headers the authentication layer forwards for a signed-in admin."""
    return {"X-Admin-User": "owner@example.com"}


@pytest.fixture
def seeded_client(client: TestClient, admin_headers: dict[str, str]) -> TestClient:
    """Test client whose store holds the default content."""
    response = client.post("/api/admin/initialize", headers=admin_headers)
    assert response.status_code == 200
    return client
