import asyncio
import os
import sys
from datetime import datetime
from typing import Any, AsyncIterable

import pytest
from dishka import Provider, Scope, provide
from sqlalchemy import Select, create_engine
from sqlalchemy.pool import StaticPool

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from fastapi.testclient import TestClient

from org_api.domain.ports import Admission, Database, RateLimiter
from org_api.fastapi_app import create_fastapi_app
from org_api.infrastructure.persistence.tables import metadata
from org_api.setup.ioc import create_container


class SqliteDatabase(Database):
    """In-memory SQLite store created from the same table metadata the repositories use."""

    def __init__(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        metadata.create_all(self.engine)
        self.calls: list[str] = []

    def insert(self, table: str, **values: Any) -> None:
        with self.engine.begin() as conn:
            conn.execute(metadata.tables[table].insert().values(**values))

    async def fetch_all(self, statement: Select) -> list[dict[str, Any]]:
        self.calls.append(str(statement.compile(self.engine)))
        with self.engine.connect() as conn:
            return [dict(row) for row in conn.execute(statement).mappings()]


class FailingDatabase(Database):
    def __init__(self, message: str = "connection refused"):
        self.message = message
        self.calls = 0

    async def fetch_all(self, statement):
        self.calls += 1
        raise ConnectionError(self.message)


class FakeRateLimiter(RateLimiter):
    RESET_AT = 1_700_000_060_000

    def __init__(self, allowed: bool = True, error: Exception | None = None):
        self.allowed = allowed
        self.error = error
        self.identities: list[str] = []

    async def admit(self, identity: str) -> Admission:
        self.identities.append(identity)
        if self.error is not None:
            raise self.error
        return Admission(allowed=self.allowed, reset_at=self.RESET_AT)


class DoublesProvider(Provider):
    """Hands the test doubles to the container in place of Prisma and limits."""

    def __init__(self, database: Database, rate_limiter: RateLimiter):
        super().__init__()
        self._database = database
        self._rate_limiter = rate_limiter

    @provide(scope=Scope.APP)
    async def get_database(self) -> AsyncIterable[Database]:
        yield self._database

    @provide(scope=Scope.APP)
    def get_rate_limiter(self) -> RateLimiter:
        return self._rate_limiter


def seed_departments(db: SqliteDatabase) -> None:
    db.insert("periods", id="per-2024", name="Kabinet 2024", year=2024)
    db.insert("periods", id="per-2025", name="Kabinet 2025", year=2025)
    db.insert("departments", id="dep-kominfo", name="Komunikasi dan Informasi",
              acronym="kominfo", type="BE", period_year=2024)
    db.insert("departments", id="dep-humas", name="Hubungan Masyarakat",
              acronym="humas", type="BE", period_year=2024)
    db.insert("departments", id="dep-komisi", name="Komisi Legislasi",
              acronym="KOMLEG", type="DP", period_year=2025)
    for index in range(1, 4):
        db.insert("programs", id=f"prog-{index}", content=f"Program {index}",
                  department_id="dep-kominfo")
    db.insert("programs", id="prog-leg", content="Rapat dengar pendapat",
              department_id="dep-komisi")


def seed_news(db: SqliteDatabase) -> None:
    db.insert("users", id="usr-author", name="Rina", username="rina", image="rina.png")
    db.insert("post_tags", id="tag-berita", title="berita", slug="berita")
    db.insert("post_tags", id="tag-acara", title="acara", slug="acara")
    posts = [
        ("post-1", "Berita pertama", datetime(2024, 1, 1, 8)),
        ("post-2", "Rapat akbar", datetime(2024, 2, 1, 8)),
        ("post-3", "Berita ketiga", datetime(2024, 3, 1, 8)),
        ("post-draft", "Berita draf", None),
        ("post-other", "Berita acara lain", datetime(2024, 4, 1, 8)),
    ]
    for post_id, title, published_at in posts:
        db.insert("posts", id=post_id, author_id="usr-author", title=title,
                  meta_title=title, slug=post_id, content=f"Isi {title}",
                  created_at=datetime(2023, 12, 31, 8), updated_at=datetime(2023, 12, 31, 8),
                  published_at=published_at)
    for post_id in ("post-1", "post-2", "post-3", "post-draft"):
        db.insert("_PostToPostTag", post_id=post_id, post_tag_id="tag-berita")
    db.insert("_PostToPostTag", post_id="post-1", post_tag_id="tag-acara")
    db.insert("_PostToPostTag", post_id="post-other", post_tag_id="tag-acara")


def seed_users(db: SqliteDatabase) -> None:
    db.insert("periods", id="per-2024", name="Kabinet 2024", year=2024)
    db.insert("periods", id="per-2025", name="Kabinet 2025", year=2025)
    db.insert("departments", id="dep-kominfo", name="Komunikasi dan Informasi",
              acronym="kominfo", type="BE", period_year=2024)
    db.insert("departments", id="dep-humas", name="Hubungan Masyarakat",
              acronym="humas", type="BE", period_year=2025)
    db.insert("positions", id="pos-ketua", name="ketua", department_id="dep-kominfo")
    db.insert("positions", id="pos-staff", name="staff", department_id="dep-humas")
    db.insert("positions", id="pos-admin", name="administrator", department_id=None)

    db.insert("users", id="usr-andi", name="Andi", username="zandi")
    db.insert("users", id="usr-budi", name="Budi", username="budi")
    db.insert("users", id="usr-citra", name="Citra", username="citra")

    links = {
        "usr-andi": (["dep-kominfo", "dep-humas"], ["per-2024", "per-2025"], ["pos-ketua", "pos-staff"]),
        "usr-budi": (["dep-humas"], ["per-2025"], ["pos-staff"]),
        "usr-citra": ([], [], ["pos-admin"]),
    }
    for user_id, (departments, periods, positions) in links.items():
        for department_id in departments:
            db.insert("_DepartmentToUser", department_id=department_id, user_id=user_id)
        for period_id in periods:
            db.insert("_PeriodToUser", period_id=period_id, user_id=user_id)
        for position_id in positions:
            db.insert("_PositionToUser", position_id=position_id, user_id=user_id)


def run(coro):
    return asyncio.run(coro)


@pytest.fixture()
def database():
    db = SqliteDatabase()
    yield db
    db.engine.dispose()


@pytest.fixture()
def rate_limiter():
    return FakeRateLimiter()


@pytest.fixture()
def app(database, rate_limiter):
    """Create a FastAPI app wired to the in-memory store and fake limiter."""
    container = create_container(DoublesProvider(database, rate_limiter))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
