"""Shared fixtures: in-memory database, app, HTTP client and tokens."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.pool import StaticPool

from catalog.config import Settings
from catalog.db import Database
from catalog.domain import (
    Difficulty,
    Material,
    MaterialType,
    Module,
    ProgrammingLanguage,
    RecordMetadata,
)
from catalog.main import create_app

TEST_SECRET = "test-secret-key"
SQLITE_URL = "sqlite+aiosqlite://"

# Fixed past timestamp so "updated_at moved forward" checks are deterministic
PAST = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_settings(**overrides) -> Settings:
    values = {
        "app_env": "test",
        "jwt_secret_key": TEST_SECRET,
        "db_url": SQLITE_URL,
        "rate_limit_enabled": False,
        "log_level": "DEBUG",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_token(
    role: str = "ADMIN",
    secret: str = TEST_SECRET,
    expires_in: timedelta = timedelta(hours=1),
    **claims,
) -> str:
    payload = {
        "id": "user-1",
        "email": "author@example.com",
        "role": role,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers(role: str = "ADMIN") -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(role)}"}


def past_meta(created_at: datetime = PAST) -> RecordMetadata:
    return RecordMetadata(id="", created_at=created_at, updated_at=created_at)


def language(slug: str = "python", name: str = "Python", **kwargs) -> ProgrammingLanguage:
    kwargs.setdefault("difficulty", Difficulty.BEGINNER)
    kwargs.setdefault("meta", past_meta())
    return ProgrammingLanguage(name=name, slug=slug, **kwargs)


def module(language_id: str, slug: str, order: int = 0, **kwargs) -> Module:
    kwargs.setdefault("title", slug.replace("-", " ").title())
    kwargs.setdefault("meta", past_meta())
    return Module(language_id=language_id, slug=slug, order=order, **kwargs)


def material(module_id: str, title: str, order: int = 0, **kwargs) -> Material:
    kwargs.setdefault("type", MaterialType.ARTICLE)
    kwargs.setdefault("content", f"{title} content")
    kwargs.setdefault("meta", past_meta())
    return Material(module_id=module_id, title=title, order=order, **kwargs)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest_asyncio.fixture
async def database():
    db = Database(
        SQLITE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return auth_headers("ADMIN")


@pytest.fixture
def user_headers() -> dict[str, str]:
    return auth_headers("USER")
