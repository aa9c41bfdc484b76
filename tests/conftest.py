"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from collab.db.base import Base
# Import all models to register with Base.metadata
import collab.db.models  # noqa: F401
from collab.db.models import (
    ChatRow,
    JoinRequestRow,
    MessageRow,
    NotificationRow,
    PostRow,
    ProjectRow,
    UserRow,
    VacancyRow,
)
from collab.security import create_access_token

SEED_DATE = datetime(2029, 1, 22, 16, 28, 32, tzinfo=timezone.utc)


def make_users() -> list[dict]:
    return [
        {"id": 1, "user_name": "test-user-1", "full_name": "Test user 1", "email": "one@example.com", "password": "x"},
        {"id": 2, "user_name": "test-user-2", "full_name": "Test user 2", "email": "two@example.com", "password": "x"},
        {"id": 3, "user_name": "test-user-3", "full_name": "Test user 3", "email": "three@example.com", "password": "x"},
    ]


def make_projects() -> list[dict]:
    return [
        {
            "id": 1,
            "name": "First project",
            "handle": "first-project",
            "description": "The first test project description",
            "creator_id": 1,
            "tags": ["python", "api"],
            "live_url": "https://first.example.com/",
            "date_created": SEED_DATE,
        },
        {
            "id": 2,
            "name": "Second project",
            "handle": "second-project",
            "description": "The second test project description",
            "creator_id": 1,
            "tags": [],
            "date_created": SEED_DATE,
        },
        {
            "id": 3,
            "name": "Third project",
            "handle": "third-project",
            "description": "The third test project description",
            "creator_id": 2,
            "tags": ["design"],
            "github_url": "https://github.com/example/third",
            "date_created": SEED_DATE,
        },
    ]


def make_vacancies() -> list[dict]:
    return [
        {"id": 1, "project_id": 1, "user_id": None, "title": "Backend dev", "description": "Build the API", "skills": ["python"]},
        {"id": 2, "project_id": 1, "user_id": 3, "title": "Designer", "description": "Design the UI", "skills": ["figma"]},
        {"id": 3, "project_id": 3, "user_id": None, "title": "Frontend dev", "description": "Build the client", "skills": []},
    ]


def make_dependents() -> dict[str, list[dict]]:
    """Rows hanging off projects 1 and 3, used to check cascading deletes."""
    return {
        "requests": [
            {"id": 1, "vacancy_id": 1, "project_id": 1, "user_id": 2, "status": "pending", "date_created": SEED_DATE},
            {"id": 2, "vacancy_id": 3, "project_id": 3, "user_id": 1, "status": "pending", "date_created": SEED_DATE},
        ],
        "posts": [
            {"id": 1, "project_id": 1, "user_id": 1, "message": "Welcome aboard", "date_created": SEED_DATE},
            {"id": 2, "project_id": 3, "user_id": 2, "message": "Kickoff on Monday", "date_created": SEED_DATE},
        ],
        "chats": [
            {"id": 1, "project_id": 1, "request_id": 1, "author_id": 2, "recipient_id": 1, "date_created": SEED_DATE},
            {"id": 2, "project_id": 3, "request_id": 2, "author_id": 1, "recipient_id": 2, "date_created": SEED_DATE},
        ],
        "messages": [
            {"id": 1, "chat_id": 1, "author_id": 2, "body": "Can I join?", "date_created": SEED_DATE},
            {"id": 2, "chat_id": 1, "author_id": 1, "body": "Sure", "date_created": SEED_DATE},
            {"id": 3, "chat_id": 2, "author_id": 1, "body": "Hello", "date_created": SEED_DATE},
        ],
        "notifications": [
            {"id": 1, "recipient_id": 1, "sender_id": 2, "project_id": 1, "chat_id": 1, "type": "join request", "date_created": SEED_DATE},
            {"id": 2, "recipient_id": 2, "sender_id": 1, "project_id": 3, "chat_id": 2, "type": "join request", "date_created": SEED_DATE},
        ],
    }


def make_malicious_data() -> dict:
    return {
        "project": {
            "id": 911,
            "name": 'Naughty naughty very naughty <script>alert("xss");</script>',
            "handle": "naughty-project",
            "description": (
                'Bad image <img src="https://url.to.file.which/does-not.exist" '
                'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
            ),
            "creator_id": 1,
            "tags": [],
            "date_created": SEED_DATE,
        },
        "vacancy": {
            "id": 911,
            "project_id": 911,
            "user_id": None,
            "title": "<b>Bold</b> role",
            "description": "Apply <script>steal()</script> now",
            "skills": [],
        },
        "expected_name": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "expected_description": (
            'Bad image &lt;img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);"&gt;. But not &lt;strong&gt;all&lt;/strong&gt; bad.'
        ),
    }


def auth_header(user: dict) -> dict:
    token = create_access_token(user["user_name"], user["id"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db_engine, session_factory):
    """Create a test application instance with in-memory DB."""
    from collab.main import create_app

    _app = create_app()
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = session_factory
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def users() -> list[dict]:
    return make_users()


@pytest.fixture
async def seed_users(session_factory, users):
    async with session_factory() as session:
        session.add_all([UserRow(**u) for u in users])
        await session.commit()
    return users


@pytest.fixture
async def seed_projects(session_factory, seed_users):
    """Insert users, projects, vacancies and every dependent table."""
    projects = make_projects()
    vacancies = make_vacancies()
    dependents = make_dependents()
    async with session_factory() as session:
        session.add_all([ProjectRow(**p) for p in projects])
        await session.flush()
        session.add_all([VacancyRow(**v) for v in vacancies])
        await session.flush()
        session.add_all([JoinRequestRow(**r) for r in dependents["requests"]])
        session.add_all([PostRow(**p) for p in dependents["posts"]])
        await session.flush()
        session.add_all([ChatRow(**c) for c in dependents["chats"]])
        await session.flush()
        session.add_all([MessageRow(**m) for m in dependents["messages"]])
        session.add_all([NotificationRow(**n) for n in dependents["notifications"]])
        await session.commit()
    return {"users": seed_users, "projects": projects, "vacancies": vacancies, **dependents}


@pytest.fixture
async def seed_malicious(session_factory, seed_users):
    data = make_malicious_data()
    async with session_factory() as session:
        session.add(ProjectRow(**data["project"]))
        await session.flush()
        session.add(VacancyRow(**data["vacancy"]))
        await session.commit()
    return data


@pytest.fixture
def make_auth_header():
    return auth_header
