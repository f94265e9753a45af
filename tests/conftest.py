import os
import tempfile
import uuid

# Point the app at a throwaway SQLite file before prompthub builds its engine
_DB_FILE = os.path.join(tempfile.gettempdir(), f"prompthub-test-{uuid.uuid4().hex}.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_FILE}"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ.pop("GITHUB_REPO", None)
os.environ.pop("GITHUB_TOKEN", None)

import pytest
from faker import Faker
from httpx import AsyncClient, ASGITransport

from prompthub.main import app
from prompthub.models.base import AsyncSessionLocal, Base, engine
from prompthub.models.prompt import Prompt
from prompthub.schemas.commons_schemas import Principal
from prompthub.services.auth_service import auth_service
from prompthub.services.user_service import ensure_user

fake = Faker()


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


def pytest_sessionfinish(session, exitstatus):
    if os.path.exists(_DB_FILE):
        os.remove(_DB_FILE)


@pytest.fixture
async def db():
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


@pytest.fixture
async def client(db):
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def sign_in(db):
    """Create a session (and by default the user row); returns (auth headers, email)."""
    async def _sign_in(email=None, name=None, create_user=True):
        email = email or fake.unique.email()
        name = name or fake.name()
        token = await auth_service.create_session(email, name)
        if create_user:
            async with AsyncSessionLocal() as session:
                await ensure_user(session, Principal(email=email, name=name))
        return {"Authorization": f"Bearer {token}"}, email
    return _sign_in


@pytest.fixture
async def make_prompt(db):
    """Insert a prompt directly, bypassing the API."""
    async def _make_prompt(author_email=None, prompt_id=None, views=0, is_public=True):
        async with AsyncSessionLocal() as session:
            author = await ensure_user(session, Principal(email=author_email or fake.unique.email()))
            prompt = Prompt(
                PROMPT_ID=prompt_id or str(uuid.uuid4()),
                TITLE=fake.sentence(nb_words=4),
                DESCRIPTION=fake.sentence(),
                CONTENT=fake.paragraph(nb_sentences=3),
                IS_PUBLIC=is_public,
                VIEWS=views,
                LIKES=0,
                AUTHOR_ID=author.USER_ID,
            )
            session.add(prompt)
            await session.commit()
            return prompt.PROMPT_ID
    return _make_prompt
