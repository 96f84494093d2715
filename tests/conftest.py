import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.session import Base, get_db
from app.models.post import Post  # noqa: F401 - registers the posts table
from app.models.comment import Comment  # noqa: F401 - registers the comments table


test_database_url = "sqlite://"

# StaticPool keeps a single in-memory database visible to every worker thread
test_engine = create_engine(
    test_database_url, connect_args={"check_same_thread": False}, poolclass=StaticPool
)


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest_asyncio.fixture(name="client")
async def client_fixture():
    Base.metadata.create_all(bind=test_engine)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(name="db_engine")
def db_engine_fixture():
    return test_engine
