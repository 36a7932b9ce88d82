"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seed companies, jobs and users with auth tokens
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.database import Base, get_db
from app.core.security import create_token_for_user, get_password_hash
from app.models import Company, Job, User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Tables are created per test below, not against the configured database
settings.CREATE_TABLES_ON_STARTUP = False


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    All tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed(db_session):
    """
    Three companies (c1..c3), four jobs at c1 and three users.

    Returns a dict of job ids keyed by title.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ])
    jobs = [
        Job(title="J1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="J2", salary=200, equity=0.2, company_handle="c1"),
        Job(title="J3", salary=300, equity=0, company_handle="c1"),
        Job(title="J4", salary=None, equity=None, company_handle="c1"),
    ]
    db_session.add_all(jobs)
    db_session.add_all([
        User(username="u1", hashed_password=get_password_hash("password1"), first_name="U1F",
             last_name="U1L", email="user1@example.com", is_admin=False),
        User(username="u2", hashed_password=get_password_hash("password2"), first_name="U2F",
             last_name="U2L", email="user2@example.com", is_admin=False),
        User(username="admin", hashed_password=get_password_hash("adminpass"), first_name="AF",
             last_name="AL", email="admin@example.com", is_admin=True),
    ])
    db_session.commit()

    return {job.title: job.id for job in jobs}


def _headers_for(db_session, username):
    user = db_session.get(User, username)
    return {"Authorization": f"Bearer {create_token_for_user(user)}"}


@pytest.fixture
def u1_headers(db_session, seed):
    return _headers_for(db_session, "u1")


@pytest.fixture
def u2_headers(db_session, seed):
    return _headers_for(db_session, "u2")


@pytest.fixture
def admin_headers(db_session, seed):
    return _headers_for(db_session, "admin")
