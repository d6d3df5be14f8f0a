"""
Pytest configuration and shared fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.database import Base, get_db
from app.models import entities  # noqa
from app.main import app
from tests import factories


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Database session"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Test client bound to the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Auth fixtures ==============

@pytest.fixture
def user(db_session):
    return factories.create_user(db_session)


@pytest.fixture
def auth_headers(db_session, user):
    """Bearer header for a signed-in user"""
    token = factories.generate_valid_token(db_session, user)
    return {"Authorization": f"Bearer {token}"}


# ============== Ticket fixtures ==============

@pytest.fixture
def enrollment(db_session, user):
    return factories.create_enrollment_with_address(db_session, user)


@pytest.fixture
def paid_hotel_ticket(db_session, enrollment):
    """Paid, in-person ticket that includes hotel"""
    ticket_type = factories.create_ticket_type_with_hotel(db_session)
    return factories.create_ticket(db_session, enrollment.id, ticket_type.id, entities.TicketStatus.PAID)
