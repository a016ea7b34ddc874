import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from main import create_application
from core.config import get_settings
from dependencies import get_session
from models import User, Category


@pytest.fixture(scope="session")
def settings():
    return get_settings()


@pytest.fixture
def test_db_engine(settings):
    engine = create_engine(
        settings.TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(test_db_engine):
    with Session(test_db_engine) as session:
        yield session


@pytest.fixture
def client(db_session):
    app = create_application()
    app.dependency_overrides[get_session] = lambda: db_session
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def author(db_session):
    user = User(username="alice", email="alice@example.com", full_name="Alice")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    user = User(username="bob", email="bob@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def category(db_session):
    category = Category(title="General")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category
