from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from habit_tracker.dates import get_today
from habit_tracker.main import create_app


class Clock:
    def __init__(self, today: datetime):
        self.today = today


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def clock():
    # Wednesday, week day index 3
    return Clock(datetime(2024, 1, 3))


@pytest.fixture
def client(engine, clock):
    app = create_app(engine)
    app.dependency_overrides[get_today] = lambda: clock.today
    with TestClient(app) as client:
        yield client


@pytest.fixture
def session(engine, client):
    with Session(engine) as session:
        yield session
