"""
Point the app at a throwaway SQLite file before any test module imports
liftlog, and share the store/manager fixtures.
"""
import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.mkdtemp(prefix="liftlog-tests-"), "app.db")

from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from liftlog.catalog import ExerciseCatalog
from liftlog.db import init_db, make_engine, make_session_factory
from liftlog.session_manager import WorkoutSessionManager


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def engine(tmp_path):
    eng = make_engine(f"sqlite:///{tmp_path / 'liftlog.db'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def catalog(session_factory):
    return ExerciseCatalog(session_factory)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 14, 9, 30))


@pytest_asyncio.fixture
async def manager(session_factory, catalog, clock):
    # an hour-long interval keeps the real timer quiet; tests tick by hand
    m = WorkoutSessionManager(session_factory, catalog, clock=clock, tick_interval=3600)
    yield m
    await m.shutdown()


@pytest.fixture
def client():
    """App client with the lifespan running against a freshly emptied store."""
    from fastapi.testclient import TestClient
    from liftlog import models  # noqa: F401
    from liftlog.db import Base, engine
    from liftlog.main import app

    Base.metadata.drop_all(engine)
    with TestClient(app) as c:
        yield c
