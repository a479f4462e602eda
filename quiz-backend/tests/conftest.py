import os

# app.main builds a default app at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from app.core.config import Settings
from app.core.database import make_session_factory
from app.db.bootstrap import run_migrations
from app.db.tables import QuizRecord
from app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'quizzes.db'}")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def engine(app):
    return app.state.engine


@pytest.fixture
def client(app):
    # entering the client runs the lifespan: connect check, table creation, seeding
    with TestClient(app) as c:
        yield c


@pytest.fixture
def empty_client(client, engine):
    with engine.begin() as conn:
        conn.execute(delete(QuizRecord))
    return client


@pytest.fixture
def session(engine):
    run_migrations(engine)
    s = make_session_factory(engine)()
    try:
        yield s
    finally:
        s.close()
