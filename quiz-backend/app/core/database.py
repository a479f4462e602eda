from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from fastapi import Request

from .config import Settings

Base = declarative_base()


def make_engine(settings: Settings) -> Engine:
    """One engine (and connection pool) per application."""
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # sync endpoints run in FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_session(request: Request):
    session: Session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()
