import logging

from sqlalchemy import func, insert, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Base
from app.core.errors import StartupFailure
from .tables import QuizRecord

logger = logging.getLogger(__name__)

SAMPLE_QUIZZES = [
    {"title": "General Knowledge Quiz", "description": "Test your knowledge across various topics"},
    {"title": "Science Quiz", "description": "Explore the wonders of science"},
    {"title": "History Quiz", "description": "Journey through time with historical facts"},
]


def check_connection(engine: Engine) -> None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise StartupFailure(f"failed to connect to the database: {e}") from e


def run_migrations(engine: Engine) -> int:
    """
    Creates the quizzes table if it is absent and seeds the sample quizzes
    into an empty table. Returns the number of rows seeded.
    """
    logger.info("Running database migrations...")
    try:
        Base.metadata.create_all(bind=engine, tables=[QuizRecord.__table__])
    except SQLAlchemyError as e:
        raise StartupFailure(f"failed to create quizzes table: {e}") from e

    try:
        with engine.begin() as conn:
            count = conn.execute(select(func.count()).select_from(QuizRecord)).scalar_one()
            if count == 0:
                logger.info("Inserting sample data...")
                conn.execute(insert(QuizRecord), SAMPLE_QUIZZES)
                seeded = len(SAMPLE_QUIZZES)
            else:
                seeded = 0
    except SQLAlchemyError as e:
        raise StartupFailure(f"failed to seed quizzes table: {e}") from e

    logger.info("Database migrations completed successfully")
    return seeded
