import logging
from datetime import datetime
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import RowDecodeError, StoreFailure
from ..db.tables import QuizRecord
from ..domain.model import Quiz

logger = logging.getLogger(__name__)

_COLUMNS = (QuizRecord.id, QuizRecord.title, QuizRecord.description, QuizRecord.created_at)


def _to_quiz(row) -> Quiz:
    quiz_id, title, description, created_at = row
    if not isinstance(quiz_id, int) or not isinstance(title, str):
        raise RowDecodeError(f"unexpected id/title in row {quiz_id!r}")
    if description is not None and not isinstance(description, str):
        raise RowDecodeError(f"unexpected description in row {quiz_id!r}")
    if not isinstance(created_at, datetime):
        raise RowDecodeError(f"unexpected created_at in row {quiz_id!r}: {created_at!r}")
    return Quiz(
        id=quiz_id,
        title=title,
        description=description or "",
        created_at=created_at,
    )


class QuizRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, title: str, description: str) -> Quiz:
        """Inserts one quiz and returns it as stored, created_at included."""
        stmt = (
            insert(QuizRecord)
            .values(title=title, description=description)
            .returning(*_COLUMNS)
        )
        try:
            row = self.session.execute(stmt).one()
            quiz = _to_quiz(row)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreFailure("failed to insert quiz") from e
        except RowDecodeError:
            self.session.rollback()
            raise
        except (ValueError, TypeError) as e:
            self.session.rollback()
            raise RowDecodeError(f"failed to decode inserted quiz: {e}") from e
        logger.debug("Inserted quiz %s", quiz.id)
        return quiz

    def list_all(self) -> List[Quiz]:
        stmt = select(*_COLUMNS).order_by(QuizRecord.created_at.desc())
        rows = self._fetch(stmt)
        # one bad row fails the whole listing
        return [_to_quiz(r) for r in rows]

    def _fetch(self, stmt) -> list:
        try:
            return self.session.execute(stmt).all()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreFailure("failed to query quizzes") from e
        except (ValueError, TypeError) as e:
            # driver-side type conversion of a stored value failed
            self.session.rollback()
            raise RowDecodeError(f"failed to decode quiz row: {e}") from e
