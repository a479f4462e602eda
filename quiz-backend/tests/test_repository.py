from datetime import datetime

import pytest
from sqlalchemy import delete, text

from app.core.errors import RowDecodeError, StoreFailure
from app.db.tables import QuizRecord
from app.repositories import quiz_repository
from app.repositories.quiz_repository import QuizRepository


@pytest.fixture
def repo(session):
    session.execute(delete(QuizRecord))
    session.commit()
    return QuizRepository(session)


def test_list_all_on_empty_table(repo):
    assert repo.list_all() == []


def test_create_returns_stored_quiz(repo):
    quiz = repo.create("Biology", "Cells and more")
    assert quiz.id > 0
    assert quiz.title == "Biology"
    assert quiz.description == "Cells and more"
    assert isinstance(quiz.created_at, datetime)
    assert repo.list_all() == [quiz]


def test_failed_create_leaves_no_row(repo, monkeypatch):
    def broken_row(row):
        raise RowDecodeError("bad row")

    monkeypatch.setattr(quiz_repository, "_to_quiz", broken_row)
    with pytest.raises(RowDecodeError):
        repo.create("Half written", "")
    monkeypatch.undo()
    assert repo.list_all() == []


def test_list_all_returns_every_created_quiz(repo):
    ids = {repo.create(f"Quiz {n}", "").id for n in range(4)}
    listed = repo.list_all()
    assert {q.id for q in listed} == ids
    assert all(a.created_at >= b.created_at for a, b in zip(listed, listed[1:]))


def test_null_description_decodes_as_empty(repo, session):
    session.execute(text("INSERT INTO quizzes (title, description) VALUES ('No description', NULL)"))
    session.commit()
    [quiz] = repo.list_all()
    assert quiz.description == ""


def test_undecodable_row_fails_whole_listing(repo, session):
    repo.create("Good", "row")
    session.execute(
        text("INSERT INTO quizzes (title, description, created_at) VALUES ('Bad', '', NULL)")
    )
    session.commit()
    with pytest.raises(RowDecodeError):
        repo.list_all()


def test_query_failure_raises_store_failure(repo, session):
    session.execute(text("DROP TABLE quizzes"))
    session.commit()
    with pytest.raises(StoreFailure):
        repo.list_all()
    with pytest.raises(StoreFailure):
        repo.create("t", "d")
