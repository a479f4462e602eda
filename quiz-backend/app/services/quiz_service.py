from .typing import to_iso
from ..domain.model import Quiz
from ..repositories.quiz_repository import QuizRepository


def to_wire(quiz: Quiz) -> dict:
    return {
        "id": quiz.id,
        "title": quiz.title,
        "description": quiz.description,
        "created_at": to_iso(quiz.created_at),
    }


class QuizService:
    def __init__(self, repo: QuizRepository) -> None:
        self.repo = repo

    def list_quizzes(self) -> list[dict]:
        return [to_wire(q) for q in self.repo.list_all()]

    def create_quiz(self, title: str, description: str) -> dict:
        return to_wire(self.repo.create(title, description))
