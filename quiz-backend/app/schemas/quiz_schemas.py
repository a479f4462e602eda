from typing import Optional
from pydantic import BaseModel, field_validator

class QuizCreateIn(BaseModel):
    # id and created_at sent by clients are dropped (extra="ignore")
    title: Optional[str] = ""
    description: Optional[str] = ""

    @field_validator("title", "description")
    @classmethod
    def _null_to_empty(cls, v: Optional[str]) -> str:
        return v or ""

class QuizOut(BaseModel):
    id: int
    title: str
    description: str
    created_at: str
