from dataclasses import dataclass
from datetime import datetime

@dataclass(frozen=True)
class Quiz:
    id: int
    title: str
    description: str
    created_at: datetime
