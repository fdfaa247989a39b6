# quizkit/schemas/questions.py
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

QuestionType = Literal["short_answer_question", "multiple_choice_question"]


class Question(BaseModel):
    id: int
    name: str
    type: QuestionType
    body: str = ""
    # meaningful for short answer questions
    expected: str = ""
    # meaningful for multiple choice questions; empty for short answer
    options: List[str] = Field(default_factory=list)
    points: int = Field(default=0, ge=0)
    published: bool = False


class Answer(BaseModel):
    question_id: int
    text: str = ""
    submitted: bool = False
    correct: bool = False
