# quizkit/bank.py

from __future__ import annotations

from typing import List

from questions import QUESTIONS
from schemas.questions import Question


# Public API
def get_questions() -> List[Question]:
    """
    The built-in bank as fresh Question models. Every call builds new objects,
    so callers are free to edit what they get back.
    """
    return [Question(**raw) for raw in QUESTIONS]
