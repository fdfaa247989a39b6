from __future__ import annotations


class QuestionNotFoundError(LookupError):
    """
    Raised by the by-id transforms when no question carries the target id.
    """

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(f"question not found: {question_id}")
