from __future__ import annotations

from schemas.questions import Question, QuestionType


def make_blank_question(id: int, name: str, type: QuestionType) -> Question:
    """
    A question with the given identity and nothing else: empty body, expected
    answer and options, zero points, unpublished.
    """
    return Question(
        id=id,
        name=name,
        type=type,
        body="",
        expected="",
        options=[],
        points=0,
        published=False,
    )


def duplicate_question(id: int, question: Question) -> Question:
    # deep copy so the duplicate never shares the source's options list
    return question.model_copy(update={"id": id}, deep=True)
