# quizkit/question_set.py
"""
Pure transforms over an ordered collection of questions.

Nothing here mutates its input: every question handed back is a deep copy, so a
caller can edit the result (including each ``options`` list) without touching
the collection it passed in.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import config
from errors import QuestionNotFoundError
from objects import duplicate_question, make_blank_question
from schemas.questions import Answer, Question, QuestionType

logger = logging.getLogger(config.LOGGER_NAME)

CSV_HEADER = "id,name,options,points,published"

# --- Low-level helpers ------------------------------------------------------------


def _copy_all(questions: Sequence[Question]) -> List[Question]:
    return [q.model_copy(deep=True) for q in questions]


def _find_index(questions: Sequence[Question], target_id: int) -> Optional[int]:
    return next((i for i, q in enumerate(questions) if q.id == target_id), None)


def _target_index(questions: Sequence[Question], target_id: int) -> Optional[int]:
    """
    First position holding ``target_id``. A miss raises when STRICT_IDS is on,
    otherwise it is logged and reported as None.
    """
    index = _find_index(questions, target_id)
    if index is None:
        if config.STRICT_IDS:
            raise QuestionNotFoundError(target_id)
        logger.warning("question %s not found; returning collection unchanged", target_id)
    return index


# --- Filters & lookups ------------------------------------------------------------


def get_published_questions(questions: Sequence[Question]) -> List[Question]:
    return [q.model_copy(deep=True) for q in questions if q.published]


def get_non_empty_questions(questions: Sequence[Question]) -> List[Question]:
    """
    Drop questions that are entirely empty: no body, no expected answer and no
    options. A question with any one of those filled in is kept.
    """
    return [
        q.model_copy(deep=True)
        for q in questions
        if q.body != "" or q.expected != "" or len(q.options) != 0
    ]


def find_question(questions: Sequence[Question], id: int) -> Optional[Question]:
    found = next((q for q in questions if q.id == id), None)
    if found is None:
        return None
    return found.model_copy(deep=True)


def remove_question(questions: Sequence[Question], id: int) -> List[Question]:
    copied = _copy_all(questions)
    index = _find_index(copied, id)
    if index is not None:
        del copied[index]
    return copied


def get_names(questions: Sequence[Question]) -> List[str]:
    return [q.name for q in questions]


def same_type(questions: Sequence[Question]) -> bool:
    if not questions:
        return True
    first = questions[0].type
    return all(q.type == first for q in questions)


# --- Aggregates -------------------------------------------------------------------


def sum_points(questions: Sequence[Question]) -> int:
    # empty collection sums to 0
    return sum(q.points for q in questions)


def sum_published_points(questions: Sequence[Question]) -> int:
    return sum(q.points for q in questions if q.published)


def to_csv(questions: Sequence[Question]) -> str:
    """
    Render questions as CSV text::

        id,name,options,points,published
        1,Addition,0,1,true
        2,Letters,0,1,false

    ``options`` is the number of options, not their text. Fields are not quoted
    or escaped, so a comma inside a name shows up as an extra column.
    """
    rows = [
        f"{q.id},{q.name},{len(q.options)},{q.points},{str(q.published).lower()}"
        for q in questions
    ]
    return "\n".join([CSV_HEADER, *rows])


def make_answers(questions: Sequence[Question]) -> List[Answer]:
    return [Answer(question_id=q.id, text="", submitted=False, correct=False) for q in questions]


# --- Whole-collection edits -------------------------------------------------------


def publish_all(questions: Sequence[Question]) -> List[Question]:
    return [q.model_copy(update={"published": True}, deep=True) for q in questions]


def add_new_question(
    questions: Sequence[Question], id: int, name: str, type: QuestionType
) -> List[Question]:
    logger.debug("adding blank %s question %s", type, id)
    return [*_copy_all(questions), make_blank_question(id, name, type)]


# --- By-id edits ------------------------------------------------------------------


def rename_question_by_id(
    questions: Sequence[Question], target_id: int, new_name: str
) -> List[Question]:
    copied = _copy_all(questions)
    index = _target_index(copied, target_id)
    if index is None:
        return copied
    logger.debug("renaming question %s to %r", target_id, new_name)
    copied[index] = copied[index].model_copy(update={"name": new_name})
    return copied


def change_question_type_by_id(
    questions: Sequence[Question], target_id: int, new_question_type: QuestionType
) -> List[Question]:
    """
    Change the target's type. Only multiple choice questions keep their
    options; switching to any other type clears them.
    """
    copied = _copy_all(questions)
    index = _target_index(copied, target_id)
    if index is None:
        return copied
    update: Dict[str, Any] = {"type": new_question_type}
    if new_question_type != "multiple_choice_question":
        update["options"] = []
    logger.debug("changing question %s type to %s", target_id, new_question_type)
    copied[index] = copied[index].model_copy(update=update)
    return copied


def edit_option(
    questions: Sequence[Question],
    target_id: int,
    target_option_index: int,
    new_option: str,
) -> List[Question]:
    """
    Edit one option of the target question.

    ``target_option_index == -1`` appends ``new_option``; any other index must
    point at an existing option, which is replaced in place. Indices outside
    ``[-1, len(options) - 1]`` raise IndexError.
    """
    copied = _copy_all(questions)
    index = _target_index(copied, target_id)
    if index is None:
        return copied

    options = list(copied[index].options)
    if target_option_index == -1:
        options.append(new_option)
    elif 0 <= target_option_index < len(options):
        options[target_option_index] = new_option
    else:
        raise IndexError(
            f"option index {target_option_index} out of range for question {target_id}"
        )

    logger.debug("editing option %s of question %s", target_option_index, target_id)
    copied[index] = copied[index].model_copy(update={"options": options})
    return copied


def duplicate_question_in_array(
    questions: Sequence[Question], target_id: int, new_id: int
) -> List[Question]:
    copied = _copy_all(questions)
    index = _target_index(copied, target_id)
    if index is None:
        return copied
    logger.debug("duplicating question %s as %s", target_id, new_id)
    copied.insert(index + 1, duplicate_question(new_id, copied[index]))
    return copied
