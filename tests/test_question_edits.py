import logging

import pytest

import config
from bank import get_questions
from errors import QuestionNotFoundError
from question_set import (
    add_new_question,
    change_question_type_by_id,
    duplicate_question_in_array,
    edit_option,
    rename_question_by_id,
)
from schemas.questions import Question

QS = get_questions()


def _ids(qs):
    return [q.id for q in qs]


@pytest.fixture(autouse=True)
def strict_ids(monkeypatch):
    monkeypatch.setattr(config, "STRICT_IDS", True)


def test_add_new_question_appends_blank():
    out = add_new_question(QS, 142, "New", "multiple_choice_question")
    assert _ids(out) == [1, 2, 5, 9, 142]
    assert out[-1] == Question(id=142, name="New", type="multiple_choice_question")
    assert len(QS) == 4


def test_rename_question_by_id():
    out = rename_question_by_id(QS, 5, "Colours")
    assert [q.name for q in out] == ["Addition", "Letters", "Colours", "Shapes"]
    assert out[2].options == QS[2].options
    assert QS[2].name == "Colors"


def test_change_type_to_short_answer_clears_options():
    qs = [
        Question(id=1, name="A", type="short_answer_question"),
        Question(id=3, name="B", type="multiple_choice_question", options=["A", "B"]),
    ]
    out = change_question_type_by_id(qs, 3, "short_answer_question")
    assert out[1].type == "short_answer_question"
    assert out[1].options == []
    assert qs[1].options == ["A", "B"]


def test_change_type_to_multiple_choice_keeps_options():
    out = change_question_type_by_id(QS, 9, "multiple_choice_question")
    assert out[3].options == ["square", "triangle", "circle"]
    out = change_question_type_by_id(QS, 1, "multiple_choice_question")
    assert out[0].type == "multiple_choice_question"
    assert out[1:] == QS[1:]


def test_edit_option_append_and_replace():
    appended = edit_option(QS, 5, -1, "Red")
    assert appended[2].options == ["red", "apple", "firetruck", "Red"]

    replaced = edit_option(QS, 5, 0, "Blue")
    assert replaced[2].options == ["Blue", "apple", "firetruck"]

    assert QS[2].options == ["red", "apple", "firetruck"]


def test_edit_option_append_to_empty():
    out = edit_option(QS, 1, -1, "4")
    assert out[0].options == ["4"]


@pytest.mark.parametrize("index", [3, -2])
def test_edit_option_out_of_range(index):
    with pytest.raises(IndexError):
        edit_option(QS, 5, index, "Nope")


def test_duplicate_question_in_array_inserts_after_target():
    qs = QS[:3]  # ids 1, 2, 5
    out = duplicate_question_in_array(qs, 2, 99)
    assert _ids(out) == [1, 2, 99, 5]
    assert out[2].model_dump(exclude={"id"}) == out[1].model_dump(exclude={"id"})


def test_duplicate_question_in_array_independent_options():
    out = duplicate_question_in_array(QS, 5, 55)
    out[3].options.append("blue")
    assert out[2].options == ["red", "apple", "firetruck"]
    assert QS[2].options == ["red", "apple", "firetruck"]


@pytest.mark.parametrize(
    "call",
    [
        lambda qs: rename_question_by_id(qs, 1234, "X"),
        lambda qs: change_question_type_by_id(qs, 1234, "short_answer_question"),
        lambda qs: edit_option(qs, 1234, -1, "X"),
        lambda qs: duplicate_question_in_array(qs, 1234, 99),
    ],
)
def test_missing_id_raises_when_strict(call):
    with pytest.raises(QuestionNotFoundError) as exc:
        call(QS)
    assert exc.value.question_id == 1234
    assert "1234" in str(exc.value)


def test_missing_id_is_logged_noop_when_lenient(monkeypatch, caplog):
    monkeypatch.setattr(config, "STRICT_IDS", False)
    with caplog.at_level(logging.WARNING, logger=config.LOGGER_NAME):
        out = rename_question_by_id(QS, 1234, "X")
    assert out == QS
    assert out[0] is not QS[0]
    assert "1234" in caplog.text

    assert duplicate_question_in_array(QS, 1234, 99) == QS
    assert edit_option(QS, 1234, -1, "X") == QS
