import json
from datetime import datetime
from types import SimpleNamespace

import pytest

from utils.export import to_csv, to_json, export_filename, render_export, CSV_HEADER
from utils.errors import ValidationError


@pytest.fixture
def quiz():
    return SimpleNamespace(title="Geography 101!", description="Capitals", created_at=datetime(2024, 5, 1, 12, 30))


@pytest.fixture
def questions():
    return [
        SimpleNamespace(question_text="Capital of France?", answer_choices=["Paris", "Lyon"], correct_answer=0),
        SimpleNamespace(
            question_text='Which city is called "the Big Apple"?',
            answer_choices=["Boston", "New York", "Chicago", "Denver", "Austin", "Miami"],
            correct_answer=1,
        ),
    ]


def test_csv_layout(quiz, questions):
    lines = to_csv(quiz, questions).decode("utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[1] == '"Capital of France?","Paris","Lyon","","","","",1'
    assert lines[2] == (
        '"Which city is called ""the Big Apple""?",'
        '"Boston","New York","Chicago","Denver","Austin","Miami",2'
    )


def test_csv_without_questions_is_header_only(quiz):
    assert to_csv(quiz, []) == (CSV_HEADER + "\n").encode("utf-8")


def test_json_keeps_zero_based_answer(quiz, questions):
    data = json.loads(to_json(quiz, questions))
    assert data["quiz"] == {"title": "Geography 101!", "description": "Capitals", "createdAt": "2024-05-01T12:30:00"}
    assert [q["correctAnswer"] for q in data["questions"]] == [0, 1]
    assert data["questions"][0]["answerChoices"] == ["Paris", "Lyon"]


def test_json_is_pretty_printed(quiz, questions):
    assert to_json(quiz, questions).decode("utf-8").startswith('{\n  "quiz"')


def test_filename_replaces_non_alphanumerics():
    assert export_filename("Geography 101!", "csv") == "Geography_101_.csv"
    assert export_filename("Café-quiz", "json") == "Caf__quiz.json"


def test_render_export_dispatch(quiz, questions):
    body, mimetype, filename = render_export(quiz, questions, "json")
    assert mimetype == "application/json"
    assert filename == "Geography_101_.json"
    assert json.loads(body)["quiz"]["title"] == "Geography 101!"

    assert render_export(quiz, questions, None)[1] == "text/csv"
    with pytest.raises(ValidationError):
        render_export(quiz, questions, "xml")
