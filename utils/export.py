"""
Rendering of a quiz and its questions into downloadable CSV or JSON.

Both formatters work on already-validated model instances and return bytes.
CSV writes the correct answer 1-based; JSON keeps it 0-based.
"""
import csv
import io
import json
import re

from utils.errors import ValidationError

MAX_CHOICES = 6
CSV_HEADER = "Question,Choice A,Choice B,Choice C,Choice D,Choice E,Choice F,Correct Answer"

EXPORT_FORMATS = {
    "csv": "text/csv",
    "json": "application/json",
}


def export_filename(title, extension):
    safe_title = re.sub(r"[^a-zA-Z0-9]", "_", title or "")
    return f"{safe_title}.{extension}"


def to_csv(quiz, questions):
    buffer = io.StringIO()
    buffer.write(CSV_HEADER + "\n")

    # QUOTE_NONNUMERIC quotes every text field and leaves the answer index bare
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for question in questions:
        choices = list(question.answer_choices)
        choices += [""] * (MAX_CHOICES - len(choices))
        writer.writerow([question.question_text, *choices, question.correct_answer + 1])

    return buffer.getvalue().encode("utf-8")


def to_json(quiz, questions):
    export_data = {
        "quiz": {
            "title": quiz.title,
            "description": quiz.description,
            "createdAt": quiz.created_at.isoformat() if quiz.created_at else None,
        },
        "questions": [
            {
                "questionText": q.question_text,
                "answerChoices": list(q.answer_choices),
                "correctAnswer": q.correct_answer,
            }
            for q in questions
        ],
    }
    return json.dumps(export_data, indent=2, ensure_ascii=False).encode("utf-8")


def render_export(quiz, questions, fmt="csv"):
    """Return (body, mimetype, filename) for the requested export format."""
    fmt = (fmt or "csv").lower()
    if fmt not in EXPORT_FORMATS:
        raise ValidationError("Export format must be 'csv' or 'json'")

    body = to_csv(quiz, questions) if fmt == "csv" else to_json(quiz, questions)
    return body, EXPORT_FORMATS[fmt], export_filename(quiz.title, fmt)
