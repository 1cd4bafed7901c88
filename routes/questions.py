from flask import Blueprint, jsonify, g, request
from models import db
from classes.question_store import QuestionStore
from classes.validators import require_fields
from utils.auth import login_required
from utils.errors import ValidationError

question_bp = Blueprint("question", __name__)


def _question_payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid request data")
    if not data.get("questionText") or data.get("answerChoices") is None or data.get("correctAnswer") is None:
        raise ValidationError("All fields are required")
    return data


def _parse_quiz_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid quiz ID")


#Fetch questions of a quiz (?quizId=)
# --------------------------------------------------------------------------------
@question_bp.route("", methods=["GET"])
@login_required
def list_questions():
    quiz_id = _parse_quiz_id(request.args.get("quizId"))
    questions = QuestionStore(db.session).list_for_owner(g.account_id, quiz_id)
    return jsonify({"questions": [q.to_dict() for q in questions]}), 200


#CREATE a question
# --------------------------------------------------------------------------------
@question_bp.route("", methods=["POST"])
@login_required
def create_question():
    data = _question_payload()
    require_fields(data, "quizId")

    question = QuestionStore(db.session).create(
        g.account_id,
        _parse_quiz_id(data.get("quizId")),
        data.get("questionText"),
        data.get("answerChoices"),
        data.get("correctAnswer"),
    )

    return jsonify({"message": "Question created successfully", "question": question.to_dict()}), 201


#Fetch questions of a quiz
# --------------------------------------------------------------------------------
@question_bp.route("/<int:quiz_id>", methods=["GET"])
@login_required
def get_questions(quiz_id):
    questions = QuestionStore(db.session).list_for_owner(g.account_id, quiz_id)
    return jsonify({"questions": [q.to_dict() for q in questions]}), 200


#EDIT a question
# --------------------------------------------------------------------------------
@question_bp.route("/<int:quiz_id>/<int:question_id>", methods=["PUT"])
@login_required
def edit_question(quiz_id, question_id):
    data = _question_payload()

    question = QuestionStore(db.session).update(
        g.account_id, quiz_id, question_id,
        data.get("questionText"),
        data.get("answerChoices"),
        data.get("correctAnswer"),
    )

    return jsonify({"message": "Question updated successfully", "question": question.to_dict()}), 200


#DELETE a question
# --------------------------------------------------------------------------------
@question_bp.route("/<int:quiz_id>/<int:question_id>", methods=["DELETE"])
@login_required
def delete_question(quiz_id, question_id):
    QuestionStore(db.session).delete(g.account_id, quiz_id, question_id)
    return jsonify({"message": "Question deleted successfully"}), 200
