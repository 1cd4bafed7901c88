from flask import Blueprint, jsonify, g, request, Response
from models import db
from classes.quiz_store import QuizStore
from classes.validators import require_fields
from utils.auth import login_required
from utils.errors import ValidationError
from utils.export import render_export

quiz_bp = Blueprint("quiz", __name__)


#Fetch All Quizzes
# --------------------------------------------------------------------------------
@quiz_bp.route("", methods=["GET"])
@login_required
def get_all_quizzes():
    quizzes = QuizStore(db.session).list(g.account_id)
    return jsonify({"quizzes": [quiz.to_summary_dict() for quiz in quizzes]}), 200


#CREATE a New Quiz
# --------------------------------------------------------------------------------
@quiz_bp.route("", methods=["POST"])
@login_required
def create_quiz():
    data = require_fields(request.get_json(silent=True), "title", message="Quiz title is required")

    quiz = QuizStore(db.session).create(g.account_id, data.get("title"), data.get("description"))

    return jsonify({"message": "Quiz created successfully", "quiz": quiz.to_dict()}), 201


#Fetch one single quiz with its questions
# --------------------------------------------------------------------------------
@quiz_bp.route("/<int:quiz_id>", methods=["GET"])
@login_required
def get_quiz(quiz_id):
    quiz, questions = QuizStore(db.session).get(g.account_id, quiz_id)

    return jsonify({
        "quiz": quiz.to_dict(),
        "questions": [q.to_dict() for q in questions],
    }), 200


# EDIT a Quiz (Only Title & Description)
# --------------------------------------------------------------------------------
@quiz_bp.route("/<int:quiz_id>", methods=["PUT"])
@login_required
def edit_quiz(quiz_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid request data")

    quiz = QuizStore(db.session).update(
        g.account_id, quiz_id,
        title=data.get("title"),
        description=data.get("description"),
    )

    return jsonify({"message": "Quiz updated successfully", "quiz": quiz.to_dict()}), 200


# DELETE a Quiz
# --------------------------------------------------------------------------------
@quiz_bp.route("/<int:quiz_id>", methods=["DELETE"])
@login_required
def delete_quiz(quiz_id):
    QuizStore(db.session).delete(g.account_id, quiz_id)
    return jsonify({"message": "Quiz deleted successfully"}), 200


# EXPORT a Quiz as CSV or JSON
# --------------------------------------------------------------------------------
@quiz_bp.route("/<int:quiz_id>/export", methods=["GET"])
@login_required
def export_quiz(quiz_id):
    quiz, questions = QuizStore(db.session).get(g.account_id, quiz_id)
    body, mimetype, filename = render_export(quiz, questions, request.args.get("format", "csv"))

    return Response(
        body,
        mimetype=mimetype,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
