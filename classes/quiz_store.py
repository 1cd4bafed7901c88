from models.quizzes import Quiz
from models.questions import Question
from classes.ownership_gate import OwnershipGate
from classes.validators import validate_quiz_title, validate_quiz_description
from utils.logger import logger


class QuizStore:
    def __init__(self, session):
        self.session = session
        self.gate = OwnershipGate(session)

    def create(self, owner_id, title, description=None):
        title = validate_quiz_title(title)
        description = validate_quiz_description(description)

        quiz = Quiz(title=title, description=description, owner_id=owner_id)
        self.session.add(quiz)
        self.session.commit()

        logger.info("Created quiz", extra={"quiz_id": quiz.id, "owner_id": owner_id})
        return quiz

    def list(self, owner_id):
        """Owner's quizzes, newest first."""
        return (
            self.session.query(Quiz)
            .filter_by(owner_id=owner_id)
            .order_by(Quiz.created_at.desc(), Quiz.id.desc())
            .all()
        )

    def get(self, owner_id, quiz_id):
        """Return (quiz, questions) with questions oldest first."""
        quiz = self.gate.authorize_quiz_owner(owner_id, quiz_id)
        questions = (
            self.session.query(Question)
            .filter_by(quiz_id=quiz.id)
            .order_by(Question.created_at.asc(), Question.id.asc())
            .all()
        )
        return quiz, questions

    def update(self, owner_id, quiz_id, title=None, description=None):
        """Partial update; only supplied fields change."""
        # validate before touching the row so a bad payload writes nothing
        if title is not None:
            title = validate_quiz_title(title)
        if description is not None:
            description = validate_quiz_description(description)

        quiz = self.gate.authorize_quiz_owner(owner_id, quiz_id)
        if title is not None:
            quiz.title = title
        if description is not None:
            quiz.description = description

        self.session.commit()
        logger.info("Updated quiz", extra={"quiz_id": quiz.id, "owner_id": owner_id})
        return quiz

    def delete(self, owner_id, quiz_id):
        """Delete an owned quiz and all of its questions in one transaction."""
        quiz = self.gate.authorize_quiz_owner(owner_id, quiz_id)

        self.session.delete(quiz)
        self.session.commit()

        logger.info("Deleted quiz", extra={"quiz_id": quiz_id, "owner_id": owner_id})
