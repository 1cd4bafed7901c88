from models.questions import Question
from classes.ownership_gate import OwnershipGate
from classes.validators import validate_question
from utils.logger import logger


class QuestionStore:
    def __init__(self, session):
        self.session = session
        self.gate = OwnershipGate(session)

    def create(self, owner_id, quiz_id, question_text, answer_choices, correct_answer):
        quiz = self.gate.authorize_quiz_owner(owner_id, quiz_id)
        text, choices, answer = validate_question(question_text, answer_choices, correct_answer)

        question = Question(
            quiz_id=quiz.id,
            question_text=text,
            answer_choices=choices,
            correct_answer=answer,
        )
        self.session.add(question)
        self.session.commit()

        logger.info("Created question", extra={"question_id": question.id, "quiz_id": quiz.id})
        return question

    def update(self, owner_id, quiz_id, question_id, question_text, answer_choices, correct_answer):
        question = self.gate.authorize_question_owner(owner_id, quiz_id, question_id)
        text, choices, answer = validate_question(question_text, answer_choices, correct_answer)

        question.question_text = text
        question.answer_choices = choices
        question.correct_answer = answer
        self.session.commit()

        logger.info("Updated question", extra={"question_id": question.id, "quiz_id": question.quiz_id})
        return question

    def delete(self, owner_id, quiz_id, question_id):
        question = self.gate.authorize_question_owner(owner_id, quiz_id, question_id)
        self.session.delete(question)
        self.session.commit()

        logger.info("Deleted question", extra={"question_id": question_id, "quiz_id": quiz_id})

    def list_by_quiz(self, quiz_id):
        """Questions of a quiz, oldest first. Callers must have checked ownership."""
        return (
            self.session.query(Question)
            .filter_by(quiz_id=quiz_id)
            .order_by(Question.created_at.asc(), Question.id.asc())
            .all()
        )

    def list_for_owner(self, owner_id, quiz_id):
        quiz = self.gate.authorize_quiz_owner(owner_id, quiz_id)
        return self.list_by_quiz(quiz.id)
