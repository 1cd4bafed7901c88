from models.quizzes import Quiz
from models.questions import Question
from utils.errors import NotFound


class OwnershipGate:
    """
    Owner-scoped lookups. A quiz owned by another account is reported
    exactly like a missing one.
    """

    def __init__(self, session):
        self.session = session

    def authorize_quiz_owner(self, account_id, quiz_id):
        quiz = self.session.query(Quiz).filter_by(id=quiz_id, owner_id=account_id).first()
        if quiz is None:
            raise NotFound("Quiz not found")
        return quiz

    def authorize_question_owner(self, account_id, quiz_id, question_id):
        # quiz first, so question ids under foreign quizzes cannot be probed
        quiz = self.authorize_quiz_owner(account_id, quiz_id)
        question = self.session.query(Question).filter_by(id=question_id, quiz_id=quiz.id).first()
        if question is None:
            raise NotFound("Question not found")
        return question
