from models import db, utcnow


class Question(db.Model):
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = db.Column(db.String(500), nullable=False)
    answer_choices = db.Column(db.JSON, nullable=False)
    correct_answer = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    quiz = db.relationship("Quiz", back_populates="questions")

    def __repr__(self):
        return f"<Question {self.id} of quiz {self.quiz_id}>"

    def to_dict(self):
        return {
            "id": self.id,
            "quizId": self.quiz_id,
            "questionText": self.question_text,
            "answerChoices": self.answer_choices,
            "correctAnswer": self.correct_answer,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
