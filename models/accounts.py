from models import db, utcnow


class Account(db.Model):
    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    # stored lower-cased so the unique constraint is case-insensitive
    email = db.Column(db.String(255), nullable=False, unique=True)
    username = db.Column(db.String(20), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="learner")  # 'learner', 'instructor'
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    quizzes = db.relationship("Quiz", back_populates="owner")

    def __repr__(self):
        return f"<Account {self.username} ({self.role})>"

    def to_public_dict(self):
        """Account fields safe to return to a client; never includes the hash."""
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "role": self.role,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
