"""SQLAlchemy models for asked questions and the feedback on their answers."""

from typing import List, Optional

from extensions import db
from utils import isoformat, utcnow


class Question(db.Model):
    """A question asked by a signed-in user, with the generated answer and matched lesson."""

    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    lesson = db.Column(db.Text, nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    feedback = db.relationship(
        "Feedback",
        backref="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy=True,
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "lesson": self.lesson,
            "userId": self.user_id,
            "createdAt": isoformat(self.created_at),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Question {self.id} user={self.user_id}>"


class Feedback(db.Model):
    __tablename__ = "feedback"

    id = db.Column(db.Integer, primary_key=True)
    question_id = db.Column(db.Integer, db.ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True)
    is_helpful = db.Column(db.Boolean, nullable=False)
    comment = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "questionId": self.question_id,
            "isHelpful": self.is_helpful,
            "comment": self.comment,
            "createdAt": isoformat(self.created_at),
        }


# ---------- Repository operations ----------

def create_question(question: str, answer: str, lesson: str, owner_id: Optional[int]) -> Question:
    record = Question(question=question, answer=answer, lesson=lesson, user_id=owner_id)
    db.session.add(record)
    db.session.commit()
    return record


def get_question(question_id: int) -> Optional[Question]:
    return db.session.get(Question, question_id)


def list_questions_for_owner(owner_id: int) -> List[Question]:
    """Oldest first."""
    return (Question.query
            .filter_by(user_id=owner_id)
            .order_by(Question.created_at.asc(), Question.id.asc())
            .all())


def create_feedback(question_id: int, is_helpful: bool, comment: Optional[str] = None) -> Feedback:
    """Insert feedback; a dangling question_id surfaces as IntegrityError from the FK."""
    record = Feedback(question_id=question_id, is_helpful=is_helpful, comment=comment)
    db.session.add(record)
    db.session.commit()
    return record
