"""SQLAlchemy model and repository operations for suggested questions."""

from typing import List, Optional

from extensions import db
from utils import isoformat, utcnow

EDITABLE_FIELDS = ("text", "category", "active")


class Suggestion(db.Model):
    """An example question; only active ones are shown to non-masters."""

    __tablename__ = "suggestions"

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(255))
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "category": self.category,
            "active": self.active,
            "createdAt": isoformat(self.created_at),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Suggestion {self.id} active={self.active}>"


def list_suggestions() -> List[Suggestion]:
    return Suggestion.query.order_by(Suggestion.id.asc()).all()


def list_active_suggestions() -> List[Suggestion]:
    return Suggestion.query.filter_by(active=True).order_by(Suggestion.id.asc()).all()


def get_suggestion(suggestion_id: int) -> Optional[Suggestion]:
    return db.session.get(Suggestion, suggestion_id)


def create_suggestion(text: str, category: Optional[str] = None, active: bool = True) -> Suggestion:
    item = Suggestion(text=text, category=category, active=active)
    db.session.add(item)
    db.session.commit()
    return item


def update_suggestion(suggestion_id: int, **fields) -> Optional[Suggestion]:
    item = get_suggestion(suggestion_id)
    if item is None:
        return None
    for key, value in fields.items():
        if key not in EDITABLE_FIELDS:
            raise ValueError(f"field {key!r} cannot be updated")
        setattr(item, key, value)
    db.session.commit()
    return item


def delete_suggestion(suggestion_id: int) -> bool:
    item = get_suggestion(suggestion_id)
    if item is None:
        return False
    db.session.delete(item)
    db.session.commit()
    return True
