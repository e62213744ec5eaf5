"""Server-side login sessions.

The browser only carries an opaque token (``session["sid"]`` in Flask's signed
cookie). Everything else, the owning user and the expiry, lives in the
``sessions`` table and is looked up on each request.
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from flask import current_app

from extensions import db
from utils import utcnow

logger = logging.getLogger(__name__)

SESSION_COOKIE_KEY = "sid"
DEFAULT_LIFETIME = timedelta(hours=24)


class SessionRecord(db.Model):
    __tablename__ = "sessions"

    sid = db.Column(db.String(128), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    sess = db.Column(db.JSON, nullable=False, default=dict)
    expire = db.Column(db.DateTime, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def is_expired(self, now=None) -> bool:
        return (now or utcnow()) >= self.expire


class SessionManager:
    """Issues, resolves and destroys session tokens.

    One instance per app, stored in ``app.extensions["session_manager"]``.
    Expiry is fixed at creation time; resolving a session does not extend it.
    """

    def __init__(self, lifetime: timedelta = DEFAULT_LIFETIME, token_bytes: int = 32):
        self.lifetime = lifetime
        self.token_bytes = token_bytes

    def create(self, user_id: int, payload: Optional[dict] = None) -> str:
        token = secrets.token_urlsafe(self.token_bytes)
        now = utcnow()
        record = SessionRecord(
            sid=token,
            user_id=user_id,
            sess=payload or {},
            expire=now + self.lifetime,
            created_at=now,
        )
        db.session.add(record)
        db.session.commit()
        return token

    def resolve(self, token: Optional[str]) -> Optional[int]:
        """Owning user id for a live token, else None. Unknown and expired tokens are not errors."""
        if not token:
            return None
        record = db.session.get(SessionRecord, token)
        if record is None or record.is_expired():
            return None
        return record.user_id

    def payload(self, token: Optional[str]) -> dict:
        if not token:
            return {}
        record = db.session.get(SessionRecord, token)
        if record is None or record.is_expired():
            return {}
        return dict(record.sess or {})

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        SessionRecord.query.filter_by(sid=token).delete()
        db.session.commit()

    def purge_expired(self) -> int:
        removed = SessionRecord.query.filter(SessionRecord.expire <= utcnow()).delete()
        db.session.commit()
        if removed:
            logger.info("Purged %d expired sessions", removed)
        return removed


def get_session_manager() -> SessionManager:
    return current_app.extensions["session_manager"]
