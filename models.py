"""Shared SQLAlchemy models: the user credential store."""

import logging
from typing import List, Optional

from flask_login import UserMixin

from extensions import db
from passwords import hash_password
from utils import isoformat, utcnow

logger = logging.getLogger(__name__)

ROLES = ("user", "master")
DEFAULT_ROLE = "user"
MASTER_ROLE = "master"


class User(UserMixin, db.Model):
    """Represents an authenticated application user."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), nullable=False, default=DEFAULT_ROLE)  # user, master
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    @property
    def is_master(self) -> bool:
        return self.role == MASTER_ROLE

    def to_dict(self) -> dict:
        # password never leaves the credential store
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "createdAt": isoformat(self.created_at),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"


# ---------- Credential store operations ----------

def get_user(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)


def get_user_by_username(username: str) -> Optional[User]:
    return User.query.filter_by(username=username).first()


def list_users() -> List[User]:
    return User.query.order_by(User.id.asc()).all()


def create_user(username: str, password: str, name: str, email: str, role: str = DEFAULT_ROLE) -> User:
    """Hash the password and insert a user. Uniqueness is enforced by the caller and the DB."""
    if role not in ROLES:
        raise ValueError(f"unknown role: {role!r}")
    user = User(
        username=username,
        password=hash_password(password),
        name=name,
        email=email,
        role=role,
    )
    db.session.add(user)
    db.session.commit()
    logger.info("Created user %s (role: %s)", username, role)
    return user


def update_user(user: User, name=None, email=None, role=None, password=None) -> User:
    """Admin edit. Username is immutable and therefore not accepted here."""
    if role is not None and role not in ROLES:
        raise ValueError(f"unknown role: {role!r}")
    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if role is not None:
        user.role = role
    if password is not None:
        user.password = hash_password(password)
    db.session.commit()
    return user


def delete_user(user_id: int) -> bool:
    """Delete a user; questions, feedback and sessions go with it via ON DELETE CASCADE."""
    user = get_user(user_id)
    if user is None:
        return False
    username = user.username
    db.session.delete(user)
    db.session.commit()
    logger.info("Deleted user %s (id: %s)", username, user_id)
    return True
