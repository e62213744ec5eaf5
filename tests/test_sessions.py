"""Tests for the server-side session store."""

from datetime import timedelta

from extensions import db
from sessions import SessionRecord, get_session_manager
from utils import utcnow


def test_create_and_resolve(app, student) -> None:
    manager = get_session_manager()
    token = manager.create(student.id, payload={"userAgent": "pytest"})

    assert len(token) >= 32
    assert manager.resolve(token) == student.id
    assert manager.payload(token) == {"userAgent": "pytest"}


def test_tokens_are_unique(app, student) -> None:
    manager = get_session_manager()
    assert manager.create(student.id) != manager.create(student.id)


def test_resolve_unknown_or_empty_is_absent(app) -> None:
    manager = get_session_manager()
    assert manager.resolve(None) is None
    assert manager.resolve("") is None
    assert manager.resolve("no-such-token") is None


def test_destroy_then_resolve_is_absent(app, student) -> None:
    manager = get_session_manager()
    token = manager.create(student.id)
    manager.destroy(token)
    assert manager.resolve(token) is None
    # idempotent
    manager.destroy(token)
    manager.destroy(None)


def test_expired_session_is_absent_without_destroy(app, student) -> None:
    manager = get_session_manager()
    token = manager.create(student.id)

    record = db.session.get(SessionRecord, token)
    record.expire = utcnow() - timedelta(seconds=1)
    db.session.commit()

    assert manager.resolve(token) is None
    assert db.session.get(SessionRecord, token) is not None


def test_default_lifetime_is_24_hours(app, student) -> None:
    manager = get_session_manager()
    token = manager.create(student.id)
    record = db.session.get(SessionRecord, token)
    assert timedelta(hours=23, minutes=59) < record.expire - record.created_at <= timedelta(hours=24)


def test_purge_expired_keeps_live_sessions(app, student) -> None:
    manager = get_session_manager()
    live = manager.create(student.id)
    dead = manager.create(student.id)
    db.session.get(SessionRecord, dead).expire = utcnow() - timedelta(hours=1)
    db.session.commit()

    assert manager.purge_expired() == 1
    assert manager.resolve(live) == student.id
    assert db.session.get(SessionRecord, dead) is None
