# tests/conftest.py
import os
import sys
import pytest

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import db
from models import create_user
from modules.assistant.generator import Answer, AnswerGenerationError
from sessions import SESSION_COOKIE_KEY, get_session_manager


class FakeAnswerGenerator:
    """Stands in for the OpenAI-backed generator; records every question."""

    def __init__(self):
        self.answer = "A closure is a function bundled with its lexical scope."
        self.lesson = "Lesson 04 - Functions in JavaScript"
        self.fail = False
        self.calls = []

    def ask(self, question, catalog=None):
        self.calls.append(question)
        if self.fail:
            raise AnswerGenerationError()
        return Answer(answer=self.answer, lesson=self.lesson)


@pytest.fixture()
def generator():
    return FakeAnswerGenerator()


@pytest.fixture()
def app(generator):
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "SECRET_KEY": "test-secret",
        },
        answer_generator=generator,
    )
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    counter = {"n": 0}

    def _make(username=None, password="pw123456", role="user", name="Test User", email=None):
        counter["n"] += 1
        username = username or f"user{counter['n']}"
        return create_user(
            username=username,
            password=password,
            name=name,
            email=email or f"{username}@example.com",
            role=role,
        )

    return _make


@pytest.fixture()
def student(make_user):
    return make_user(username="student", role="user")


@pytest.fixture()
def master(make_user):
    return make_user(username="master", role="master")


def authenticate(client, user_id: int) -> str:
    """Open a real server-side session for user_id and put its token into the client's cookie."""
    token = get_session_manager().create(user_id)
    with client.session_transaction() as s:
        s[SESSION_COOKIE_KEY] = token
    return token


@pytest.fixture()
def login_as(client):
    def _login(user) -> str:
        return authenticate(client, user.id)

    return _login
