import logging

from flask import jsonify, request, session
from flask_login import current_user
from sqlalchemy.exc import IntegrityError

from errors import Conflict, Unauthenticated
from extensions import db, login_manager
from models import DEFAULT_ROLE, create_user, get_user, get_user_by_username
from passwords import verify_password
from sessions import SESSION_COOKIE_KEY, get_session_manager
from validation import parse_body

from . import bp
from .schemas import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


@login_manager.request_loader
def load_user_from_session(req):
    """Resolve the opaque token in the cookie to a user; None leaves the request anonymous."""
    user_id = get_session_manager().resolve(session.get(SESSION_COOKIE_KEY))
    if user_id is None:
        return None
    return get_user(user_id)


@login_manager.unauthorized_handler
def unauthorized():
    raise Unauthenticated()


def _start_session(user) -> None:
    manager = get_session_manager()
    # drop whatever session the browser had before, then issue a fresh token
    manager.destroy(session.get(SESSION_COOKIE_KEY))
    session.clear()
    token = manager.create(user.id, payload={"userAgent": request.headers.get("User-Agent", "")})
    session[SESSION_COOKIE_KEY] = token
    session.permanent = True


@bp.route("/register", methods=["POST"])
def register():
    data = parse_body(RegisterRequest)

    if get_user_by_username(data.username):
        raise Conflict()

    try:
        user = create_user(
            username=data.username,
            password=data.password,
            name=data.name,
            email=data.email,
            role=DEFAULT_ROLE,
        )
    except IntegrityError:
        # concurrent registration with the same username
        db.session.rollback()
        raise Conflict()

    _start_session(user)
    return jsonify(user.to_dict()), 201


@bp.route("/login", methods=["POST"])
def login():
    data = parse_body(LoginRequest)

    user = get_user_by_username(data.username)
    if user is None or not verify_password(data.password, user.password):
        logger.info("Failed login for username %r", data.username)
        raise Unauthenticated("Invalid username or password")

    _start_session(user)
    logger.info("User %s logged in", user.username)
    return jsonify(user.to_dict())


@bp.route("/logout", methods=["POST"])
def logout():
    get_session_manager().destroy(session.get(SESSION_COOKIE_KEY))
    session.clear()
    return jsonify(success=True)


@bp.route("/user")
def current_user_info():
    return jsonify(current_user.to_dict())
