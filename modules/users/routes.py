import logging

from flask import jsonify
from flask_login import current_user
from sqlalchemy.exc import IntegrityError

from errors import Conflict, NotFound
from extensions import db
from models import create_user, delete_user, get_user, get_user_by_username, list_users, update_user
from permissions import forbid_self_target
from validation import parse_body

from . import bp
from .schemas import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)


def _get_or_404(user_id: int):
    user = get_user(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


@bp.route("", methods=["GET"])
def user_list():
    return jsonify([u.to_dict() for u in list_users()])


@bp.route("", methods=["POST"])
def user_create():
    data = parse_body(CreateUserRequest)

    if get_user_by_username(data.username):
        raise Conflict()

    try:
        user = create_user(
            username=data.username,
            password=data.password,
            name=data.name,
            email=data.email,
            role=data.role,
        )
    except IntegrityError:
        db.session.rollback()
        raise Conflict()

    logger.info("User %s created by %s", user.username, current_user.username)
    return jsonify(user.to_dict()), 201


@bp.route("/<int:user_id>", methods=["GET"])
def user_detail(user_id: int):
    return jsonify(_get_or_404(user_id).to_dict())


@bp.route("/<int:user_id>", methods=["PUT"])
def user_update(user_id: int):
    data = parse_body(UpdateUserRequest)
    user = _get_or_404(user_id)

    if data.role is not None and data.role != user.role:
        forbid_self_target(user_id, "You cannot change your own role")

    update_user(user, **data.model_dump(exclude_none=True))
    logger.info("User %s updated by %s", user.username, current_user.username)
    return jsonify(user.to_dict())


@bp.route("/<int:user_id>", methods=["DELETE"])
def user_delete(user_id: int):
    forbid_self_target(user_id, "You cannot delete your own account")

    if not delete_user(user_id):
        raise NotFound("User not found")

    logger.info("User id %s deleted by %s", user_id, current_user.username)
    return jsonify(success=True)
