import logging

from flask import jsonify
from flask_login import current_user

from errors import NotFound
from permissions import is_master
from validation import parse_body

from . import bp
from .models import (
    create_suggestion,
    delete_suggestion,
    get_suggestion,
    list_active_suggestions,
    list_suggestions,
    update_suggestion,
)
from .schemas import SuggestionCreate, SuggestionUpdate

logger = logging.getLogger(__name__)


@bp.route("", methods=["GET"])
def suggestion_list():
    # masters manage the full list, everyone else only sees active prompts
    items = list_suggestions() if is_master() else list_active_suggestions()
    return jsonify([s.to_dict() for s in items])


@bp.route("/active", methods=["GET"])
def suggestion_active():
    return jsonify([s.to_dict() for s in list_active_suggestions()])


@bp.route("/<int:suggestion_id>", methods=["GET"])
def suggestion_detail(suggestion_id: int):
    item = get_suggestion(suggestion_id)
    if item is None or (not item.active and not is_master()):
        raise NotFound("Suggestion not found")
    return jsonify(item.to_dict())


@bp.route("", methods=["POST"])
def suggestion_create():
    data = parse_body(SuggestionCreate)
    item = create_suggestion(text=data.text, category=data.category or None, active=data.active)
    logger.info("Suggestion %s created by %s", item.id, current_user.username)
    return jsonify(item.to_dict()), 201


@bp.route("/<int:suggestion_id>", methods=["PUT"])
def suggestion_update(suggestion_id: int):
    data = parse_body(SuggestionUpdate)
    item = update_suggestion(suggestion_id, **data.changes())
    if item is None:
        raise NotFound("Suggestion not found")
    return jsonify(item.to_dict())


@bp.route("/<int:suggestion_id>", methods=["DELETE"])
def suggestion_delete(suggestion_id: int):
    if not delete_suggestion(suggestion_id):
        raise NotFound("Suggestion not found")
    logger.info("Suggestion %s deleted by %s", suggestion_id, current_user.username)
    return jsonify(success=True)
