# permissions.py
"""
RBAC for the API.

- CAPABILITIES: the single table endpoint → required access level.
- guard_request(): before_request hook that consults the table (fail closed).
- require_authenticated() / require_role(role): the checks themselves, usable from views.
- forbid_self_target(): a user may not delete (or demote) their own account.

Roles:
- user:   ask questions, see own history, leave feedback, read active suggestions
- master: everything user can + manage users and suggestions
"""

import logging

from flask import request
from flask_login import current_user

from errors import Forbidden, SelfActionForbidden, Unauthenticated
from models import MASTER_ROLE

logger = logging.getLogger(__name__)

# access levels besides role names
PUBLIC = "public"            # no session needed
OPTIONAL = "optional"        # session resolved if present, anonymous allowed
AUTHENTICATED = "authenticated"


# ------------------------------ CAPABILITY TABLE ----------------------------- #
CAPABILITIES = {
    # accounts
    "accounts.register": PUBLIC,
    "accounts.login": PUBLIC,
    "accounts.logout": AUTHENTICATED,
    "accounts.current_user_info": AUTHENTICATED,

    # assistant
    "assistant.ask_question": OPTIONAL,
    "assistant.question_history": AUTHENTICATED,
    "assistant.submit_feedback": AUTHENTICATED,

    # users (admin)
    "users.user_list": MASTER_ROLE,
    "users.user_create": MASTER_ROLE,
    "users.user_detail": MASTER_ROLE,
    "users.user_update": MASTER_ROLE,
    "users.user_delete": MASTER_ROLE,

    # suggestions: read for any session, write for master
    "suggestions.suggestion_list": AUTHENTICATED,
    "suggestions.suggestion_active": AUTHENTICATED,
    "suggestions.suggestion_detail": AUTHENTICATED,
    "suggestions.suggestion_create": MASTER_ROLE,
    "suggestions.suggestion_update": MASTER_ROLE,
    "suggestions.suggestion_delete": MASTER_ROLE,
}


def required_access(endpoint):
    return CAPABILITIES.get(endpoint)


# ------------------------------- THE GUARD ---------------------------------- #
def guard_request():
    """Authorize the current request by its endpoint. Registered via app.before_request."""
    endpoint = request.endpoint
    # no endpoint → routing failed (404/405), static files are public
    if endpoint is None or endpoint == "static":
        return None

    required = required_access(endpoint)
    if required is None:
        logger.warning("Endpoint %s has no capability entry, denying", endpoint)
        raise Forbidden()

    if required in (PUBLIC, OPTIONAL):
        return None
    if required == AUTHENTICATED:
        require_authenticated()
        return None
    require_role(required)
    return None


def require_authenticated():
    """Return the session's user or raise Unauthenticated."""
    if not current_user.is_authenticated:
        raise Unauthenticated()
    return current_user._get_current_object()


def require_role(role: str):
    """Return the session's user if it has ``role``; Unauthenticated / Forbidden otherwise."""
    user = require_authenticated()
    if getattr(user, "role", None) != role:
        logger.info("User %s (role %s) denied %s access to %s", user.username, user.role, role, request.path)
        raise Forbidden()
    return user


def forbid_self_target(target_id: int, message=None) -> None:
    """Refuse an admin action aimed at the acting user's own account."""
    user = require_authenticated()
    if user.id == target_id:
        raise SelfActionForbidden(message)


# ----------------------------- HELPERS FOR VIEWS ----------------------------- #
def has_role(role: str) -> bool:
    """True if the current user has exactly this role."""
    return bool(current_user.is_authenticated and getattr(current_user, "role", None) == role)


def is_master() -> bool:
    return has_role(MASTER_ROLE)
