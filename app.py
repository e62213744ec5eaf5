import logging
from datetime import timedelta

from flask import Flask
from dotenv import load_dotenv

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db, login_manager  # noqa: E402  (load_dotenv needs to run first)
from errors import register_error_handlers  # noqa: E402
from permissions import guard_request  # noqa: E402
from sessions import SessionManager  # noqa: E402


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def create_app(test_config=None, answer_generator=None) -> Flask:
    """Application factory for the course assistant API.

    ``test_config`` overrides settings before extensions are bound;
    ``answer_generator`` replaces the OpenAI-backed generator (tests pass a fake).
    """

    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    _configure_logging(app)

    # init extensions
    db.init_app(app)
    login_manager.init_app(app)

    # sessions: token in the signed cookie, record in the DB
    lifetime = timedelta(hours=app.config["SESSION_LIFETIME_HOURS"])
    app.config["PERMANENT_SESSION_LIFETIME"] = lifetime
    app.extensions["session_manager"] = SessionManager(lifetime=lifetime)

    if answer_generator is None:
        from modules.assistant.generator import AnswerGenerator
        answer_generator = AnswerGenerator.from_config(app.config)
    app.extensions["answer_generator"] = answer_generator

    register_error_handlers(app)
    app.before_request(guard_request)

    # blueprints
    from modules.accounts import bp as accounts_bp
    from modules.users import bp as users_bp
    from modules.assistant import bp as assistant_bp
    from modules.suggestions import bp as suggestions_bp

    app.register_blueprint(accounts_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(assistant_bp)
    app.register_blueprint(suggestions_bp)

    # DB
    with app.app_context():
        # models must be imported before create_all()
        import models  # noqa: F401
        import sessions  # noqa: F401
        from modules.assistant import models as assistant_models  # noqa: F401
        from modules.suggestions import models as suggestion_models  # noqa: F401

        db.create_all()

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
