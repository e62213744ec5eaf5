"""Delete expired login sessions. Meant for cron; resolving already ignores expired rows."""

from app import create_app
from sessions import get_session_manager


def main():
    app = create_app()
    with app.app_context():
        removed = get_session_manager().purge_expired()
        print(f"✔ {removed} expired sessions removed.")


if __name__ == "__main__":
    main()
