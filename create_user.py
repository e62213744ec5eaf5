from sqlalchemy.exc import IntegrityError

from app import create_app
from extensions import db
from models import ROLES, create_user as store_user, get_user_by_username

app = create_app()


def create_user(username, password, name, email, role):
    with app.app_context():
        # Проверка на уникальность логина
        existing_user = get_user_by_username(username)
        if existing_user:
            print(f"⚠️  User '{username}' already exists with role '{existing_user.role}'.")
            return

        try:
            store_user(username=username, password=password, name=name, email=email, role=role)
        except IntegrityError:
            db.session.rollback()
            print(f"⚠️  User '{username}' already exists.")
            return
        print(f"✅ Created user: {username} (role: {role})")


if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create a new user (use role "master" for the first admin).')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password')
    parser.add_argument('name', help='Display name')
    parser.add_argument('email', help='E-mail')
    parser.add_argument('role', choices=ROLES, help='User role')

    args = parser.parse_args()
    create_user(args.username, args.password, args.name, args.email, args.role)
