from app import create_app
from errors import AlreadyExists, ValidationError
from modules.users.store import UserStore


def create_user(app, username, password, is_admin=False):
    with app.app_context():
        store = UserStore()
        existing = store.find_by_username(username.strip())
        if existing:
            print(f"⚠️  User '{existing.username}' already exists (admin: {existing.is_admin}).")
            return None

        try:
            user = store.create_user(username, password, is_admin)
        except (AlreadyExists, ValidationError) as exc:
            print(f"❌ {exc.message}")
            return None
        print(f"✅ Created user: {user.username} (admin: {user.is_admin})")
        return user.to_dict()

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(description='Create a new user.')
    parser.add_argument('username', help='Username')
    parser.add_argument('password', help='Password')
    parser.add_argument('--admin', action='store_true', help='Grant the admin flag')

    args = parser.parse_args()
    create_user(create_app(), args.username, args.password, args.admin)
