"""Credential store: user accounts and the bootstrap admin."""

from flask import current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from errors import AlreadyExists, ValidationError
from extensions import db
from models import User

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 4


class UserStore:
    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def find_by_username(self, username: str) -> User | None:
        # exact, case-sensitive match
        return self.session.query(User).filter_by(username=username).first()

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def create_user(self, username: str, password: str, is_admin: bool = False) -> User:
        """Validate, hash and persist a new account.

        Raises ValidationError before touching the database, and
        AlreadyExists if the name is taken.
        """
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Username and password are required")
        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationError(f"Username must be at least {MIN_USERNAME_LENGTH} characters")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        if self.find_by_username(username) is not None:
            raise AlreadyExists("Username already taken")

        user = User(
            username=username,
            password=generate_password_hash(password),
            is_admin=bool(is_admin),
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # lost a race with a concurrent insert of the same name
            self.session.rollback()
            raise AlreadyExists("Username already taken") from None
        current_app.logger.info("Created user %s (admin=%s)", username, user.is_admin)
        return user

    @staticmethod
    def validate_password(user: User, candidate: str) -> bool:
        if user is None or not candidate:
            return False
        return check_password_hash(user.password, candidate)

    def list_users(self) -> list[dict]:
        users = self.session.query(User).order_by(User.username.asc()).all()
        return [u.to_dict() for u in users]

    def ensure_default_admin(self) -> User:
        """Provision the default admin account if it does not exist yet."""
        username = current_app.config.get("DEFAULT_ADMIN_USERNAME", "admin")
        existing = self.find_by_username(username)
        if existing is not None:
            return existing

        admin = self.create_user(
            username,
            current_app.config.get("DEFAULT_ADMIN_PASSWORD", "admin"),
            is_admin=True,
        )
        current_app.logger.warning(
            "Default admin user '%s' created; change its password", username
        )
        return admin
