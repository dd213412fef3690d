"""Shared SQLAlchemy models."""

from flask_login import UserMixin

from extensions import db
from utils import isoformat, utcnow


class User(UserMixin, db.Model):
    """Represents an authenticated application user."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # salted hash only
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    def to_dict(self) -> dict:
        """Public view of the account; the password hash never leaves the store."""
        return {
            "_id": str(self.id),
            "username": self.username,
            "isAdmin": bool(self.is_admin),
            "createdAt": isoformat(self.created_at),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"
