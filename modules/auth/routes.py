"""Login / logout and the Flask-Login hooks."""

from flask import current_app, jsonify
from flask_login import current_user, login_required, login_user, logout_user

from errors import Unauthorized, ValidationError, error_response
from extensions import db, login_manager
from models import User
from modules.users.store import UserStore
from utils import json_body

from . import bp


@login_manager.user_loader
def load_user(user_id: str | None) -> User | None:
    """Resolve a ``User`` instance for Flask-Login sessions."""

    if not user_id or not str(user_id).isdigit():
        return None
    return db.session.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    return error_response(Unauthorized.message, Unauthorized.status_code)


@bp.route("/login", methods=["POST"])
def login():
    body = json_body()
    username = body.get("username")
    password = body.get("password")
    if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
        raise ValidationError("Username and password are required")

    store = UserStore()
    store.ensure_default_admin()

    user = store.find_by_username(username)
    if not store.validate_password(user, password):
        current_app.logger.warning("Failed login for %s", username)
        raise Unauthorized("Invalid username or password")

    login_user(user)
    return jsonify(user=user.to_dict())


@bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify(success=True)


@bp.route("/me", methods=["GET"])
@login_required
def me():
    return jsonify(user={"username": current_user.username, "isAdmin": bool(current_user.is_admin)})
