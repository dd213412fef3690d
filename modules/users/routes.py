"""HTTP routes for account provisioning (admin only)."""

from flask import jsonify

from permissions import admin_required
from utils import json_body

from . import bp
from .store import UserStore


@bp.route("", methods=["GET"])
@admin_required
def list_users():
    return jsonify(users=UserStore().list_users())


@bp.route("", methods=["POST"])
@admin_required
def create_user():
    body = json_body()
    username = body.get("username")
    password = body.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        username, password = None, None

    user = UserStore().create_user(username, password, body.get("isAdmin") is True)
    return jsonify(user=user.to_dict()), 201
