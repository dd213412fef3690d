# ui_routes.py -- small endpoints the client shell needs before anything else
from flask import Blueprint, jsonify
from flask_login import login_required

from categories import catalog

ui = Blueprint("ui", __name__)


@ui.route("/health")
def health():
    return jsonify(status="ok")


@ui.route("/categories")
@login_required
def categories():
    return jsonify(**catalog())
