"""HTTP routes for the weekly planner. Notes are always the caller's own."""

from flask import jsonify, request
from flask_login import login_required

from errors import ValidationError
from permissions import current_identity
from utils import json_body, require_id

from . import bp
from .store import WeeklyNoteStore


@bp.route("", methods=["GET"])
@login_required
def list_notes():
    username = current_identity().username
    week_start = (request.args.get("weekStart") or "").strip()
    if not week_start:
        raise ValidationError("weekStart parameter required")

    notes = WeeklyNoteStore().get_notes_by_owner_and_week(username, week_start)
    return jsonify(notes=[n.to_dict() for n in notes])


@bp.route("", methods=["POST"])
@login_required
def create_note():
    username = current_identity().username
    body = json_body()
    note = WeeklyNoteStore().create_note(
        username,
        body.get("dayOfWeek"),
        body.get("text"),
        body.get("weekStart"),
    )
    return jsonify(note=note.to_dict()), 201


@bp.route("", methods=["PUT"])
@login_required
def update_note():
    username = current_identity().username
    body = json_body()
    if not body.get("id"):
        raise ValidationError("id is required")
    require_id(body["id"], "Invalid note ID")

    updates = {}
    if isinstance(body.get("done"), bool):
        updates["done"] = body["done"]
    if body.get("text"):
        updates["text"] = body["text"]

    note = WeeklyNoteStore().update_note(body["id"], updates, username)
    return jsonify(note=note.to_dict())


@bp.route("", methods=["DELETE"])
@login_required
def delete_notes():
    username = current_identity().username
    note_id = request.args.get("id")
    day_of_week = request.args.get("dayOfWeek")
    week_start = request.args.get("weekStart")
    store = WeeklyNoteStore()

    if note_id:
        require_id(note_id, "Invalid note ID")
        store.delete_note(note_id, username)
        return jsonify(success=True)

    if day_of_week and week_start:
        count = store.clear_day_notes(username, day_of_week, week_start)
        return jsonify(success=True, deletedCount=count)

    raise ValidationError("id or (dayOfWeek and weekStart) required")
