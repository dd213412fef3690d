"""HTTP routes for the tasks domain."""

from flask import jsonify, request
from flask_login import login_required

from permissions import current_identity, record_scope, resolve_list_scope, task_owner_for_create
from utils import json_body, require_id

from . import bp
from .store import TaskFilters, TaskStore


@bp.route("", methods=["GET"])
@login_required
def list_tasks():
    identity = current_identity()
    scope = resolve_list_scope(
        TaskStore(), identity,
        request.args.get("viewMode"), request.args.get("viewUser"),
    )
    tasks = scope.list_tasks(TaskFilters.from_args(request.args))
    return jsonify(tasks=[t.to_dict() for t in tasks])


@bp.route("", methods=["POST"])
@login_required
def create_task():
    identity = current_identity()
    body = json_body()

    task = TaskStore().create_task(
        owner=task_owner_for_create(identity, body.get("userId")),
        date=body.get("date"),
        category=body.get("category"),
        subcategory=body.get("subcategory"),
        title=body.get("title"),
        description=body.get("description") or "",
        status_id=body.get("statusId"),
        start_time=body.get("startTime"),
        end_time=body.get("endTime"),
    )
    return jsonify(task=task.to_dict()), 201


@bp.route("/<task_id>", methods=["GET"])
@login_required
def get_task(task_id):
    require_id(task_id, "Invalid task ID")
    task = record_scope(TaskStore(), current_identity()).get_task(task_id)
    return jsonify(task=task.to_dict())


@bp.route("/<task_id>", methods=["PUT"])
@login_required
def update_task(task_id):
    require_id(task_id, "Invalid task ID")
    identity = current_identity()
    body = json_body()

    task = record_scope(TaskStore(), identity).update_task(task_id, body)
    return jsonify(task=task.to_dict())


@bp.route("/<task_id>", methods=["DELETE"])
@login_required
def delete_task(task_id):
    require_id(task_id, "Invalid task ID")
    record_scope(TaskStore(), current_identity()).delete_task(task_id)
    return jsonify(success=True)
