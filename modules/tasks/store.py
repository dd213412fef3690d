"""Task store: CRUD and filtered reads over tasks, always through an owner scope.

``TaskStore.scoped_to(owner)`` pins every read and write to one owner;
``TaskStore.unscoped()`` is the admin path and sees every owner.
"""

from dataclasses import dataclass

from flask import current_app

from categories import STATUSES, STATUS_TODO
from errors import NotFound, ValidationError
from extensions import db
from utils import normalize_clock, normalize_date, parse_clock, require_id, utcnow

from .models import Task

MINUTES_PER_DAY = 24 * 60

REQUIRED_FIELDS = ("date", "category", "subcategory", "title", "start_time", "end_time")

# wire name -> column; anything else in an update payload is dropped
UPDATABLE_FIELDS = {
    "date": "date",
    "category": "category",
    "subcategory": "subcategory",
    "title": "title",
    "description": "description",
    "statusId": "status_id",
    "startTime": "start_time",
    "endTime": "end_time",
    "carriedOver": "carried_over",
}

# identity / derived fields a client may echo back but never changes
PROTECTED_FIELDS = ("_id", "id", "userId", "createdAt", "updatedAt", "durationMinutes")


def calculate_duration(start_time: str | None, end_time: str | None) -> int:
    """Minutes between two ``HH:MM`` times; an earlier end means the task ran overnight."""
    if not start_time or not end_time:
        return 0
    start = parse_clock(start_time, "startTime")
    end = parse_clock(end_time, "endTime")
    if end < start:
        end += MINUTES_PER_DAY
    return max(0, end - start)


def parse_status(value) -> int:
    if isinstance(value, bool):
        raise ValidationError("statusId must be one of 1, 2, 3, 4")
    try:
        status_id = int(value)
    except (TypeError, ValueError):
        raise ValidationError("statusId must be one of 1, 2, 3, 4") from None
    if status_id not in STATUSES:
        raise ValidationError("statusId must be one of 1, 2, 3, 4")
    return status_id


@dataclass
class TaskFilters:
    date: str | None = None
    category: str | None = None
    status_id: int | None = None
    start_date: str | None = None
    end_date: str | None = None

    @classmethod
    def from_args(cls, args) -> "TaskFilters":
        """Build filters from query-string args; blank values mean "no filter"."""
        status = (args.get("statusId") or "").strip()
        if status:
            try:
                status_id = int(status)
            except ValueError:
                raise ValidationError("statusId must be an integer") from None
        else:
            status_id = None
        return cls(
            date=(args.get("date") or "").strip() or None,
            category=(args.get("category") or "").strip() or None,
            status_id=status_id,
            start_date=(args.get("startDate") or "").strip() or None,
            end_date=(args.get("endDate") or "").strip() or None,
        )

    def apply(self, query):
        # a complete range overrides the exact date
        if self.start_date and self.end_date:
            query = query.filter(Task.date >= self.start_date, Task.date <= self.end_date)
        elif self.date:
            query = query.filter(Task.date == self.date)
        if self.category:
            query = query.filter(Task.category == self.category)
        if self.status_id:
            query = query.filter(Task.status_id == self.status_id)
        return query


class TaskScope:
    """Task operations bound to one owner, or to none for the admin path."""

    def __init__(self, store: "TaskStore", owner: str | None):
        self.store = store
        self.owner = owner

    @property
    def is_unscoped(self) -> bool:
        return self.owner is None

    def _query(self):
        query = self.store.session.query(Task)
        if self.owner is not None:
            query = query.filter(Task.user_id == self.owner)
        return query

    def list_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        if self.owner is None:
            return self.store.get_all_tasks(filters)
        return self.store.get_tasks_by_owner(self.owner, filters)

    def get_task(self, task_id) -> Task:
        pk = require_id(task_id, "Invalid task ID")
        task = self._query().filter(Task.id == pk).first()
        if task is None:
            raise NotFound("Task not found")
        return task

    def update_task(self, task_id, fields: dict) -> Task:
        task = self.get_task(task_id)
        changes = _clean_update(fields)

        if "start_time" in changes or "end_time" in changes:
            start = changes.get("start_time") or task.start_time
            end = changes.get("end_time") or task.end_time
            changes["duration_minutes"] = calculate_duration(start, end)

        for column, value in changes.items():
            setattr(task, column, value)
        task.updated_at = utcnow()
        self.store.session.commit()
        return task

    def delete_task(self, task_id) -> bool:
        task = self.get_task(task_id)
        owner = task.user_id
        self.store.session.delete(task)
        self.store.session.commit()
        current_app.logger.info("Deleted task %s of %s", task_id, owner)
        return True

    def count_by_status(self) -> dict[int, int]:
        counts = {sid: 0 for sid in STATUSES}
        rows = (self._query()
                .with_entities(Task.status_id, db.func.count(Task.id))
                .group_by(Task.status_id)
                .all())
        for status_id, count in rows:
            counts[status_id] = count
        return counts


class TaskStore:
    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def scoped_to(self, owner: str) -> TaskScope:
        if not owner:
            raise ValueError("owner is required for a scoped task view")
        return TaskScope(self, owner)

    def unscoped(self) -> TaskScope:
        return TaskScope(self, None)

    def create_task(self, owner: str, date: str, category: str, subcategory: str,
                    title: str, start_time: str, end_time: str,
                    description: str | None = "", status_id=None) -> Task:
        values = {
            "date": date, "category": category, "subcategory": subcategory,
            "title": title, "start_time": start_time, "end_time": end_time,
        }
        if not owner or any(not isinstance(values[f], str) or not values[f].strip()
                            for f in REQUIRED_FIELDS):
            raise ValidationError("Missing required fields")
        date = normalize_date(date)
        start_time = normalize_clock(start_time, "startTime")
        end_time = normalize_clock(end_time, "endTime")

        task = Task(
            user_id=owner,
            date=date,
            category=category,
            subcategory=subcategory,
            title=title,
            description=description or "",
            status_id=parse_status(status_id) if status_id else STATUS_TODO,
            start_time=start_time,
            end_time=end_time,
            duration_minutes=calculate_duration(start_time, end_time),
        )
        now = utcnow()
        task.created_at = now
        task.updated_at = now
        self.session.add(task)
        self.session.commit()
        return task

    def _ordered(self, query, filters: TaskFilters | None):
        if filters is not None:
            query = filters.apply(query)
        return query.order_by(Task.date.desc(), Task.created_at.desc(), Task.id.desc()).all()

    def get_tasks_by_owner(self, owner: str, filters: TaskFilters | None = None) -> list[Task]:
        return self._ordered(self.session.query(Task).filter(Task.user_id == owner), filters)

    def get_all_tasks(self, filters: TaskFilters | None = None) -> list[Task]:
        return self._ordered(self.session.query(Task), filters)


def _clean_update(fields: dict) -> dict:
    """Wire payload -> validated column changes. Protected and unknown keys are dropped."""
    changes = {}
    for key, value in fields.items():
        if key in PROTECTED_FIELDS or key not in UPDATABLE_FIELDS:
            continue
        column = UPDATABLE_FIELDS[key]

        if column == "status_id":
            value = parse_status(value)
        elif column == "description":
            value = "" if value is None else str(value)
        elif column == "carried_over":
            if value is not None and not isinstance(value, bool):
                raise ValidationError("carriedOver must be a boolean")
        else:
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{key} cannot be empty")
            if column == "date":
                value = normalize_date(value)
            elif column in ("start_time", "end_time"):
                value = normalize_clock(value, key)
        changes[column] = value
    return changes
