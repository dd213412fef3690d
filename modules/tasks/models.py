"""SQLAlchemy models for the tasks domain."""

from categories import STATUS_TODO
from extensions import db
from utils import isoformat, utcnow


class Task(db.Model):
    """A time-boxed piece of work owned by one user."""

    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(150), nullable=False, index=True)  # owner username
    date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD
    category = db.Column(db.String(100), nullable=False)
    subcategory = db.Column(db.String(150), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    status_id = db.Column(db.Integer, nullable=False, default=STATUS_TODO)
    start_time = db.Column(db.String(5), nullable=False)  # HH:MM
    end_time = db.Column(db.String(5), nullable=False)
    duration_minutes = db.Column(db.Integer, nullable=False, default=0)
    carried_over = db.Column(db.Boolean)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    def to_dict(self) -> dict:
        data = {
            "_id": str(self.id),
            "userId": self.user_id,
            "date": self.date,
            "category": self.category,
            "subcategory": self.subcategory,
            "title": self.title,
            "description": self.description or "",
            "statusId": self.status_id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "durationMinutes": self.duration_minutes,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
        if self.carried_over is not None:
            data["carriedOver"] = self.carried_over
        return data

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Task {self.id} {self.user_id} {self.date}: {self.title}>"
