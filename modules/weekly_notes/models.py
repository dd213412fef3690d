"""SQLAlchemy models for the weekly planner."""

from extensions import db
from utils import isoformat, utcnow


class WeeklyNote(db.Model):
    """Sticky note pinned to one weekday of one planner week."""

    __tablename__ = "weekly_notes"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(150), nullable=False)
    day_of_week = db.Column(db.String(10), nullable=False)  # Monday..Sunday
    week_start = db.Column(db.String(10), nullable=False)  # Monday, YYYY-MM-DD
    text = db.Column(db.Text, nullable=False)
    done = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    __table_args__ = (
        db.Index("ix_weekly_notes_owner_week", "user_id", "week_start"),
    )

    def to_dict(self) -> dict:
        return {
            "_id": str(self.id),
            "userId": self.user_id,
            "dayOfWeek": self.day_of_week,
            "weekStart": self.week_start,
            "text": self.text,
            "done": bool(self.done),
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<WeeklyNote {self.id} {self.user_id} {self.week_start} {self.day_of_week}>"
