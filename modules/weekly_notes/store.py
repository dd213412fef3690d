"""Weekly note store. Every operation is pinned to one owner."""

from datetime import date, timedelta

from errors import NotFound, ValidationError
from extensions import db
from utils import DATE_FORMAT, parse_date, require_id, utcnow

from .models import WeeklyNote

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def week_start_for(day: date) -> date:
    """Monday of the week ``day`` falls in."""
    return day - timedelta(days=day.weekday())


def check_week_start(value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("weekStart is required")
    parsed = parse_date(value.strip(), "weekStart")
    if parsed.weekday() != 0:
        raise ValidationError("weekStart must be a Monday")
    return parsed.strftime(DATE_FORMAT)


def check_day_of_week(value) -> str:
    if value not in WEEKDAYS:
        raise ValidationError(f"dayOfWeek must be one of: {', '.join(WEEKDAYS)}")
    return value


class WeeklyNoteStore:
    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def _owned(self, note_id, owner: str) -> WeeklyNote:
        pk = require_id(note_id, "Invalid note ID")
        note = (self.session.query(WeeklyNote)
                .filter(WeeklyNote.id == pk, WeeklyNote.user_id == owner)
                .first())
        if note is None:
            raise NotFound("Note not found")
        return note

    def create_note(self, owner: str, day_of_week: str, text: str, week_start: str) -> WeeklyNote:
        if not owner or not day_of_week or not week_start or not isinstance(text, str) or not text.strip():
            raise ValidationError("dayOfWeek, text, and weekStart are required")
        note = WeeklyNote(
            user_id=owner,
            day_of_week=check_day_of_week(day_of_week),
            week_start=check_week_start(week_start),
            text=text,
            done=False,
        )
        now = utcnow()
        note.created_at = now
        note.updated_at = now
        self.session.add(note)
        self.session.commit()
        return note

    def get_notes_by_owner_and_week(self, owner: str, week_start: str) -> list[WeeklyNote]:
        week_start = check_week_start(week_start)
        return (self.session.query(WeeklyNote)
                .filter(WeeklyNote.user_id == owner, WeeklyNote.week_start == week_start)
                .order_by(WeeklyNote.created_at.asc(), WeeklyNote.id.asc())
                .all())

    def update_note(self, note_id, updates: dict, owner: str) -> WeeklyNote:
        """Apply ``done`` and/or ``text``; a blank text leaves the note's text as is."""
        done = updates.get("done")
        if done is not None and not isinstance(done, bool):
            raise ValidationError("done must be a boolean")
        text = updates.get("text")
        if text is not None and not isinstance(text, str):
            raise ValidationError("text must be a string")

        note = self._owned(note_id, owner)
        if done is not None:
            note.done = done
        if text:
            note.text = text
        note.updated_at = utcnow()
        self.session.commit()
        return note

    def delete_note(self, note_id, owner: str) -> bool:
        note = self._owned(note_id, owner)
        self.session.delete(note)
        self.session.commit()
        return True

    def clear_day_notes(self, owner: str, day_of_week: str, week_start: str) -> int:
        deleted = (self.session.query(WeeklyNote)
                   .filter(WeeklyNote.user_id == owner,
                           WeeklyNote.day_of_week == check_day_of_week(day_of_week),
                           WeeklyNote.week_start == check_week_start(week_start))
                   .delete(synchronize_session=False))
        self.session.commit()
        return deleted

    def clear_week_notes(self, owner: str, week_start: str) -> int:
        deleted = (self.session.query(WeeklyNote)
                   .filter(WeeklyNote.user_id == owner,
                           WeeklyNote.week_start == check_week_start(week_start))
                   .delete(synchronize_session=False))
        self.session.commit()
        return deleted
