"""Report windows and in-memory aggregation over task lists."""

import calendar
from datetime import date, timedelta

from categories import STATUS_DONE, STATUS_ON_HOLD, STATUS_PENDING, STATUS_TODO
from errors import ValidationError
from modules.weekly_notes.store import week_start_for
from utils import DATE_FORMAT

REPORT_RANGES = ("daily", "weekly", "monthly")


def report_window(report_range: str, base: date) -> tuple[date, date]:
    """Inclusive (start, end) of the daily / weekly / monthly window around ``base``.

    Weeks run Monday to Sunday, matching the planner's ``weekStart``, not the
    Sunday-based weeks of the old reports screen.
    """
    if report_range == "daily":
        return base, base
    if report_range == "weekly":
        start = week_start_for(base)
        return start, start + timedelta(days=6)
    if report_range == "monthly":
        last_day = calendar.monthrange(base.year, base.month)[1]
        return base.replace(day=1), base.replace(day=last_day)
    raise ValidationError(f"range must be one of: {', '.join(REPORT_RANGES)}")


def window_strings(report_range: str, base: date) -> tuple[str, str]:
    start, end = report_window(report_range, base)
    return start.strftime(DATE_FORMAT), end.strftime(DATE_FORMAT)


def format_duration(minutes: int) -> str:
    hours, mins = divmod(int(minutes or 0), 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def summarize(tasks) -> dict:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.status_id == STATUS_DONE)
    total_minutes = sum(t.duration_minutes or 0 for t in tasks)
    return {
        "total": total,
        "todo": sum(1 for t in tasks if t.status_id == STATUS_TODO),
        "pending": sum(1 for t in tasks if t.status_id == STATUS_PENDING),
        "completed": completed,
        "onHold": sum(1 for t in tasks if t.status_id == STATUS_ON_HOLD),
        "totalMinutes": total_minutes,
        "totalHours": total_minutes // 60,
        "remainingMinutes": total_minutes % 60,
        "completionRate": round(completed / total * 100, 1) if total else 0,
    }


def breakdown_by_category(tasks) -> list[dict]:
    buckets: dict[str, dict] = {}
    for t in tasks:
        row = buckets.setdefault(t.category, {"category": t.category, "count": 0, "minutes": 0})
        row["count"] += 1
        row["minutes"] += t.duration_minutes or 0
    return sorted(buckets.values(), key=lambda r: (-r["minutes"], r["category"]))
