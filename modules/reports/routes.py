"""HTTP routes for reports: summary stats and spreadsheet exports."""

from datetime import date

from flask import jsonify, make_response, request
from flask_login import login_required

from modules.tasks.store import TaskFilters, TaskStore
from permissions import current_identity, resolve_list_scope
from utils import parse_date, utcnow

from . import bp
from .export import build_csv, build_workbook
from .summary import breakdown_by_category, summarize, window_strings

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _report_tasks():
    """Tasks of the requested window, scoped exactly like GET /tasks."""
    report_range = (request.args.get("range") or "weekly").strip()
    base_arg = (request.args.get("baseDate") or "").strip()
    base = parse_date(base_arg, "baseDate") if base_arg else date.today()
    start, end = window_strings(report_range, base)

    scope = resolve_list_scope(
        TaskStore(), current_identity(),
        request.args.get("viewMode"), request.args.get("viewUser"),
    )
    tasks = scope.list_tasks(TaskFilters(start_date=start, end_date=end))
    return tasks, {"range": report_range, "startDate": start, "endDate": end}


def _attachment(data: bytes, content_type: str, filename: str):
    resp = make_response(data)
    resp.headers["Content-Type"] = content_type
    resp.headers["Content-Disposition"] = f"attachment; filename={filename}"
    return resp


@bp.route("/summary")
@login_required
def summary():
    tasks, meta = _report_tasks()
    return jsonify(
        **meta,
        stats=summarize(tasks),
        byCategory=breakdown_by_category(tasks),
    )


@bp.route("/export.xlsx")
@login_required
def export_xlsx():
    tasks, meta = _report_tasks()
    data = build_workbook(tasks, summarize(tasks), breakdown_by_category(tasks), meta)
    return _attachment(data, XLSX_MIMETYPE,
                       f"task_report_{meta['range']}_{utcnow():%Y%m%d_%H%M%S}.xlsx")


@bp.route("/export.csv")
@login_required
def export_csv():
    tasks, meta = _report_tasks()
    return _attachment(build_csv(tasks), "text/csv; charset=utf-8",
                       f"task_report_{meta['range']}_{utcnow():%Y%m%d_%H%M%S}.csv")
