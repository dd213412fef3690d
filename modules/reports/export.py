"""Spreadsheet exports of a report window (Excel via openpyxl, and CSV)."""

import csv
import io

from openpyxl import Workbook
from openpyxl.styles import Font

from categories import status_name

from .summary import format_duration

TASK_HEADER = ["DATE", "USER", "CATEGORY", "SUBCATEGORY", "TITLE", "STATUS",
               "START", "END", "DURATION", "DESCRIPTION"]


def _task_row(t) -> list:
    return [
        t.date,
        t.user_id,
        t.category,
        t.subcategory,
        t.title,
        status_name(t.status_id),
        t.start_time,
        t.end_time,
        format_duration(t.duration_minutes),
        t.description or "",
    ]


def build_workbook(tasks, stats: dict, by_category: list[dict], meta: dict) -> bytes:
    wb = Workbook()

    ws = wb.active
    ws.title = "Summary"
    ws.append(["Task Manager Report"])
    ws["A1"].font = Font(bold=True, size=14)
    ws.append(["Report Type", meta["range"].capitalize()])
    ws.append(["Period", f"{meta['startDate']} .. {meta['endDate']}"])
    ws.append([])
    for label, key in (("Total Tasks", "total"), ("Completed", "completed"),
                       ("Pending", "pending"), ("To Do", "todo"), ("On Hold", "onHold")):
        ws.append([label, stats[key]])
    ws.append(["Total Time", format_duration(stats["totalMinutes"])])
    ws.append(["Completion Rate", f"{stats['completionRate']}%"])
    ws.append([])
    ws.append(["CATEGORY", "TASKS", "TIME"])
    for row in by_category:
        ws.append([row["category"], row["count"], format_duration(row["minutes"])])

    sheet = wb.create_sheet("Tasks")
    sheet.append(TASK_HEADER)
    for cell in sheet[1]:
        cell.font = Font(bold=True)
    for t in tasks:
        sheet.append(_task_row(t))

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def build_csv(tasks) -> bytes:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(TASK_HEADER)
    for t in tasks:
        writer.writerow(_task_row(t))
    # BOM so Excel picks up UTF-8
    return ("\ufeff" + out.getvalue()).encode("utf-8")
