"""HTTP tests for /reports."""

import io

from openpyxl import load_workbook


def _seed(client, task_payload, **extra):
    client.post("/tasks", json=task_payload(date="2025-03-03", statusId=3, **extra))
    client.post("/tasks", json=task_payload(date="2025-03-05", startTime="22:00", endTime="02:00", **extra))
    client.post("/tasks", json=task_payload(date="2025-03-12", **extra))


def test_weekly_summary(client, alice, login, task_payload):
    login(alice)
    _seed(client, task_payload)

    resp = client.get("/reports/summary?range=weekly&baseDate=2025-03-05")
    assert resp.status_code == 200
    data = resp.get_json()

    assert (data["startDate"], data["endDate"]) == ("2025-03-03", "2025-03-09")
    assert data["stats"]["total"] == 2
    assert data["stats"]["completed"] == 1
    assert data["stats"]["totalMinutes"] == 480 + 240
    assert data["stats"]["completionRate"] == 50.0
    assert data["byCategory"] == [{"category": "HR", "count": 2, "minutes": 720}]


def test_summary_is_scoped(client, alice, boss, login, task_payload):
    login(boss)
    _seed(client, task_payload, userId="alice")

    own = client.get("/reports/summary?range=monthly&baseDate=2025-03-01").get_json()
    assert own["stats"]["total"] == 0

    everyone = client.get("/reports/summary?range=monthly&baseDate=2025-03-01&viewMode=all").get_json()
    assert everyone["stats"]["total"] == 3

    login(alice)
    mine = client.get("/reports/summary?range=monthly&baseDate=2025-03-01&viewMode=all").get_json()
    assert mine["stats"]["total"] == 3


def test_summary_validation(client, alice, login):
    login(alice)
    assert client.get("/reports/summary?range=yearly").status_code == 400
    assert client.get("/reports/summary?baseDate=tomorrow").status_code == 400


def test_export_xlsx(client, alice, login, task_payload):
    login(alice)
    _seed(client, task_payload)

    resp = client.get("/reports/export.xlsx?range=weekly&baseDate=2025-03-05")
    assert resp.status_code == 200
    assert "attachment; filename=task_report_weekly_" in resp.headers["Content-Disposition"]

    wb = load_workbook(io.BytesIO(resp.data))
    assert wb.sheetnames == ["Summary", "Tasks"]
    rows = list(wb["Tasks"].iter_rows(values_only=True))
    assert rows[0][0] == "DATE"
    assert [r[0] for r in rows[1:]] == ["2025-03-05", "2025-03-03"]
    assert rows[1][8] == "4h 0m"


def test_export_csv(client, alice, login, task_payload):
    login(alice)
    _seed(client, task_payload)

    resp = client.get("/reports/export.csv?range=daily&baseDate=2025-03-03")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"].startswith("text/csv")
    text = resp.data.decode("utf-8-sig")
    lines = text.strip().split("\n")
    assert lines[0].startswith("DATE,USER,CATEGORY")
    assert len(lines) == 2
    assert "Done" in lines[1]
