from datetime import date

from bizops_engine.metrics import (
    category_breakdown,
    compute_dashboard,
    monthly_chart_data,
    recent_transactions,
    revenue_summary,
    task_stats,
)
from bizops_engine.schema import TaskRecord, TransactionRecord


def sample_transactions():
    return [
        TransactionRecord("Client invoice", 5000.0, date(2025, 1, 15), "Revenue"),
        TransactionRecord("Office rent", -2000.0, date(2025, 1, 1), "Rent"),
        TransactionRecord("Year end bonus", -1000.0, date(2024, 12, 20), "Payroll"),
        TransactionRecord("Consulting", 1500.0, date(2025, 2, 3), "Revenue"),
        TransactionRecord("Hotel", -300.0, date(2025, 2, 10), "Travel"),
    ]


def test_revenue_summary():
    assert revenue_summary(sample_transactions()) == {"total": 6500.0, "expenses": 3300.0, "net": 3200.0}


def test_monthly_chart_is_chronological_across_years():
    rows = monthly_chart_data(sample_transactions())
    assert [row["month"] for row in rows] == ["Dec 2024", "Jan 2025", "Feb 2025"]
    assert rows[1] == {"month": "Jan 2025", "revenue": 5000.0, "expenses": 2000.0, "net": 3000.0}


def test_category_breakdown_sorted_by_absolute_net():
    rows = category_breakdown(sample_transactions())
    assert [row["category"] for row in rows] == ["Revenue", "Rent", "Payroll", "Travel"]
    assert rows[0] == {"category": "Revenue", "income": 6500.0, "expense": 0.0, "net": 6500.0}
    assert rows[1]["net"] == -2000.0


def test_task_stats():
    tasks = [
        TaskRecord(None, "low", "pending"),
        TaskRecord(None, "low", "completed"),
        TaskRecord(None, "high", "in_progress"),
        TaskRecord(None, "high", "overdue"),
        TaskRecord(None, "urgent", "pending"),
    ]
    assert task_stats(tasks) == {"total": 5, "completed": 1, "pending": 2, "in_progress": 1, "overdue": 1}


def test_recent_transactions_newest_first():
    recent = recent_transactions(sample_transactions(), limit=2)
    assert [t.description for t in recent] == ["Hotel", "Consulting"]


def test_empty_dashboard():
    dashboard = compute_dashboard([], [])
    assert dashboard["revenue"] == {"total": 0.0, "expenses": 0.0, "net": 0.0}
    assert dashboard["chart_data"] == []
    assert dashboard["category_breakdown"] == []
    assert dashboard["task_stats"]["total"] == 0
    assert dashboard["recent_transactions"] == []
