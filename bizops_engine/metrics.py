"""Dashboard analytics over transactions and tasks."""

from __future__ import annotations

from collections import Counter, defaultdict

from bizops_engine.schema import TaskRecord, TransactionRecord

RECENT_LIMIT = 5
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def revenue_summary(transactions: list[TransactionRecord]) -> dict:
    """Total income, total expenses (as a positive number) and net income."""

    total = sum(t.amount for t in transactions if t.amount > 0)
    expenses = abs(sum(t.amount for t in transactions if t.amount < 0))
    return {"total": float(total), "expenses": float(expenses), "net": float(total - expenses)}


def monthly_chart_data(transactions: list[TransactionRecord]) -> list[dict]:
    """Revenue, expenses and net per calendar month, oldest first."""

    by_month: dict[tuple[int, int], dict] = defaultdict(lambda: {"revenue": 0.0, "expenses": 0.0})
    for transaction in transactions:
        bucket = by_month[(transaction.date.year, transaction.date.month)]
        if transaction.amount > 0:
            bucket["revenue"] += transaction.amount
        else:
            bucket["expenses"] += abs(transaction.amount)

    rows = []
    for (year, month), totals in sorted(by_month.items()):
        rows.append(
            {
                "month": f"{_MONTHS[month - 1]} {year}",
                "revenue": totals["revenue"],
                "expenses": totals["expenses"],
                "net": totals["revenue"] - totals["expenses"],
            }
        )
    return rows


def category_breakdown(transactions: list[TransactionRecord]) -> list[dict]:
    """Income, expense and net per category, largest absolute net first."""

    by_category: dict[str, dict] = {}
    for transaction in transactions:
        totals = by_category.setdefault(transaction.category, {"income": 0.0, "expense": 0.0})
        if transaction.amount > 0:
            totals["income"] += transaction.amount
        else:
            totals["expense"] += abs(transaction.amount)

    rows = [
        {
            "category": category,
            "income": totals["income"],
            "expense": totals["expense"],
            "net": totals["income"] - totals["expense"],
        }
        for category, totals in by_category.items()
    ]
    return sorted(rows, key=lambda row: abs(row["net"]), reverse=True)


def task_stats(tasks: list[TaskRecord]) -> dict:
    counts = Counter(task.status for task in tasks)
    return {
        "total": len(tasks),
        "completed": counts.get("completed", 0),
        "pending": counts.get("pending", 0),
        "in_progress": counts.get("in_progress", 0),
        "overdue": counts.get("overdue", 0),
    }


def recent_transactions(transactions: list[TransactionRecord], limit: int = RECENT_LIMIT) -> list[TransactionRecord]:
    """Most recent transactions by date."""

    return sorted(transactions, key=lambda t: t.date, reverse=True)[:limit]


def compute_dashboard(
    transactions: list[TransactionRecord],
    tasks: list[TaskRecord],
    recent_limit: int = RECENT_LIMIT,
) -> dict:
    """Compute every dashboard section in one payload."""

    return {
        "revenue": revenue_summary(transactions),
        "chart_data": monthly_chart_data(transactions),
        "category_breakdown": category_breakdown(transactions),
        "task_stats": task_stats(tasks),
        "recent_transactions": recent_transactions(transactions, limit=recent_limit),
    }
