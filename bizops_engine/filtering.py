"""In-memory listing filters for transactions and tasks."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from bizops_engine.prioritization import as_datetime
from bizops_engine.schema import TaskRecord, TransactionRecord


def filter_transactions(
    transactions: list[TransactionRecord],
    search: Optional[str] = None,
    category: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> list[TransactionRecord]:
    """Filter by free-text search, exact category and inclusive date range, newest first.

    ``search`` matches case-insensitively against description and category.
    """

    needle = search.lower() if search else None

    def keep(transaction: TransactionRecord) -> bool:
        if needle and needle not in transaction.description.lower() and needle not in transaction.category.lower():
            return False
        if category and transaction.category != category:
            return False
        if start_date is not None and transaction.date < start_date:
            return False
        if end_date is not None and transaction.date > end_date:
            return False
        return True

    return sorted((t for t in transactions if keep(t)), key=lambda t: t.date, reverse=True)


def _due_sort_key(task: TaskRecord) -> tuple[int, datetime]:
    if task.due_date is None:
        return 1, datetime.min
    return 0, as_datetime(task.due_date)


def filter_tasks(
    tasks: list[TaskRecord],
    status: Optional[str] = None,
    priority: Optional[str] = None,
) -> list[TaskRecord]:
    """Filter by exact status and priority, earliest due date first and undated tasks last."""

    selected = [
        task
        for task in tasks
        if (not status or task.status == status) and (not priority or task.priority == priority)
    ]
    return sorted(selected, key=_due_sort_key)


def refresh_overdue_status(tasks: list[TaskRecord], now: datetime) -> list[TaskRecord]:
    """Return the tasks with every open task past its due date marked ``overdue``."""

    refreshed = []
    for task in tasks:
        if task.due_date is not None and task.status != "completed" and as_datetime(task.due_date) < now:
            task = replace(task, status="overdue")
        refreshed.append(task)
    return refreshed
