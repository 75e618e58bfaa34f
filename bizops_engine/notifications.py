"""Notification rules raised when transactions and tasks are recorded."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from bizops_engine.logging_setup import get_logger
from bizops_engine.prioritization import as_datetime
from bizops_engine.schema import Notification, TaskRecord, TransactionRecord

logger = get_logger(__name__)

LARGE_TRANSACTION_THRESHOLD = 10000.0
DUE_SOON_WINDOW = timedelta(hours=24)


def large_transaction_notification(
    transaction: TransactionRecord, threshold: float = LARGE_TRANSACTION_THRESHOLD
) -> Optional[Notification]:
    """Return a notification when the transaction size strictly exceeds ``threshold``."""

    amount = abs(transaction.amount)
    if amount <= threshold:
        return None

    kind = "income" if transaction.amount > 0 else "expense"
    return Notification(
        kind="transaction",
        title="Large Transaction",
        message=f"A {kind} of {amount:,.2f} was recorded in {transaction.category}",
    )


def urgent_task_notification(task: TaskRecord, now: datetime) -> Optional[Notification]:
    """Return a notification for urgent tasks and tasks due within 24 hours of ``now`` (inclusive)."""

    due_soon = task.due_date is not None and as_datetime(task.due_date) <= now + DUE_SOON_WINDOW
    if task.priority != "urgent" and not due_soon:
        return None

    return Notification(
        kind="task",
        title="New Urgent Task",
        message=f'Task "{task.title}" is due soon',
    )


def collect_notifications(
    transactions: list[TransactionRecord],
    tasks: list[TaskRecord],
    now: datetime,
    threshold: float = LARGE_TRANSACTION_THRESHOLD,
) -> list[Notification]:
    """Transaction notices in input order, then notices for open tasks in input order."""

    notices = []
    for transaction in transactions:
        notice = large_transaction_notification(transaction, threshold)
        if notice is not None:
            notices.append(notice)
    for task in tasks:
        if task.status == "completed":
            continue
        notice = urgent_task_notification(task, now)
        if notice is not None:
            notices.append(notice)
    logger.debug("Raised %d notification(s)", len(notices))
    return notices
