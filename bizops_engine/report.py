"""Combine the heuristics and dashboard analytics into one report."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime

from bizops_engine.anomaly import detect_anomaly
from bizops_engine.categorizer import categorize_transaction
from bizops_engine.filtering import refresh_overdue_status
from bizops_engine.logging_setup import get_logger
from bizops_engine.metrics import compute_dashboard
from bizops_engine.notifications import LARGE_TRANSACTION_THRESHOLD, collect_notifications
from bizops_engine.prioritization import prioritize_tasks
from bizops_engine.schema import TaskRecord, TransactionRecord

logger = get_logger(__name__)


def build_report(
    transactions: list[TransactionRecord],
    tasks: list[TaskRecord],
    now: datetime,
    threshold: float = LARGE_TRANSACTION_THRESHOLD,
) -> dict:
    """Run every engine step over the given records.

    Open tasks past their due date are marked overdue before scoring and counting.
    """

    tasks = refresh_overdue_status(tasks, now)
    logger.info("Building report for %d transactions and %d tasks", len(transactions), len(tasks))
    return {
        "categories": [
            {
                "description": t.description,
                "amount": t.amount,
                "suggested_category": categorize_transaction(t.description, t.amount),
            }
            for t in transactions
        ],
        "anomalies": detect_anomaly(transactions),
        "priorities": prioritize_tasks(tasks, now),
        "dashboard": compute_dashboard(transactions, tasks),
        "notifications": collect_notifications(transactions, tasks, now, threshold),
    }


def to_jsonable(value):
    """Convert report values (dataclasses, dates) into JSON-serializable structures."""

    if hasattr(value, "__dataclass_fields__"):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value
