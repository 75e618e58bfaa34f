"""Task urgency scoring from priority and due-date proximity."""

from __future__ import annotations

from datetime import date, datetime, time
from math import ceil

from bizops_engine.logging_setup import get_logger
from bizops_engine.schema import PriorityResult, TaskRecord

logger = get_logger(__name__)

PRIORITY_WEIGHTS = {"urgent": 100, "high": 50, "medium": 25, "low": 10}

_SECONDS_PER_DAY = 86400.0


def as_datetime(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def days_until_due(due_date: datetime | date, now: datetime) -> int:
    """Whole days until ``due_date``, rounded up."""

    delta = as_datetime(due_date) - now
    return int(ceil(delta.total_seconds() / _SECONDS_PER_DAY))


def due_date_weight(days: int) -> tuple[int, str]:
    """Return the due-date score bonus and advisory text for ``days`` remaining."""

    if days < 0:
        return 200, "This task is overdue!"
    if days <= 1:
        return 150, "Due today or tomorrow"
    if days <= 3:
        return 100, "Due within 3 days"
    if days <= 7:
        return 50, "Due within a week"
    return 0, ""


def score_task(task: TaskRecord, now: datetime) -> PriorityResult:
    """Score a single task; unrecognized priorities contribute nothing."""

    score = PRIORITY_WEIGHTS.get(task.priority, 0)
    suggestion = ""
    if task.due_date is not None:
        bonus, suggestion = due_date_weight(days_until_due(task.due_date, now))
        score += bonus
    return PriorityResult(task=task, score=score, suggestion=suggestion)


def prioritize_tasks(tasks: list[TaskRecord], now: datetime) -> list[PriorityResult]:
    """Score every open task and order by descending urgency, ties kept in input order."""

    open_tasks = [task for task in tasks if task.status != "completed"]
    unknown = sum(1 for task in open_tasks if task.priority not in PRIORITY_WEIGHTS)
    if unknown:
        logger.debug("%d task(s) with unrecognized priority scored without priority weight", unknown)

    results = [score_task(task, now) for task in open_tasks]
    return sorted(results, key=lambda result: -result.score)
