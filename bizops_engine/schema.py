"""Core data schema for transactions, tasks and engine results."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Union

PRIORITIES = ("low", "medium", "high", "urgent")
STATUSES = ("pending", "in_progress", "completed", "overdue")


@dataclass(frozen=True)
class TransactionRecord:
    """Bookkeeping entry; positive amounts are income, negative are expenses."""

    description: str
    amount: float
    date: date
    category: str = ""


@dataclass(frozen=True)
class TaskRecord:
    """Task tracked on the dashboard."""

    due_date: Optional[Union[datetime, date]]
    priority: str
    status: str
    title: str = ""


@dataclass(frozen=True)
class AnomalyFinding:
    transaction: TransactionRecord
    reason: str


@dataclass(frozen=True)
class PriorityResult:
    task: TaskRecord
    score: int
    suggestion: str


@dataclass(frozen=True)
class ClientRecord:
    """Invoiced client with the amount billed and the amount received so far."""

    name: str
    email: str = ""
    company_name: str = ""
    total_due: float = 0.0
    total_paid: float = 0.0


@dataclass(frozen=True)
class Notification:
    kind: str
    title: str
    message: str


def to_naive_utc(value: datetime) -> datetime:
    """Drop the offset of an aware datetime after converting it to UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
