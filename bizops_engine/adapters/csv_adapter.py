"""CSV adapter for transaction and task records."""

from __future__ import annotations

import csv
from datetime import date, datetime
from math import isfinite

from bizops_engine.schema import PRIORITIES, STATUSES, TaskRecord, TransactionRecord, to_naive_utc

_TRANSACTION_FIELDS = {"description", "amount", "date"}
_TASK_FIELDS = {"priority", "status"}


def _parse_transaction_row(row: dict, row_number: int) -> TransactionRecord:
    missing = sorted(field for field in _TRANSACTION_FIELDS if not row.get(field))
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        when = date.fromisoformat(row["date"].strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed date") from exc

    try:
        amount = float(row["amount"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: invalid amount") from exc
    if not isfinite(amount):
        raise ValueError(f"Row {row_number}: amount must be finite")

    category_raw = row.get("category")
    return TransactionRecord(
        description=row["description"].strip(),
        amount=amount,
        date=when,
        category=category_raw.strip() if category_raw else "",
    )


def _parse_task_row(row: dict, row_number: int) -> TaskRecord:
    missing = sorted(field for field in _TASK_FIELDS if not row.get(field))
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    priority = row["priority"].strip()
    if priority not in PRIORITIES:
        raise ValueError(f"Row {row_number}: invalid priority '{priority}'")

    status = row["status"].strip()
    if status not in STATUSES:
        raise ValueError(f"Row {row_number}: invalid status '{status}'")

    due_raw = row.get("due_date")
    due_date = None
    if due_raw not in (None, ""):
        try:
            due_date = to_naive_utc(datetime.fromisoformat(due_raw.strip()))
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Row {row_number}: malformed due_date") from exc

    title_raw = row.get("title")
    return TaskRecord(
        due_date=due_date,
        priority=priority,
        status=status,
        title=title_raw.strip() if title_raw else "",
    )


def _read_rows(file_path: str, parse_row) -> list:
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []
        return [parse_row(row, row_number) for row_number, row in enumerate(reader, start=2)]


def parse_transactions(file_path: str) -> list[TransactionRecord]:
    """Parse CSV file into a list of transaction records."""

    return _read_rows(file_path, _parse_transaction_row)


def parse_tasks(file_path: str) -> list[TaskRecord]:
    """Parse CSV file into a list of task records."""

    return _read_rows(file_path, _parse_task_row)
