"""JSON adapter for transaction and task records."""

from __future__ import annotations

import json
from datetime import date, datetime
from math import isfinite

from bizops_engine.schema import PRIORITIES, STATUSES, TaskRecord, TransactionRecord, to_naive_utc

_TRANSACTION_FIELDS = {"description", "amount", "date"}
_TASK_FIELDS = {"priority", "status"}


def _missing(item: dict, required: set[str]) -> list[str]:
    return sorted(field for field in required if item.get(field) in (None, ""))


def _parse_transaction(item: dict, index: int) -> TransactionRecord:
    missing = _missing(item, _TRANSACTION_FIELDS)
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        when = date.fromisoformat(str(item["date"]).strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed date") from exc

    raw_amount = item["amount"]
    if isinstance(raw_amount, bool):
        raise ValueError(f"Item {index}: invalid amount")
    try:
        amount = float(raw_amount)
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: invalid amount") from exc
    if not isfinite(amount):
        raise ValueError(f"Item {index}: amount must be finite")

    category_raw = item.get("category")
    return TransactionRecord(
        description=str(item["description"]).strip(),
        amount=amount,
        date=when,
        category=str(category_raw).strip() if category_raw else "",
    )


def _parse_task(item: dict, index: int) -> TaskRecord:
    missing = _missing(item, _TASK_FIELDS)
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    priority = str(item["priority"]).strip()
    if priority not in PRIORITIES:
        raise ValueError(f"Item {index}: invalid priority '{priority}'")

    status = str(item["status"]).strip()
    if status not in STATUSES:
        raise ValueError(f"Item {index}: invalid status '{status}'")

    due_raw = item.get("due_date")
    due_date = None
    if due_raw not in (None, ""):
        try:
            due_date = to_naive_utc(datetime.fromisoformat(str(due_raw).strip()))
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Item {index}: malformed due_date") from exc

    title_raw = item.get("title")
    return TaskRecord(
        due_date=due_date,
        priority=priority,
        status=status,
        title=str(title_raw).strip() if title_raw else "",
    )


def _load_items(file_path: str) -> list:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
    return payload


def parse_transactions(file_path: str) -> list[TransactionRecord]:
    """Parse JSON file into transaction records."""

    return [_parse_transaction(item, i) for i, item in enumerate(_load_items(file_path), start=1)]


def parse_tasks(file_path: str) -> list[TaskRecord]:
    """Parse JSON file into task records."""

    return [_parse_task(item, i) for i, item in enumerate(_load_items(file_path), start=1)]
