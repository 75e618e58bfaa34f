"""Pick the CSV or JSON adapter from a file's suffix."""

from __future__ import annotations

from pathlib import Path

from bizops_engine.adapters import csv_adapter, json_adapter
from bizops_engine.schema import TaskRecord, TransactionRecord


def _adapter_for(file_path: str):
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError("Unsupported input format, expected .csv or .json")


def load_transactions(file_path: str) -> list[TransactionRecord]:
    return _adapter_for(file_path).parse_transactions(file_path)


def load_tasks(file_path: str) -> list[TaskRecord]:
    return _adapter_for(file_path).parse_tasks(file_path)
