import importlib.util
import json
import sys
from pathlib import Path

import pytest

from bizops_engine import logging_setup

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "run_report.py"


def load_script():
    spec = importlib.util.spec_from_file_location("run_report", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def input_files(tmp_path, monkeypatch):
    # keep the script from attaching a handler to pytest's captured stderr
    monkeypatch.setattr(logging_setup, "_CONFIGURED", True)
    transactions = tmp_path / "transactions.csv"
    transactions.write_text(
        "description,amount,date,category\n"
        "Office lease,-2000,2025-01-01,Rent\n"
        "Client invoice,15000,2025-01-15,Revenue\n",
        encoding="utf-8",
    )
    tasks = tmp_path / "tasks.csv"
    tasks.write_text(
        "title,priority,status,due_date\n"
        "Send invoices,high,pending,2025-03-11T09:00:00+00:00\n",
        encoding="utf-8",
    )
    return transactions, tasks


def test_main_writes_report(tmp_path, monkeypatch, input_files):
    transactions, tasks = input_files
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_report.py", "--transactions", str(transactions), "--tasks", str(tasks), "--now", "2025-03-10T09:00:00"],
    )
    assert load_script().main() == 0

    report = json.loads((tmp_path / "outputs" / "report.json").read_text(encoding="utf-8"))
    assert report["priorities"][0]["score"] == 200
    assert report["priorities"][0]["suggestion"] == "Due today or tomorrow"
    assert report["dashboard"]["revenue"]["net"] == 13000.0


def test_main_accepts_offset_now(tmp_path, monkeypatch, input_files):
    transactions, tasks = input_files
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_report.py", "--transactions", str(transactions), "--tasks", str(tasks), "--now", "2025-03-10T09:00:00+00:00"],
    )
    assert load_script().main() == 0


def test_main_returns_1_on_invalid_input(tmp_path, monkeypatch, input_files):
    transactions, _ = input_files
    bad_tasks = tmp_path / "tasks.csv"
    bad_tasks.write_text("priority,status\ncritical,pending\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["run_report.py", "--transactions", str(transactions), "--tasks", str(bad_tasks)])
    assert load_script().main() == 1
    assert not (tmp_path / "outputs").exists()
