"""Demo script for bizops-engine."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from bizops_engine.adapters.csv_adapter import parse_tasks, parse_transactions
from bizops_engine.anomaly import detect_anomaly
from bizops_engine.categorizer import categorize_transaction
from bizops_engine.metrics import compute_dashboard
from bizops_engine.prioritization import prioritize_tasks


def main() -> None:
    transactions = parse_transactions("examples/sample_transactions.csv")
    tasks = parse_tasks("examples/sample_tasks.csv")
    now = datetime(2025, 3, 10, 9, 0)

    for transaction in transactions:
        print(f"{transaction.description!r:40} -> {categorize_transaction(transaction.description, transaction.amount)}")
    print("Anomalies:", [finding.reason for finding in detect_anomaly(transactions)])
    for result in prioritize_tasks(tasks, now):
        print(f"{result.score:4d}  {result.task.title}  {result.suggestion}")
    print("Revenue:", compute_dashboard(transactions, tasks)["revenue"])


if __name__ == "__main__":
    main()
