"""Build a dashboard report from CSV/JSON transaction and task files."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from bizops_engine.adapters.loader import load_tasks, load_transactions
from bizops_engine.logging_setup import configure_logging, get_logger
from bizops_engine.notifications import LARGE_TRANSACTION_THRESHOLD
from bizops_engine.report import build_report, to_jsonable
from bizops_engine.schema import to_naive_utc

logger = get_logger("bizops_engine.scripts.run_report")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run bizops-engine heuristics and dashboard report")
    parser.add_argument("--transactions", required=True, help="Path to CSV/JSON transactions file")
    parser.add_argument("--tasks", required=True, help="Path to CSV/JSON tasks file")
    parser.add_argument("--now", default=None, help="Reference time (ISO format), defaults to current time")
    parser.add_argument("--threshold", type=float, default=LARGE_TRANSACTION_THRESHOLD, help="Large transaction threshold")
    parser.add_argument("--log-level", default=None, help="Logging level (defaults to BIZOPS_ENGINE_LOG_LEVEL or INFO)")
    args = parser.parse_args()

    configure_logging(args.log_level)

    try:
        now = to_naive_utc(datetime.fromisoformat(args.now)) if args.now else datetime.now()
        transactions = load_transactions(args.transactions)
        tasks = load_tasks(args.tasks)
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    report = to_jsonable(build_report(transactions, tasks, now, threshold=args.threshold))
    print(json.dumps(report, indent=2))

    outputs_dir = Path("outputs")
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "report.json"
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    logger.info("Saved report to %s", out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
