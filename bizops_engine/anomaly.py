"""Statistical outlier detection over transaction amounts."""

from __future__ import annotations

import numpy as np

from bizops_engine.logging_setup import get_logger
from bizops_engine.schema import AnomalyFinding, TransactionRecord

logger = get_logger(__name__)

_STD_MULTIPLIER = 2.0


def amount_stats(transactions: list[TransactionRecord]) -> tuple[float, float]:
    """Return mean and population standard deviation of absolute amounts."""

    if not transactions:
        return 0.0, 0.0
    amounts = np.abs(np.asarray([t.amount for t in transactions], dtype=float))
    # ddof=0: population variance, divided by count
    return float(np.mean(amounts)), float(np.std(amounts, ddof=0))


def detect_anomaly(transactions: list[TransactionRecord]) -> list[AnomalyFinding]:
    """Flag transactions more than two standard deviations above the mean size."""

    if not transactions:
        return []

    avg, std_dev = amount_stats(transactions)
    cutoff = avg + _STD_MULTIPLIER * std_dev

    findings = []
    for transaction in transactions:
        amount = abs(transaction.amount)
        if amount > cutoff:
            findings.append(
                AnomalyFinding(
                    transaction=transaction,
                    reason=f"Unusually large transaction: {amount:.2f} (avg: {avg:.2f})",
                )
            )

    logger.debug("Flagged %d of %d transactions above %.2f", len(findings), len(transactions), cutoff)
    return findings
