"""Client payments, balances and lookup."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from math import isfinite
from typing import Optional

from bizops_engine.logging_setup import get_logger
from bizops_engine.schema import ClientRecord, TransactionRecord

logger = get_logger(__name__)

CLIENT_PAYMENT_CATEGORY = "Client Payment"


def apply_payment(
    client: ClientRecord, amount: float, payment_date: date, notes: Optional[str] = None
) -> tuple[ClientRecord, TransactionRecord]:
    """Record a payment: raise the client's total paid and book the matching income transaction."""

    if not isfinite(amount) or amount <= 0:
        raise ValueError(f"Payment amount must be a positive number, got {amount!r}")

    description = f"Payment from {client.name}"
    if notes:
        description = f"{description} - {notes}"

    updated = replace(client, total_paid=client.total_paid + amount)
    transaction = TransactionRecord(
        description=description,
        amount=amount,
        date=payment_date,
        category=CLIENT_PAYMENT_CATEGORY,
    )
    logger.debug("Applied payment of %.2f to %s", amount, client.name)
    return updated, transaction


def outstanding_balance(client: ClientRecord) -> float:
    """Amount still owed; negative when the client has overpaid."""

    return client.total_due - client.total_paid


def receivables_summary(clients: list[ClientRecord]) -> dict:
    return {
        "total_outstanding": float(sum(outstanding_balance(c) for c in clients)),
        "total_paid": float(sum(c.total_paid for c in clients)),
    }


def search_clients(clients: list[ClientRecord], search: Optional[str] = None) -> list[ClientRecord]:
    """Substring match over name, email and company name, ordered by name.

    Matching is case-sensitive.
    """

    if search:
        clients = [c for c in clients if search in c.name or search in c.email or search in c.company_name]
    return sorted(clients, key=lambda c: c.name)
