"""Keyword rule chain for transaction categorization."""

from __future__ import annotations

from bizops_engine.logging_setup import get_logger

logger = get_logger(__name__)

# Evaluated top to bottom; the first group with a keyword in the description wins.
CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("salary", "wage", "payroll"), "Payroll"),
    (("rent", "lease"), "Rent"),
    (("office", "utilities", "electric"), "Utilities"),
    (("marketing", "ad", "advertisement"), "Marketing"),
    (("software", "subscription", "saas"), "Software"),
    (("travel", "flight", "hotel"), "Travel"),
    (("food", "restaurant", "meal"), "Food & Dining"),
    (("tax", "irs"), "Taxes"),
    (("client", "payment", "invoice"), "Revenue"),
)

INCOME_LABEL = "Income"
EXPENSE_LABEL = "Other Expense"

CATEGORY_LABELS = tuple(label for _, label in CATEGORY_RULES) + (INCOME_LABEL, EXPENSE_LABEL)


def match_rule(description: str) -> str | None:
    """Return the label of the first rule whose keyword occurs in ``description``."""

    text = (description or "").lower()
    for keywords, label in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return label
    return None


def categorize_transaction(description: str, amount: float) -> str:
    """Assign exactly one category label to a transaction."""

    label = match_rule(description)
    if label is None:
        label = INCOME_LABEL if amount > 0 else EXPENSE_LABEL
        logger.debug("No keyword rule matched %r, falling back to %s", description, label)
    return label
