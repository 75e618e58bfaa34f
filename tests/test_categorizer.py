import pytest

from bizops_engine.categorizer import CATEGORY_LABELS, CATEGORY_RULES, categorize_transaction


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Monthly PAYROLL", "Payroll"),
        ("Warehouse lease", "Rent"),
        ("Electric company", "Utilities"),
        ("Marketing agency retainer", "Marketing"),
        ("SaaS seats", "Software"),
        ("Hotel booking", "Travel"),
        ("Restaurant lunch", "Food & Dining"),
        ("IRS quarterly", "Taxes"),
        ("Invoice 77", "Revenue"),
    ],
)
def test_keyword_groups(description, expected):
    assert categorize_transaction(description, -10.0) == expected


def test_rent_matches_regardless_of_amount_sign():
    assert categorize_transaction("RENT for March", 1200.0) == "Rent"
    assert categorize_transaction("rent for March", -1200.0) == "Rent"


def test_first_matching_group_wins():
    # "salary" (Payroll) comes before "payment" (Revenue)
    assert categorize_transaction("Salary payment", -500.0) == "Payroll"
    # "office" (Utilities) comes before "software" (Software)
    assert categorize_transaction("Office software", -20.0) == "Utilities"


def test_fallback_uses_amount_sign():
    assert categorize_transaction("Misc", 5.0) == "Income"
    assert categorize_transaction("Misc", 0.0) == "Other Expense"
    assert categorize_transaction("Misc", -5.0) == "Other Expense"


def test_blank_description_falls_through():
    assert categorize_transaction("", 10.0) == "Income"
    assert categorize_transaction("   ", -10.0) == "Other Expense"


def test_rule_table_order_and_labels():
    labels = [label for _, label in CATEGORY_RULES]
    assert labels[0] == "Payroll"
    assert labels[-1] == "Revenue"
    assert set(CATEGORY_LABELS) == set(labels) | {"Income", "Other Expense"}


def test_repeated_calls_are_identical():
    assert categorize_transaction("Flight home", -300.0) == categorize_transaction("Flight home", -300.0)
