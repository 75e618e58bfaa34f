from datetime import date

from bizops_engine.anomaly import amount_stats, detect_anomaly
from bizops_engine.schema import TransactionRecord


def make(amounts):
    return [TransactionRecord(f"t{i}", amount, date(2025, 1, i + 1), "Other") for i, amount in enumerate(amounts)]


def test_empty_input():
    assert detect_anomaly([]) == []


def test_single_transaction_is_never_flagged():
    assert detect_anomaly(make([5000.0])) == []


def test_equal_amounts_flag_nothing():
    assert detect_anomaly(make([42.5, 42.5, -42.5, 42.5])) == []


def test_large_outlier_flagged():
    transactions = make([10.0] * 9 + [1000.0])
    findings = detect_anomaly(transactions)
    assert [f.transaction for f in findings] == [transactions[-1]]
    assert findings[0].reason == "Unusually large transaction: 1000.00 (avg: 109.00)"


def test_single_outlier_among_five_is_not_flagged_because_it_equals_the_cutoff():
    """[10, 10, 10, 10, 1000] is not flagged even though the 1000 looks like an obvious outlier.

    With population std and n=5 the z-score of a lone outlier is at most sqrt(n - 1) = 2,
    so the 1000 lands exactly on avg + 2 * std and the strict comparison leaves it out.
    """
    avg, std_dev = amount_stats(make([10.0, 10.0, 10.0, 10.0, 1000.0]))
    assert avg == 208.0
    assert std_dev == 396.0
    assert detect_anomaly(make([10.0, 10.0, 10.0, 10.0, 1000.0])) == []


def test_uses_absolute_amounts_and_keeps_input_order():
    transactions = make([-2000.0] + [20.0] * 10 + [1900.0] + [15.0] * 10)
    findings = detect_anomaly(transactions)
    assert [f.transaction.amount for f in findings] == [-2000.0, 1900.0]
    assert findings[0].reason.startswith("Unusually large transaction: 2000.00")


def test_population_standard_deviation():
    avg, std_dev = amount_stats(make([2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]))
    assert avg == 5.0
    assert std_dev == 2.0


def test_repeated_calls_are_identical():
    transactions = make([10.0] * 9 + [1000.0])
    assert detect_anomaly(transactions) == detect_anomaly(transactions)
