"""Tests for candidate validation and summary aggregation."""

from decimal import Decimal

import pytest

from statement_engine.models import (
    Candidate,
    DateRange,
    SkipReason,
    Summary,
    Transaction,
    TransactionType,
)
from statement_engine.validators.financial_validator import (
    TransactionValidator,
    build_summary,
    validate_transactions,
)


def _candidate(date="2024-01-15", amount="10.00", description="Store", **kwargs):
    return Candidate(
        raw_line=kwargs.pop("raw_line", f"{date} {description} {amount}"),
        date=date,
        amount=Decimal(amount) if amount is not None else None,
        description=description,
        category=kwargs.pop("category", "Other"),
        direction=kwargs.pop("direction", TransactionType.EXPENSE),
    )


class TestCheck:
    """Tests for per-candidate drop reasons."""

    @pytest.mark.parametrize("candidate,reason", [
        (_candidate(date=None), SkipReason.NO_DATE),
        (_candidate(amount=None), SkipReason.NO_AMOUNT),
        (_candidate(description=None), SkipReason.EMPTY_DESCRIPTION),
        (_candidate(description=""), SkipReason.EMPTY_DESCRIPTION),
        (_candidate(amount="0.00"), SkipReason.NON_POSITIVE_AMOUNT),
        (_candidate(amount="-5.00"), SkipReason.NON_POSITIVE_AMOUNT),
    ])
    def test_drop_reasons(self, candidate, reason):
        assert TransactionValidator().check(candidate) == reason

    def test_valid_candidate(self):
        assert TransactionValidator().check(_candidate()) is None


class TestValidateTransactions:
    """Tests for filtering and ordering."""

    def test_invalid_candidates_are_dropped(self):
        candidates = [
            _candidate(description="Kept"),
            _candidate(amount="0"),
            _candidate(amount="-1"),
            _candidate(date=None),
        ]
        result = validate_transactions(candidates)
        assert [txn.description for txn in result] == ["Kept"]
        assert all(txn.amount > 0 for txn in result)

    def test_missing_category_gets_default(self):
        result = validate_transactions([_candidate(category=None)])
        assert result[0].category == "Other"

    def test_sorted_by_date_with_stable_ties(self):
        """Test ascending date order; same-date entries keep source order."""
        candidates = [
            _candidate(date="2024-02-01", description="Third"),
            _candidate(date="2024-01-15", description="First A"),
            _candidate(date="2024-01-15", description="First B"),
            _candidate(date="2024-01-03", description="Earliest"),
        ]
        result = validate_transactions(candidates)
        assert [txn.description for txn in result] == ["Earliest", "First A", "First B", "Third"]
        dates = [txn.date for txn in result]
        assert dates == sorted(dates)

    def test_validation_is_idempotent(self):
        candidates = [
            _candidate(date="2024-02-01", description="B"),
            _candidate(date="2024-01-01", description="A"),
            _candidate(amount="0"),
        ]
        once = validate_transactions(candidates)
        twice = validate_transactions(once)
        assert twice == once
        assert all(isinstance(txn, Transaction) for txn in twice)

    def test_partition_reports_rejected_lines(self):
        validator = TransactionValidator()
        kept, rejected = validator.partition([
            _candidate(raw_line="good"),
            _candidate(date=None, raw_line="no date"),
        ])
        assert len(kept) == 1
        assert [(r.raw_line, r.reason) for r in rejected] == [("no date", SkipReason.NO_DATE)]

    def test_partition_checks_each_item_once(self, monkeypatch):
        validator = TransactionValidator()
        calls = []
        original_check = validator.check

        def counting_check(item):
            calls.append(item.raw_line)
            return original_check(item)

        monkeypatch.setattr(validator, "check", counting_check)
        validator.partition([
            _candidate(raw_line="good"),
            _candidate(amount="0", raw_line="zero"),
        ])
        assert calls == ["good", "zero"]

    def test_stats(self):
        validator = TransactionValidator()
        validator.validate_transactions([
            _candidate(),
            _candidate(date=None),
            _candidate(amount="0"),
            _candidate(description=""),
        ])
        stats = validator.get_stats()
        assert stats["total_validated"] == 4
        assert stats["valid"] == 1
        assert stats["invalid"] == 3
        assert stats["invalid_date"] == 1
        assert stats["invalid_amount"] == 1
        assert stats["invalid_description"] == 1

        validator.reset_stats()
        assert validator.get_stats()["total_validated"] == 0


class TestSummary:
    """Tests for build_summary."""

    def test_empty_summary(self):
        summary = build_summary([])
        assert summary == Summary(total_transactions=0, expense_count=0, income_count=0)
        assert summary.date_range is None

    def test_counts_and_range(self):
        transactions = validate_transactions([
            _candidate(date="2024-01-20", direction=TransactionType.EXPENSE),
            _candidate(date="2024-01-03", direction=TransactionType.EXPENSE),
            _candidate(date="2024-02-01", direction=TransactionType.INCOME),
        ])
        summary = build_summary(transactions)
        assert summary.total_transactions == 3
        assert summary.expense_count == 2
        assert summary.income_count == 1
        assert summary.date_range == DateRange(start="2024-01-03", end="2024-02-01")
