"""
Financial Validator Module
Filters candidate transactions, orders the survivors by date and
computes the processing summary.
"""

import logging
from typing import Iterable, Optional, Union

from ..config import config
from ..models import (
    Candidate,
    DateRange,
    SkippedLine,
    SkipReason,
    Summary,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

Validatable = Union[Candidate, Transaction]


class TransactionValidator:
    """Validates candidate transactions."""

    def __init__(
        self,
        default_description: str = config.DEFAULT_DESCRIPTION,
        default_category: str = config.DEFAULT_CATEGORY
    ):
        """
        Initialize validator.

        Args:
            default_description: Placeholder for a surviving record without description.
            default_category: Category for a surviving record without category.
        """
        self.default_description = default_description
        self.default_category = default_category

        self.validation_stats = {
            "total_validated": 0,
            "valid": 0,
            "invalid": 0,
            "invalid_date": 0,
            "invalid_amount": 0,
            "invalid_description": 0
        }

    def check(self, item: Validatable) -> Optional[SkipReason]:
        """
        Explain why an item would be dropped.

        Returns:
            The SkipReason, or None if the item is valid
        """
        if not item.date:
            return SkipReason.NO_DATE
        if item.amount is None:
            return SkipReason.NO_AMOUNT
        if not item.description:
            return SkipReason.EMPTY_DESCRIPTION
        if item.amount <= 0:
            return SkipReason.NON_POSITIVE_AMOUNT
        return None

    def validate_transaction(self, item: Validatable) -> Optional[Transaction]:
        """
        Validate a single candidate.

        Returns:
            Transaction if valid, None if the candidate is dropped
        """
        transaction, _ = self._validate(item)
        return transaction

    def _validate(self, item: Validatable) -> tuple[Optional[Transaction], Optional[SkipReason]]:
        self.validation_stats["total_validated"] += 1

        reason = self.check(item)
        if reason is not None:
            self.validation_stats["invalid"] += 1
            if reason == SkipReason.NO_DATE:
                self.validation_stats["invalid_date"] += 1
            elif reason == SkipReason.EMPTY_DESCRIPTION:
                self.validation_stats["invalid_description"] += 1
            else:
                self.validation_stats["invalid_amount"] += 1
            logger.debug(f"Dropping candidate ({reason.value}): {item.raw_line[:50]}")
            return None, reason

        self.validation_stats["valid"] += 1
        if isinstance(item, Transaction):
            return item, None

        return Transaction(
            date=item.date,
            amount=item.amount,
            direction=item.direction,
            description=item.description or self.default_description,
            category=item.category or self.default_category,
            raw_line=item.raw_line
        ), None

    def partition(
        self,
        items: Iterable[Validatable]
    ) -> tuple[list[Transaction], list[SkippedLine]]:
        """
        Split items into date-ordered transactions and rejected lines.

        The sort is stable: transactions sharing a date keep source order.
        """
        valid_transactions = []
        rejected = []

        for item in items:
            transaction, reason = self._validate(item)
            if transaction is None:
                rejected.append(SkippedLine(raw_line=item.raw_line, reason=reason))
            else:
                valid_transactions.append(transaction)

        valid_transactions.sort(key=lambda txn: txn.date)

        logger.info(
            f"Validation complete: {self.validation_stats['valid']} valid, "
            f"{self.validation_stats['invalid']} invalid out of "
            f"{self.validation_stats['total_validated']} total"
        )

        return valid_transactions, rejected

    def validate_transactions(self, items: Iterable[Validatable]) -> list[Transaction]:
        """
        Validate a list of candidates.

        Returns:
            Valid transactions sorted by date (invalid ones filtered out)
        """
        valid_transactions, _ = self.partition(items)
        return valid_transactions

    def get_stats(self) -> dict:
        """Get validation statistics."""
        return self.validation_stats.copy()

    def reset_stats(self):
        """Reset validation statistics."""
        for key in self.validation_stats:
            self.validation_stats[key] = 0


def build_summary(transactions: Iterable[Transaction]) -> Summary:
    """
    Count transactions by direction and find their date span.

    Args:
        transactions: Validated transactions

    Returns:
        Summary; date_range is None for an empty sequence
    """
    transactions = list(transactions)
    if not transactions:
        return Summary()

    dates = [txn.date for txn in transactions]
    income_count = sum(1 for txn in transactions if txn.direction == TransactionType.INCOME)

    return Summary(
        total_transactions=len(transactions),
        expense_count=len(transactions) - income_count,
        income_count=income_count,
        date_range=DateRange(start=min(dates), end=max(dates))
    )


def validate_transactions(items: Iterable[Validatable]) -> list[Transaction]:
    """
    Convenience function to validate a list of candidates.

    Args:
        items: Candidate (or already validated) transactions

    Returns:
        List of valid transactions sorted by date
    """
    validator = TransactionValidator()
    return validator.validate_transactions(items)
