"""
Data Model Module
Value types flowing through the statement interpretation pipeline.
All records are immutable; each pipeline stage builds new ones.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class TransactionType(Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class DirectionSignal(Enum):
    """Debit/credit cue read from the line text, before the income heuristic."""
    CREDIT = "credit"
    DEBIT = "debit"
    NONE = "none"


class SkipReason(Enum):
    """Why a line did not become a transaction."""
    HEADER = "header"
    BALANCE = "balance"
    NO_AMOUNT = "no_amount"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    NO_DATE = "no_date"
    EMPTY_DESCRIPTION = "empty_description"


@dataclass(frozen=True)
class RawLine:
    """A trimmed, non-empty line of statement text."""
    text: str
    original: str
    line_number: int = 0


@dataclass(frozen=True)
class Candidate:
    """
    Transaction-shaped record produced from one line, still subject to validation.

    Any of date, amount and description may be absent; the validator decides
    whether the candidate survives.
    """
    raw_line: str
    date: Optional[str] = None
    amount: Optional[Decimal] = None
    direction: TransactionType = TransactionType.EXPENSE
    description: Optional[str] = None
    category: Optional[str] = None
    date_token: Optional[str] = None
    amount_token: Optional[str] = None
    signal: DirectionSignal = DirectionSignal.NONE


@dataclass(frozen=True)
class Transaction:
    """A validated financial transaction."""
    date: str
    amount: Decimal
    direction: TransactionType
    description: str
    category: str
    raw_line: str

    @property
    def type(self) -> str:
        return self.direction.value

    @property
    def amount_display(self) -> str:
        sign = "+" if self.direction == TransactionType.INCOME else "-"
        return f"{sign}{self.amount:.2f}"

    def to_dict(self) -> dict:
        """Convert transaction to dictionary."""
        return {
            "date": self.date,
            "description": self.description,
            "amount": float(self.amount),
            "amount_display": self.amount_display,
            "type": self.type,
            "category": self.category,
            "raw_line": self.raw_line,
        }

    def __repr__(self) -> str:
        return f"Transaction(date={self.date}, desc={self.description[:30]}..., amount={self.amount_display})"


@dataclass(frozen=True)
class SkippedLine:
    """A line that produced no transaction, with the reason."""
    raw_line: str
    reason: SkipReason


LineOutcome = Union[Candidate, SkippedLine]


@dataclass(frozen=True)
class DateRange:
    start: str
    end: str

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class Summary:
    """Counts and date span of the surviving transactions."""
    total_transactions: int = 0
    expense_count: int = 0
    income_count: int = 0
    date_range: Optional[DateRange] = None

    def to_dict(self) -> dict:
        return {
            "total_transactions": self.total_transactions,
            "expense_count": self.expense_count,
            "income_count": self.income_count,
            "date_range": self.date_range.to_dict() if self.date_range else None,
        }


@dataclass(frozen=True)
class ProcessingResult:
    """
    Outcome of processing one statement.

    A successful result may carry an empty transaction sequence. A failed
    result never carries transactions; `error` explains what went wrong.
    """
    success: bool
    transactions: tuple[Transaction, ...] = ()
    raw_text: Optional[str] = None
    summary: Summary = field(default_factory=Summary)
    error: Optional[str] = None
    skipped: tuple[SkippedLine, ...] = ()

    @classmethod
    def failure(cls, error: str) -> "ProcessingResult":
        return cls(success=False, error=error)

    def to_dict(self, include_raw_text: bool = True) -> dict:
        """Convert result to dictionary."""
        payload = {
            "success": self.success,
            "transactions": [txn.to_dict() for txn in self.transactions],
            "summary": self.summary.to_dict(),
        }
        if self.error is not None:
            payload["error"] = self.error
        if include_raw_text:
            payload["raw_text"] = self.raw_text
        return payload
