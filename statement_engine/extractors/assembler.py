"""
Transaction Assembler Module
Turns each statement line into a candidate transaction or a skipped-line
record. Lines are independent, so they may be processed concurrently.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from ..models import Candidate, LineOutcome, RawLine, SkippedLine, SkipReason
from .categorizer import suggest_category
from .financial_rules import DEFAULT_RULES, RuleSet
from .line_classifier import classify_line
from .normalizers import normalize_date, normalize_description, resolve_direction
from .regex_extractor import extract_fields

logger = logging.getLogger(__name__)


class TransactionAssembler:
    """
    Builds one LineOutcome per statement line.

    Holds no per-run state: the rule set is shared read-only, which is what
    allows assemble_all to fan lines out across threads.
    """

    def __init__(self, rules: RuleSet = DEFAULT_RULES, max_workers: int = 1):
        self.rules = rules
        self.max_workers = max(1, max_workers)

    def assemble_line(self, raw_line: RawLine) -> LineOutcome:
        """
        Classify and extract a single line.

        Returns:
            Candidate when an amount was recovered, SkippedLine otherwise
        """
        line = raw_line.text

        reason = classify_line(line, self.rules)
        if reason is not None:
            logger.debug(f"Skipping {reason.value} line {raw_line.line_number}: {line[:50]}")
            return SkippedLine(raw_line=line, reason=reason)

        fields = extract_fields(line)
        if fields.amount is None:
            logger.debug(f"Skipping line {raw_line.line_number} (no amount): {line[:50]}")
            return SkippedLine(raw_line=line, reason=SkipReason.NO_AMOUNT)

        date = normalize_date(fields.date_token) if fields.date_token else None
        description = None
        if fields.description is not None:
            description = normalize_description(fields.description)

        return Candidate(
            raw_line=line,
            date=date,
            amount=fields.amount.amount,
            direction=resolve_direction(fields.signal, description, self.rules),
            description=description,
            category=suggest_category(description or '', self.rules),
            date_token=fields.date_token,
            amount_token=fields.amount.token,
            signal=fields.signal,
        )

    def assemble_all(self, lines: Iterable[RawLine]) -> list[LineOutcome]:
        """
        Assemble every line, keeping source order in the returned list.

        With max_workers > 1 lines are processed on a thread pool;
        Executor.map yields results in input order regardless.
        """
        lines = list(lines)
        if self.max_workers == 1 or len(lines) < 2:
            return [self.assemble_line(line) for line in lines]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(self.assemble_line, lines))


def summarize_outcomes(outcomes: Iterable[LineOutcome]) -> dict:
    """Count candidates and skipped lines by reason."""
    outcomes = list(outcomes)
    reasons = Counter(
        outcome.reason.value for outcome in outcomes if isinstance(outcome, SkippedLine)
    )
    return {
        "lines_processed": len(outcomes),
        "candidates": sum(1 for outcome in outcomes if isinstance(outcome, Candidate)),
        "skipped": sum(reasons.values()),
        "skipped_by_reason": dict(reasons),
    }
