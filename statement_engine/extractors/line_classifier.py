"""
Line Classifier Module
Flags header and balance lines so they are not read as transactions.
"""

import re
from typing import Optional

from ..models import SkipReason
from .financial_rules import DEFAULT_RULES, RuleSet
from .regex_extractor import has_amount

BALANCE_PATTERN = re.compile(r'(?:balance|bal|total)[:\s]*\$?\d+', re.IGNORECASE)
SUB_BALANCE_PATTERN = re.compile(r'(?:available|pending)', re.IGNORECASE)


def is_header_line(line: str, rules: RuleSet = DEFAULT_RULES) -> bool:
    """
    Check if line is a column header or page furniture.

    A header carries one of the header keywords and no parsable amount;
    a transaction that merely mentions a header word still has an amount.
    """
    upper_line = line.upper()
    if not any(keyword in upper_line for keyword in rules.header_keywords):
        return False
    return not has_amount(line)


def is_balance_line(line: str) -> bool:
    """Check if line announces a balance or total (available/pending excluded)."""
    return bool(BALANCE_PATTERN.search(line)) and not SUB_BALANCE_PATTERN.search(line)


def classify_line(line: str, rules: RuleSet = DEFAULT_RULES) -> Optional[SkipReason]:
    """
    Decide whether a line is noise.

    Returns:
        SkipReason.HEADER or SkipReason.BALANCE for noise, None for a
        transaction candidate
    """
    if is_header_line(line, rules):
        return SkipReason.HEADER
    if is_balance_line(line):
        return SkipReason.BALANCE
    return None
