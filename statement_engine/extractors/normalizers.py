"""
Normalizers Module
Pure functions that canonicalize dates and descriptions and decide
whether a transaction is income.
"""

import re
import datetime
import logging
from typing import Optional

from ..models import DirectionSignal, TransactionType
from .financial_rules import DEFAULT_RULES, RuleSet

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r'^\d+\s*')
_WHITESPACE = re.compile(r'\s+')
_ASTERISKS = re.compile(r'\*+')
_REFERENCE_NUMBER = re.compile(r'#\d+')


def normalize_date(date_str: str) -> Optional[str]:
    """
    Convert a raw date token to YYYY-MM-DD.

    Slash tokens are read month-first (MM/DD/YYYY). Dash tokens are
    YYYY-MM-DD when the first part has four digits, DD-MM-YYYY otherwise.

    Returns:
        Canonical date string, or None if the token is not a valid date
    """
    if not date_str:
        return None

    try:
        if '/' in date_str:
            parts = date_str.split('/')
            if len(parts) != 3:
                return None
            month, day, year = parts
        elif '-' in date_str:
            parts = date_str.split('-')
            if len(parts) != 3:
                return None
            if len(parts[0]) == 4:
                year, month, day = parts
            else:
                day, month, year = parts
        else:
            return None

        return datetime.date(int(year), int(month), int(day)).isoformat()

    except ValueError:
        logger.debug(f"Not a calendar date: '{date_str}'")
        return None


def normalize_description(description: str) -> str:
    """
    Clean up a raw description.

    Strips leading numbers, collapses whitespace, drops asterisks and
    '#123' reference numbers, then capitalizes the first letter only.
    """
    cleaned = _LEADING_DIGITS.sub('', description)
    cleaned = _WHITESPACE.sub(' ', cleaned)
    cleaned = _ASTERISKS.sub('', cleaned)
    cleaned = _REFERENCE_NUMBER.sub('', cleaned)
    cleaned = cleaned.strip()

    if cleaned:
        cleaned = cleaned[0].upper() + cleaned[1:].lower()
    return cleaned


def is_income_description(description: str, rules: RuleSet = DEFAULT_RULES) -> bool:
    """Check description for income keywords (case-insensitive)."""
    upper_desc = description.upper()
    return any(keyword in upper_desc for keyword in rules.income_keywords)


def resolve_direction(
    signal: DirectionSignal,
    description: Optional[str],
    rules: RuleSet = DEFAULT_RULES
) -> TransactionType:
    """
    Settle income vs expense.

    A credit signal is conclusive. Otherwise the description decides:
    income keywords mean income, anything else is an expense.
    """
    if signal == DirectionSignal.CREDIT:
        return TransactionType.INCOME
    if description and is_income_description(description, rules):
        return TransactionType.INCOME
    return TransactionType.EXPENSE
