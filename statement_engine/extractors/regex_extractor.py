"""
Regex Extractor Module
Recovers the date token, amount, direction signal and description prefix
from a single bank statement line using ordered regex pattern lists.
"""

import re
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..models import DirectionSignal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AmountPattern:
    """An amount shape; negative patterns encode a debit in the sign itself."""
    name: str
    regex: re.Pattern
    negative: bool = False


@dataclass(frozen=True)
class AmountMatch:
    """The amount chosen for a line and the numeral it was parsed from."""
    amount: Decimal
    token: str
    pattern: AmountPattern


@dataclass(frozen=True)
class ExtractedFields:
    """Raw fields recovered from one line, before normalization."""
    date_token: Optional[str] = None
    amount: Optional[AmountMatch] = None
    signal: DirectionSignal = DirectionSignal.NONE
    description: Optional[str] = None


# Date shapes, tried in order; the first one found anywhere in the line wins:
# - MM/DD/YYYY (e.g., 01/15/2024)
# - DD-MM-YYYY (e.g., 15-01-2024)
# - YYYY-MM-DD (e.g., 2024-01-15)
DATE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r'(\d{1,2}/\d{1,2}/\d{4})'),
    re.compile(r'(\d{1,2}-\d{1,2}-\d{4})'),
    re.compile(r'(\d{4}-\d{1,2}-\d{1,2})'),
)

# Either grouped thousands (1,234,567.89) or a plain run of digits (2500.00)
_NUMERAL = r'(\d{1,3}(?:,\d{3})+(?:\.\d*)?|\d+\.?\d*)'

# Amount shapes, tried in order; the first one with any match wins
AMOUNT_PATTERNS: tuple[AmountPattern, ...] = (
    AmountPattern("currency", re.compile(r'\$' + _NUMERAL)),
    AmountPattern("credit_suffix", re.compile(_NUMERAL + r'\s*CR')),
    AmountPattern("debit_suffix", re.compile(_NUMERAL + r'\s*DR')),
    AmountPattern("negative_currency", re.compile(r'-\$?' + _NUMERAL), negative=True),
    AmountPattern("trailing_minus", re.compile(_NUMERAL + r'-'), negative=True),
)

# DR/CR as standalone markers, not letters inside a word like ADDRESS
DEBIT_TOKEN = re.compile(r'(?<![A-Za-z])DR(?![A-Za-z])')
CREDIT_TOKEN = re.compile(r'(?<![A-Za-z])CR(?![A-Za-z])')


def has_amount(line: str) -> bool:
    """Check whether any amount pattern matches the line outside its date."""
    return find_amount(line) is not None


def _match_date(line: str) -> Optional[re.Match]:
    for pattern in DATE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match
    return None


def find_date_token(line: str) -> Optional[str]:
    """Return the substring matched by the first date pattern that hits."""
    match = _match_date(line)
    return match.group(1) if match else None


def parse_amount(amount_str: str) -> Decimal:
    """
    Parse amount string to Decimal.
    Handles commas in thousands.

    Raises:
        ValueError: If amount cannot be parsed
    """
    clean = amount_str.replace(',', '')
    try:
        return Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount format: {amount_str}") from e


def find_amount(line: str) -> Optional[AmountMatch]:
    """
    Find the transaction amount in a line.

    The first pattern with at least one match decides; of its matches the
    last one is taken, since statements often print the running balance
    before the posted amount ends the line. Matches overlapping the date
    token (the dashes of 2024-03-05) are ignored.
    """
    date_match = _match_date(line)
    date_start, date_end = date_match.span(1) if date_match else (-1, -1)

    for pattern in AMOUNT_PATTERNS:
        matches = [
            match for match in pattern.regex.finditer(line)
            if match.end() <= date_start or match.start() >= date_end
        ]
        if not matches:
            continue

        token = matches[-1].group(1)
        try:
            amount = parse_amount(token)
        except ValueError as e:
            logger.warning(f"Failed to parse amount '{token}': {e}")
            return None
        return AmountMatch(amount=amount, token=token, pattern=pattern)
    return None


def canonical_amount_text(amount: Decimal) -> str:
    """Plain numeral without separators or trailing zeros (2500.00 -> '2500')."""
    return format(amount.normalize(), 'f')


def detect_direction_signal(
    line: str,
    date_token: Optional[str] = None,
    amount: Optional[AmountMatch] = None
) -> DirectionSignal:
    """
    Read the debit/credit cue from the line text.

    Precedence: an explicit DR token, then an explicit CR token or the word
    DEPOSIT, then a bare minus sign (outside the date) or a negative amount
    pattern.
    """
    if DEBIT_TOKEN.search(line):
        return DirectionSignal.DEBIT
    if CREDIT_TOKEN.search(line) or 'DEPOSIT' in line:
        return DirectionSignal.CREDIT

    sign_text = line.replace(date_token, ' ', 1) if date_token else line
    if '-' in sign_text or (amount is not None and amount.pattern.negative):
        return DirectionSignal.DEBIT
    return DirectionSignal.NONE


def extract_description(
    line: str,
    amount: AmountMatch,
    date_token: Optional[str] = None
) -> Optional[str]:
    """
    Return the text preceding the amount, with the date token removed.

    The amount is located by its canonical numeral; amounts printed with
    thousands separators fall back to the numeral as matched. Returns None
    when the amount is not found or starts the line.
    """
    index = line.rfind(canonical_amount_text(amount.amount))
    if index < 0:
        index = line.rfind(amount.token)
    if index <= 0:
        return None

    prefix = line[:index].strip()
    if date_token and date_token in prefix:
        prefix = prefix.replace(date_token, '', 1).strip()
    return prefix


def extract_fields(line: str) -> ExtractedFields:
    """
    Recover the raw fields of a transaction-candidate line.

    Args:
        line: Trimmed statement line

    Returns:
        ExtractedFields; description is only set when an amount was found
    """
    date_token = find_date_token(line)
    amount = find_amount(line)
    if amount is None:
        return ExtractedFields(date_token=date_token)

    signal = detect_direction_signal(line, date_token, amount)
    description = extract_description(line, amount, date_token)

    logger.debug(
        f"Fields: date={date_token} | amount={amount.token} ({amount.pattern.name}) | "
        f"signal={signal.value} | desc={(description or '')[:30]}"
    )
    return ExtractedFields(
        date_token=date_token,
        amount=amount,
        signal=signal,
        description=description
    )
