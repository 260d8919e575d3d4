"""
Extractors Module - Line segmentation, field extraction and categorization.
"""

from .segmenter import segment_lines

from .line_classifier import (
    classify_line,
    is_balance_line,
    is_header_line
)

from .regex_extractor import (
    AMOUNT_PATTERNS,
    DATE_PATTERNS,
    extract_fields,
    find_amount,
    find_date_token,
    parse_amount
)

from .normalizers import (
    is_income_description,
    normalize_date,
    normalize_description,
    resolve_direction
)

from .categorizer import suggest_category

from .financial_rules import (
    CategoryRule,
    DEFAULT_RULES,
    RuleSet
)

from .assembler import (
    TransactionAssembler,
    summarize_outcomes
)

__all__ = [
    'segment_lines',
    'classify_line',
    'is_balance_line',
    'is_header_line',
    'AMOUNT_PATTERNS',
    'DATE_PATTERNS',
    'extract_fields',
    'find_amount',
    'find_date_token',
    'parse_amount',
    'is_income_description',
    'normalize_date',
    'normalize_description',
    'resolve_direction',
    'suggest_category',
    'CategoryRule',
    'DEFAULT_RULES',
    'RuleSet',
    'TransactionAssembler',
    'summarize_outcomes',
]
