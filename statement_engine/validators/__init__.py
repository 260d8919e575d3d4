"""
Validators Module - Candidate validation and result aggregation.
"""

from .financial_validator import (
    TransactionValidator,
    build_summary,
    validate_transactions
)

__all__ = [
    'TransactionValidator',
    'build_summary',
    'validate_transactions',
]
