"""
Statement Interpretation Engine - recover transactions from bank statement text.
"""

from .main import (
    StatementProcessor,
    process_statement_file,
    process_statement_text
)

from .models import (
    ProcessingResult,
    Summary,
    Transaction,
    TransactionType
)

from .output.writer import prepare_for_storage

__version__ = "1.0.0"

__all__ = [
    'StatementProcessor',
    'process_statement_file',
    'process_statement_text',
    'ProcessingResult',
    'Summary',
    'Transaction',
    'TransactionType',
    'prepare_for_storage',
]
