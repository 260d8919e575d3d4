"""Shared pytest fixtures for statement engine tests."""

import pytest

from statement_engine.main import StatementProcessor


SAMPLE_STATEMENT = """FIRST NATIONAL BANK
Account Statement
Statement Period: 01/01/2024 - 01/31/2024
Date Description Amount Balance
Beginning Balance $1,000.00
01/15/2024 WALMART PURCHASE $45.67
01/03/2024 NETFLIX SUBSCRIPTION $15.99
02/01/2024 PAYROLL DEPOSIT $2500.00 CR
01/15/2024 SHELL GAS STATION $40.00
01/20/2024 ATM WITHDRAWAL $200.00
Page 1 of 2
Ending Balance: $3,198.34
"""


@pytest.fixture
def sample_statement():
    """Return a small statement with headers, balances and five transactions."""
    return SAMPLE_STATEMENT


@pytest.fixture
def processor():
    """Create a sequential StatementProcessor."""
    return StatementProcessor(max_workers=1)


@pytest.fixture
def statement_txt(tmp_path, sample_statement):
    """Write the sample statement to a temporary .txt file."""
    path = tmp_path / "statement.txt"
    path.write_text(sample_statement, encoding="utf-8")
    return path
