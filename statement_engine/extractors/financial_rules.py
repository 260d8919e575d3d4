"""
Financial Rules Module
Keyword tables used to classify statement lines, directions and categories.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryRule:
    """Case-insensitive keyword that assigns a category label."""
    keyword: str
    category: str

    def matches(self, description: str) -> bool:
        return self.keyword.upper() in description.upper()


@dataclass(frozen=True)
class RuleSet:
    """
    Static keyword configuration shared by the classifiers.

    Built once at import and passed by reference; every table is a tuple so
    first-match-wins lookups iterate in a fixed order.
    """
    header_keywords: tuple[str, ...]
    income_keywords: tuple[str, ...]
    category_rules: tuple[CategoryRule, ...]
    transfer_keywords: tuple[str, ...] = ("TRANSFER", "PAYMENT")
    transfer_category: str = "Transfer"
    fallback_category: str = "Other"


# Column headers and page furniture
HEADER_KEYWORDS = (
    "DATE", "DESCRIPTION", "AMOUNT", "BALANCE", "TRANSACTION",
    "ACCOUNT", "STATEMENT", "PERIOD", "PAGE", "SUMMARY",
)

INCOME_KEYWORDS = (
    "DEPOSIT", "PAYROLL", "SALARY", "WAGE", "INCOME", "REFUND",
    "DIVIDEND", "INTEREST", "BONUS", "COMMISSION",
)

# PAYROLL must precede DEPOSIT so payroll deposits land in Salary
CATEGORY_RULES = (
    CategoryRule("ATM", "Cash"),
    CategoryRule("PAYROLL", "Salary"),
    CategoryRule("DEPOSIT", "Income"),
    CategoryRule("GROCERY", "Food & Dining"),
    CategoryRule("RESTAURANT", "Food & Dining"),
    CategoryRule("GAS", "Transportation"),
    CategoryRule("FUEL", "Transportation"),
    CategoryRule("PHARMACY", "Healthcare"),
    CategoryRule("MEDICAL", "Healthcare"),
    CategoryRule("RENT", "Bills & Utilities"),
    CategoryRule("ELECTRIC", "Bills & Utilities"),
    CategoryRule("UTILITY", "Bills & Utilities"),
    CategoryRule("AMAZON", "Shopping"),
    CategoryRule("TARGET", "Shopping"),
    CategoryRule("WALMART", "Shopping"),
    CategoryRule("NETFLIX", "Entertainment"),
    CategoryRule("SPOTIFY", "Entertainment"),
)

DEFAULT_RULES = RuleSet(
    header_keywords=HEADER_KEYWORDS,
    income_keywords=INCOME_KEYWORDS,
    category_rules=CATEGORY_RULES,
)
