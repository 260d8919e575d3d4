"""
Categorizer Module
Suggests a category label for a normalized transaction description.
"""

from .financial_rules import DEFAULT_RULES, RuleSet


def suggest_category(description: str, rules: RuleSet = DEFAULT_RULES) -> str:
    """
    Map a description to a category.

    The first matching keyword rule wins. Unmatched transfers and payments
    fall back to the transfer category; everything else is 'Other'.
    """
    description = description or ''
    for rule in rules.category_rules:
        if rule.matches(description):
            return rule.category

    upper_desc = description.upper()
    if any(keyword in upper_desc for keyword in rules.transfer_keywords):
        return rules.transfer_category

    return rules.fallback_category
