"""
Keyword tables for the transaction classifier.

The tables are immutable data so they can be swapped per locale or per test
without touching the classifier. Patterns are matched against the lowercased
message as typed (whitespace untouched), with plain substring semantics: no
word boundaries, so "grocer" matches "groceries" and "bus" matches "business".
"""
from re import Pattern
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from core.schema import TransactionKind

# Tie-break when no income signal fired, whether or not an expense signal did.
DEFAULT_TRANSACTION_KIND = TransactionKind.EXPENSE

FALLBACK_CATEGORY = "Other"


class DomainRule(BaseModel):
    """Topical keyword rule that overrides the category and may force income."""
    model_config = ConfigDict(frozen=True)

    name: str
    pattern: Pattern
    category: str = Field(..., min_length=1)
    force_income: bool = False

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


class RuleSet(BaseModel):
    """
    Everything the classifier needs besides the category catalog.

    domain_rules are evaluated left to right and every match overwrites the
    category chosen so far, so the last matching rule wins.
    """
    model_config = ConfigDict(frozen=True)

    query_keywords: Tuple[str, ...]
    expense_signals: Tuple[Pattern, ...]
    income_signals: Tuple[Pattern, ...]
    domain_rules: Tuple[DomainRule, ...]
    default_kind: TransactionKind = DEFAULT_TRANSACTION_KIND
    fallback_category: str = Field(default=FALLBACK_CATEGORY, min_length=1)


QUERY_KEYWORDS: Tuple[str, ...] = ("balance", "summary", "total", "how much")

EXPENSE_SIGNALS: Tuple[str, ...] = (
    r"spent",
    r"paid",
    r"bought",
    r"expense",
    r"cost",
    r"-\s*[$€£]?\d",
)

INCOME_SIGNALS: Tuple[str, ...] = (
    r"earned",
    r"received",
    r"got paid",
    r"income",
    r"salary",
    r"\+\s*[$€£]?\d",
)

# Ordering matters: later matches win.
DOMAIN_RULES: Tuple[DomainRule, ...] = (
    DomainRule(
        name="food",
        pattern=r"food|meal|lunch|dinner|breakfast|coffee|restaurant|grocer|eat",
        category="Food",
    ),
    DomainRule(
        name="transport",
        pattern=r"uber|lyft|taxi|gas|fuel|train|bus|transport",
        category="Transport",
    ),
    DomainRule(
        name="entertainment",
        pattern=r"netflix|spotify|movie|game|entertainment",
        category="Entertainment",
    ),
    DomainRule(
        name="bills",
        pattern=r"electric|water|internet|rent|bill",
        category="Bills",
    ),
    DomainRule(
        name="salary",
        pattern=r"salary|paycheck",
        category="Salary",
        force_income=True,
    ),
    DomainRule(
        name="freelance",
        pattern=r"freelance|client|project",
        category="Freelance",
        force_income=True,
    ),
)

DEFAULT_RULES = RuleSet(
    query_keywords=QUERY_KEYWORDS,
    expense_signals=EXPENSE_SIGNALS,
    income_signals=INCOME_SIGNALS,
    domain_rules=DOMAIN_RULES,
)
