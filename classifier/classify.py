"""
Free-text transaction classification.

Turns one chat message into a balance query, a categorized transaction or an
unrecognized result. The pipeline runs in a fixed order:

1. query keywords short-circuit everything else
2. expense and income signals are scored independently
3. the first valid amount is extracted (none -> unrecognized)
4. the first catalog category named in the text is picked
5. domain keyword rules override the category, later rules winning
6. income if an income signal fired, otherwise the default kind

classify() is pure: no I/O, no shared mutable state.
"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from classifier.rules import DEFAULT_RULES, RuleSet
from core.logger import setup_logger
from core.normalize import extract_amount, normalize_text
from core.schema import (
    DEFAULT_CATALOG,
    CategoryCatalog,
    ClassificationResult,
    QueryResult,
    TransactionKind,
    TransactionResult,
    UnrecognizedResult,
)

logger = setup_logger(__name__)


class IntentSignals(BaseModel):
    """Expense/income evidence found in a message. Both may be set."""
    model_config = ConfigDict(frozen=True)

    is_expense: bool = False
    is_income: bool = False


def is_query(text: str, rules: RuleSet = DEFAULT_RULES) -> bool:
    """
    Check whether lowercased text asks for a balance or summary.

    Args:
        text: Lowercased message text
        rules: Rule set holding the query keywords

    Returns:
        True if any query keyword is a substring of the text
    """
    return any(keyword in text for keyword in rules.query_keywords)


def detect_signals(text: str, rules: RuleSet = DEFAULT_RULES) -> IntentSignals:
    """
    Score expense and income signals in lowercased text.

    Args:
        text: Lowercased message text
        rules: Rule set holding the signal patterns

    Returns:
        IntentSignals with both flags evaluated independently
    """
    return IntentSignals(
        is_expense=any(p.search(text) for p in rules.expense_signals),
        is_income=any(p.search(text) for p in rules.income_signals),
    )


def match_catalog_category(text: str, catalog: CategoryCatalog, fallback: str) -> str:
    """First catalog entry (income before expense) named in the text, else fallback."""
    for name in catalog.all():
        if name.lower() in text:
            return name
    return fallback


def apply_domain_rules(
    text: str,
    category: str,
    signals: IntentSignals,
    rules: RuleSet = DEFAULT_RULES,
) -> Tuple[str, IntentSignals]:
    """
    Run every domain rule in order over lowercased text.

    Each matching rule overwrites the category, so the last match wins.
    Rules with force_income set the income signal.

    Args:
        text: Lowercased message text
        category: Category resolved so far
        signals: Signals detected so far
        rules: Rule set holding the ordered domain rules

    Returns:
        Tuple of (category, signals) after all rules ran
    """
    for rule in rules.domain_rules:
        if not rule.matches(text):
            continue
        category = rule.category
        if rule.force_income and not signals.is_income:
            signals = signals.model_copy(update={"is_income": True})
        logger.debug(f"Domain rule '{rule.name}' matched -> {category}")
    return category, signals


def resolve_kind(signals: IntentSignals, rules: RuleSet = DEFAULT_RULES) -> TransactionKind:
    """Income wins whenever an income signal fired; otherwise the default kind."""
    if signals.is_income:
        return TransactionKind.INCOME
    return rules.default_kind


def classify(
    text: str,
    catalog: CategoryCatalog = DEFAULT_CATALOG,
    rules: RuleSet = DEFAULT_RULES,
) -> ClassificationResult:
    """
    Classify one chat message.

    Args:
        text: Raw message text
        catalog: Income/expense category catalog
        rules: Keyword tables and domain rules

    Returns:
        QueryResult, TransactionResult or UnrecognizedResult
    """
    if not normalize_text(text):
        return UnrecognizedResult()

    lowered = text.lower()

    if is_query(lowered, rules):
        logger.debug("Message classified as balance query")
        return QueryResult()

    signals = detect_signals(lowered, rules)

    amount = extract_amount(text)
    if not amount:
        logger.debug("No amount found, message unrecognized")
        return UnrecognizedResult()

    category = match_catalog_category(lowered, catalog, rules.fallback_category)
    category, signals = apply_domain_rules(lowered, category, signals, rules)
    kind = resolve_kind(signals, rules)

    logger.debug(
        f"Classified as {kind.value} {amount} in {category} "
        f"(expense_signal={signals.is_expense}, income_signal={signals.is_income})"
    )
    return TransactionResult(kind=kind, amount=amount, category=category, description=text)
