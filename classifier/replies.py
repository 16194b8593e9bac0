"""
Chat reply templates for classification results.
"""
from core.normalize import format_currency
from core.schema import (
    BalanceSummary,
    ClassificationResult,
    QueryResult,
    TransactionKind,
    TransactionResult,
)

WELCOME_MESSAGE = (
    "Hey! I'm your finance assistant. Tell me about your expenses or income naturally. "
    'Try: "Spent $50 on groceries" or "Got paid $3000 salary"'
)

UNRECOGNIZED_MESSAGE = (
    "I couldn't understand that. "
    'Try something like "Spent $30 on lunch" or "Received $500 freelance payment"'
)

QUERY_TEMPLATE = (
    "Your current balance is {balance}. "
    "Total income: {income}, Total expenses: {expenses}."
)

INCOME_TEMPLATE = "Added {amount} income under {category}. Your new balance is {balance}."

EXPENSE_TEMPLATE = "Logged {amount} expense for {category}. Your new balance is {balance}."


def build_reply(result: ClassificationResult, summary: BalanceSummary, symbol: str = "$") -> str:
    """
    Render the assistant reply for a classification result.

    Args:
        result: Classifier output
        summary: Ledger totals after the result was applied
        symbol: Currency symbol used in amounts

    Returns:
        Reply text
    """
    if isinstance(result, QueryResult):
        return QUERY_TEMPLATE.format(
            balance=format_currency(summary.balance, symbol),
            income=format_currency(summary.total_income, symbol),
            expenses=format_currency(summary.total_expenses, symbol),
        )

    if not isinstance(result, TransactionResult):
        return UNRECOGNIZED_MESSAGE

    template = INCOME_TEMPLATE if result.kind == TransactionKind.INCOME else EXPENSE_TEMPLATE
    return template.format(
        amount=format_currency(result.amount, symbol),
        category=result.category,
        balance=format_currency(summary.balance, symbol),
    )
