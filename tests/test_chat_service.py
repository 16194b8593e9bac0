"""
Unit tests for the chat service.
"""
from decimal import Decimal

import pytest

from classifier.replies import UNRECOGNIZED_MESSAGE, WELCOME_MESSAGE
from core.exceptions import ClassificationError, LedgerError, ValidationError
from core.schema import TransactionKind
from services.chat_service import ChatService


@pytest.fixture
def service():
    return ChatService()


def test_initial_session(service):
    """Test a new session has demo data and the welcome message."""
    assert len(service.ledger) == 5
    assert len(service.messages) == 1
    assert service.messages[0].role == "system"
    assert service.messages[0].content == WELCOME_MESSAGE


def test_expense_message(service):
    """Test an expense is logged and confirmed."""
    reply = service.handle_message("Spent $50 on groceries")
    assert reply.result.intent == "transaction"
    assert reply.transaction is not None
    assert reply.transaction.kind == TransactionKind.EXPENSE
    assert reply.transaction.category == "Food"
    assert reply.summary.balance == Decimal("4885")
    assert reply.reply.content == "Logged $50.00 expense for Food. Your new balance is $4,885.00."
    assert len(service.ledger) == 6


def test_income_message(service):
    """Test income is logged and confirmed."""
    reply = service.handle_message("Got paid $3000 salary")
    assert reply.transaction.kind == TransactionKind.INCOME
    assert reply.reply.content == "Added $3,000.00 income under Salary. Your new balance is $7,935.00."


def test_query_message(service):
    """Test a balance question reports totals without logging anything."""
    reply = service.handle_message("What's my balance?")
    assert reply.result.intent == "query"
    assert reply.transaction is None
    assert reply.reply.content == (
        "Your current balance is $4,935.00. Total income: $5,300.00, Total expenses: $365.00."
    )
    assert len(service.ledger) == 5


def test_unrecognized_message(service):
    """Test unparseable input asks the user to rephrase."""
    reply = service.handle_message("asdf no numbers here")
    assert reply.result.intent == "unrecognized"
    assert reply.transaction is None
    assert reply.reply.content == UNRECOGNIZED_MESSAGE
    assert len(service.ledger) == 5


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_message_rejected(service, text):
    """Test empty messages are rejected and not recorded."""
    with pytest.raises(ValidationError):
        service.handle_message(text)
    assert len(service.messages) == 1


def test_transcript(service):
    """Test user and system messages are appended in order."""
    service.handle_message("-20 lunch")
    roles = [m.role for m in service.messages]
    assert roles == ["system", "user", "system"]
    assert service.messages[1].content == "-20 lunch"


def test_reset(service):
    """Test reset restores the initial session."""
    service.handle_message("Spent $50 on groceries")
    service.reset()
    assert len(service.ledger) == 5
    assert len(service.messages) == 1


def test_demo_data_disabled(monkeypatch):
    """Test a session without demo data starts at zero."""
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    service = ChatService()
    assert len(service.ledger) == 0
    reply = service.handle_message("What's my balance?")
    assert reply.reply.content == (
        "Your current balance is $0.00. Total income: $0.00, Total expenses: $0.00."
    )


def test_custom_currency_symbol(monkeypatch):
    """Test replies use the configured currency symbol."""
    monkeypatch.setenv("CURRENCY_SYMBOL", "€")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    reply = ChatService().handle_message("Spent 12 on coffee")
    assert reply.reply.content == "Logged €12.00 expense for Food. Your new balance is -€12.00."


def test_configured_catalog(monkeypatch):
    """Test the service classifies against the configured catalog."""
    monkeypatch.setenv("EXPENSE_CATEGORIES", '["Pets", "Other"]')
    reply = ChatService().handle_message("$40 vet for pets")
    assert reply.transaction.category == "Pets"


def test_classification_failure_wrapped(service, monkeypatch):
    """Test unexpected classifier failures surface as ClassificationError."""
    def broken_classify(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("services.chat_service.classify", broken_classify)
    with pytest.raises(ClassificationError) as exc_info:
        service.handle_message("Spent $5 on coffee")
    assert exc_info.value.details["error"] == "boom"


def test_oversized_amount_keeps_session_usable(service):
    """Test a huge amount is not logged and later messages still work."""
    reply = service.handle_message("Spent " + "9" * 26 + " on food")
    assert reply.result.intent == "unrecognized"
    assert len(service.ledger) == 5

    query = service.handle_message("What's my balance?")
    assert query.summary.balance == Decimal("4935")


def test_ledger_failure_rolls_back(service, monkeypatch):
    """Test a failed summary removes the record that was just added."""
    def broken_summary():
        raise ArithmeticError("overflow")

    monkeypatch.setattr(service.ledger, "summary", broken_summary)
    with pytest.raises(LedgerError) as exc_info:
        service.handle_message("Spent $50 on groceries")
    assert exc_info.value.details["error"] == "overflow"
    assert len(service.ledger) == 5
