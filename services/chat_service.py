"""
Chat service.
Runs each user message through the classifier, applies it to the ledger and
keeps the conversation transcript.
"""
import uuid
from datetime import datetime, timezone
from typing import List, Literal, Optional

from classifier.classify import classify
from classifier.replies import WELCOME_MESSAGE, build_reply
from classifier.rules import DEFAULT_RULES, RuleSet
from core.config import get_settings
from core.exceptions import ClassificationError, LedgerError, ValidationError
from core.logger import setup_logger
from core.schema import ChatMessage, ChatReply, TransactionResult
from services.ledger_service import TransactionLedger

logger = setup_logger(__name__)


class ChatService:
    """Single-session chat over an in-memory ledger."""

    def __init__(self, ledger: Optional[TransactionLedger] = None, rules: RuleSet = DEFAULT_RULES):
        """
        Initialize chat service.

        Args:
            ledger: Ledger to record transactions in (a fresh one by default)
            rules: Classifier rule set
        """
        self.settings = get_settings()
        self.catalog = self.settings.catalog()
        self.rules = rules
        self.ledger = ledger if ledger is not None else TransactionLedger()
        self.messages: List[ChatMessage] = []
        self.reset()

    def reset(self) -> None:
        """Restore the initial session: demo ledger (if enabled) and welcome message."""
        self.ledger.clear()
        if self.settings.seed_demo_data:
            self.ledger.seed_demo_transactions()
        self.messages = []
        self._append("system", WELCOME_MESSAGE)

    def _append(self, role: Literal["user", "system"], content: str) -> ChatMessage:
        message = ChatMessage(
            id=str(uuid.uuid4()),
            role=role,
            content=content,
            timestamp=datetime.now(timezone.utc),
        )
        self.messages.append(message)
        return message

    def handle_message(self, text: str) -> ChatReply:
        """
        Process one user message.

        Args:
            text: Raw message from the user

        Returns:
            ChatReply with the assistant message, classification and new totals

        Raises:
            ValidationError: If the message is empty
            ClassificationError: If classification fails unexpectedly
            LedgerError: If the ledger cannot be updated; the message is not logged
        """
        if not text or not text.strip():
            raise ValidationError("Message must not be empty")

        self._append("user", text)

        try:
            result = classify(text, self.catalog, self.rules)
        except Exception as e:
            logger.error(f"Classification failed: {e}", exc_info=True)
            raise ClassificationError(
                "Failed to classify message",
                details={"message": text, "error": str(e)}
            )

        record = None
        try:
            if isinstance(result, TransactionResult):
                record = self.ledger.add(result)
            summary = self.ledger.summary()
        except Exception as e:
            if record is not None:
                self.ledger.discard(record.id)
            logger.error(f"Ledger update failed: {e}", exc_info=True)
            raise LedgerError(
                "Failed to update ledger",
                details={"message": text, "error": str(e)}
            )

        reply = self._append("system", build_reply(result, summary, self.settings.currency_symbol))
        logger.info(f"Handled message as {result.intent}")

        return ChatReply(reply=reply, result=result, transaction=record, summary=summary)
