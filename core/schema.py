"""
Pydantic schemas for classification results, ledger records and API payloads.
"""
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

CENTS = Decimal("0.01")

# Largest amount a single message may log
MAX_AMOUNT = Decimal("999999999999.99")

DEFAULT_INCOME_CATEGORIES: Tuple[str, ...] = ("Salary", "Freelance", "Investment", "Gift", "Other")
DEFAULT_EXPENSE_CATEGORIES: Tuple[str, ...] = (
    "Food",
    "Transport",
    "Shopping",
    "Bills",
    "Entertainment",
    "Health",
    "Other",
)


def normalize_amount(v):
    """Quantize amounts to cents; floats go through str to avoid binary noise."""
    if v is None:
        return v
    if isinstance(v, float):
        v = str(v)
    if isinstance(v, (str, int)):
        v = Decimal(v)
    if isinstance(v, Decimal):
        return v.quantize(CENTS, rounding=ROUND_HALF_UP)
    return v


Amount = Annotated[Decimal, BeforeValidator(normalize_amount)]


class TransactionKind(str, Enum):
    """Direction of money for a logged transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class CategoryCatalog(BaseModel):
    """Ordered income and expense category labels, fixed at startup."""
    model_config = ConfigDict(frozen=True)

    income: Tuple[str, ...] = DEFAULT_INCOME_CATEGORIES
    expense: Tuple[str, ...] = DEFAULT_EXPENSE_CATEGORIES

    def all(self) -> Tuple[str, ...]:
        """Income categories first, then expense categories, in catalog order."""
        return self.income + self.expense


DEFAULT_CATALOG = CategoryCatalog()


class QueryResult(BaseModel):
    """The user asked for their balance or a summary."""
    model_config = ConfigDict(frozen=True)

    intent: Literal["query"] = "query"


class TransactionResult(BaseModel):
    """A message parsed into a categorized income or expense."""
    model_config = ConfigDict(frozen=True)

    intent: Literal["transaction"] = "transaction"
    kind: TransactionKind
    amount: Amount = Field(..., gt=0, description="Positive amount with 2-decimal precision")
    category: str = Field(..., min_length=1)
    description: str = Field(..., description="Raw message text")


class UnrecognizedResult(BaseModel):
    """No amount could be parsed from the message."""
    model_config = ConfigDict(frozen=True)

    intent: Literal["unrecognized"] = "unrecognized"


ClassificationResult = Annotated[
    Union[QueryResult, TransactionResult, UnrecognizedResult],
    Field(discriminator="intent"),
]


class TransactionRecord(BaseModel):
    """A logged transaction as stored by the ledger."""
    id: str
    kind: TransactionKind
    amount: Amount = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    description: str = ""
    created_at: datetime


class BalanceSummary(BaseModel):
    """Running totals over the ledger."""
    total_income: Amount = Decimal("0.00")
    total_expenses: Amount = Decimal("0.00")
    balance: Amount = Decimal("0.00")
    transaction_count: int = 0


class ChatMessage(BaseModel):
    """One entry of the chat transcript."""
    id: str
    role: Literal["user", "system"]
    content: str
    timestamp: datetime


class ChatRequest(BaseModel):
    """Incoming chat message."""
    message: str = Field(..., max_length=1000)


class ChatReply(BaseModel):
    """Reply to a chat message, with what the classifier decided."""
    reply: ChatMessage
    result: ClassificationResult
    transaction: Optional[TransactionRecord] = None
    summary: BalanceSummary


class CatalogResponse(BaseModel):
    """Configured category catalog."""
    income: List[str]
    expense: List[str]
