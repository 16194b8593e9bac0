"""
In-memory transaction ledger.
Owns transaction records and running totals for the single chat session.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from core.exceptions import LedgerError
from core.logger import setup_logger
from core.schema import BalanceSummary, TransactionKind, TransactionRecord, TransactionResult

logger = setup_logger(__name__)

# Sample transactions shown on a fresh session
DEMO_TRANSACTIONS = [
    (TransactionKind.INCOME, "4500", "Salary", "Monthly salary", datetime(2024, 1, 1, tzinfo=timezone.utc)),
    (TransactionKind.EXPENSE, "120", "Food", "Grocery shopping", datetime(2024, 1, 3, tzinfo=timezone.utc)),
    (TransactionKind.EXPENSE, "45", "Transport", "Uber rides", datetime(2024, 1, 5, tzinfo=timezone.utc)),
    (TransactionKind.INCOME, "800", "Freelance", "Design project", datetime(2024, 1, 7, tzinfo=timezone.utc)),
    (TransactionKind.EXPENSE, "200", "Bills", "Electricity bill", datetime(2024, 1, 10, tzinfo=timezone.utc)),
]


class TransactionLedger:
    """Transaction records kept newest first, in memory only."""
    
    def __init__(self):
        """Initialize an empty ledger."""
        self._records: List[TransactionRecord] = []
    
    def __len__(self) -> int:
        return len(self._records)
    
    def _insert(self, record: TransactionRecord) -> TransactionRecord:
        self._records.insert(0, record)
        return record
    
    def add(self, result: TransactionResult) -> TransactionRecord:
        """
        Turn a classified transaction into a ledger record.
        
        Args:
            result: Transaction result from the classifier
        
        Returns:
            The stored record with generated id and timestamp
        
        Raises:
            LedgerError: If result is not a transaction
        """
        if not isinstance(result, TransactionResult):
            raise LedgerError(
                "Only transaction results can be added to the ledger",
                details={"intent": getattr(result, "intent", type(result).__name__)}
            )
        
        record = TransactionRecord(
            id=str(uuid.uuid4()),
            kind=result.kind,
            amount=result.amount,
            category=result.category,
            description=result.description,
            created_at=datetime.now(timezone.utc),
        )
        self._insert(record)
        logger.info(f"Logged {record.kind.value} {record.amount} under {record.category}")
        return record
    
    def list(self, limit: Optional[int] = None) -> List[TransactionRecord]:
        """
        Get records, newest first.
        
        Args:
            limit: Maximum number of records to return
        
        Returns:
            List of transaction records
        """
        if limit is None:
            return list(self._records)
        return self._records[:max(limit, 0)]
    
    def summary(self) -> BalanceSummary:
        """Compute total income, total expenses and balance."""
        total_income = sum(
            (r.amount for r in self._records if r.kind == TransactionKind.INCOME),
            Decimal("0")
        )
        total_expenses = sum(
            (r.amount for r in self._records if r.kind == TransactionKind.EXPENSE),
            Decimal("0")
        )
        return BalanceSummary(
            total_income=total_income,
            total_expenses=total_expenses,
            balance=total_income - total_expenses,
            transaction_count=len(self._records),
        )
    
    def seed_demo_transactions(self) -> int:
        """
        Load the sample transactions.
        
        Returns:
            Number of records added
        """
        for kind, amount, category, description, created_at in DEMO_TRANSACTIONS:
            self._insert(TransactionRecord(
                id=str(uuid.uuid4()),
                kind=kind,
                amount=amount,
                category=category,
                description=description,
                created_at=created_at,
            ))
        logger.info(f"Seeded ledger with {len(DEMO_TRANSACTIONS)} demo transactions")
        return len(DEMO_TRANSACTIONS)
    
    def clear(self) -> None:
        """Remove all records."""
        self._records.clear()
    
    def discard(self, record_id: str) -> bool:
        """
        Remove a record by id.
        
        Args:
            record_id: Id of the record to remove
        
        Returns:
            True if a record was removed
        """
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[idx]
                logger.info(f"Discarded record {record_id}")
                return True
        return False
