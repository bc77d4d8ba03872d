"""
Data models for the bank account library.

This module contains the transaction record kept in every account's history.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(Enum):
    """Types of transactions."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class Transaction:
    """Represents one entry of an account's transaction log."""

    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Normalize amounts to Decimal."""
        # Frozen dataclass, so assign through object.__setattr__
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if not isinstance(self.balance_after, Decimal):
            object.__setattr__(self, 'balance_after', Decimal(str(self.balance_after)))

    @property
    def label(self) -> str:
        """Human readable name of the transaction kind."""
        if self.transaction_type is TransactionType.DEPOSIT:
            return "Deposit"
        return "Withdraw"

    def __str__(self) -> str:
        return f"{self.label} ${self.amount:,.2f} at {self.timestamp.strftime('%Y-%m-%d %H:%M:%S')}"
