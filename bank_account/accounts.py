"""
Account types for the bank account library.

This module contains the business rules for plain accounts and fixed deposit
accounts: which operations are allowed while an account is open or closed,
how the transaction log grows, and how a fixed deposit reports its balance.
"""

import abc
import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from .config import AccountSettings, DEFAULT_SETTINGS
from .exceptions import (
    AccountAlreadyClosedError,
    AccountClosedError,
    AlreadySetError,
    InsufficientFundsError,
    InvalidAmountError,
    UnsupportedOperationError,
)
from .models import Transaction, TransactionType

logger = logging.getLogger(__name__)


def generate_account_number(prefix: str = DEFAULT_SETTINGS.account_number_prefix) -> str:
    """Generate a random account number."""
    # Format: PREFIX-XXXXXXXXXXXX (12 hex characters of a uuid4)
    unique_id = uuid.uuid4().hex[:12].upper()
    return f"{prefix}-{unique_id}"


def to_decimal(value) -> Decimal:
    """Convert a numeric value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class BaseAccount(abc.ABC):
    """State and lifecycle shared by every account type."""

    account_type = "base"

    def __init__(self, holder_name: str, initial_balance=0,
                 settings: Optional[AccountSettings] = None):
        settings = settings or DEFAULT_SETTINGS

        self._holder_name = holder_name
        self._account_number = generate_account_number(settings.account_number_prefix)
        self._balance = to_decimal(initial_balance)
        self._transactions: List[Transaction] = []
        self._closed = False
        self._created_at = datetime.now()
        self._closed_at: Optional[datetime] = None

        if not self._balance.is_finite():
            raise InvalidAmountError(f"Invalid opening balance: {initial_balance}. Balance must be a finite number.")

        if self._balance < 0:
            logger.warning("Account %s opened with negative balance %s",
                           self._account_number, self._balance)

        logger.info("Opened %s account %s for %s",
                    self.account_type, self._account_number, holder_name)

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        """Current balance of the account."""
        return self._balance

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Read-only snapshot of the transaction log, oldest first."""
        return tuple(self._transactions)

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def closed_at(self) -> Optional[datetime]:
        """When the account was closed, or None while it is open."""
        return self._closed_at

    @abc.abstractmethod
    def deposit(self, amount) -> Decimal:
        """Deposit money to the account and return the new balance."""

    @abc.abstractmethod
    def withdraw(self, amount) -> Decimal:
        """Withdraw money from the account and return the new balance."""

    def close(self) -> None:
        """Close the account. Closed accounts cannot be reopened."""
        if self._closed:
            raise AccountAlreadyClosedError("Account is already closed.")

        self._closed = True
        self._closed_at = datetime.now()
        logger.info("Closed account %s", self._account_number)

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the account for display."""
        return {
            'holder_name': self.holder_name,
            'account_number': self.account_number,
            'account_type': self.account_type,
            'balance': self.balance,
            'is_closed': self.is_closed,
            'created_at': self.created_at,
            'closed_at': self.closed_at,
            'transaction_count': len(self._transactions),
        }

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(holder_name={self.holder_name!r}, "
                f"account_number={self.account_number!r}, balance={self.balance!r})")


class Account(BaseAccount):
    """A basic bank account accepting deposits and withdrawals while open."""

    account_type = "standard"

    def _validate(self, amount: Decimal, operation: str) -> None:
        if not amount.is_finite() or amount <= 0:
            logger.debug("Rejected %s of %s on %s: amount not positive",
                         operation, amount, self._account_number)
            raise InvalidAmountError(f"Invalid {operation} amount: {amount}. Amount must be positive.")

        if self._closed:
            logger.debug("Rejected %s on closed account %s", operation, self._account_number)
            raise AccountClosedError(f"Cannot {operation}: account is closed.")

    def _record(self, transaction_type: TransactionType, amount: Decimal) -> None:
        transaction = Transaction(
            transaction_type=transaction_type,
            amount=amount,
            balance_after=self._balance,
        )
        self._transactions.append(transaction)
        logger.info("%s on %s, balance now %s", transaction, self._account_number, self._balance)

    def deposit(self, amount) -> Decimal:
        """Deposit money to the account."""
        amount = to_decimal(amount)
        self._validate(amount, "deposit")

        self._balance += amount
        self._record(TransactionType.DEPOSIT, amount)
        return self._balance

    def withdraw(self, amount) -> Decimal:
        """Withdraw money from the account."""
        amount = to_decimal(amount)
        self._validate(amount, "withdrawal")

        if self._balance < amount:
            logger.debug("Rejected withdrawal of %s on %s: insufficient funds",
                         amount, self._account_number)
            raise InsufficientFundsError(f"Insufficient funds. Available: {self._balance}")

        self._balance -= amount
        self._record(TransactionType.WITHDRAWAL, amount)
        return self._balance


class FixedDepositAccount(BaseAccount):
    """
    A fixed deposit account.

    Funds are accepted only when the account is opened. The interest rate and
    term are fixed at opening, and the reported balance includes the interest
    earned over the term. Deposits and withdrawals are never allowed.
    """

    account_type = "fixed_deposit"

    def __init__(self, holder_name: str, initial_balance,
                 interest_rate=None, term_months: Optional[int] = None,
                 settings: Optional[AccountSettings] = None):
        settings = settings or DEFAULT_SETTINGS
        if interest_rate is None:
            interest_rate = settings.default_interest_rate
        if term_months is None:
            term_months = settings.default_term_months

        self._interest_rate = to_decimal(interest_rate)
        if not self._interest_rate.is_finite():
            raise InvalidAmountError(f"Invalid interest rate: {interest_rate}. Rate must be a finite number.")
        self._term_months = int(term_months)
        super().__init__(holder_name, initial_balance, settings)

    @property
    def interest_rate(self) -> Decimal:
        """Interest rate as a percentage of the principal."""
        return self._interest_rate

    @interest_rate.setter
    def interest_rate(self, value) -> None:
        self.set_interest_rate(value)

    @property
    def term_months(self) -> int:
        return self._term_months

    @term_months.setter
    def term_months(self, value) -> None:
        self.set_term_months(value)

    def set_interest_rate(self, value) -> None:
        """Interest rate is set once when the account is opened."""
        raise AlreadySetError("Interest rate can only be set once.")

    def set_term_months(self, value) -> None:
        """Term is set once when the account is opened."""
        raise AlreadySetError("Term can only be set once.")

    @property
    def principal(self) -> Decimal:
        """Amount deposited when the account was opened."""
        return self._balance

    @property
    def balance(self) -> Decimal:
        """Principal plus the interest earned on it."""
        return self._balance + self._balance * self._interest_rate / 100

    def deposit(self, amount) -> Decimal:
        raise UnsupportedOperationError("Deposits are not allowed for fixed deposit accounts.")

    def withdraw(self, amount) -> Decimal:
        raise UnsupportedOperationError("Withdrawals are not allowed for fixed deposit accounts.")

    def to_dict(self) -> Dict[str, Any]:
        summary = super().to_dict()
        summary.update({
            'principal': self.principal,
            'interest_rate': self.interest_rate,
            'term_months': self.term_months,
        })
        return summary
