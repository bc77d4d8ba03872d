"""
Bank Account

An in-memory model of a basic bank account and a fixed deposit account.
Supports deposits, withdrawals, transaction history, closing accounts and
interest-bearing balances for fixed deposits.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from typing import Optional

from .models import Transaction, TransactionType
from .accounts import Account, BaseAccount, FixedDepositAccount, generate_account_number
from .config import AccountSettings, setup_logging
from .exceptions import (
    AccountAlreadyClosedError,
    AccountClosedError,
    AccountError,
    AlreadySetError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidOperationError,
    UnsupportedOperationError,
)
from .cli import main


def open_account(holder_name: str, initial_balance=0) -> Account:
    """
    Open a standard account using settings from the environment.

    Args:
        holder_name: Name of the account holder
        initial_balance: Opening balance

    Returns:
        Account instance
    """
    return Account(holder_name, initial_balance, settings=AccountSettings.from_env())


def open_fixed_deposit(holder_name: str, initial_balance, interest_rate=None,
                       term_months: Optional[int] = None) -> FixedDepositAccount:
    """
    Open a fixed deposit using settings from the environment.

    Interest rate and term fall back to the configured defaults.
    """
    return FixedDepositAccount(
        holder_name,
        initial_balance,
        interest_rate=interest_rate,
        term_months=term_months,
        settings=AccountSettings.from_env(),
    )


__all__ = [
    "Account",
    "BaseAccount",
    "FixedDepositAccount",
    "Transaction",
    "TransactionType",
    "AccountSettings",
    "AccountError",
    "InvalidOperationError",
    "InvalidAmountError",
    "AccountClosedError",
    "InsufficientFundsError",
    "AccountAlreadyClosedError",
    "AlreadySetError",
    "UnsupportedOperationError",
    "generate_account_number",
    "open_account",
    "open_fixed_deposit",
    "setup_logging",
    "main"
]
