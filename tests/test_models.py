"""
Tests for the models module.

This module contains tests for the Transaction record and TransactionType enum.
"""

import dataclasses

import pytest
from datetime import datetime
from decimal import Decimal

from bank_account.models import Transaction, TransactionType


class TestTransactionType:
    """Test TransactionType enum."""

    def test_transaction_types(self):
        """Test all transaction type values."""
        assert TransactionType.DEPOSIT.value == "deposit"
        assert TransactionType.WITHDRAWAL.value == "withdrawal"


class TestTransaction:
    """Test Transaction model."""

    def test_transaction_initialization(self):
        """Test transaction creation with explicit values."""
        test_time = datetime(2026, 10, 19, 9, 30, 0)
        txn = Transaction(
            transaction_type=TransactionType.DEPOSIT,
            amount=Decimal('250.00'),
            balance_after=Decimal('1250.00'),
            timestamp=test_time,
        )

        assert txn.transaction_type == TransactionType.DEPOSIT
        assert txn.amount == Decimal('250.00')
        assert txn.balance_after == Decimal('1250.00')
        assert txn.timestamp == test_time

    def test_timestamp_defaults_to_now(self):
        """Test that the timestamp is filled in on creation."""
        before = datetime.now()
        txn = Transaction(TransactionType.DEPOSIT, Decimal('1'), Decimal('1'))
        after = datetime.now()

        assert before <= txn.timestamp <= after

    def test_amount_decimal_conversion(self):
        """Test automatic conversion of amounts to Decimal."""
        txn = Transaction(TransactionType.WITHDRAWAL, 10.1, "89.9")

        assert txn.amount == Decimal('10.1')
        assert isinstance(txn.amount, Decimal)
        assert txn.balance_after == Decimal('89.9')
        assert isinstance(txn.balance_after, Decimal)

    def test_transaction_is_immutable(self):
        """Test that log entries cannot be edited."""
        txn = Transaction(TransactionType.DEPOSIT, Decimal('5'), Decimal('5'))

        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.amount = Decimal('500')

    def test_str_deposit(self):
        """Test log line for a deposit."""
        txn = Transaction(
            TransactionType.DEPOSIT,
            Decimal('1234.5'),
            Decimal('1234.5'),
            timestamp=datetime(2026, 10, 19, 9, 30, 0),
        )

        assert str(txn) == "Deposit $1,234.50 at 2026-10-19 09:30:00"

    def test_str_withdrawal(self):
        """Test log line for a withdrawal."""
        txn = Transaction(
            TransactionType.WITHDRAWAL,
            Decimal('20'),
            Decimal('80'),
            timestamp=datetime(2026, 1, 2, 3, 4, 5),
        )

        assert str(txn) == "Withdraw $20.00 at 2026-01-02 03:04:05"
