"""Shared fixtures for the bank account tests."""

import logging

import pytest

from bank_account.accounts import Account, FixedDepositAccount


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def account():
    """Open account with a balance of 1000."""
    return Account("John Smith", 1000)


@pytest.fixture
def fixed_deposit():
    """Fixed deposit of 1000 at 5% for 12 months."""
    return FixedDepositAccount("Jane Doe", 1000, 5, 12)
