"""Exception hierarchy for the bank account library."""


class AccountError(Exception):
    """Base exception for all account errors."""


class InvalidOperationError(AccountError, ValueError):
    """Raised when a deposit or withdrawal cannot be applied."""


class InvalidAmountError(InvalidOperationError):
    """Raised when a transaction amount is not positive."""


class AccountClosedError(InvalidOperationError):
    """Raised when a transaction is attempted on a closed account."""


class InsufficientFundsError(AccountError, ValueError):
    """Raised when a withdrawal exceeds the available balance."""


class AccountAlreadyClosedError(AccountError):
    """Raised when closing an account that is already closed."""


class AlreadySetError(AccountError, ValueError):
    """Raised when a set-once field is assigned a second time."""


class UnsupportedOperationError(AccountError, NotImplementedError):
    """Raised when an account type does not support an operation."""
