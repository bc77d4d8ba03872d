"""Configuration management for the bank account library."""

import logging
import os
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AccountSettings:
    """Defaults applied when opening accounts."""

    default_interest_rate: Decimal = Decimal('3.0')
    default_term_months: int = 6
    account_number_prefix: str = "ACCT"
    log_level: str = "WARNING"

    def __post_init__(self):
        if not isinstance(self.default_interest_rate, Decimal):
            object.__setattr__(self, 'default_interest_rate', Decimal(str(self.default_interest_rate)))

    @classmethod
    def from_env(cls) -> "AccountSettings":
        """Create settings from environment variables."""
        return cls(
            default_interest_rate=Decimal(os.getenv("BANK_ACCOUNT_INTEREST_RATE", "3.0")),
            default_term_months=int(os.getenv("BANK_ACCOUNT_TERM_MONTHS", "6")),
            account_number_prefix=os.getenv("BANK_ACCOUNT_NUMBER_PREFIX", "ACCT"),
            log_level=os.getenv("BANK_ACCOUNT_LOG_LEVEL", "WARNING"),
        )


DEFAULT_SETTINGS = AccountSettings()


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure root logging for command line use.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
