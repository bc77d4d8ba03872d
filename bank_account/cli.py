"""
CLI interface for the bank account library.

Commands are chained and act on a single in-memory account opened at the
start of the invocation, for example:

    bank-account open --name "Alice" --balance 100 deposit --amount 50 show

Nothing is persisted between invocations.
"""

import click
from decimal import Decimal, InvalidOperation
from typing import Optional

from .accounts import Account, BaseAccount, FixedDepositAccount
from .config import AccountSettings, setup_logging
from .exceptions import AccountError


class AccountSession:
    """Holds the account opened during one CLI invocation."""

    def __init__(self, settings: Optional[AccountSettings] = None):
        """Initialize an empty session."""
        self.settings = settings or AccountSettings()
        self.account: Optional[BaseAccount] = None

    def require_account(self) -> BaseAccount:
        """Return the open account or fail with a usage error."""
        if self.account is None:
            raise click.UsageError("No account opened. Use 'open' or 'open-fixed' first.")
        return self.account

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"${amount:,.2f}"

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        try:
            # Remove $ and commas
            clean_str = amount_str.replace('$', '').replace(',', '').strip()
            value = Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise ValueError(f"Invalid amount: {amount_str}")

        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount_str}")
        return value


def fail(ctx, error: Exception):
    """Report an error and stop the command chain."""
    click.echo(f"❌ Error: {error}", err=True)
    ctx.exit(1)


@click.group(chain=True)
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                                case_sensitive=False),
              help='Logging level (default: $BANK_ACCOUNT_LOG_LEVEL or WARNING)')
@click.pass_context
def cli(ctx, log_level):
    """Bank Account CLI"""
    settings = AccountSettings.from_env()
    setup_logging(log_level or settings.log_level)
    ctx.obj = AccountSession(settings)


@cli.command('open')
@click.option('--name', prompt='Account holder name', help='Account holder name')
@click.option('--balance', default='0.00', help='Initial balance')
@click.pass_context
def open_account(ctx, name, balance):
    """Open a standard account."""
    session = ctx.obj

    try:
        session.account = Account(name, session.parse_currency(balance), settings=session.settings)
    except (AccountError, ValueError) as e:
        fail(ctx, e)

    click.echo("✅ Account opened successfully!")
    click.echo(f"Account Number: {session.account.account_number}")
    click.echo(f"Balance: {session.format_currency(session.account.balance)}")


@cli.command('open-fixed')
@click.option('--name', prompt='Account holder name', help='Account holder name')
@click.option('--balance', prompt='Deposit amount', help='Amount deposited at opening')
@click.option('--interest', default=None, help='Interest rate in percent')
@click.option('--term', type=int, default=None, help='Term in months')
@click.pass_context
def open_fixed(ctx, name, balance, interest, term):
    """Open a fixed deposit account."""
    session = ctx.obj

    try:
        rate = session.parse_currency(interest) if interest is not None else None
        session.account = FixedDepositAccount(
            name,
            session.parse_currency(balance),
            interest_rate=rate,
            term_months=term,
            settings=session.settings,
        )
    except (AccountError, ValueError) as e:
        fail(ctx, e)

    account = session.account
    click.echo("✅ Fixed deposit opened successfully!")
    click.echo(f"Account Number: {account.account_number}")
    click.echo(f"Principal: {session.format_currency(account.principal)}")
    click.echo(f"Interest Rate: {account.interest_rate}% for {account.term_months} months")
    click.echo(f"Balance at Maturity: {session.format_currency(account.balance)}")


@cli.command()
@click.option('--amount', prompt='Deposit amount', help='Amount to deposit')
@click.pass_context
def deposit(ctx, amount):
    """Deposit money to the account."""
    session = ctx.obj
    account = session.require_account()

    try:
        deposit_amount = session.parse_currency(amount)
        new_balance = account.deposit(deposit_amount)
    except (AccountError, ValueError) as e:
        fail(ctx, e)

    click.echo("✅ Deposit successful!")
    click.echo(f"Amount: {session.format_currency(deposit_amount)}")
    click.echo(f"New Balance: {session.format_currency(new_balance)}")


@cli.command()
@click.option('--amount', prompt='Withdrawal amount', help='Amount to withdraw')
@click.pass_context
def withdraw(ctx, amount):
    """Withdraw money from the account."""
    session = ctx.obj
    account = session.require_account()

    try:
        withdraw_amount = session.parse_currency(amount)
        new_balance = account.withdraw(withdraw_amount)
    except (AccountError, ValueError) as e:
        fail(ctx, e)

    click.echo("✅ Withdrawal successful!")
    click.echo(f"Amount: {session.format_currency(withdraw_amount)}")
    click.echo(f"New Balance: {session.format_currency(new_balance)}")


@cli.command()
@click.pass_context
def close(ctx):
    """Close the account."""
    session = ctx.obj
    account = session.require_account()

    try:
        account.close()
    except AccountError as e:
        fail(ctx, e)

    click.echo(f"✅ Account {account.account_number} closed")
    click.echo(f"Closed: {account.closed_at.strftime('%Y-%m-%d %H:%M:%S')}")


@cli.command()
@click.pass_context
def show(ctx):
    """Show account details."""
    session = ctx.obj
    summary = session.require_account().to_dict()

    click.echo("\n📊 Account Details")
    click.echo(f"{'='*50}")
    click.echo(f"Account Number: {summary['account_number']}")
    click.echo(f"Holder: {summary['holder_name']}")
    click.echo(f"Type: {summary['account_type']}")
    if summary['account_type'] == FixedDepositAccount.account_type:
        click.echo(f"Principal: {session.format_currency(summary['principal'])}")
        click.echo(f"Interest Rate: {summary['interest_rate']}%")
        click.echo(f"Term: {summary['term_months']} months")
    click.echo(f"Balance: {session.format_currency(summary['balance'])}")
    click.echo(f"Status: {'Closed' if summary['is_closed'] else 'Open'}")
    click.echo(f"Created: {summary['created_at'].strftime('%Y-%m-%d %H:%M:%S')}")
    if summary['closed_at']:
        click.echo(f"Closed: {summary['closed_at'].strftime('%Y-%m-%d %H:%M:%S')}")
    click.echo(f"Transactions: {summary['transaction_count']}")


@cli.command()
@click.pass_context
def history(ctx):
    """Show the transaction log."""
    account = ctx.obj.require_account()

    if not account.transactions:
        click.echo("No transactions")
        return

    click.echo("\n📋 Transactions")
    click.echo(f"{'-'*50}")
    for txn in account.transactions:
        click.echo(str(txn))


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
