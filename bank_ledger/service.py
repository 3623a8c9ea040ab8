"""
Ledger Service Module

Orchestrates the account store and account operations for a front end:
creating, finding and listing accounts, plus the load, mutate and save flows
for deposits, withdrawals and transfers.
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from .accounts import Account
from .logging_config import get_logger, log_action
from .money import AmountLike, format_amount
from .storage import InMemoryStorage, StorageInterface


class LedgerService:
    """
    Front-end facing entry point to the ledger

    Errors raised by accounts and the store propagate unchanged.
    """

    def __init__(self, storage: Optional[StorageInterface] = None):
        self.storage = storage if storage is not None else InMemoryStorage()
        self.logger = get_logger("bank_ledger.service")

    def create_account(self, owner: str) -> Account:
        """
        Create and store a new account with zero balance

        Args:
            owner: Display name of the account holder

        Returns:
            The stored account, with its newly minted identity
        """
        account = Account(owner=owner)
        self.storage.save(account)

        log_action(
            self.logger, "info", "Account created",
            action="create_account", resource=f"account:{account.id}",
            extra={"account_id": account.id, "owner": owner}
        )

        return account

    def find_account(self, account_id: str) -> Account:
        """Get account by ID, raising AccountNotFoundError if absent"""
        return self.storage.load(account_id)

    def list_all_accounts(self) -> List[Account]:
        """Get all accounts; order is not guaranteed"""
        return self.storage.load_all()

    def deposit(self, account_id: str, amount: AmountLike) -> Account:
        """Deposit into a stored account and save it"""
        account = self.storage.load(account_id)
        entry = account.deposit(amount)
        self.storage.save(account)

        self._log_entry("deposit", account, entry.amount)
        return account

    def withdraw(self, account_id: str, amount: AmountLike) -> Account:
        """Withdraw from a stored account and save it"""
        account = self.storage.load(account_id)
        entry = account.withdraw(amount)
        self.storage.save(account)

        self._log_entry("withdraw", account, entry.amount)
        return account

    def transfer(self, from_account_id: str, to_account_id: str,
                 amount: AmountLike) -> Tuple[Account, Account]:
        """
        Transfer between two stored accounts and save both

        Account.transfer validates everything before touching either
        account, so the saves only run after a transfer that fully applied.

        Args:
            from_account_id: Sending account
            to_account_id: Receiving account
            amount: Amount to move

        Returns:
            Tuple of (sender, receiver) after the transfer

        Raises:
            AccountNotFoundError: If either account is unknown
            InvalidAmountError: If amount is not greater than zero
            SameAccountTransferError: If both IDs name the same account
            InsufficientFundsError: If the sender cannot cover the amount
        """
        sender = self.storage.load(from_account_id)
        receiver = self.storage.load(to_account_id)

        entry = sender.transfer(receiver, amount)

        self.storage.save(sender)
        self.storage.save(receiver)

        log_action(
            self.logger, "info", "Transfer completed",
            action="transfer", resource=f"account:{sender.id}",
            extra={
                "from_account": sender.id,
                "to_account": receiver.id,
                "amount": format_amount(entry.amount),
                "from_balance": format_amount(sender.balance),
                "to_balance": format_amount(receiver.balance)
            }
        )

        return sender, receiver

    def get_balance(self, account_id: str) -> Decimal:
        """Current balance of a stored account"""
        return self.storage.load(account_id).get_balance()

    def get_statement(self, account_id: str) -> str:
        """Text statement of a stored account"""
        return self.storage.load(account_id).get_statement()

    def _log_entry(self, action: str, account: Account, amount: Decimal) -> None:
        log_action(
            self.logger, "info", f"{action.capitalize()} completed",
            action=action, resource=f"account:{account.id}",
            extra={
                "account_id": account.id,
                "amount": format_amount(amount),
                "balance": format_amount(account.balance)
            }
        )
