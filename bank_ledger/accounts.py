"""
Account Module

An account owns an identity, a balance and an append-only history of ledger
entries. Every balance change goes through deposit, withdraw or transfer,
each of which validates fully before mutating anything, so the balance
always equals the signed sum of the history.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import List, Optional

from .config import get_config
from .entries import EntryDirection, EntryKind, LedgerEntry
from .errors import InsufficientFundsError, SameAccountTransferError
from .money import ZERO, AmountLike, format_amount, to_positive_amount


EMPTY_STATEMENT = "Transaction history is empty"


@dataclass
class Account:
    """
    Bank account with a non-negative Decimal balance

    id stays None until the account is first saved to a store. Balance and
    history start empty and only change through deposit, withdraw and
    transfer.
    """
    owner: str
    id: Optional[str] = None
    balance: Decimal = field(default=ZERO, init=False)
    history: List[LedgerEntry] = field(default_factory=list, init=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def deposit(self, amount: AmountLike) -> LedgerEntry:
        """
        Add funds to the account

        Raises:
            InvalidAmountError: If amount is not greater than zero
        """
        amount = to_positive_amount(amount)

        entry = LedgerEntry(
            kind=EntryKind.DEPOSIT,
            amount=amount,
            direction=EntryDirection.CREDIT,
            description=f"Deposit: {format_amount(amount, signed=True)}"
        )

        self.balance += amount
        self.history.append(entry)
        return entry

    def withdraw(self, amount: AmountLike) -> LedgerEntry:
        """
        Take funds out of the account

        Raises:
            InvalidAmountError: If amount is not greater than zero
            InsufficientFundsError: If amount exceeds the balance
        """
        amount = to_positive_amount(amount)
        self._require_funds(amount)

        entry = LedgerEntry(
            kind=EntryKind.WITHDRAW,
            amount=amount,
            direction=EntryDirection.DEBIT,
            description=f"Withdrawal: {format_amount(-amount, signed=True)}"
        )

        self.balance -= amount
        self.history.append(entry)
        return entry

    def transfer(self, to: 'Account', amount: AmountLike) -> LedgerEntry:
        """
        Move funds from this account to another

        Checks run in a fixed order: amount, then same account, then funds.
        Both legs are built before either account is touched, so a rejected
        transfer leaves both accounts exactly as they were.

        Args:
            to: Receiving account
            amount: Amount to move

        Returns:
            The outgoing entry appended to this account's history

        Raises:
            InvalidAmountError: If amount is not greater than zero
            SameAccountTransferError: If to is this account
            InsufficientFundsError: If amount exceeds the balance
        """
        amount = to_positive_amount(amount)

        if to is self or to.id == self.id:
            raise SameAccountTransferError(
                f"Cannot transfer from account {self.id} to itself"
            )

        self._require_funds(amount)

        now = datetime.now(timezone.utc)
        outgoing = LedgerEntry(
            kind=EntryKind.TRANSFER,
            amount=amount,
            direction=EntryDirection.DEBIT,
            description=f"Transfer to account {to.id}: {format_amount(-amount, signed=True)}",
            timestamp=now,
            counterparty_id=to.id
        )
        incoming = LedgerEntry(
            kind=EntryKind.TRANSFER,
            amount=amount,
            direction=EntryDirection.CREDIT,
            description=f"Transfer from account {self.id}: {format_amount(amount, signed=True)}",
            timestamp=now,
            counterparty_id=self.id
        )

        self.balance -= amount
        to.balance += amount
        self.history.append(outgoing)
        to.history.append(incoming)
        return outgoing

    def get_balance(self) -> Decimal:
        """Current balance"""
        return self.balance

    def get_statement(self) -> str:
        """Render owner, identity, balance and numbered history as text"""
        if not self.history:
            return EMPTY_STATEMENT

        timestamp_format = get_config().statement_timestamp_format
        lines = [
            "Account statement:",
            f"Owner: {self.owner}",
            f"Account number: {self.id}",
            f"Current balance: {format_amount(self.balance)}",
            "",
            "Transactions:",
        ]
        for number, entry in enumerate(self.history, start=1):
            lines.append(
                f"{number}. {entry.description} [{entry.timestamp.strftime(timestamp_format)}]"
            )

        return "\n".join(lines) + "\n"

    def entries_total(self) -> Decimal:
        """Signed sum of the history; equals balance for a consistent account"""
        return sum((entry.signed_amount for entry in self.history), ZERO)

    def _require_funds(self, amount: Decimal) -> None:
        if amount > self.balance:
            raise InsufficientFundsError(
                f"Insufficient funds in account {self.id}: "
                f"balance {format_amount(self.balance)}, requested {format_amount(amount)}"
            )
