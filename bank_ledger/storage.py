"""
Account Store Module

Provides the abstract storage interface and the in-memory implementation.
The in-memory store keeps the Account instances themselves: every load
returns the same object that was saved.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import threading

from .accounts import Account
from .config import get_config
from .errors import AccountNotFoundError


class StorageInterface(ABC):
    """Abstract interface for account stores"""

    @abstractmethod
    def save(self, account: Account) -> Account:
        """Save an account, assigning an identity if it has none"""
        pass

    @abstractmethod
    def load(self, account_id: str) -> Account:
        """Load an account, raising AccountNotFoundError if absent"""
        pass

    @abstractmethod
    def load_all(self) -> List[Account]:
        """Load every stored account in no particular order"""
        pass

    @abstractmethod
    def exists(self, account_id: str) -> bool:
        """Check if an account is stored under account_id"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored accounts"""
        pass


class InMemoryStorage(StorageInterface):
    """In-memory account store with sequential identities"""

    def __init__(self, first_id: Optional[int] = None):
        if first_id is None:
            first_id = get_config().first_account_id
        if first_id < 1:
            raise ValueError("first_id must be at least 1")

        self._accounts: Dict[str, Account] = {}
        self._next_id = first_id
        self._lock = threading.RLock()

    def _mint_id(self) -> str:
        """Next unused sequential identity"""
        while str(self._next_id) in self._accounts:
            self._next_id += 1
        account_id = str(self._next_id)
        self._next_id += 1
        return account_id

    def save(self, account: Account) -> Account:
        """Save an account, minting an identity for unidentified accounts"""
        with self._lock:
            if not account.id:
                account.id = self._mint_id()
            self._accounts[account.id] = account
            return account

    def load(self, account_id: str) -> Account:
        """Load the stored account instance"""
        with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                raise AccountNotFoundError(account_id)
            return account

    def load_all(self) -> List[Account]:
        """Load all stored accounts"""
        with self._lock:
            return list(self._accounts.values())

    def exists(self, account_id: str) -> bool:
        """Check if an account exists"""
        with self._lock:
            return account_id in self._accounts

    def count(self) -> int:
        """Count stored accounts"""
        with self._lock:
            return len(self._accounts)
