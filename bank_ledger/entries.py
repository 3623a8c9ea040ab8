"""
Ledger Entry Model

One immutable record per balance-affecting event. Entries are appended to
the history of the account that owns them and are never edited or removed.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from enum import Enum
import uuid


class EntryKind(Enum):
    """Types of balance-affecting events"""
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER = "TRANSFER"


class EntryDirection(Enum):
    """Effect of an entry on the owning account's balance"""
    CREDIT = "credit"  # Increases balance
    DEBIT = "debit"    # Decreases balance


@dataclass(frozen=True)
class LedgerEntry:
    """
    Immutable history record

    amount is always positive; direction carries the sign.
    """
    kind: EntryKind
    amount: Decimal
    description: str
    direction: EntryDirection
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    counterparty_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        if self.amount <= Decimal('0'):
            raise ValueError("Ledger entry amount must be positive")

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign of its effect on the balance"""
        if self.direction == EntryDirection.DEBIT:
            return -self.amount
        return self.amount

    @property
    def is_credit(self) -> bool:
        return self.direction == EntryDirection.CREDIT

    @property
    def is_debit(self) -> bool:
        return self.direction == EntryDirection.DEBIT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "direction": self.direction.value,
            "amount": str(self.amount),
            "timestamp": self.timestamp.isoformat(),
            "description": self.description,
            "counterparty_id": self.counterparty_id,
        }
