"""
Transaction Module

Append-only record of balance movements. A Transaction is written by the
ledger as a side effect of every successful deposit or withdrawal and is
never updated or removed afterwards. The amount is always positive; the
direction is carried by the transaction type.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass
from typing import Dict
from enum import Enum

from .errors import InvalidArgumentError
from .storage import StorageRecord


class TransactionType(Enum):
    """Types of ledger transactions"""
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


@dataclass
class Transaction(StorageRecord):
    """
    Single deposit or withdrawal against one account
    """
    account_id: int
    amount: Decimal
    transaction_type: TransactionType
    
    def __post_init__(self):
        if self.amount <= 0:
            raise InvalidArgumentError("Transaction amount must be positive")
    
    @property
    def timestamp(self) -> datetime:
        """Instant the transaction was recorded"""
        return self.created_at
    
    @property
    def is_deposit(self) -> bool:
        return self.transaction_type == TransactionType.DEPOSIT
    
    @property
    def is_withdrawal(self) -> bool:
        return self.transaction_type == TransactionType.WITHDRAWAL
    
    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign of its effect on the balance"""
        return self.amount if self.is_deposit else -self.amount
    
    def __str__(self) -> str:
        return (
            f"Transaction ID: {self.id}, Account ID: {self.account_id}, "
            f"Amount: {self.amount:,.2f}, Date: {self.timestamp:%Y-%m-%d %H:%M:%S}, "
            f"Type: {self.transaction_type.value}"
        )
    
    @classmethod
    def from_dict(cls, data: Dict) -> 'Transaction':
        """Rebuild a Transaction from its stored dictionary"""
        return cls(
            id=data['id'],
            created_at=datetime.fromisoformat(data['created_at']),
            account_id=data['account_id'],
            amount=Decimal(data['amount']),
            transaction_type=TransactionType(data['transaction_type'])
        )
