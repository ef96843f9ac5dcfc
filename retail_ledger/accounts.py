"""
Account Module

Savings and checking accounts. Both kinds share one record; the kind tag
selects the withdrawal rule:

- Savings: the balance can never go below zero. Carries an interest rate
  (percentage) that apply_interest() credits on demand.
- Checking: the balance may go negative down to -overdraft_limit.

The account itself is the single authority on whether funds are
sufficient; the ledger only orchestrates.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass
from typing import Dict, Optional
from enum import Enum

from .amounts import AmountLike, to_positive_amount
from .errors import InvalidArgumentError, InvalidOperationError
from .storage import StorageRecord


class AccountKind(Enum):
    """Account product kinds"""
    SAVINGS = "Savings"
    CHECKING = "Checking"
    
    @classmethod
    def from_label(cls, label: str) -> 'AccountKind':
        """Resolve an exact, case-sensitive kind label such as "Savings" """
        for kind in cls:
            if kind.value == label:
                return kind
        raise InvalidArgumentError(f"Invalid account type: {label!r}")


@dataclass
class Account(StorageRecord):
    """
    Customer account with a signed Decimal balance
    """
    account_number: str
    customer_id: int
    kind: AccountKind
    balance: Decimal = Decimal('0')
    interest_rate: Optional[Decimal] = None    # Savings only, percentage
    overdraft_limit: Optional[Decimal] = None  # Checking only
    
    def __post_init__(self):
        if self.kind == AccountKind.SAVINGS:
            if self.interest_rate is None:
                raise InvalidArgumentError("Savings account requires an interest rate")
            if self.overdraft_limit is not None:
                raise InvalidArgumentError("Savings account cannot have an overdraft limit")
        elif self.kind == AccountKind.CHECKING:
            if self.overdraft_limit is None:
                raise InvalidArgumentError("Checking account requires an overdraft limit")
            if self.overdraft_limit < 0:
                raise InvalidArgumentError("Overdraft limit cannot be negative")
            if self.interest_rate is not None:
                raise InvalidArgumentError("Checking account cannot have an interest rate")
    
    @property
    def is_savings(self) -> bool:
        return self.kind == AccountKind.SAVINGS
    
    @property
    def is_checking(self) -> bool:
        return self.kind == AccountKind.CHECKING
    
    @property
    def available_funds(self) -> Decimal:
        """Largest amount that can currently be withdrawn"""
        if self.is_checking:
            return self.balance + self.overdraft_limit
        return self.balance
    
    def deposit(self, amount: AmountLike) -> Decimal:
        """
        Credit the account.
        
        Returns:
            The Decimal amount that was credited
            
        Raises:
            InvalidArgumentError: If amount is not greater than zero
        """
        amount = to_positive_amount(amount)
        self.balance += amount
        return amount
    
    def withdraw(self, amount: AmountLike) -> Decimal:
        """
        Debit the account.
        
        Returns:
            The Decimal amount that was debited
            
        Raises:
            InvalidArgumentError: If amount is not greater than zero
            InvalidOperationError: If funds (including overdraft) are insufficient
        """
        amount = to_positive_amount(amount)
        if self.available_funds < amount:
            if self.is_checking:
                raise InvalidOperationError("Insufficient funds including overdraft limit")
            raise InvalidOperationError("Insufficient funds")
        self.balance -= amount
        return amount
    
    def apply_interest(self) -> Decimal:
        """Credit balance * interest_rate / 100 to a savings account and return the interest"""
        if not self.is_savings:
            raise InvalidOperationError("Interest applies to savings accounts only")
        interest = self.balance * self.interest_rate / Decimal('100')
        self.balance += interest
        return interest
    
    def __str__(self) -> str:
        text = (
            f"Account ID: {self.id}, Number: {self.account_number}, "
            f"Type: {self.kind.value}, Balance: {self.balance:,.2f}"
        )
        if self.is_savings:
            return f"{text}, Interest Rate: {self.interest_rate}%"
        return f"{text}, Overdraft Limit: {self.overdraft_limit:,.2f}"
    
    @classmethod
    def from_dict(cls, data: Dict) -> 'Account':
        """Rebuild an Account from its stored dictionary"""
        interest_rate = None
        if data.get('interest_rate') is not None:
            interest_rate = Decimal(data['interest_rate'])
        
        overdraft_limit = None
        if data.get('overdraft_limit') is not None:
            overdraft_limit = Decimal(data['overdraft_limit'])
        
        return cls(
            id=data['id'],
            created_at=datetime.fromisoformat(data['created_at']),
            account_number=data['account_number'],
            customer_id=data['customer_id'],
            kind=AccountKind(data['kind']),
            balance=Decimal(data['balance']),
            interest_rate=interest_rate,
            overdraft_limit=overdraft_limit
        )
