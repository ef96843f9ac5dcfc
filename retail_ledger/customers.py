"""
Customer Module

Customer profiles owned by the ledger. Customers are created through
RetailLedger.add_customer() and are never updated or removed.
"""

from datetime import datetime
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import InvalidArgumentError
from .storage import StorageRecord


@dataclass
class Customer(StorageRecord):
    """
    Bank customer
    """
    name: str
    email: str
    phone: Optional[str] = None
    
    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidArgumentError("Customer name cannot be empty")
        if not self.email or not self.email.strip():
            raise InvalidArgumentError("Customer email cannot be empty")
    
    def __str__(self) -> str:
        return (
            f"Customer ID: {self.id}, Name: {self.name}, "
            f"Email: {self.email}, Phone: {self.phone or ''}"
        )
    
    @classmethod
    def from_dict(cls, data: Dict) -> 'Customer':
        """Rebuild a Customer from its stored dictionary"""
        return cls(
            id=data['id'],
            created_at=datetime.fromisoformat(data['created_at']),
            name=data['name'],
            email=data['email'],
            phone=data.get('phone')
        )
