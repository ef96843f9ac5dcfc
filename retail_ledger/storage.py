"""
Storage Backend Module

Provides the storage interface and the in-memory registry tables the ledger
keeps its customers, accounts and transactions in. Records are stored as
plain dictionaries with Decimal amounts and datetimes held as strings, so
every load hands out an independent copy.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any
from decimal import Decimal
from datetime import datetime
import json
import threading
from dataclasses import dataclass, asdict
from enum import Enum


@dataclass
class StorageRecord:
    """Base class for all stored records"""
    id: int
    created_at: datetime
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage"""
        result = asdict(self)
        result['created_at'] = self.created_at.isoformat()
        for key, value in result.items():
            if isinstance(value, Decimal):
                result[key] = str(value)
            elif isinstance(value, Enum):
                result[key] = value.value
        return result


class StorageInterface(ABC):
    """Abstract interface for storage backends"""
    
    @abstractmethod
    def save(self, table: str, record_id: int, data: Dict[str, Any]) -> None:
        """Save a record to storage"""
        pass
    
    @abstractmethod
    def load(self, table: str, record_id: int) -> Optional[Dict[str, Any]]:
        """Load a record from storage"""
        pass
    
    @abstractmethod
    def exists(self, table: str, record_id: int) -> bool:
        """Check if a record exists"""
        pass
    
    @abstractmethod
    def find(self, table: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Find records matching filters, in insertion order"""
        pass


class InMemoryStorage(StorageInterface):
    """In-memory storage implementation"""
    
    def __init__(self):
        self._data: Dict[str, Dict[int, Dict[str, Any]]] = {}
        self._lock = threading.RLock()
    
    def _ensure_table(self, table: str) -> None:
        """Ensure table exists"""
        if table not in self._data:
            self._data[table] = {}
    
    @staticmethod
    def _copy(record: Dict[str, Any]) -> Dict[str, Any]:
        return json.loads(json.dumps(record, default=str))
    
    def save(self, table: str, record_id: int, data: Dict[str, Any]) -> None:
        """Save a record to memory"""
        with self._lock:
            self._ensure_table(table)
            # Deep copy to prevent external mutation
            self._data[table][record_id] = self._copy(data)
    
    def load(self, table: str, record_id: int) -> Optional[Dict[str, Any]]:
        """Load a record from memory"""
        with self._lock:
            self._ensure_table(table)
            record = self._data[table].get(record_id)
            if record is not None:
                return self._copy(record)
            return None
    
    def exists(self, table: str, record_id: int) -> bool:
        """Check if a record exists"""
        with self._lock:
            self._ensure_table(table)
            return record_id in self._data[table]
    
    def find(self, table: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Find records matching filters"""
        with self._lock:
            self._ensure_table(table)
            results = []
            for record in self._data[table].values():
                match = True
                for key, value in filters.items():
                    if key not in record or record[key] != value:
                        match = False
                        break
                if match:
                    results.append(self._copy(record))
            return results
