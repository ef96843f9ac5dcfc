"""
Ledger Service Module

RetailLedger is the single authority over customers, accounts and
transactions: it assigns identifiers, generates account numbers, applies
deposits and withdrawals, and appends to the transaction log. Entities
returned to callers are copies; changing them does not change the ledger.

All operations run under one re-entrant lock so identifier assignment and
balance updates are atomic and reads observe a consistent snapshot.
"""

from decimal import Decimal
from datetime import datetime, timezone
from typing import Iterator, List, Optional
import itertools
import threading

from .accounts import Account, AccountKind
from .amounts import AmountLike
from .config import LedgerConfig, get_config
from .customers import Customer
from .errors import InvalidArgumentError, InvalidOperationError
from .logging_config import get_logger, log_action
from .storage import InMemoryStorage, StorageInterface
from .transactions import Transaction, TransactionType


class RetailLedger:
    """
    In-memory ledger of customers, accounts and their transactions
    """
    
    def __init__(
        self,
        storage: Optional[StorageInterface] = None,
        config: Optional[LedgerConfig] = None
    ):
        self.storage = storage if storage is not None else InMemoryStorage()
        self.config = config if config is not None else get_config()
        self.customers_table = "customers"
        self.accounts_table = "accounts"
        self.transactions_table = "transactions"
        self.logger = get_logger("retail_ledger.ledger")
        
        self._lock = threading.RLock()
        self._customer_ids: Iterator[int] = itertools.count(1)
        self._account_ids: Iterator[int] = itertools.count(1)
        self._transaction_ids: Iterator[int] = itertools.count(1)
    
    # Customers
    
    def add_customer(self, name: str, email: str, phone: Optional[str] = None) -> Customer:
        """
        Register a new customer. Duplicate names and emails are allowed.
        
        Raises:
            InvalidArgumentError: If name or email is blank
        """
        with self._lock:
            # Validate before consuming an id
            if not name or not name.strip():
                raise InvalidArgumentError("Customer name cannot be empty")
            if not email or not email.strip():
                raise InvalidArgumentError("Customer email cannot be empty")
            
            customer = Customer(
                id=next(self._customer_ids),
                created_at=datetime.now(timezone.utc),
                name=name,
                email=email,
                phone=phone
            )
            self.storage.save(self.customers_table, customer.id, customer.to_dict())
        
        log_action(
            self.logger, "info", f"Customer added: {customer.id}",
            action="add_customer", resource=f"customer:{customer.id}"
        )
        return customer
    
    def get_customer(self, customer_id: int) -> Customer:
        """Get customer by ID or raise InvalidOperationError"""
        with self._lock:
            data = self.storage.load(self.customers_table, customer_id)
        if data is None:
            raise InvalidOperationError("Customer not found")
        return Customer.from_dict(data)
    
    # Accounts
    
    def create_account(self, customer_id: int, kind: str) -> Account:
        """
        Open a Savings or Checking account for an existing customer.
        
        Args:
            customer_id: Owning customer
            kind: Exactly "Savings" or "Checking" (case-sensitive)
            
        Raises:
            InvalidArgumentError: If kind is empty or not a known account type
            InvalidOperationError: If the customer does not exist
        """
        if not kind:
            raise InvalidArgumentError("Account type cannot be empty")
        
        with self._lock:
            if not self.storage.exists(self.customers_table, customer_id):
                raise InvalidOperationError("Customer not found")
            
            account_kind = AccountKind.from_label(kind)
            account_id = next(self._account_ids)
            
            if account_kind == AccountKind.SAVINGS:
                account = Account(
                    id=account_id,
                    created_at=datetime.now(timezone.utc),
                    account_number=self._generate_account_number(account_id),
                    customer_id=customer_id,
                    kind=account_kind,
                    interest_rate=self.config.default_interest_rate
                )
            else:
                account = Account(
                    id=account_id,
                    created_at=datetime.now(timezone.utc),
                    account_number=self._generate_account_number(account_id),
                    customer_id=customer_id,
                    kind=account_kind,
                    overdraft_limit=self.config.default_overdraft_limit
                )
            
            self._save_account(account)
        
        log_action(
            self.logger, "info", f"Account opened: {account.account_number}",
            action="create_account", resource=f"account:{account.id}",
            extra={
                "customer_id": customer_id,
                "kind": account_kind.value,
                "account_number": account.account_number
            }
        )
        return account
    
    def get_account(self, account_id: int) -> Account:
        """Get account by ID or raise InvalidOperationError"""
        with self._lock:
            return self._require_account(account_id)
    
    def get_customer_accounts(self, customer_id: int) -> List[Account]:
        """Get all accounts owned by a customer, oldest first"""
        with self._lock:
            if not self.storage.exists(self.customers_table, customer_id):
                raise InvalidOperationError("Customer not found")
            accounts_data = self.storage.find(self.accounts_table, {"customer_id": customer_id})
        return [Account.from_dict(data) for data in accounts_data]
    
    # Transactions
    
    def deposit(self, account_id: int, amount: AmountLike) -> Transaction:
        """
        Credit an account and record a Deposit transaction.
        
        Raises:
            InvalidOperationError: If the account does not exist
            InvalidArgumentError: If amount is not greater than zero
        """
        with self._lock:
            account = self._require_account(account_id)
            credited = account.deposit(amount)
            self._save_account(account)
            transaction = self._record_transaction(account.id, credited, TransactionType.DEPOSIT)
        
        log_action(
            self.logger, "info", f"Deposited {credited} to {account.account_number}",
            action="deposit", resource=f"account:{account.id}",
            extra={"transaction_id": transaction.id, "balance": str(account.balance)}
        )
        return transaction
    
    def withdraw(self, account_id: int, amount: AmountLike) -> Transaction:
        """
        Debit an account and record a Withdrawal transaction.
        
        Raises:
            InvalidOperationError: If the account does not exist or funds
                (including overdraft for checking accounts) are insufficient
            InvalidArgumentError: If amount is not greater than zero
        """
        with self._lock:
            account = self._require_account(account_id)
            try:
                debited = account.withdraw(amount)
            except InvalidOperationError as e:
                log_action(
                    self.logger, "warning", f"Withdrawal rejected: {e}",
                    action="withdraw", resource=f"account:{account.id}",
                    extra={"amount": str(amount), "balance": str(account.balance)}
                )
                raise
            self._save_account(account)
            transaction = self._record_transaction(account.id, debited, TransactionType.WITHDRAWAL)
        
        log_action(
            self.logger, "info", f"Withdrew {debited} from {account.account_number}",
            action="withdraw", resource=f"account:{account.id}",
            extra={"transaction_id": transaction.id, "balance": str(account.balance)}
        )
        return transaction
    
    def get_transaction_history(self, account_id: int) -> List[Transaction]:
        """
        Get an account's transactions in the order they were recorded.
        
        Returns an empty list for an account with no activity.
        
        Raises:
            InvalidOperationError: If the account does not exist
        """
        with self._lock:
            if not self.storage.exists(self.accounts_table, account_id):
                raise InvalidOperationError("Account not found")
            transactions_data = self.storage.find(self.transactions_table, {"account_id": account_id})
        return [Transaction.from_dict(data) for data in transactions_data]
    
    # Internals
    
    def _require_account(self, account_id: int) -> Account:
        data = self.storage.load(self.accounts_table, account_id)
        if data is None:
            raise InvalidOperationError("Account not found")
        return Account.from_dict(data)
    
    def _save_account(self, account: Account) -> None:
        self.storage.save(self.accounts_table, account.id, account.to_dict())
    
    def _record_transaction(
        self,
        account_id: int,
        amount: Decimal,
        transaction_type: TransactionType
    ) -> Transaction:
        transaction = Transaction(
            id=next(self._transaction_ids),
            created_at=datetime.now(timezone.utc),
            account_id=account_id,
            amount=amount,
            transaction_type=transaction_type
        )
        self.storage.save(self.transactions_table, transaction.id, transaction.to_dict())
        return transaction
    
    def _generate_account_number(self, account_id: int) -> str:
        """Build PREFIX-NNNNNN from the account's sequential id"""
        width = self.config.account_number_width
        return f"{self.config.account_number_prefix}-{account_id:0{width}d}"
