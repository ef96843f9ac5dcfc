"""
Test suite for account, customer and transaction entities

Tests the per-kind deposit/withdraw rules, interest application and the
validation each entity performs on construction.
"""

import pytest
from decimal import Decimal
from datetime import datetime, timezone

from retail_ledger.accounts import Account, AccountKind
from retail_ledger.customers import Customer
from retail_ledger.errors import InvalidArgumentError, InvalidOperationError
from retail_ledger.transactions import Transaction, TransactionType


def make_savings(balance="0", rate="2.5") -> Account:
    return Account(
        id=1,
        created_at=datetime.now(timezone.utc),
        account_number="ACMX-000001",
        customer_id=1,
        kind=AccountKind.SAVINGS,
        balance=Decimal(balance),
        interest_rate=Decimal(rate)
    )


def make_checking(balance="0", overdraft="500") -> Account:
    return Account(
        id=2,
        created_at=datetime.now(timezone.utc),
        account_number="ACMX-000002",
        customer_id=1,
        kind=AccountKind.CHECKING,
        balance=Decimal(balance),
        overdraft_limit=Decimal(overdraft)
    )


class TestAccountKind:
    """Test account kind labels"""
    
    def test_exact_labels(self):
        assert AccountKind.from_label("Savings") == AccountKind.SAVINGS
        assert AccountKind.from_label("Checking") == AccountKind.CHECKING
    
    def test_labels_are_case_sensitive(self):
        for label in ["savings", "CHECKING", " Savings", "Current", ""]:
            with pytest.raises(InvalidArgumentError, match="Invalid account type"):
                AccountKind.from_label(label)


class TestAccount:
    """Test Account behaviour for both kinds"""
    
    def test_kind_properties(self):
        savings = make_savings()
        checking = make_checking()
        
        assert savings.is_savings and not savings.is_checking
        assert checking.is_checking and not checking.is_savings
        assert savings.available_funds == Decimal('0')
        assert checking.available_funds == Decimal('500')
    
    def test_kind_requires_its_own_setting(self):
        now = datetime.now(timezone.utc)
        
        with pytest.raises(InvalidArgumentError, match="requires an interest rate"):
            Account(id=1, created_at=now, account_number="A", customer_id=1,
                    kind=AccountKind.SAVINGS)
        
        with pytest.raises(InvalidArgumentError, match="requires an overdraft limit"):
            Account(id=1, created_at=now, account_number="A", customer_id=1,
                    kind=AccountKind.CHECKING)
        
        with pytest.raises(InvalidArgumentError, match="cannot have an overdraft limit"):
            Account(id=1, created_at=now, account_number="A", customer_id=1,
                    kind=AccountKind.SAVINGS, interest_rate=Decimal('1'),
                    overdraft_limit=Decimal('100'))
        
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            Account(id=1, created_at=now, account_number="A", customer_id=1,
                    kind=AccountKind.CHECKING, overdraft_limit=Decimal('-1'))
    
    def test_deposit_same_for_both_kinds(self):
        for account in (make_savings("10"), make_checking("10")):
            credited = account.deposit(Decimal('15.25'))
            assert credited == Decimal('15.25')
            assert account.balance == Decimal('25.25')
    
    def test_non_positive_amounts_rejected(self):
        for account in (make_savings("100"), make_checking("100")):
            for amount in (Decimal('0'), Decimal('-1')):
                with pytest.raises(InvalidArgumentError):
                    account.deposit(amount)
                with pytest.raises(InvalidArgumentError):
                    account.withdraw(amount)
            assert account.balance == Decimal('100')
    
    def test_savings_withdraw(self):
        account = make_savings("100")
        
        account.withdraw(Decimal('100'))
        assert account.balance == Decimal('0')
        
        with pytest.raises(InvalidOperationError, match="^Insufficient funds$"):
            account.withdraw(Decimal('0.01'))
        assert account.balance == Decimal('0')
    
    def test_checking_withdraw_into_overdraft(self):
        account = make_checking("100")
        
        account.withdraw(Decimal('550'))
        assert account.balance == Decimal('-450')
        
        with pytest.raises(InvalidOperationError, match="including overdraft limit"):
            account.withdraw(Decimal('200'))
        assert account.balance == Decimal('-450')
        
        # Exactly down to the limit is allowed
        account.withdraw(Decimal('50'))
        assert account.balance == Decimal('-500')
        assert account.available_funds == Decimal('0')
    
    def test_apply_interest(self):
        account = make_savings("100")
        
        interest = account.apply_interest()
        
        assert interest == Decimal('2.50')
        assert account.balance == Decimal('102.50')
    
    def test_apply_interest_is_exact(self):
        account = make_savings("33.33", rate="1.5")
        
        assert account.apply_interest() == Decimal('0.49995')
        assert account.balance == Decimal('33.82995')
        
        small = make_savings("0.10")
        small.apply_interest()
        assert small.balance == Decimal('0.1025')
    
    def test_sub_cent_amounts_are_not_rounded(self):
        for account in (make_savings(), make_checking()):
            assert account.deposit(Decimal('0.005')) == Decimal('0.005')
            assert account.balance == Decimal('0.005')
            account.withdraw(Decimal('0.005'))
            assert account.balance == Decimal('0')
        
        account = make_savings()
        account.deposit(Decimal('0.004'))
        with pytest.raises(InvalidOperationError):
            account.withdraw(Decimal('0.0041'))
        assert account.balance == Decimal('0.004')
    
    def test_apply_interest_on_zero_balance(self):
        account = make_savings()
        assert account.apply_interest() == Decimal('0')
        assert account.balance == Decimal('0')
    
    def test_apply_interest_only_for_savings(self):
        with pytest.raises(InvalidOperationError, match="savings accounts only"):
            make_checking("100").apply_interest()
    
    def test_dict_round_trip(self):
        account = make_checking("-12.34")
        
        data = account.to_dict()
        assert data["kind"] == "Checking"
        assert data["balance"] == "-12.34"
        assert data["interest_rate"] is None
        
        restored = Account.from_dict(data)
        assert restored == account
    
    def test_str(self):
        assert "Interest Rate: 2.5%" in str(make_savings())
        assert "Overdraft Limit: 500.00" in str(make_checking())


class TestCustomer:
    """Test Customer entity"""
    
    def test_valid_customer(self):
        customer = Customer(id=1, created_at=datetime.now(timezone.utc),
                            name="Alice", email="a@x.com")
        
        assert customer.phone is None
        assert "Name: Alice" in str(customer)
        assert Customer.from_dict(customer.to_dict()) == customer
    
    def test_blank_fields_rejected(self):
        now = datetime.now(timezone.utc)
        with pytest.raises(InvalidArgumentError, match="name cannot be empty"):
            Customer(id=1, created_at=now, name="  ", email="a@x.com")
        with pytest.raises(InvalidArgumentError, match="email cannot be empty"):
            Customer(id=1, created_at=now, name="Alice", email="")


class TestTransaction:
    """Test Transaction entity"""
    
    def test_signed_amount(self):
        now = datetime.now(timezone.utc)
        deposit = Transaction(id=1, created_at=now, account_id=1,
                              amount=Decimal('5'), transaction_type=TransactionType.DEPOSIT)
        withdrawal = Transaction(id=2, created_at=now, account_id=1,
                                 amount=Decimal('5'), transaction_type=TransactionType.WITHDRAWAL)
        
        assert deposit.is_deposit and deposit.signed_amount == Decimal('5')
        assert withdrawal.is_withdrawal and withdrawal.signed_amount == Decimal('-5')
        assert deposit.timestamp == now
        assert Transaction.from_dict(withdrawal.to_dict()) == withdrawal
    
    def test_amount_must_be_positive(self):
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            Transaction(id=1, created_at=datetime.now(timezone.utc), account_id=1,
                        amount=Decimal('0'), transaction_type=TransactionType.DEPOSIT)
