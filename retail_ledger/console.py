"""
Console Driver

Text menu over RetailLedger. Holds no business rules: it parses input,
calls the ledger and prints results or the ledger's error message.
"""

from decimal import Decimal
from typing import Callable, Optional

from .amounts import parse_amount
from .config import get_config
from .errors import InvalidArgumentError, LedgerError
from .ledger import RetailLedger
from .logging_config import setup_logging


MENU = """
.::Banking System Menu::.
-------------------------
1. Add Customer
2. Open Account
3. Deposit
4. Withdraw
5. View Transactions
6. Exit
-------------------------"""


class LedgerConsole:
    """Interactive menu loop driving a RetailLedger"""
    
    def __init__(
        self,
        ledger: RetailLedger,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        self.ledger = ledger
        self._input = input_func
        self._output = output
        self._actions = {
            "1": self.add_customer,
            "2": self.open_account,
            "3": self.deposit,
            "4": self.withdraw,
            "5": self.view_transactions,
        }
    
    def run(self) -> None:
        """Show the menu until the user exits or input ends"""
        self._output("Welcome to the Banking System!")
        while True:
            self._output(MENU)
            choice = self._read("Select an option: ")
            if choice is None or choice == "6":
                self._output("Thank you for using the Banking System. Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid option, please try again.")
                continue
            try:
                action()
            except EOFError:
                self._output("Goodbye!")
                return
    
    def add_customer(self) -> None:
        while True:
            name = self._prompt("Enter customer name: ")
            email = self._prompt("Enter customer email: ")
            if name and email:
                break
            self._output("Name and email cannot be empty.")
        try:
            customer = self.ledger.add_customer(name, email)
        except LedgerError as e:
            self._output(f"Error adding customer: {e}")
            return
        self._output(f"Customer added successfully! Customer ID: {customer.id}")
    
    def open_account(self) -> None:
        customer_id = self._prompt_int("Enter customer ID: ", "Invalid customer ID.")
        kind = self._prompt("Enter account type (Savings/Checking): ")
        try:
            account = self.ledger.create_account(customer_id, kind)
        except LedgerError as e:
            self._output(f"Error creating account: {e}")
            return
        self._output(f"Account created successfully! Account Number: {account.account_number}")
    
    def deposit(self) -> None:
        account_id = self._prompt_int("Enter account ID: ", "Invalid account ID.")
        amount = self._prompt_amount("Enter amount to deposit: ")
        try:
            self.ledger.deposit(account_id, amount)
            account = self.ledger.get_account(account_id)
        except LedgerError as e:
            self._output(f"Error depositing funds: {e}")
            return
        self._output(
            f"Successfully deposited {amount:,.2f} into account {account.account_number}. "
            f"New balance: {account.balance:,.2f}"
        )
    
    def withdraw(self) -> None:
        account_id = self._prompt_int("Enter account ID: ", "Invalid account ID.")
        amount = self._prompt_amount("Enter amount to withdraw: ")
        try:
            self.ledger.withdraw(account_id, amount)
            account = self.ledger.get_account(account_id)
        except LedgerError as e:
            self._output(f"Error withdrawing funds: {e}")
            return
        self._output(
            f"Successfully withdrew {amount:,.2f} from account {account.account_number}. "
            f"New balance: {account.balance:,.2f}"
        )
    
    def view_transactions(self) -> None:
        account_id = self._prompt_int("Enter account ID: ", "Invalid account ID.")
        try:
            transactions = self.ledger.get_transaction_history(account_id)
        except LedgerError as e:
            self._output(f"Error retrieving transactions: {e}")
            return
        if not transactions:
            self._output("No transactions found for this account.")
            return
        self._output(f"Transactions for Account ID {account_id}:")
        for transaction in transactions:
            symbol = "+" if transaction.is_deposit else "-"
            self._output(
                f"{transaction.id:>5} | {transaction.timestamp:%Y-%m-%d %H:%M:%S} | "
                f"{transaction.transaction_type.value:>10} | {symbol} {transaction.amount:>10,.2f}"
            )
    
    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt).strip()
        except EOFError:
            return None
    
    def _prompt(self, prompt: str) -> str:
        value = self._read(prompt)
        if value is None:
            raise EOFError
        return value
    
    def _prompt_int(self, prompt: str, error: str) -> int:
        while True:
            try:
                return int(self._prompt(prompt))
            except ValueError:
                self._output(error)
    
    def _prompt_amount(self, prompt: str) -> Decimal:
        while True:
            try:
                return parse_amount(self._prompt(prompt))
            except InvalidArgumentError:
                self._output("Invalid amount. Please enter a positive number.")


def main() -> None:
    """Console entry point"""
    config = get_config()
    setup_logging(config.log_level, "retail_ledger", config.log_format)
    try:
        LedgerConsole(RetailLedger(config=config)).run()
    except KeyboardInterrupt:
        print("\nGoodbye.")
