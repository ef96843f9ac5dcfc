"""
Retail Ledger

An in-memory retail banking ledger: customers, savings and checking
accounts, and the deposit/withdrawal transactions that move their balances.
All amounts are handled as Decimal.
"""

__version__ = "1.0.0"
