"""
Ledger Error Types

Both error kinds subclass ValueError so callers that already guard
ledger calls with ``except ValueError`` keep working.
"""


class LedgerError(ValueError):
    """Base class for all ledger failures"""


class InvalidArgumentError(LedgerError):
    """A caller-supplied value violates a precondition (bad amount, unknown account kind)"""


class InvalidOperationError(LedgerError):
    """The referenced entity does not exist or a business rule blocks the mutation"""
