"""
Exception hierarchy for InvestWise.

Storage errors are treated as fatal by the console loop.
Account and selection errors are expected user-input conditions:
they are reported and the user is prompted again.
"""


class InvestWiseError(Exception):
    """Base exception for all InvestWise errors."""
    pass


class StorageError(InvestWiseError):
    """A persisted container could not be read or written."""
    pass


class CorruptDataError(StorageError):
    """A persisted container exists but its content cannot be decoded."""
    pass


class AccountError(InvestWiseError):
    """Base exception for account operations."""
    pass


class DuplicateEmailError(AccountError):
    """Sign-up attempted with an email that is already registered."""
    pass


class InvalidCredentialsError(AccountError):
    """No user matches the given email and password."""
    pass


class AccountIdExhaustedError(AccountError):
    """Could not find a free account id within the allowed attempts."""
    pass


class InvalidSelectionError(InvestWiseError):
    """A menu or list choice is out of range."""
    pass
