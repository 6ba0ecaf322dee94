"""Account management package."""

from investwise.accounts.manager import AccountManager

__all__ = ["AccountManager"]
