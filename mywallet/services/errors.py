"""
mywallet/services/errors.py

Domain errors raised by the service layer. Routers translate them into
HTTP responses; the services themselves know nothing about status codes.
"""


class WalletError(Exception):
    """Base class for all expected failures of a wallet operation."""


class DuplicateUser(WalletError):
    """Sign-up with an e-mail that is already registered."""


class UserNotFound(WalletError):
    """Sign-in with an e-mail that matches no user."""


class InvalidCredentials(WalletError):
    """Sign-in with a password that does not match the stored hash."""


class InvalidSession(WalletError):
    """A bearer token that was never issued (or whose user is gone)."""
