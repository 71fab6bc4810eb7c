"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class ProfileNotFoundError(AccountsServiceError):
    """Raised when the user has not created a profile yet."""
    pass


class UsernameTakenError(AccountsServiceError):
    """Raised when another user already holds the username."""
    pass
