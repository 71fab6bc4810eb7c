"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    ProfileNotFoundError,
    UsernameTakenError,
)
from .profile_management import get_profile, set_username

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'ProfileNotFoundError',
    'UsernameTakenError',
    # Services
    'get_profile',
    'set_username',
]
