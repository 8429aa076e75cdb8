"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    UsernameTakenError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'UsernameTakenError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    # Services
    'register_user',
    'authenticate_user',
]
