"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    ValidationFailedError,
    DuplicateAccountError,
    ProvisioningFailedError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
)
from .account_provisioning import (
    ProvisionedAccount,
    email_is_registered,
    validate_registration,
    provision_account,
)
from .user_authentication import authenticate_user
from .email_verification import verify_user_email
from .settings_management import get_personal_settings, update_personal_settings

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'ValidationFailedError',
    'DuplicateAccountError',
    'ProvisioningFailedError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidTokenError',
    # Services
    'ProvisionedAccount',
    'email_is_registered',
    'validate_registration',
    'provision_account',
    'authenticate_user',
    'verify_user_email',
    'get_personal_settings',
    'update_personal_settings',
]
