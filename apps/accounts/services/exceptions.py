"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class ValidationFailedError(AccountsServiceError):
    """Raised when registration input fails validation."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class DuplicateAccountError(AccountsServiceError):
    """Raised when an account with the email already exists."""
    pass


class ProvisioningFailedError(AccountsServiceError):
    """Raised when the account could not be provisioned; nothing was saved."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class InvalidTokenError(AccountsServiceError):
    """Raised when verification token is invalid."""
    pass
