"""Tenancy-Engine exception hierarchy.

Every error carries a machine-stable ``code`` and the HTTP status it maps to.
"""


class TenancyError(Exception):
    """Base exception for all Tenancy-Engine errors."""

    status_code = 500

    def __init__(self, message: str = "", code: str = "TENANCY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TenantNotFoundError(TenancyError):
    """Raised when a tenant slug does not match any tenant."""

    status_code = 404

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f'Tenant not found: "{slug}"', code="TENANT_NOT_FOUND")


class TenantRequiredError(TenancyError):
    """Raised when an operation needs a tenant and none was resolved."""

    status_code = 400

    def __init__(self, message: str = "Tenant required"):
        super().__init__(message, code="TENANT_REQUIRED")


class TenantExistsError(TenancyError):
    """Raised when creating a tenant whose slug is already taken."""

    status_code = 400

    def __init__(self, message: str = "Tenant already exists"):
        super().__init__(message, code="TENANT_EXISTS")


class AuthRequiredError(TenancyError):
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="AUTH_REQUIRED")


class InvalidTokenError(TenancyError):
    """Raised for bad signatures, malformed payloads and expired tokens."""

    status_code = 401

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class InvalidCredentialsError(TenancyError):
    """Same error for unknown users and wrong passwords."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class TenantMismatchError(TenancyError):
    """Raised when a token's user belongs to another tenant than the request."""

    status_code = 403

    def __init__(self, message: str = "Access denied: tenant mismatch"):
        super().__init__(message, code="TENANT_MISMATCH")


class ForbiddenError(TenancyError):
    status_code = 403

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, code="FORBIDDEN")


class SelfDeleteDeniedError(TenancyError):
    status_code = 403

    def __init__(self, message: str = "Cannot delete your own account"):
        super().__init__(message, code="SELF_DELETE_DENIED")


class NotFoundError(TenancyError):
    """Raised for absent records, including records owned by another tenant."""

    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message, code="NOT_FOUND")


class ValidationError(TenancyError):
    status_code = 400

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class UserExistsError(TenancyError):
    status_code = 400

    def __init__(self, message: str = "User already exists"):
        super().__init__(message, code="USER_EXISTS")
