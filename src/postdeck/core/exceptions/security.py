"""
Security-related exception classes for PostDeck.
Password hashing, JWT doğrulama ve auth strategy hataları.
"""

from typing import Optional, Dict, Any
from .base import PostDeckException


class SecurityException(PostDeckException):
    """Base exception class for security-related errors."""
    pass


class PasswordHashingError(SecurityException):
    status_code = 500
    error_code = "PASSWORD_HASHING_ERROR"
    error_message = "Password hashing failed. Please check the password and try again."

    def __init__(self, rounds: Optional[int] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if rounds is not None:
            error_details["rounds"] = rounds
        super().__init__(error_message=message, error_details=error_details, cause=cause)


# ==============================================================
# JWT
# ==============================================================

class JWTError(SecurityException):
    """Base exception class for JWT-related errors."""
    status_code = 401
    error_code = "JWT_ERROR"
    error_message = "Token validation failed"


class JWTConfigurationError(JWTError):
    status_code = 500
    error_code = "JWT_CONFIGURATION_ERROR"
    error_message = "JWT configuration is missing or invalid"

    def __init__(self, config_key: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if config_key:
            error_details["config_key"] = config_key
            message = message or f"JWT configuration '{config_key}' is missing or invalid."
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class JWTExpiredError(JWTError):
    error_code = "JWT_EXPIRED_ERROR"
    error_message = "Token has expired. Please log in again."

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class JWTInvalidTokenError(JWTError):
    error_code = "JWT_INVALID_TOKEN_ERROR"
    error_message = "Token is invalid"

    def __init__(self, reason: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if reason:
            error_details["reason"] = reason
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class JWTMissingClaimError(JWTError):
    error_code = "JWT_MISSING_CLAIM_ERROR"
    error_message = "Token is missing a required claim"

    def __init__(self, claim_name: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if claim_name:
            error_details["claim_name"] = claim_name
            message = message or f"Token is missing required claim '{claim_name}'"
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class JWTTokenTypeError(JWTError):
    error_code = "JWT_TOKEN_TYPE_ERROR"
    error_message = "Token type does not match"

    def __init__(self, expected_type: Optional[str] = None, actual_type: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        error_details = error_details or {}
        if expected_type:
            error_details["expected_type"] = expected_type
        if actual_type:
            error_details["actual_type"] = actual_type
        if not message and expected_type:
            message = f"Expected '{expected_type}' token, got '{actual_type}'"
        super().__init__(error_message=message, error_details=error_details, cause=cause)


# ==============================================================
# AUTH STRATEGY / GUARD
# ==============================================================

class AuthenticationRequiredError(SecurityException):
    status_code = 401
    error_code = "AUTHENTICATION_REQUIRED"
    error_message = "Unauthorized"

    def __init__(self, strategy: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if strategy:
            error_details["strategy"] = strategy
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class AuthStrategyNotFoundError(SecurityException):
    status_code = 500
    error_code = "AUTH_STRATEGY_NOT_FOUND"
    error_message = "Unknown authentication strategy"

    def __init__(self, strategy: str, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        error_details["strategy"] = strategy
        super().__init__(
            error_message=message or f"Unknown authentication strategy \"{strategy}\"",
            error_details=error_details,
            cause=cause,
        )
