"""
External service exception classes for PostDeck.
Mail sağlayıcısı gibi dış servis hataları.
"""

from typing import Optional, Dict, Any
from .base import PostDeckException


class ExternalServiceException(PostDeckException):
    """Base exception class for external service errors."""
    pass


def _service_details(service_name, operation_name, error_details):
    error_details = error_details or {}
    if service_name:
        error_details["service_name"] = service_name
    if operation_name:
        error_details["operation_name"] = operation_name
    return error_details


class ExternalServiceConnectionError(ExternalServiceException):
    status_code = 503
    error_code = "EXTERNAL_SERVICE_CONNECTION_ERROR"
    error_message = "Unable to connect to external service. Please try again later."

    def __init__(self, service_name: Optional[str] = None, operation_name: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        if not message and service_name:
            message = f"Unable to connect to {service_name} service. Please try again later."
        super().__init__(error_message=message,
                         error_details=_service_details(service_name, operation_name, error_details),
                         cause=cause)


class ExternalServiceTimeoutError(ExternalServiceException):
    status_code = 504
    error_code = "EXTERNAL_SERVICE_TIMEOUT_ERROR"
    error_message = "External service request timed out"

    def __init__(self, service_name: Optional[str] = None, operation_name: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        if not message and service_name:
            message = f"{service_name} request timed out during {operation_name or 'request'}."
        super().__init__(error_message=message,
                         error_details=_service_details(service_name, operation_name, error_details),
                         cause=cause)


class ExternalServiceValidationError(ExternalServiceException):
    status_code = 400
    error_code = "EXTERNAL_SERVICE_VALIDATION_ERROR"
    error_message = "External service rejected the request"

    def __init__(self, service_name: Optional[str] = None, operation_name: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message,
                         error_details=_service_details(service_name, operation_name, error_details),
                         cause=cause)


class ExternalServiceAuthorizationError(ExternalServiceException):
    status_code = 502
    error_code = "EXTERNAL_SERVICE_AUTHORIZATION_ERROR"
    error_message = "External service authorization failed"

    def __init__(self, service_name: Optional[str] = None, operation_name: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message,
                         error_details=_service_details(service_name, operation_name, error_details),
                         cause=cause)


class ExternalServiceRateLimitError(ExternalServiceException):
    status_code = 429
    error_code = "EXTERNAL_SERVICE_RATE_LIMIT_ERROR"
    error_message = "External service rate limit exceeded"

    def __init__(self, service_name: Optional[str] = None, operation_name: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message,
                         error_details=_service_details(service_name, operation_name, error_details),
                         cause=cause)


# MailTrap
class MailTrapError(ExternalServiceException):
    """Base exception class for MailTrap-specific errors."""
    pass


class MailTrapClientError(MailTrapError):
    status_code = 500
    error_code = "MAILTRAP_CLIENT_ERROR"
    error_message = "MailTrap client error. Please check your configuration."

    def __init__(self, operation: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if operation:
            error_details["operation"] = operation
            message = message or f"MailTrap client error during {operation}. Please check your configuration."
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class MailTrapSendError(MailTrapError):
    status_code = 502
    error_code = "MAILTRAP_SEND_ERROR"
    error_message = "Failed to send email. Please try again or contact support."

    def __init__(self, to_email: Optional[str] = None, operation: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        error_details = error_details or {}
        if to_email:
            error_details["to_email"] = to_email
            message = message or f"Failed to send email to {to_email}. Please try again or contact support."
        if operation:
            error_details["operation"] = operation
        super().__init__(error_message=message, error_details=error_details, cause=cause)
