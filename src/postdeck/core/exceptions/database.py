from typing import Optional, Dict, Any
from .base import PostDeckException


class DatabaseException(PostDeckException):
    """Base exception class for database-related errors."""
    pass


class DatabaseConfigurationError(DatabaseException):
    status_code = 500
    error_code = "DATABASE_CONFIGURATION_ERROR"
    error_message = "Database configuration error"

    def __init__(self, config_name: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if config_name:
            error_details["config_name"] = config_name
        default_message = "The database settings may be incorrect or incomplete."
        if config_name:
            default_message = f"Database configuration error for '{config_name}'. {default_message}"
        super().__init__(error_message=message or default_message, error_details=error_details, cause=cause)


class DatabaseValidationError(DatabaseException):
    """Kullanıcı girdisinden kaynaklanan veritabanı doğrulama hatası."""

    status_code = 400
    error_code = "DATABASE_VALIDATION_ERROR"
    error_message = "Database validation error"

    def __init__(self, field_name: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if field_name:
            error_details["field_name"] = field_name
        if not message and field_name:
            message = f"Invalid value for '{field_name}'."
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseConnectionError(DatabaseException):
    status_code = 503
    error_code = "DATABASE_CONNECTION_ERROR"
    error_message = "Unable to connect to the database. Please try again later."

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseQueryError(DatabaseException):
    status_code = 500
    error_code = "DATABASE_QUERY_ERROR"
    error_message = "Database query failed"

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseEngineError(DatabaseException):
    status_code = 500
    error_code = "DATABASE_ENGINE_ERROR"
    error_message = "Database engine is not running. Call start() before using sessions."

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseManagerNotInitializedError(DatabaseException):
    status_code = 500
    error_code = "DATABASE_MANAGER_NOT_INITIALIZED"
    error_message = "DatabaseManager has not been initialized. Call DatabaseManager().initialize(config) first."

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseManagerAlreadyInitializedError(DatabaseException):
    status_code = 500
    error_code = "DATABASE_MANAGER_ALREADY_INITIALIZED"
    error_message = "DatabaseManager is already initialized. Use force_reinitialize=True to replace it."

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseDecoratorSignatureError(DatabaseException):
    status_code = 500
    error_code = "DATABASE_DECORATOR_SIGNATURE_ERROR"
    error_message = "Decorated function must accept a 'session' parameter"

    def __init__(self, function_name: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if function_name:
            error_details["function_name"] = function_name
            message = message or f"Function '{function_name}' must accept a 'session' parameter"
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class DatabaseResourceNotFoundError(DatabaseException):
    status_code = 404
    error_code = "DATABASE_RESOURCE_NOT_FOUND"
    error_message = "Requested resource was not found"

    def __init__(self, resource_name: Optional[str] = None, resource_id: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        error_details = error_details or {}
        if resource_name:
            error_details["resource_name"] = resource_name
        if resource_id:
            error_details["resource_id"] = resource_id
        if not message and resource_name:
            message = f"{resource_name} '{resource_id}' not found"
        super().__init__(error_message=message, error_details=error_details, cause=cause)
