"""
Application-level exception classes for PostDeck.
Environment ve configuration handler hataları burada tanımlanır.
"""

from typing import Optional, Dict, Any
from .base import PostDeckException


class ApplicationException(PostDeckException):
    """Base exception class for application-level errors."""
    pass


class EnvironmentFileNotFoundError(ApplicationException):
    status_code = 404
    error_code = "ENVIRONMENT_FILE_NOT_FOUND_ERROR"
    error_message = "Environment file not found"

    def __init__(
        self,
        file_path: Optional[str] = None,
        message: Optional[str] = None,
        error_details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        error_details = error_details or {}
        if file_path:
            error_details["file_path"] = file_path

        if not message:
            message = (
                f"Environment file not found at path: {file_path}" if file_path
                else "Environment file not found. Please ensure the .env file exists."
            )

        super().__init__(error_message=message, error_details=error_details, cause=cause)


class EnvironmentTestFailedError(ApplicationException):
    status_code = 500
    error_code = "ENVIRONMENT_TEST_FAILED_ERROR"
    error_message = "Environment validation test failed"

    def __init__(
        self,
        test_key: Optional[str] = None,
        expected_value: Optional[str] = None,
        actual_value: Optional[str] = None,
        message: Optional[str] = None,
        error_details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        error_details = error_details or {}
        if test_key:
            error_details["test_key"] = test_key
        if expected_value:
            error_details["expected_value"] = expected_value
        if actual_value:
            error_details["actual_value"] = actual_value

        if not message:
            message = (
                f"Environment test failed for key '{test_key}'. "
                f"Expected: '{expected_value}', Actual: '{actual_value}'"
            )

        super().__init__(error_message=message, error_details=error_details, cause=cause)


class EnvironmentNotInitializedError(ApplicationException):
    status_code = 500
    error_code = "ENVIRONMENT_NOT_INITIALIZED_ERROR"
    error_message = (
        "Environment handler has not been initialized. "
        "Please call EnvironmentHandler.init() or EnvironmentHandler.load() first."
    )

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class EnvironmentTypeConversionError(ApplicationException):
    status_code = 400
    error_code = "ENVIRONMENT_TYPE_CONVERSION_ERROR"
    error_message = "Environment variable type conversion failed"

    def __init__(
        self,
        key: Optional[str] = None,
        target_type: Optional[str] = None,
        message: Optional[str] = None,
        error_details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        error_details = error_details or {}
        if key:
            error_details["key"] = key
        if target_type:
            error_details["target_type"] = target_type

        if not message and key and target_type:
            message = f"Environment variable '{key}' could not be converted to {target_type}."

        super().__init__(error_message=message, error_details=error_details, cause=cause)


class ConfigurationError(ApplicationException):
    """Base exception class for configuration errors."""
    pass


class ConfigurationDirectoryNotFoundError(ConfigurationError):
    status_code = 404
    error_code = "CONFIGURATION_DIRECTORY_NOT_FOUND_ERROR"
    error_message = "Configuration directory not found"

    def __init__(self, directory_path: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if directory_path:
            error_details["directory_path"] = directory_path
            message = message or f"Configuration directory not found at path: {directory_path}"
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class ConfigurationFileNotFoundError(ConfigurationError):
    status_code = 404
    error_code = "CONFIGURATION_FILE_NOT_FOUND_ERROR"
    error_message = "Configuration file not found"

    def __init__(self, file_path: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if file_path:
            error_details["file_path"] = file_path
            message = message or f"Configuration file not found at path: {file_path}"
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class ConfigurationInvalidAppEnvError(ConfigurationError):
    status_code = 400
    error_code = "CONFIGURATION_INVALID_APP_ENV_ERROR"
    error_message = "Invalid APP_ENV value"

    def __init__(self, app_env: Optional[str] = None, valid_envs: Optional[list] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        error_details = error_details or {}
        error_details["app_env"] = app_env
        if valid_envs:
            error_details["valid_envs"] = valid_envs

        if not message:
            message = f"Invalid APP_ENV value: '{app_env}'. Valid values: {', '.join(valid_envs or [])}"

        super().__init__(error_message=message, error_details=error_details, cause=cause)


class ConfigurationTestFailedError(ConfigurationError):
    status_code = 500
    error_code = "CONFIGURATION_TEST_FAILED_ERROR"
    error_message = "Configuration validation test failed"

    def __init__(self, section: Optional[str] = None, key: Optional[str] = None,
                 expected_value: Optional[str] = None, actual_value: Optional[str] = None,
                 message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        error_details = error_details or {}
        for name, value in (("section", section), ("key", key),
                            ("expected_value", expected_value), ("actual_value", actual_value)):
            if value:
                error_details[name] = value
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class ConfigurationNotInitializedError(ConfigurationError):
    status_code = 500
    error_code = "CONFIGURATION_NOT_INITIALIZED_ERROR"
    error_message = (
        "Configuration handler has not been initialized. "
        "Please call ConfigurationHandler.init() or ConfigurationHandler.load() first."
    )

    def __init__(self, message: Optional[str] = None, error_details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(error_message=message, error_details=error_details, cause=cause)


class ConfigurationTypeConversionError(ConfigurationError):
    status_code = 400
    error_code = "CONFIGURATION_TYPE_CONVERSION_ERROR"
    error_message = "Configuration value type conversion failed"

    def __init__(self, section: Optional[str] = None, key: Optional[str] = None,
                 target_type: Optional[str] = None, message: Optional[str] = None,
                 error_details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        error_details = error_details or {}
        if section:
            error_details["section"] = section
        if key:
            error_details["key"] = key
        if target_type:
            error_details["target_type"] = target_type

        if not message and section and key and target_type:
            message = f"Configuration value [{section}] {key} could not be converted to {target_type}."

        super().__init__(error_message=message, error_details=error_details, cause=cause)
