"""
PostDeck Exception Classes
==========================

Tüm uygulama hataları PostDeckException'dan türetilir.
"""

from .base import PostDeckException
from .error_levels import ErrorDetailLevel, get_error_level_from_env
from .database import (
    DatabaseException,
    DatabaseConfigurationError,
    DatabaseValidationError,
    DatabaseConnectionError,
    DatabaseQueryError,
    DatabaseEngineError,
    DatabaseManagerNotInitializedError,
    DatabaseManagerAlreadyInitializedError,
    DatabaseDecoratorSignatureError,
    DatabaseResourceNotFoundError,
)
from .application import (
    ApplicationException,
    EnvironmentFileNotFoundError,
    EnvironmentTestFailedError,
    EnvironmentNotInitializedError,
    EnvironmentTypeConversionError,
    ConfigurationError,
    ConfigurationDirectoryNotFoundError,
    ConfigurationFileNotFoundError,
    ConfigurationInvalidAppEnvError,
    ConfigurationTestFailedError,
    ConfigurationNotInitializedError,
    ConfigurationTypeConversionError,
)
from .external import (
    ExternalServiceException,
    ExternalServiceConnectionError,
    ExternalServiceTimeoutError,
    ExternalServiceValidationError,
    ExternalServiceAuthorizationError,
    ExternalServiceRateLimitError,
    MailTrapError,
    MailTrapClientError,
    MailTrapSendError,
)
from .security import (
    SecurityException,
    PasswordHashingError,
    JWTError,
    JWTConfigurationError,
    JWTExpiredError,
    JWTInvalidTokenError,
    JWTMissingClaimError,
    JWTTokenTypeError,
    AuthenticationRequiredError,
    AuthStrategyNotFoundError,
)
from .services import *  # noqa: F401,F403
