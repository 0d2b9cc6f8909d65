from typing import Optional, Dict
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from postdeck.core.exceptions import PostDeckException
from postdeck.core.exceptions.error_levels import ErrorDetailLevel, get_error_level_from_env
from postdeck.core.postdeck_logger import get_logger
from postdeck.utils.handlers.environment_handler import EnvironmentHandler

logger = get_logger("exception_handling", parent_folder="api")

VALIDATION_STATUS_CODE = 422

ERROR_LEVEL: Optional[ErrorDetailLevel] = None


def _get_error_level() -> ErrorDetailLevel:
    """Lazy evaluation of error level - only called when needed."""
    global ERROR_LEVEL
    if ERROR_LEVEL is None:
        if EnvironmentHandler.is_initialized():
            app_env = EnvironmentHandler.get_value_as_str("APP_ENV", default="prod")
        else:
            app_env = "prod"
        ERROR_LEVEL = get_error_level_from_env(app_env)
    return ERROR_LEVEL


def build_error_response(exception: PostDeckException, level: Optional[ErrorDetailLevel] = None) -> JSONResponse:
    """Build error response with environment-based detail level."""
    flags: Dict[str, bool] = (level or _get_error_level()).as_flags()
    response_data = {
        "success": False,
        "error": exception.to_dict(**flags),
    }
    return JSONResponse(content=jsonable_encoder(response_data), status_code=exception.status_code)


async def postdeck_exception_handler(request: Request, exception: PostDeckException) -> JSONResponse:
    log = logger.error if exception.status_code >= 500 else logger.info
    log(
        f"{exception.error_code}: {exception.error_message}",
        extra={"path": request.url.path, "status_code": exception.status_code}
    )
    return build_error_response(exception)


async def validation_exception_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    response_data = {
        "success": False,
        "error": {
            "status_code": VALIDATION_STATUS_CODE,
            "error_code": "VALIDATION_ERROR",
            "error_message": "Request validation failed",
            "error_details": {"errors": exception.errors()},
        },
    }
    return JSONResponse(content=jsonable_encoder(response_data), status_code=VALIDATION_STATUS_CODE)


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    logger.error(
        f"Beklenmeyen hata: {exception}",
        extra={"path": request.url.path, "error_type": type(exception).__name__},
        exc_info=exception,
    )
    return build_error_response(PostDeckException(cause=exception))


def register_postdeck_handlers(app) -> None:
    app.add_exception_handler(PostDeckException, postdeck_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
