"""
Error Detail Levels
===================

APP_ENV'e göre API hata yanıtlarında ne kadar detay gösterileceğini belirler.
"""

from enum import Enum
from typing import Dict


class ErrorDetailLevel(str, Enum):
    MINIMAL = "minimal"      # prod: error_code + message
    STANDARD = "standard"    # test/stage: details, traceback yok
    FULL = "full"            # dev/local: details + traceback

    def as_flags(self) -> Dict[str, bool]:
        return {
            "include_traceback": self is ErrorDetailLevel.FULL,
            "include_details": self is not ErrorDetailLevel.MINIMAL,
        }


def get_error_level_from_env(app_env: str) -> ErrorDetailLevel:
    """
    >>> get_error_level_from_env("dev")
    <ErrorDetailLevel.FULL: 'full'>
    >>> get_error_level_from_env("prod")
    <ErrorDetailLevel.MINIMAL: 'minimal'>
    """
    app_env_lower = app_env.lower() if app_env else "prod"

    if "dev" in app_env_lower or "local" in app_env_lower:
        return ErrorDetailLevel.FULL
    if "stage" in app_env_lower or "test" in app_env_lower:
        return ErrorDetailLevel.STANDARD
    return ErrorDetailLevel.MINIMAL
