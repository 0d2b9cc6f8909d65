import os
import json
from pathlib import Path
from dotenv import load_dotenv

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    PostDeckException,
    EnvironmentFileNotFoundError,
    EnvironmentTestFailedError,
    EnvironmentNotInitializedError,
    EnvironmentTypeConversionError,
)


class EnvironmentHandler:
    _env_path = None
    _initialized = False
    _logger = get_logger("core")

    @classmethod
    def load(cls, env_path: Path = None):
        if cls._initialized:
            cls._logger.info("Environment Handler daha önce başlatılmış, tekrar başlatılamaz")
            return

        cls._env_path = Path(env_path) if env_path else Path(__file__).resolve().parents[3] / ".env"

        if not cls._env_path.exists():
            cls._logger.error(
                f"Environment dosyası bulunamadı: {cls._env_path}",
                extra={"env_file_path": str(cls._env_path)}
            )
            raise EnvironmentFileNotFoundError(file_path=str(cls._env_path))

        load_dotenv(cls._env_path)
        cls._logger.debug("Environment dosyası başarıyla yüklendi")
        cls._initialized = True

    @classmethod
    def test(cls, test_key: str = "TestKey", expected_value: str = "ThisKeyIsForEnvTest"):
        if not cls._initialized:
            cls._logger.debug("Environment Handler başlatılıyor...")
            cls.load()

        actual_value = os.getenv(test_key)
        return actual_value == expected_value, actual_value, expected_value

    @classmethod
    def init(cls, test_key: str = "TestKey", expected_value: str = "ThisKeyIsForEnvTest"):
        if cls._initialized:
            cls._logger.info("Environment Handler daha önce başlatılmış, tekrar başlatılamaz")
            return True

        cls.load()

        success, actual_value, expected_value = cls.test(test_key, expected_value)
        if not success:
            cls._logger.error(
                "Environment test başarısız, .env dosyasını kontrol ediniz",
                extra={"test_key": test_key, "expected_value": expected_value, "actual_value": actual_value}
            )
            raise EnvironmentTestFailedError(
                test_key=test_key,
                expected_value=expected_value,
                actual_value=actual_value,
            )

        cls._logger.info("Environment Handler başarıyla başlatıldı")
        return cls._initialized

    @classmethod
    def is_initialized(cls):
        return cls._initialized

    @classmethod
    def _get(cls, key: str, default=None):
        if not cls._initialized:
            cls._logger.error(
                "Get işlemi yapılmadan önce Environment Handler başlatılmalıdır",
                extra={"key": key}
            )
            raise EnvironmentNotInitializedError()

        return os.getenv(key, default)

    @classmethod
    def _convert(cls, key: str, default, target_type: str, converter):
        try:
            value = cls._get(key, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                return default
            return converter(value)
        except PostDeckException:
            raise
        except (ValueError, TypeError) as e:
            cls._logger.error(
                f"Environment değeri alınamadı: {key}",
                extra={"key": key, "target_type": target_type, "error": str(e)}
            )
            raise EnvironmentTypeConversionError(key=key, target_type=target_type, cause=e) from e

    @classmethod
    def get_value_as_str(cls, key: str, default: str = None) -> str:
        return cls._convert(key, default, "string", lambda v: str(v).strip())

    @classmethod
    def get_value_as_int(cls, key: str, default: int = None) -> int:
        return cls._convert(key, default, "integer", int)

    @classmethod
    def get_value_as_float(cls, key: str, default: float = None) -> float:
        return cls._convert(key, default, "float", float)

    @classmethod
    def get_value_as_bool(cls, key: str, default: bool = None) -> bool:
        def to_bool(value):
            normalized = str(value).strip().lower()
            if normalized in {"true", "1", "yes", "on"}:
                return True
            if normalized in {"false", "0", "no", "off"}:
                return False
            raise ValueError(f"'{value}' boolean değil")
        return cls._convert(key, default, "boolean", to_bool)

    @classmethod
    def get_value_as_list(cls, key: str, default: list = None) -> list:
        def to_list(value):
            try:
                parsed = json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(str(e)) from e
            if not isinstance(parsed, list):
                raise ValueError(f"'{key}' JSON list değil")
            return parsed
        return cls._convert(key, default, "list", to_list)
