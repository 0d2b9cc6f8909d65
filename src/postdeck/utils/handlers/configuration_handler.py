from pathlib import Path
from configparser import ConfigParser

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import (
    PostDeckException,
    ConfigurationDirectoryNotFoundError,
    ConfigurationFileNotFoundError,
    ConfigurationInvalidAppEnvError,
    ConfigurationTestFailedError,
    ConfigurationNotInitializedError,
    ConfigurationTypeConversionError,
)
from .environment_handler import EnvironmentHandler


class ConfigurationHandler:
    """APP_ENV'e göre configurations/{env}.ini dosyasını yükler ve tipli erişim sağlar."""

    _initialized = False
    _parser = ConfigParser()
    _config_dir = None
    _current_env = None
    _logger = get_logger("core")

    ENV_FILE_MAP = {
        "dev": "dev.ini",
        "prod": "prod.ini",
        "local": "local.ini",
        "test": "test.ini",
    }

    @classmethod
    def load(cls):
        if cls._initialized:
            cls._logger.info("Configuration Handler daha önce başlatılmış, tekrar başlatılamaz")
            return

        if not EnvironmentHandler.is_initialized():
            cls._logger.debug("Environment Handler başlatılıyor...")
            EnvironmentHandler.load()

        cls._config_dir = Path(__file__).resolve().parents[2] / "configurations"

        if not cls._config_dir.exists():
            cls._logger.error(
                f"Configuration dizini bulunamadı: {cls._config_dir}",
                extra={"config_directory": str(cls._config_dir)}
            )
            raise ConfigurationDirectoryNotFoundError(directory_path=str(cls._config_dir))

        cls._load_configuration_file()
        cls._logger.debug("Configuration dosyası başarıyla yüklendi")
        cls._initialized = True

    @classmethod
    def _load_configuration_file(cls):
        app_env = EnvironmentHandler.get_value_as_str("APP_ENV")
        valid = list(cls.ENV_FILE_MAP)

        if not app_env:
            cls._logger.error("APP_ENV environment variable tanımlı değil", extra={"valid_environments": valid})
            raise ConfigurationInvalidAppEnvError(app_env=None, valid_envs=valid)

        app_env = app_env.lower()
        matched_env = next((env for env in cls.ENV_FILE_MAP if env in app_env), None)
        if not matched_env:
            cls._logger.error(f"Geçersiz APP_ENV değeri: {app_env}", extra={"app_env": app_env})
            raise ConfigurationInvalidAppEnvError(app_env=app_env, valid_envs=valid)

        cls._current_env = matched_env
        ini_file = cls._config_dir / cls.ENV_FILE_MAP[matched_env]

        if not ini_file.exists():
            cls._logger.error(
                f"Configuration dosyası bulunamadı: {ini_file}",
                extra={"config_file": str(ini_file), "app_env": app_env}
            )
            raise ConfigurationFileNotFoundError(file_path=str(ini_file))

        cls._parser.read(ini_file, encoding="utf-8")
        cls._logger.debug(f"Configuration dosyası yüklendi: {ini_file}")

    @classmethod
    def test(cls, test_section: str = "Test", test_key: str = "value", expected_value: str = "ThisKeyIsForConfigTest"):
        if not cls._initialized:
            cls.load()

        actual_value = cls._parser.get(test_section, test_key, fallback=None)
        return actual_value == expected_value, actual_value, expected_value

    @classmethod
    def init(cls, test_section: str = "Test", test_key: str = "value", expected_value: str = "ThisKeyIsForConfigTest"):
        if cls._initialized:
            cls._logger.info("Configuration Handler daha önce başlatılmış, tekrar başlatılamaz")
            return True

        cls.load()

        success, actual_value, expected_value = cls.test(test_section, test_key, expected_value)
        if not success:
            cls._logger.error(
                "Configuration test başarısız, ini dosyasını kontrol ediniz",
                extra={"section": test_section, "key": test_key, "actual_value": actual_value}
            )
            raise ConfigurationTestFailedError(
                section=test_section,
                key=test_key,
                expected_value=expected_value,
                actual_value=actual_value,
            )

        cls._logger.info("Configuration Handler başarıyla başlatıldı", extra={"app_env": cls._current_env})
        return cls._initialized

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def get_current_env(cls) -> str:
        return cls._current_env

    @classmethod
    def _get(cls, section: str, key: str, fallback=None):
        if not cls._initialized:
            cls._logger.error(
                "Get işlemi yapılmadan önce Configuration Handler başlatılmalıdır",
                extra={"section": section, "key": key}
            )
            raise ConfigurationNotInitializedError()

        return cls._parser.get(section, key, fallback=fallback)

    @classmethod
    def _convert(cls, section: str, key: str, fallback, target_type: str, converter):
        try:
            value = cls._get(section, key, fallback=None)
            if value is None or not value.strip():
                return fallback
            return converter(value.strip())
        except PostDeckException:
            raise
        except (ValueError, TypeError) as e:
            cls._logger.error(
                f"Configuration değeri alınamadı: [{section}] {key}",
                extra={"section": section, "key": key, "target_type": target_type, "error": str(e)}
            )
            raise ConfigurationTypeConversionError(
                section=section, key=key, target_type=target_type, cause=e
            ) from e

    @classmethod
    def get_value_as_str(cls, section: str, key: str, fallback: str = None) -> str:
        return cls._convert(section, key, fallback, "string", str)

    @classmethod
    def get_value_as_int(cls, section: str, key: str, fallback: int = None) -> int:
        return cls._convert(section, key, fallback, "integer", int)

    @classmethod
    def get_value_as_float(cls, section: str, key: str, fallback: float = None) -> float:
        return cls._convert(section, key, fallback, "float", float)

    @classmethod
    def get_value_as_bool(cls, section: str, key: str, fallback: bool = None) -> bool:
        def to_bool(value):
            normalized = value.lower()
            if normalized in {"true", "1", "yes", "on"}:
                return True
            if normalized in {"false", "0", "no", "off"}:
                return False
            raise ValueError(f"'{value}' boolean değil")
        return cls._convert(section, key, fallback, "boolean", to_bool)

    @classmethod
    def get_value_as_list(cls, section: str, key: str, separator: str = ",", fallback: list = None) -> list:
        result = cls._convert(
            section, key, None, "list",
            lambda v: [item.strip() for item in v.split(separator) if item.strip()],
        )
        if result is None:
            return fallback if fallback is not None else []
        return result

    @classmethod
    def ensure_loaded(cls):
        if not cls._initialized:
            cls.load()
