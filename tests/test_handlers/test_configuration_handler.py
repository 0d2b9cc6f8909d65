import pytest
from unittest.mock import patch
from configparser import ConfigParser
from postdeck.utils.handlers.configuration_handler import ConfigurationHandler
from postdeck.core.exceptions import (
    ConfigurationDirectoryNotFoundError,
    ConfigurationFileNotFoundError,
    ConfigurationInvalidAppEnvError,
    ConfigurationTestFailedError,
    ConfigurationNotInitializedError,
    ConfigurationTypeConversionError,
)

ENV_HANDLER = "postdeck.utils.handlers.environment_handler.EnvironmentHandler"


@pytest.fixture(autouse=True)
def reset_config_handler():
    """Reset ConfigurationHandler class variables before each test."""
    ConfigurationHandler._initialized = False
    ConfigurationHandler._parser = ConfigParser()
    ConfigurationHandler._config_dir = None
    ConfigurationHandler._current_env = None
    yield
    ConfigurationHandler._initialized = False
    ConfigurationHandler._parser = ConfigParser()
    ConfigurationHandler._config_dir = None
    ConfigurationHandler._current_env = None


def test_load_directory_not_found():
    with patch(f"{ENV_HANDLER}.is_initialized", return_value=True), \
         patch("pathlib.Path.exists", return_value=False):
        with pytest.raises(ConfigurationDirectoryNotFoundError):
            ConfigurationHandler.load()


def test_load_app_env_missing():
    with patch(f"{ENV_HANDLER}.is_initialized", return_value=True), \
         patch("pathlib.Path.exists", return_value=True), \
         patch(f"{ENV_HANDLER}.get_value_as_str", return_value=None):
        with pytest.raises(ConfigurationInvalidAppEnvError):
            ConfigurationHandler.load()


def test_load_invalid_app_env():
    with patch(f"{ENV_HANDLER}.is_initialized", return_value=True), \
         patch("pathlib.Path.exists", return_value=True), \
         patch(f"{ENV_HANDLER}.get_value_as_str", return_value="invalid"):
        with pytest.raises(ConfigurationInvalidAppEnvError) as exc:
            ConfigurationHandler.load()
        assert exc.value.error_details["app_env"] == "invalid"


def test_load_file_not_found():
    with patch(f"{ENV_HANDLER}.is_initialized", return_value=True), \
         patch(f"{ENV_HANDLER}.get_value_as_str", return_value="dev"), \
         patch("pathlib.Path.exists", side_effect=[True, False]):
        with pytest.raises(ConfigurationFileNotFoundError):
            ConfigurationHandler.load()


def test_load_real_test_ini():
    with patch(f"{ENV_HANDLER}.is_initialized", return_value=True), \
         patch(f"{ENV_HANDLER}.get_value_as_str", return_value="test"):
        ConfigurationHandler.load()

    assert ConfigurationHandler.is_initialized() is True
    assert ConfigurationHandler.get_current_env() == "test"
    assert ConfigurationHandler.get_value_as_str("Database", "sqlite_path") == ":memory:"
    assert ConfigurationHandler.get_value_as_int("Upload", "max_files") == 10
    assert ConfigurationHandler.get_value_as_bool("GraphQL", "graphiql") is False


def test_init_and_validation_success():
    def mock_load():
        ConfigurationHandler._initialized = True

    with patch.object(ConfigurationHandler, "load", side_effect=mock_load), \
         patch.object(ConfigurationHandler, "_parser") as mock_parser:
        mock_parser.get.return_value = "ThisKeyIsForConfigTest"
        assert ConfigurationHandler.init() is True


def test_init_validation_failure():
    with patch.object(ConfigurationHandler, "load"), \
         patch.object(ConfigurationHandler, "_parser") as mock_parser:
        mock_parser.get.return_value = "WrongValue"
        with pytest.raises(ConfigurationTestFailedError):
            ConfigurationHandler.init()


def test_get_value_as_str():
    ConfigurationHandler._initialized = True
    ConfigurationHandler._parser.add_section("App")
    ConfigurationHandler._parser.set("App", "title", " PostDeck ")

    assert ConfigurationHandler.get_value_as_str("App", "title") == "PostDeck"
    assert ConfigurationHandler.get_value_as_str("App", "missing", fallback="def") == "def"


def test_get_value_as_int():
    ConfigurationHandler._initialized = True
    ConfigurationHandler._parser.add_section("Server")
    ConfigurationHandler._parser.set("Server", "port", "8080")
    ConfigurationHandler._parser.set("Server", "bad_int", "not_int")

    assert ConfigurationHandler.get_value_as_int("Server", "port") == 8080
    with pytest.raises(ConfigurationTypeConversionError) as exc:
        ConfigurationHandler.get_value_as_int("Server", "bad_int")
    assert exc.value.error_details["section"] == "Server"
    assert exc.value.error_details["key"] == "bad_int"
    assert exc.value.error_details["target_type"] == "integer"


def test_get_value_as_bool():
    ConfigurationHandler._initialized = True
    ConfigurationHandler._parser.add_section("App")
    ConfigurationHandler._parser.set("App", "docs_enabled", "true")
    ConfigurationHandler._parser.set("App", "off_key", "no")
    ConfigurationHandler._parser.set("App", "weird", "maybe")

    assert ConfigurationHandler.get_value_as_bool("App", "docs_enabled") is True
    assert ConfigurationHandler.get_value_as_bool("App", "off_key") is False
    with pytest.raises(ConfigurationTypeConversionError):
        ConfigurationHandler.get_value_as_bool("App", "weird")


def test_get_value_as_list():
    ConfigurationHandler._initialized = True
    ConfigurationHandler._parser.add_section("App")
    ConfigurationHandler._parser.set("App", "cors_origins", "http://a.test, http://b.test,  ")

    assert ConfigurationHandler.get_value_as_list("App", "cors_origins") == ["http://a.test", "http://b.test"]
    assert ConfigurationHandler.get_value_as_list("App", "missing") == []
    assert ConfigurationHandler.get_value_as_list("App", "missing", fallback=["*"]) == ["*"]


def test_not_initialized_error_across_types():
    getters = [
        lambda: ConfigurationHandler.get_value_as_str("ANY", "KEY"),
        lambda: ConfigurationHandler.get_value_as_int("ANY", "KEY"),
        lambda: ConfigurationHandler.get_value_as_float("ANY", "KEY"),
        lambda: ConfigurationHandler.get_value_as_bool("ANY", "KEY"),
        lambda: ConfigurationHandler.get_value_as_list("ANY", "KEY"),
    ]

    for getter in getters:
        with pytest.raises(ConfigurationNotInitializedError):
            getter()
