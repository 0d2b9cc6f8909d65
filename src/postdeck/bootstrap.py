from typing import Optional

from fastapi import FastAPI

from postdeck.core.postdeck_logger import get_logger
from postdeck.core.exceptions import PostDeckException, DatabaseConfigurationError, DatabaseValidationError
from postdeck.utils.handlers import EnvironmentHandler, ConfigurationHandler
from postdeck.infrastructure.database import DatabaseManager, BaseModel, get_database_config_from_settings
from postdeck.infrastructure.clients import MailTrapClient


class PostDeckBootstrap:
    """
    Uygulama açılış sırası:
        environment -> configuration -> database (+ tablolar) -> mail client -> app
    """

    _logger = get_logger("bootstrap", parent_folder="core")

    def __init__(self, create_tables: bool = True):
        self._initialized = False
        self._create_tables = create_tables
        self._database_manager: Optional[DatabaseManager] = None

    def _setup_environment_handler(self) -> None:
        self._logger.debug("Environment Handler başlatılıyor...")
        if not EnvironmentHandler.is_initialized():
            EnvironmentHandler.init()
        self._logger.info("Environment Handler başarıyla başlatıldı")

    def _setup_configuration_handler(self) -> None:
        self._logger.debug("Configuration Handler başlatılıyor...")
        if not ConfigurationHandler.is_initialized():
            ConfigurationHandler.init()
        self._logger.info("Configuration Handler başarıyla başlatıldı")

    def _setup_database_manager(self) -> None:
        self._logger.debug("Database Manager başlatılıyor...")
        try:
            db_config = get_database_config_from_settings()
        except (DatabaseConfigurationError, DatabaseValidationError) as e:
            self._logger.error(f"Database yapılandırma hatası: {e.error_message}", extra={"error_code": e.error_code})
            raise

        self._database_manager = DatabaseManager()
        if self._database_manager.is_initialized:
            self._logger.info("Database Manager zaten başlatılmış")
            return

        engine = self._database_manager.initialize(db_config, auto_start=True)
        if self._create_tables:
            # Modeller metadata'ya kaydolsun
            import postdeck.domain.models  # noqa: F401
            engine.create_tables(BaseModel.metadata)

        self._logger.info(f"Database Manager başarıyla başlatıldı: {db_config!r}")

    def _setup_mail_client(self) -> None:
        try:
            MailTrapClient.init()
        except PostDeckException as e:
            # E-posta gönderimi kayıt akışını durdurmaz; servisler hatayı ayrıca loglar
            self._logger.error(
                f"MailTrap client başlatılamadı: {e.error_message}",
                extra={"error_code": e.error_code}
            )

    def initialize(self) -> bool:
        if self._initialized:
            self._logger.info("PostDeck Bootstrap zaten başlatılmış")
            return True

        self._logger.info("PostDeck Bootstrap başlatılıyor...")
        self._setup_environment_handler()
        self._setup_configuration_handler()
        self._setup_database_manager()
        self._setup_mail_client()

        self._initialized = True
        self._logger.info("PostDeck Bootstrap başarıyla tamamlandı")
        return True

    def create_postdeck(self):
        from postdeck.core.postdeck import PostDeck

        postdeck = PostDeck()
        postdeck.create_app()
        postdeck.register_health_check("database", self._database_is_healthy)
        return postdeck

    def create_app(self) -> FastAPI:
        return self.create_postdeck().app

    def _database_is_healthy(self) -> bool:
        if self._database_manager is None or not self._database_manager.is_initialized:
            return False
        return self._database_manager.engine.health_check().get("status") == "healthy"
