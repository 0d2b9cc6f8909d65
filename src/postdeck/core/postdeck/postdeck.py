from typing import Optional, Callable

from fastapi import FastAPI

from postdeck.core.postdeck_logger import get_logger
from .app import AppFactory, AppConfig
from .server import ServerManager, ServerConfig


class PostDeck:
    """AppFactory ve ServerManager'ı tek bir giriş noktasında toplar."""

    def __init__(
        self,
        app_config: Optional[AppConfig] = None,
        server_config: Optional[ServerConfig] = None
    ):
        self.logger = get_logger("postdeck", parent_folder="core")
        self.app_config = app_config or AppConfig.from_config()
        self.server_config = server_config or ServerConfig.from_config()
        self.app_factory = AppFactory(self.app_config)
        self.server_manager = ServerManager(self.server_config)

    def create_app(self, lifespan: Optional[Callable] = None) -> FastAPI:
        return self.app_factory.create(lifespan=lifespan)

    def run(self, app: Optional[FastAPI] = None, app_import_string: Optional[str] = None) -> None:
        if app is None:
            app = self.create_app()
        self.server_manager.start(app, app_import_string=app_import_string)

    def register_health_check(self, name: str, check_func: Callable[[], bool]) -> None:
        self.app_factory.register_health_check(name, check_func)

    @property
    def app(self) -> Optional[FastAPI]:
        return self.app_factory.app

    def get_info(self) -> dict:
        info = self.server_manager.get_info()
        info.update({
            "app_title": self.app_config.title,
            "app_version": self.app_config.version,
            "app_env": self.app_config.app_env,
        })
        return info
