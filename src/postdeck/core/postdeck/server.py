import signal
from dataclasses import dataclass, field
from typing import Optional, List

from fastapi import FastAPI

from postdeck.utils.handlers.configuration_handler import ConfigurationHandler
from postdeck.core.postdeck_logger import get_logger


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    reload: bool = False
    reload_dirs: List[str] = field(default_factory=list)
    timeout_keep_alive: int = 5
    timeout_graceful_shutdown: int = 30
    log_level: str = "info"
    access_log: bool = True

    def __post_init__(self):
        if self.port < 1 or self.port > 65535:
            raise ValueError(f"Geçersiz port: {self.port}")
        if self.workers < 0:
            raise ValueError(f"Workers negatif olamaz: {self.workers}")
        # Reload açıkken tek worker
        if self.reload and self.workers > 1:
            self.workers = 1

    @classmethod
    def from_config(cls):
        return cls(
            host=ConfigurationHandler.get_value_as_str("Server", "host", fallback="0.0.0.0"),
            port=ConfigurationHandler.get_value_as_int("Server", "port", fallback=8000),
            workers=ConfigurationHandler.get_value_as_int("Server", "workers", fallback=1),
            reload=ConfigurationHandler.get_value_as_bool("Server", "reload", fallback=False),
            reload_dirs=ConfigurationHandler.get_value_as_list("Server", "reload_dirs", fallback=[]),
            timeout_keep_alive=ConfigurationHandler.get_value_as_int("Server", "timeout_keep_alive", fallback=5),
            timeout_graceful_shutdown=ConfigurationHandler.get_value_as_int(
                "Server", "timeout_graceful_shutdown", fallback=30
            ),
            log_level=ConfigurationHandler.get_value_as_str("Server", "log_level", fallback="info"),
            access_log=ConfigurationHandler.get_value_as_bool("Server", "access_log", fallback=True),
        )


class ServerManager:
    """Uvicorn sunucu yöneticisi"""

    def __init__(self, config: ServerConfig):
        self.config = config
        self._is_running = False
        self.logger = get_logger("server", parent_folder="core")

    def start(self, app: FastAPI, app_import_string: Optional[str] = None) -> None:
        """
        Uvicorn sunucusunu başlatır.

        Reload veya çoklu worker modunda ``app_import_string`` zorunludur.
        """
        import uvicorn

        self._setup_signal_handlers()
        self._is_running = True

        self.logger.info(
            f"Starting server on {self.config.host}:{self.config.port}",
            extra={
                "host": self.config.host,
                "port": self.config.port,
                "workers": self.config.workers,
                "reload": self.config.reload,
            }
        )

        uvicorn_kwargs = self._build_uvicorn_config()
        # Reload ve çoklu worker uygulamayı import string üzerinden yükler
        if self.config.reload or self.config.workers > 1:
            if not app_import_string:
                raise ValueError("Reload/multi-worker modu için 'app_import_string' parametresi zorunludur")
            uvicorn.run(app_import_string, **uvicorn_kwargs)
        else:
            uvicorn.run(app, **uvicorn_kwargs)

    def _build_uvicorn_config(self) -> dict:
        config = {
            "host": self.config.host,
            "port": self.config.port,
            "log_level": self.config.log_level,
            "access_log": self.config.access_log,
            "timeout_keep_alive": self.config.timeout_keep_alive,
            "timeout_graceful_shutdown": self.config.timeout_graceful_shutdown,
            "log_config": None,
        }
        if self.config.reload:
            config["reload"] = True
            config["reload_dirs"] = self.config.reload_dirs
        else:
            config["workers"] = self.config.workers
        return config

    def _setup_signal_handlers(self) -> None:
        def handle_shutdown(signum: int, frame) -> None:
            self.logger.info(f"Received {signal.Signals(signum).name}, shutting down...")
            self.stop()

        signal.signal(signal.SIGTERM, handle_shutdown)
        signal.signal(signal.SIGINT, handle_shutdown)

    def get_info(self) -> dict:
        base_url = f"http://{self.config.host}:{self.config.port}"
        return {
            "host": self.config.host,
            "port": self.config.port,
            "workers": self.config.workers,
            "reload": self.config.reload,
            "log_level": self.config.log_level,
            "url": base_url,
        }

    def stop(self) -> None:
        if not self._is_running:
            self.logger.warning("Server is not running")
            return
        self.logger.info("Stopping server...")
        self._is_running = False

    @property
    def is_running(self) -> bool:
        return self._is_running
