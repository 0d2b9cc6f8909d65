import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Callable, Optional, List, Dict

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from postdeck.utils.handlers.configuration_handler import ConfigurationHandler
from postdeck.core.postdeck_logger import get_logger, shutdown_loggers


@dataclass
class AppConfig:
    title: str = "PostDeck API"
    description: str = "PostDeck social media management backend"
    version: str = "1.0.0"
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    docs_enabled: bool = True
    graphiql: bool = False
    app_env: str = "dev"

    def __post_init__(self):
        if self.is_production:
            self.docs_enabled = False
            self.graphiql = False

    @classmethod
    def from_config(cls):
        return cls(
            title=ConfigurationHandler.get_value_as_str("App", "title", fallback="PostDeck API"),
            description=ConfigurationHandler.get_value_as_str(
                "App", "description", fallback="PostDeck social media management backend"
            ),
            version=ConfigurationHandler.get_value_as_str("App", "version", fallback="1.0.0"),
            allowed_origins=ConfigurationHandler.get_value_as_list("App", "cors_origins", fallback=["*"]),
            docs_enabled=ConfigurationHandler.get_value_as_bool("App", "docs_enabled", fallback=True),
            graphiql=ConfigurationHandler.get_value_as_bool("GraphQL", "graphiql", fallback=False),
            app_env=ConfigurationHandler.get_current_env(),
        )

    @property
    def is_production(self) -> bool:
        return self.app_env == "prod"

    @property
    def is_development(self) -> bool:
        return self.app_env in ("dev", "local")


class AppFactory:
    def __init__(self, config: AppConfig):
        self.config = config
        self._app: Optional[FastAPI] = None
        self._health_checks: Dict[str, Callable] = {}
        self.logger = get_logger("app", parent_folder="core")

    @property
    def app(self) -> Optional[FastAPI]:
        return self._app

    def create(self, lifespan: Optional[Callable] = None) -> FastAPI:
        if self._app is not None:
            self.logger.warning("App already created, returning existing instance")
            return self._app

        self.logger.info(
            f"Creating FastAPI application: {self.config.title} v{self.config.version}",
            extra={"env": self.config.app_env, "docs_enabled": self.config.docs_enabled}
        )

        if lifespan is None:
            lifespan = self._create_lifespan()

        docs = self.config.docs_enabled
        self._app = FastAPI(
            title=self.config.title,
            description=self.config.description,
            version=self.config.version,
            docs_url="/docs" if docs else None,
            redoc_url="/redoc" if docs else None,
            openapi_url="/openapi.json" if docs else None,
            lifespan=lifespan
        )

        self._setup_cors()
        self._setup_logging_middleware()
        self._setup_exception_handlers()
        self._setup_routers()
        self._setup_default_routes()

        self.logger.info("FastAPI application created successfully")
        return self._app

    def _create_lifespan(self):
        @asynccontextmanager
        async def lifespan(app: FastAPI):
            self.logger.info("FastAPI worker started")
            yield
            self.logger.info("FastAPI worker shutting down")
            shutdown_loggers()

        return lifespan

    def _setup_cors(self):
        origins = self.config.allowed_origins
        allow_all = not origins or "*" in origins

        if allow_all:
            self.logger.info("CORS configured to allow all origins")
            self._app.add_middleware(
                CORSMiddleware,
                allow_origin_regex=".*",
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        else:
            self.logger.info(f"CORS configured with specific origins: {origins}")
            self._app.add_middleware(
                CORSMiddleware,
                allow_origins=origins,
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )

    def _setup_logging_middleware(self) -> None:
        from postdeck.api.middleware import LoggingMiddleware
        self._app.add_middleware(LoggingMiddleware)

    def _setup_exception_handlers(self) -> None:
        from postdeck.api.middleware import register_postdeck_handlers
        register_postdeck_handlers(self._app)

    def _setup_routers(self) -> None:
        from postdeck.api.routes import auth_router, upload_router
        from postdeck.api.graphql import create_graphql_router

        self.include_router(auth_router)
        self.include_router(upload_router)
        self.include_router(create_graphql_router(graphiql=self.config.graphiql), prefix="/graphql")

    def _setup_default_routes(self) -> None:
        @self._app.get("/", tags=["General"])
        async def root() -> dict:
            """Kök endpoint"""
            response = {
                "app": self.config.title,
                "version": self.config.version,
                "status": "running",
            }
            if self.config.docs_enabled:
                response["docs"] = "/docs"
            return response

        @self._app.get("/health", tags=["Health"])
        async def health() -> dict:
            checks = {"status": "healthy"}
            all_healthy = True

            for name, check_func in self._health_checks.items():
                try:
                    result = await check_func() if asyncio.iscoroutinefunction(check_func) else check_func()
                    checks[name] = "ok" if result else "unhealthy"
                    if not result:
                        all_healthy = False
                except Exception as e:
                    self.logger.error(f"Health check '{name}' failed: {e}", exc_info=True)
                    checks[name] = f"error: {str(e)}"
                    all_healthy = False

            if not all_healthy:
                checks["status"] = "unhealthy"
            return checks

    # ---- Helpers ---- #

    def register_health_check(self, name: str, check_func: Callable[[], bool]) -> None:
        """
        Health check fonksiyonu kaydet.

        Örnek:
            >>> factory.register_health_check("database", lambda: manager.engine.is_alive)
        """
        self._health_checks[name] = check_func
        self.logger.info(f"Health check registered: {name}")

    def include_router(self, router: APIRouter, **kwargs) -> None:
        if not self._app:
            raise RuntimeError("Önce create() çağrılmalı")

        self.logger.info(
            f"Registering router: prefix={kwargs.get('prefix', router.prefix)}",
            extra={"prefix": kwargs.get("prefix", router.prefix)}
        )
        self._app.include_router(router, **kwargs)
