from .app import AppConfig, AppFactory
from .server import ServerConfig, ServerManager
from .postdeck import PostDeck

__all__ = ["AppConfig", "AppFactory", "ServerConfig", "ServerManager", "PostDeck"]
