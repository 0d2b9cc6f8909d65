from .environment_handler import EnvironmentHandler
from .configuration_handler import ConfigurationHandler

__all__ = [
    "EnvironmentHandler",
    "ConfigurationHandler",
]
