from .base import BaseRepository, handle_exceptions

__all__ = ["BaseRepository", "handle_exceptions"]
