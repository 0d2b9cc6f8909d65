from __future__ import annotations

import atexit
import logging
import queue
import sys
import threading
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from typing import Optional


class AsyncHandler:
    """
    Queue tabanlı asenkron handler.

    Logger QueueHandler'a yazar ve anında döner. QueueListener arka plandaki
    thread'de kayıtları gerçek handler'a (console/file) aktarır.
    """

    def __init__(self, handler: logging.Handler):
        self._queue: queue.Queue = queue.Queue(-1)
        self._handler = handler
        self._listener: Optional[QueueListener] = None
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._listener is not None:
                return
            self._listener = QueueListener(self._queue, self._handler, respect_handler_level=True)
            self._listener.start()
            atexit.register(self.stop)

    def stop(self) -> None:
        """Kuyruktaki kayıtları boşaltır ve handler'ı kapatır. Idempotent."""
        with self._lock:
            if self._listener is None:
                return
            self._listener.stop()
            self._listener = None
            self._handler.flush()
            self._handler.close()

    def get_queue_handler(self) -> QueueHandler:
        self.start()
        return QueueHandler(self._queue)

    @property
    def handler(self) -> logging.Handler:
        return self._handler


class AsyncConsoleHandler(AsyncHandler):
    def __init__(self, level: int = logging.INFO, stream=None):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setLevel(level)
        super().__init__(handler)


class AsyncRotatingFileHandler(AsyncHandler):
    def __init__(self, filename: str, max_bytes: int = 10 * 1024 * 1024, backup_count: int = 5,
                 level: int = logging.DEBUG):
        Path(filename).parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
            delay=True,
        )
        handler.setLevel(level)
        super().__init__(handler)
