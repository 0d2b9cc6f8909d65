"""
Trace ve Correlation ile Loglama Middleware'i

Çalışma sırası:
1. Middleware trace context'i başlatır (X-Trace-Id / X-Correlation-Id header'dan alınır veya oluşturulur)
2. JwtAuthGuard çalıştığında trace context'e user_id eklenir
3. Response'a güncel trace header'ları eklenir
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from postdeck.core.logger.context import trace, get_current_context
from postdeck.core.postdeck_logger import get_logger

# API katmanı genel istek/cevap logger'ı
logger = get_logger("logging_middleware", parent_folder="api")


class LoggingMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, log_requests: bool = True):
        super().__init__(app)
        self.log_requests = log_requests

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        with trace(headers=dict(request.headers)) as ctx:
            start_time = time.time()

            if self.log_requests:
                logger.info(
                    "Request başladı",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "query": str(request.url.query) if request.url.query else None,
                        "client": request.client.host if request.client else None,
                    },
                )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request hatası",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "error": str(e),
                        "error_type": type(e).__name__,
                        "process_time": f"{time.time() - start_time:.3f}s",
                    },
                    exc_info=True,
                )
                raise

            current_ctx = get_current_context() or ctx
            for key, value in current_ctx.to_headers().items():
                response.headers[key] = value

            if self.log_requests:
                logger.info(
                    "Request tamamlandı",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "status_code": response.status_code,
                        "process_time": f"{time.time() - start_time:.3f}s",
                    },
                )

            return response
