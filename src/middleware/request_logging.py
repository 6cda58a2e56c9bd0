"""
Middleware per il logging centralizzato di richieste, errori e richieste lente
"""
import logging
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Registra l'inizio di ogni richiesta, gli errori non gestiti e le richieste
    più lente della soglia; aggiunge gli header X-Process-Time e X-Request-ID.
    """

    def __init__(self, app, log_requests: bool = True, slow_request_threshold: float = 1.0):
        super().__init__(app)
        self.log_requests = log_requests
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        if self.log_requests:
            logger.info(
                f"Request started: {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "client_ip": request.client.host if request.client else None,
                }
            )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request failed: {request.method} {request.url.path} - {type(exc).__name__}: {str(exc)}",
                extra={
                    "request_id": request_id,
                    "process_time": time.time() - start_time,
                },
                exc_info=True
            )
            # Rilancia l'eccezione per essere gestita dagli exception handler
            raise

        process_time = time.time() - start_time
        if process_time > self.slow_request_threshold:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path} ({process_time:.2f}s)",
                extra={
                    "request_id": request_id,
                    "status_code": response.status_code,
                    "threshold": self.slow_request_threshold,
                }
            )

        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id
        return response
