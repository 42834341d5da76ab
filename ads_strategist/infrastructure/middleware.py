import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from ads_strategist.logging_config import (
    generate_request_id, request_id,
    log_request_details, log_response_details
)

logger = logging.getLogger(__name__)

class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate and set request ID
        req_id = generate_request_id()
        token = request_id.set(req_id)

        client_ip = request.client.host if request.client else "unknown"
        content_length = request.headers.get("content-length")

        log_request_details(
            logger,
            request.method,
            str(request.url.path),
            client_ip,
            request.headers.get("user-agent"),
            int(content_length) if content_length and content_length.isdigit() else None
        )

        start_time = time.time()
        try:
            response = await call_next(request)

            log_response_details(
                logger,
                response.status_code,
                duration_ms=round((time.time() - start_time) * 1000, 2)
            )

            # Add request ID to response headers
            response.headers["X-Request-ID"] = req_id
            return response
        finally:
            request_id.reset(token)
