"""
Request correlation middleware.
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from geopoint.core.logging_config import LogContext

logger = logging.getLogger(__name__)


class RequestCorrelationMiddleware(BaseHTTPMiddleware):
    """
    Tag every request with an ID and log its outcome.

    The ID is taken from the incoming header or generated, stored on
    ``request.state.request_id``, attached to log records emitted while the
    request runs, and echoed back in the response header.
    """

    def __init__(self, app, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        with LogContext(
            request_id=request_id,
            http_method=request.method,
            request_path=request.url.path,
        ):
            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"Request failed: {request.method} {request.url.path} "
                    f"- Error: {type(e).__name__} - Duration: {duration_ms:.2f}ms"
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[self.header_name] = request_id
            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"- Status: {response.status_code} - Duration: {duration_ms:.2f}ms",
                extra={"duration_ms": round(duration_ms, 2)},
            )
            return response
