# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to Leaflings, recording what was asked for,
# how long it took to answer and how it ended, with a tracking number on each line.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: assigns (or honours) a request id, binds it to the logging context,
# logs start and completion with duration, and sets correlation/timing response headers.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging (log_context)
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import time
from typing import Iterable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
DEFAULT_EXCLUDED_PATHS = ("/api/health/live", "/favicon.ico")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request correlation (``X-Request-ID``)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(
        self,
        app: ASGIApp,
        excluded_paths: Iterable[str] = DEFAULT_EXCLUDED_PATHS,
        slow_request_threshold: float = 2.0,
    ):
        super().__init__(app)
        self.excluded_paths = set(excluded_paths)
        self.slow_request_threshold = slow_request_threshold

    def _incoming_request_id(self, request: Request) -> Optional[str]:
        request_id = request.headers.get(REQUEST_ID_HEADER, "").strip()
        return request_id[:64] or None

    async def dispatch(self, request: Request, call_next) -> Response:
        with log_context(self._incoming_request_id(request)) as request_id:
            request.state.request_id = request_id
            quiet = request.url.path in self.excluded_paths
            start_time = time.perf_counter()

            if not quiet:
                logger.info(f"Request started: {request.method} {request.url.path}")

            try:
                response = await call_next(request)
            except Exception:
                duration = time.perf_counter() - start_time
                logger.exception(f"Request failed: {request.method} {request.url.path} after {duration:.3f}s")
                raise

            duration = time.perf_counter() - start_time
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{duration:.3f}s"

            if not quiet:
                message = (
                    f"Request completed: {request.method} {request.url.path} "
                    f"- {response.status_code} - {duration:.3f}s"
                )
                if duration > self.slow_request_threshold:
                    logger.warning(f"Slow request. {message}")
                else:
                    logger.info(message)
            return response
