# zr_core/common/middleware.py
from __future__ import annotations

import logging
import time

from django.utils.deprecation import MiddlewareMixin

from zr_core.common.api.exceptions import ensure_request_id

logger = logging.getLogger("zr_core.request")


class RequestLogMiddleware(MiddlewareMixin):
    """
    Assigns a request id (inbound X-Request-Id wins), echoes it on the
    response and logs one line per API request.

    Docs/schema/admin traffic is not logged.
    """

    LOGGED_PREFIXES = ("/api/",)
    QUIET_PREFIXES = ("/api/docs/", "/api/schema/")
    RESPONSE_HEADER = "X-Request-Id"

    def _should_log(self, path: str) -> bool:
        if any(path.startswith(p) for p in self.QUIET_PREFIXES):
            return False
        return any(path.startswith(p) for p in self.LOGGED_PREFIXES)

    def process_request(self, request):
        ensure_request_id(request)
        request._started_at = time.monotonic()
        return None

    def process_response(self, request, response):
        rid = ensure_request_id(request)
        response[self.RESPONSE_HEADER] = rid

        path = getattr(request, "path", "") or ""
        if self._should_log(path):
            started = getattr(request, "_started_at", None)
            elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "%s %s -> %s (%.1fms) request_id=%s",
                request.method,
                path,
                response.status_code,
                elapsed_ms,
                rid,
            )
        return response
