from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import time
import uuid

from app.util.log import get_logger

access_log = get_logger("access")

class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        started = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = req_id
        access_log.info("%s %s %s %.1fms rid=%s", request.method, request.url.path, response.status_code,
                        (time.perf_counter() - started) * 1000, req_id)
        return response
