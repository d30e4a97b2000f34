"""LoggingMiddleware -- 请求级访问日志

为每个 HTTP 请求生成 request_id，绑定到 structlog contextvars，
记录请求开始与完成（含耗时）。

未处理异常在此转换为 500 响应，使其同样带有 X-Request-ID；
异常日志只由 unexpected_error_handler 记录一次。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

from .error_handlers import unexpected_error_handler


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件 -- 为每个请求生成 request_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(ULID())

        # 绑定 request_id 到 structlog context
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        log = structlog.get_logger()
        await log.ainfo(
            "request_started",
            query=str(request.url.query),
            client=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent", ""),
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            response = await unexpected_error_handler(request, e)

        await log.ainfo(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        # 在响应头中返回 request_id
        response.headers["X-Request-ID"] = request_id
        return response
