"""TraceMiddleware -- 任务级追踪

为任务操作绑定 trace_id，贯穿同一任务的所有日志。
trace_id 从路径参数中的 task_id 生成。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ULID 长度
_TASK_ID_LENGTH = 26


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件 -- 为任务操作绑定 trace_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        trace_id = extract_trace_id(request.url.path)
        if trace_id:
            structlog.contextvars.bind_contextvars(trace_id=trace_id)

        return await call_next(request)


def extract_trace_id(path: str) -> str | None:
    """从 /api/tasks/{task_id}[/assign|/unassign] 提取 trace_id

    非 ULID 长度的路径段（如子路由名）不视为 task_id。
    """
    parts = path.split("/")
    for i, part in enumerate(parts):
        if part == "tasks" and i + 1 < len(parts):
            task_id = parts[i + 1]
            if len(task_id) == _TASK_ID_LENGTH:
                return f"trace-{task_id}"
    return None
