"""全局异常处理 -- 统一错误响应格式

- TaskNotFoundError -> 404 TASK_NOT_FOUND
- 请求校验失败 -> 400 VALIDATION_ERROR
- 其他异常 -> 500 INTERNAL_SERVER_ERROR（非生产环境附带堆栈）

4xx 记录 warning，5xx 记录 error。
"""

import traceback
from datetime import UTC, datetime
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import JSONResponse
from taskboard.core.exceptions import TaskNotFoundError

log = structlog.get_logger()


class ErrorBody(BaseModel):
    """错误详情"""

    code: str
    message: str
    path: str
    method: str
    timestamp: str
    details: list[dict[str, Any]] | None = None
    stack: str | None = None


class ErrorResponse(BaseModel):
    """错误响应"""

    error: ErrorBody


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    **extra: Any,
) -> JSONResponse:
    body = ErrorBody(
        code=code,
        message=message,
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(UTC).isoformat(),
        **extra,
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(exclude_none=True),
    )


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    log.warning("task_not_found", task_id=exc.task_id)
    return _error_response(request, 404, "TASK_NOT_FOUND", str(exc))


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    log.warning("request_validation_failed", errors=details)
    return _error_response(
        request,
        400,
        "VALIDATION_ERROR",
        "Request validation failed",
        details=details,
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error(
        "unhandled_exception",
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    extra: dict[str, Any] = {}
    config = getattr(request.app.state, "app_config", None)
    if config is not None and config.show_error_stack:
        extra["stack"] = "".join(traceback.format_exception(exc))
    return _error_response(
        request,
        500,
        "INTERNAL_SERVER_ERROR",
        "Internal server error",
        **extra,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
