"""FastAPI 应用主文件

app 创建 + lifespan 管理：TaskStore 初始化 + 中间件 + 异常处理器 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from taskboard.core.store import create_task_store

from .config import AppConfig, load_app_config
from .middleware.error_handlers import register_exception_handlers
from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时创建 TaskStore"""
    app.state.task_store = create_task_store()
    log.info("task_store_initialized", backend="memory", env=app.state.app_config.env)

    yield

    # 内存存储无需清理，进程退出即丢弃
    log.info("app_shutdown")


def create_app(config: AppConfig | None = None) -> FastAPI:
    """创建 FastAPI 应用实例

    Args:
        config: Gateway 配置，缺省时从环境变量加载
    """
    app = FastAPI(
        title="Taskboard API",
        version="0.1.0",
        description="任务管理 API：任务 CRUD 与人员分配",
        lifespan=lifespan,
    )
    config = config or load_app_config()
    app.state.app_config = config

    # 注册中间件（顺序：先 Trace 后 Logging，Logging 位于最外层）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    # 初始化日志
    setup_logging(config)
    setup_logfire(config, app)

    register_exception_handlers(app)

    # 注册路由
    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
