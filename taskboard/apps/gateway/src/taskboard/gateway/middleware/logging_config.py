"""日志初始化 -- structlog 接管标准库 logging

渲染格式、级别与 Logfire 开关均取自 AppConfig：
dev 为控制台彩色输出，json 为单行 JSON（异常转为 exception 字段）。
"""

import logging

import structlog
from fastapi import FastAPI

from ..config import AppConfig


def setup_logging(config: AppConfig) -> None:
    """按 AppConfig 配置 structlog 与根 logger（可重复调用）"""
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if config.log_format == "json":
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # 重新配置后已取得的 logger 也要生效，不能缓存
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *renderers,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level)


def setup_logfire(config: AppConfig, app: FastAPI) -> None:
    """send_to_logfire 为 True 时启用 Logfire；需安装 logfire extra"""
    if not config.send_to_logfire:
        return
    try:
        import logfire

        logfire.configure()
        logfire.instrument_fastapi(app)
    except Exception:
        structlog.get_logger().warning(
            "logfire_init_failed",
            message="Logfire 初始化失败，降级为纯本地日志",
        )
