"""AppConfig -- Gateway 运行配置加载

从环境变量加载配置；非法值记录 warning 并回退默认值，不阻塞启动。
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

Environment = Literal["development", "production", "test"]
LogFormat = Literal["dev", "json"]

# 环境名归一化（prod 视为 production）
_ENV_ALIASES: dict[str, Environment] = {
    "development": "development",
    "production": "production",
    "prod": "production",
    "test": "test",
}

DEFAULT_PORT = 3000
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    """Gateway 配置 -- 从环境变量加载

    环境变量:
        TASKBOARD_ENV: 运行环境（development/production/prod/test）
        TASKBOARD_HOST: 监听地址（默认 127.0.0.1）
        TASKBOARD_PORT: 监听端口（默认 3000）
        TASKBOARD_LOG_FORMAT: 日志格式（dev/json，默认 dev）
        TASKBOARD_LOG_LEVEL: 日志级别（默认 INFO）
        LOGFIRE_SEND_TO_LOGFIRE: 是否启用 Logfire（默认 false）
    """

    env: Environment = Field(default="development", description="运行环境")
    host: str = Field(default="127.0.0.1", description="监听地址")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="监听端口")
    log_format: LogFormat = Field(default="dev", description="日志渲染格式")
    log_level: str = Field(default="INFO", description="根 logger 级别")
    send_to_logfire: bool = Field(default=False, description="是否启用 Logfire APM")

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        return self.env == "test"

    @property
    def show_error_stack(self) -> bool:
        """500 响应是否携带堆栈（生产环境关闭）"""
        return not self.is_production


def load_app_config() -> AppConfig:
    """从环境变量加载 Gateway 配置

    环境变量映射:
        TASKBOARD_ENV -> env (默认 "development"，未知值回退默认)
        TASKBOARD_HOST -> host (默认 "127.0.0.1")
        TASKBOARD_PORT -> port (默认 3000，仅接受纯数字)
        TASKBOARD_LOG_FORMAT -> log_format (默认 "dev")
        TASKBOARD_LOG_LEVEL -> log_level (默认 "INFO")
        LOGFIRE_SEND_TO_LOGFIRE -> send_to_logfire ("true" 时启用)

    Returns:
        AppConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKBOARD_ENV"):
        env = _ENV_ALIASES.get(val.strip().lower())
        if env is None:
            log.warning(
                "invalid_env_config",
                env_var="TASKBOARD_ENV",
                value=val,
                fallback="development",
            )
        else:
            kwargs["env"] = env

    if val := os.environ.get("TASKBOARD_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("TASKBOARD_PORT"):
        if val.isdigit() and 1 <= int(val) <= 65535:
            kwargs["port"] = int(val)
        else:
            log.warning(
                "invalid_port_config",
                env_var="TASKBOARD_PORT",
                value=val,
                fallback=DEFAULT_PORT,
            )

    if val := os.environ.get("TASKBOARD_LOG_FORMAT"):
        # 非 json 一律按 dev 渲染
        kwargs["log_format"] = "json" if val.strip().lower() == "json" else "dev"

    if val := os.environ.get("TASKBOARD_LOG_LEVEL"):
        if val.strip().upper() in _LOG_LEVELS:
            kwargs["log_level"] = val.strip().upper()
        else:
            log.warning(
                "invalid_log_level_config",
                env_var="TASKBOARD_LOG_LEVEL",
                value=val,
                fallback="INFO",
            )

    kwargs["send_to_logfire"] = (
        os.environ.get("LOGFIRE_SEND_TO_LOGFIRE", "false").strip().lower() == "true"
    )

    return AppConfig(**kwargs)
