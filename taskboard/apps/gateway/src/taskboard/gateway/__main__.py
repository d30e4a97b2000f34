"""服务入口模块 -- python -m taskboard.gateway

按 TASKBOARD_HOST / TASKBOARD_PORT 启动 uvicorn。
"""

import structlog
import uvicorn

from .config import load_app_config
from .middleware.logging_config import setup_logging


def main() -> None:
    """启动 HTTP 服务"""
    config = load_app_config()
    setup_logging(config)

    log = structlog.get_logger()
    log.info(
        "server_starting",
        url=f"http://{config.host}:{config.port}",
        env=config.env,
    )

    uvicorn.run(
        "taskboard.gateway.main:app",
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
