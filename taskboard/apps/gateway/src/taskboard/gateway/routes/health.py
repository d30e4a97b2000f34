"""健康检查路由

GET /health: Liveness 检查，永远返回 200。
GET /ready: Readiness 检查，验证 TaskStore 可用。
"""

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

log = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- 验证 TaskStore 已初始化且可读"""
    checks = {}
    all_ok = True

    try:
        task_store = request.app.state.task_store
        tasks = await task_store.list_all()
        checks["task_store"] = "ok"
        checks["task_count"] = len(tasks)
    except Exception as e:
        log.warning("readiness_check_failed", check="task_store", error=str(e))
        checks["task_store"] = f"error: {str(e)}"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
