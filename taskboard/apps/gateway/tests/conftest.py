"""apps/gateway 测试配置 -- FastAPI app + httpx AsyncClient fixture"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from taskboard.core.store import InMemoryTaskStore
from taskboard.gateway.config import AppConfig


@pytest_asyncio.fixture
async def app():
    """创建测试用 FastAPI app 实例（手动初始化，绕过 lifespan）"""
    os.environ["LOGFIRE_SEND_TO_LOGFIRE"] = "false"

    from taskboard.gateway.main import create_app

    application = create_app(AppConfig(env="test"))
    application.state.task_store = InMemoryTaskStore()
    yield application

    os.environ.pop("LOGFIRE_SEND_TO_LOGFIRE", None)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def create_task(client: AsyncClient):
    """通过 API 创建任务，返回响应 JSON 的工厂函数"""

    async def _create(**overrides) -> dict:
        payload = {
            "title": "Test Task",
            "description": "Test Description",
            "status": "TODO",
            "priority": "MEDIUM",
        }
        payload.update(overrides)
        resp = await client.post("/api/tasks", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
