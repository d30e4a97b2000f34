"""全局 pytest 配置 -- 内存 TaskStore 与可控时钟 fixture"""

from datetime import UTC, datetime, timedelta

import pytest
from taskboard.core.store import InMemoryTaskStore


class FakeClock:
    """可控时钟：每次调用前进固定步长，保证时间戳可区分"""

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 1, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture
def fake_clock() -> FakeClock:
    """提供从 2024-01-01 起每次前进 1 秒的时钟"""
    return FakeClock()


@pytest.fixture
def task_store() -> InMemoryTaskStore:
    """提供空的内存 TaskStore"""
    return InMemoryTaskStore()
