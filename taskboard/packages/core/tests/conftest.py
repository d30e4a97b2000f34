"""packages/core 测试配置 -- 核心层 fixture"""

from datetime import UTC, datetime

import pytest
from taskboard.core.models import Priority, Task, TaskStatus


@pytest.fixture
def make_task():
    """构造 Task 的工厂函数，字段可按需覆盖"""

    def _make(task_id: str = "task-1", **overrides) -> Task:
        created = datetime(2024, 1, 1, tzinfo=UTC)
        fields = {
            "task_id": task_id,
            "title": "Test Task",
            "description": "Test Description",
            "status": TaskStatus.TODO,
            "priority": Priority.MEDIUM,
            "assigned_people": [],
            "created_at": created,
            "updated_at": created,
        }
        fields.update(overrides)
        return Task(**fields)

    return _make
