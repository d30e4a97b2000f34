"""TaskStore 内存实现

进程内的 task_id -> Task 映射，进程退出即丢失。
所有操作在同一把 asyncio.Lock 下执行，每次读写都是完整的逻辑事务；
对外返回的 Task 均为副本，调用方修改不会影响存储内容。
"""

import asyncio
from datetime import datetime
from typing import Any

from ..exceptions import TaskNotFoundError
from ..models.task import Task


class InMemoryTaskStore:
    """TaskStore 的内存实现"""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[Task]:
        """返回全部任务，按插入顺序"""
        async with self._lock:
            return [task.model_copy(deep=True) for task in self._tasks.values()]

    async def get(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        async with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy(deep=True) if task is not None else None

    async def put(self, task: Task) -> None:
        """插入或整体替换任务记录"""
        async with self._lock:
            self._tasks[task.task_id] = task.model_copy(deep=True)

    async def merge(self, task_id: str, changes: dict[str, Any]) -> Task:
        """部分更新：changes 中的字段覆盖原值，其余字段保留"""
        async with self._lock:
            existing = self._require(task_id)
            merged = existing.model_copy(update=changes, deep=True)
            self._tasks[task_id] = merged
            return merged.model_copy(deep=True)

    async def delete(self, task_id: str) -> bool:
        """删除任务，不存在时返回 False"""
        async with self._lock:
            return self._tasks.pop(task_id, None) is not None

    async def add_assignment(
        self,
        task_id: str,
        person_id: str,
        updated_at: datetime,
    ) -> Task:
        """添加人员分配；已分配时集合不变，但 updated_at 仍刷新"""
        async with self._lock:
            existing = self._require(task_id)
            people = list(existing.assigned_people)
            if person_id not in people:
                people.append(person_id)
            return self._replace_assignments(existing, people, updated_at)

    async def remove_assignment(
        self,
        task_id: str,
        person_id: str,
        updated_at: datetime,
    ) -> Task:
        """移除人员分配；未分配时集合不变，但 updated_at 仍刷新"""
        async with self._lock:
            existing = self._require(task_id)
            people = [p for p in existing.assigned_people if p != person_id]
            return self._replace_assignments(existing, people, updated_at)

    def _require(self, task_id: str) -> Task:
        """调用方须持有锁"""
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _replace_assignments(
        self,
        existing: Task,
        people: list[str],
        updated_at: datetime,
    ) -> Task:
        updated = existing.model_copy(
            update={"assigned_people": people, "updated_at": updated_at},
            deep=True,
        )
        self._tasks[existing.task_id] = updated
        return updated.model_copy(deep=True)
