"""TaskService -- 任务生命周期业务逻辑

调用方唯一直接访问的组件：
1. 生成 task_id（ULID）与时间戳
2. 对已有任务的变更前先检查存在性，不存在抛出 TaskNotFoundError
3. 部分更新（dueDate 三态语义）
4. 人员分配 / 取消分配（幂等，但每次都刷新 updated_at）

Core 不约束状态流转，status 可以被设置为任意枚举值。
"""

from collections.abc import Callable
from datetime import UTC, datetime

import structlog
from taskboard.core.exceptions import TaskNotFoundError
from taskboard.core.models import CreateTaskCommand, Task, UpdateTaskCommand
from taskboard.core.store import TaskStore
from ulid import ULID

log = structlog.get_logger()


def utc_now() -> datetime:
    return datetime.now(UTC)


class TaskService:
    """任务业务服务"""

    def __init__(
        self,
        task_store: TaskStore,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = task_store
        self._clock = clock

    async def list_tasks(self) -> list[Task]:
        """查询全部任务，不做筛选"""
        return await self._store.list_all()

    async def get_task(self, task_id: str) -> Task:
        """查询任务详情；读操作不刷新 updated_at"""
        return await self._require_task(task_id)

    async def create_task(self, command: CreateTaskCommand) -> Task:
        """创建任务

        task_id 由 ULID 保证唯一，不再回查 Store。

        Args:
            command: 已校验的创建命令

        Returns:
            新建的 Task
        """
        now = self._clock()
        task = Task(
            task_id=str(ULID()),
            title=command.title,
            description=command.description,
            status=command.status,
            priority=command.priority,
            assigned_people=[],
            created_at=now,
            updated_at=now,
            due_date=command.due_date,
        )
        await self._store.put(task)
        log.info("task_created", task_id=task.task_id, status=task.status.value)
        return task

    async def update_task(self, task_id: str, command: UpdateTaskCommand) -> Task:
        """部分更新任务

        只应用命令中实际提供的字段；due_date 显式为 null 时清除。
        无论字段值是否变化，updated_at 都会刷新。
        """
        existing = await self._require_task(task_id)
        changes = command.to_changes()
        changes["updated_at"] = self._next_timestamp(existing)
        task = await self._store.merge(task_id, changes)
        log.info(
            "task_updated",
            task_id=task_id,
            fields=sorted(k for k in changes if k != "updated_at"),
        )
        return task

    async def delete_task(self, task_id: str) -> None:
        """删除任务；重复删除同一 task_id 抛出 TaskNotFoundError"""
        await self._require_task(task_id)
        if not await self._store.delete(task_id):
            # 检查与删除之间已被并发删除
            raise TaskNotFoundError(task_id)
        log.info("task_deleted", task_id=task_id)

    async def assign_person(self, task_id: str, person_id: str) -> Task:
        """分配人员（幂等）；人员是否存在不做校验"""
        existing = await self._require_task(task_id)
        task = await self._store.add_assignment(
            task_id, person_id, updated_at=self._next_timestamp(existing)
        )
        log.info("task_person_assigned", task_id=task_id, person_id=person_id)
        return task

    async def unassign_person(self, task_id: str, person_id: str) -> Task:
        """取消分配人员（幂等）；人员未分配时不报错"""
        existing = await self._require_task(task_id)
        task = await self._store.remove_assignment(
            task_id, person_id, updated_at=self._next_timestamp(existing)
        )
        log.info("task_person_unassigned", task_id=task_id, person_id=person_id)
        return task

    async def _require_task(self, task_id: str) -> Task:
        task = await self._store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def _next_timestamp(self, existing: Task) -> datetime:
        # 保证 updated_at 单调不减（时钟回拨时沿用原值）
        return max(self._clock(), existing.updated_at)
