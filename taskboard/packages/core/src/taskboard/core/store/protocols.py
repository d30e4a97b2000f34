"""Store Protocol 接口定义

TaskStore 是 TaskService 唯一依赖的存储抽象，
使用 Python Protocol 实现结构化子类型（duck typing），
当前由 InMemoryTaskStore 实现，可替换为持久化后端而不改动 TaskService。
"""

from datetime import datetime
from typing import Any, Protocol

from ..models.task import Task


class TaskStore(Protocol):
    """Task 存储接口

    只负责按 task_id 存取记录，不包含业务规则。
    merge / add_assignment / remove_assignment 在写入时自行检查存在性，
    不存在时抛出 TaskNotFoundError。
    """

    async def list_all(self) -> list[Task]:
        """返回全部任务（插入顺序）"""
        ...

    async def get(self, task_id: str) -> Task | None:
        """按 task_id 查询，不存在返回 None"""
        ...

    async def put(self, task: Task) -> None:
        """插入或整体替换任务记录"""
        ...

    async def merge(self, task_id: str, changes: dict[str, Any]) -> Task:
        """字段级部分更新，未出现在 changes 中的字段保持不变"""
        ...

    async def delete(self, task_id: str) -> bool:
        """删除任务，返回是否实际删除"""
        ...

    async def add_assignment(
        self,
        task_id: str,
        person_id: str,
        updated_at: datetime,
    ) -> Task:
        """添加人员分配（已存在时不重复添加），刷新 updated_at"""
        ...

    async def remove_assignment(
        self,
        task_id: str,
        person_id: str,
        updated_at: datetime,
    ) -> Task:
        """移除人员分配（不存在时无操作），刷新 updated_at"""
        ...
