"""Taskboard Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .commands import AssignCommand, CreateTaskCommand, UpdateTaskCommand
from .enums import Priority, TaskStatus
from .task import PersonId, Task

__all__ = [
    # 枚举
    "TaskStatus",
    "Priority",
    # Task
    "Task",
    "PersonId",
    # 命令
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "AssignCommand",
]
