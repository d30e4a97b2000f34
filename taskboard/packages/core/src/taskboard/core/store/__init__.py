"""Taskboard Core Store -- 任务存储

提供 TaskStore 协议与内存实现，以及创建 Store 实例的工厂函数。
"""

from .protocols import TaskStore
from .task_store import InMemoryTaskStore


def create_task_store() -> TaskStore:
    """创建进程内任务存储

    Returns:
        新的空 InMemoryTaskStore 实例（每次调用互不共享）
    """
    return InMemoryTaskStore()


__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "create_task_store",
]
