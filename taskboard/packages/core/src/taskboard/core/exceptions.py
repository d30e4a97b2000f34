"""Core 异常体系

TaskNotFoundError 是唯一的领域异常；其余异常一律视为非预期错误，
由调用方（HTTP 层）统一映射为 500。
"""


class TaskboardError(Exception):
    """Core 包基础异常"""


class TaskNotFoundError(TaskboardError):
    """引用的 task_id 在 Store 中不存在"""

    def __init__(self, task_id: str) -> None:
        """
        Args:
            task_id: 未找到的任务 ID
        """
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id
