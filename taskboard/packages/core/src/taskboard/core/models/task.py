"""Task Domain Model

Task 是唯一的聚合根。id 与时间戳由 TaskService 生成，调用方不可指定。
对外 JSON 字段使用 camelCase（id / assignedPeople / createdAt / updatedAt / dueDate）。
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import Priority, TaskStatus

# 人员 ID：不透明字符串，Core 不校验其是否存在
PersonId = str


class Task(BaseModel):
    """Task 数据模型

    不变量：
    - task_id 在 Store 中唯一，创建后不可变
    - assigned_people 无重复项（有序存储，语义上是集合）
    - updated_at >= created_at
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    task_id: str = Field(alias="id", description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    description: str = Field(description="任务描述")
    status: TaskStatus = Field(description="当前状态")
    priority: Priority = Field(description="优先级")
    assigned_people: list[PersonId] = Field(
        default_factory=list,
        description="已分配的人员 ID 列表",
    )
    created_at: datetime = Field(description="创建时间")
    updated_at: datetime = Field(description="更新时间")
    due_date: datetime | None = Field(default=None, description="截止时间，None 表示无截止时间")
