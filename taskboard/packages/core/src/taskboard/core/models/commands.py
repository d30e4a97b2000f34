"""入站命令模型 -- 由边界层（HTTP 请求体）校验后交给 TaskService

Core 自身不做输入清洗，这里的 pydantic 约束即边界校验。
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..config import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    PERSON_ID_MAX_LENGTH,
    PERSON_ID_MIN_LENGTH,
    PERSON_ID_PATTERN,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from .enums import Priority, TaskStatus

_COMMAND_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)

# 更新时不允许显式置空的字段（dueDate 除外）
_NON_NULLABLE_UPDATE_FIELDS = ("title", "description", "status", "priority")


class CreateTaskCommand(BaseModel):
    """创建任务命令"""

    model_config = _COMMAND_CONFIG

    title: str = Field(
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="任务标题",
        examples=["Implement user authentication"],
    )
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="任务描述",
        examples=["Add JWT-based authentication to the API"],
    )
    status: TaskStatus = Field(description="任务状态")
    priority: Priority = Field(description="优先级")
    due_date: datetime | None = Field(
        default=None,
        description="截止时间（ISO 8601）",
        examples=["2024-12-31T23:59:59Z"],
    )


class UpdateTaskCommand(BaseModel):
    """部分更新命令 -- 所有字段可选

    dueDate 是三态字段：
    - 未提供：保留原值
    - 显式 null 或空字符串：清除截止时间
    - 提供日期：设置为新值

    "是否提供" 通过 model_fields_set 区分，不能只看值是否为 None。
    """

    model_config = _COMMAND_CONFIG

    title: str | None = Field(
        default=None,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="任务标题",
    )
    description: str | None = Field(
        default=None,
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="任务描述",
    )
    status: TaskStatus | None = Field(default=None, description="任务状态")
    priority: Priority | None = Field(default=None, description="优先级")
    due_date: datetime | None = Field(
        default=None,
        description="截止时间（ISO 8601），显式 null 或空字符串表示清除",
    )

    @field_validator("due_date", mode="before")
    @classmethod
    def _empty_due_date_clears(cls, value: Any) -> Any:
        # 空字符串与 null 等价；字段仍计入 model_fields_set
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _reject_explicit_null(self) -> "UpdateTaskCommand":
        for name in _NON_NULLABLE_UPDATE_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self

    def to_changes(self) -> dict[str, Any]:
        """返回调用方实际提供的字段（字段名 -> 值）

        显式 null 的 due_date 会以 None 出现在结果中，未提供的字段不出现。
        """
        return {name: getattr(self, name) for name in self.model_fields_set}


class AssignCommand(BaseModel):
    """分配 / 取消分配人员命令"""

    model_config = _COMMAND_CONFIG

    person_id: str = Field(
        min_length=PERSON_ID_MIN_LENGTH,
        max_length=PERSON_ID_MAX_LENGTH,
        pattern=PERSON_ID_PATTERN,
        description="人员 ID（字母、数字、连字符）",
        examples=["person-123"],
    )
