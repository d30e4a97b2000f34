"""配置常量模块 -- 任务字段的校验边界

入站命令（CreateTaskCommand / UpdateTaskCommand / AssignCommand）
在边界处按这些常量做长度与格式校验。
"""

# 任务标题长度范围
TITLE_MIN_LENGTH: int = 1
TITLE_MAX_LENGTH: int = 200

# 任务描述长度范围
DESCRIPTION_MIN_LENGTH: int = 1
DESCRIPTION_MAX_LENGTH: int = 5000

# 人员 ID 长度范围与字符集（字母、数字、连字符）
PERSON_ID_MIN_LENGTH: int = 1
PERSON_ID_MAX_LENGTH: int = 100
PERSON_ID_PATTERN: str = r"^[a-zA-Z0-9-]+$"
