"""任务路由 -- CRUD + 人员分配

GET    /api/tasks: 任务列表
GET    /api/tasks/{task_id}: 任务详情
POST   /api/tasks: 创建任务
PUT    /api/tasks/{task_id}: 部分更新任务
DELETE /api/tasks/{task_id}: 删除任务
POST   /api/tasks/{task_id}/assign: 分配人员
POST   /api/tasks/{task_id}/unassign: 取消分配人员

TaskNotFoundError 由全局异常处理器映射为 404。
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from starlette.responses import Response
from taskboard.core.models import (
    AssignCommand,
    CreateTaskCommand,
    Task,
    UpdateTaskCommand,
)

from ..deps import get_task_store
from ..middleware.error_handlers import ErrorResponse
from ..services.task_service import TaskService

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid input data"}}

TaskIdParam = Annotated[
    str,
    Path(
        description="任务唯一标识",
        examples=["01JCXZ8M5V4T0K3Q9W2E7R6Y1B"],
    ),
]


@router.get(
    "/api/tasks",
    response_model=list[Task],
    response_model_exclude_none=True,
    summary="Get all tasks",
)
async def list_tasks(task_store=Depends(get_task_store)):
    """查询全部任务"""
    service = TaskService(task_store)
    return await service.list_tasks()


@router.get(
    "/api/tasks/{task_id}",
    response_model=Task,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
    summary="Get task by ID",
)
async def get_task(
    task_id: TaskIdParam,
    task_store=Depends(get_task_store),
):
    """按 ID 查询任务"""
    service = TaskService(task_store)
    return await service.get_task(task_id)


@router.post(
    "/api/tasks",
    status_code=201,
    response_model=Task,
    response_model_exclude_none=True,
    responses=_INVALID,
    summary="Create a new task",
)
async def create_task(
    body: CreateTaskCommand,
    task_store=Depends(get_task_store),
):
    """创建任务，id 与时间戳由服务端生成"""
    service = TaskService(task_store)
    return await service.create_task(body)


@router.put(
    "/api/tasks/{task_id}",
    response_model=Task,
    response_model_exclude_none=True,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Update a task",
)
async def update_task(
    body: UpdateTaskCommand,
    task_id: TaskIdParam,
    task_store=Depends(get_task_store),
):
    """部分更新任务，只更新请求体中提供的字段

    dueDate 为 null 或空字符串时清除截止时间，省略时保留原值。
    """
    service = TaskService(task_store)
    return await service.update_task(task_id, body)


@router.delete(
    "/api/tasks/{task_id}",
    status_code=204,
    responses=_NOT_FOUND,
    summary="Delete a task",
)
async def delete_task(
    task_id: TaskIdParam,
    task_store=Depends(get_task_store),
):
    """永久删除任务"""
    service = TaskService(task_store)
    await service.delete_task(task_id)
    return Response(status_code=204)


@router.post(
    "/api/tasks/{task_id}/assign",
    response_model=Task,
    response_model_exclude_none=True,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Assign a person to a task",
)
async def assign_person(
    body: AssignCommand,
    task_id: TaskIdParam,
    task_store=Depends(get_task_store),
):
    """分配人员；重复分配同一人员是幂等的"""
    service = TaskService(task_store)
    return await service.assign_person(task_id, body.person_id)


@router.post(
    "/api/tasks/{task_id}/unassign",
    response_model=Task,
    response_model_exclude_none=True,
    responses={**_NOT_FOUND, **_INVALID},
    summary="Unassign a person from a task",
)
async def unassign_person(
    body: AssignCommand,
    task_id: TaskIdParam,
    task_store=Depends(get_task_store),
):
    """取消分配人员；人员未分配时同样返回 200"""
    service = TaskService(task_store)
    return await service.unassign_person(task_id, body.person_id)
