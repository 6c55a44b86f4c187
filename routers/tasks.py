"""
Task API Router

Collection endpoint (/tasks):
- GET: Task 목록 조회
- POST: Task 생성

Item endpoint (/tasks/{id}):
- GET: Task 조회
- PUT: completed 변경
- DELETE: Task 삭제
"""

import logging
import re
from typing import TypeVar

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ValidationError

from models.tasks import StatusResponse, Task, TaskCreateRequest, TaskUpdateRequest
from services.errors import (
    InvalidJSONError,
    InvalidTaskIdError,
    MethodNotSupportedError,
    TaskNotFoundError,
)
from services.task_store import TaskStore

logger = logging.getLogger(__name__)
router = APIRouter()

# 선언된 핸들러가 없는 메서드는 405로 응답 (id 검증/존재 확인 이후)
UNSUPPORTED_METHODS = ["PATCH", "HEAD", "OPTIONS", "TRACE"]

TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def get_task_store(request: Request) -> TaskStore:
    """앱에 연결된 TaskStore"""
    return request.app.state.task_store


def parse_task_id(task_id: str) -> int:
    """경로의 id 세그먼트를 정수로 변환"""
    if not TASK_ID_PATTERN.fullmatch(task_id):
        logger.debug(f"Rejected task id: {task_id!r}")
        raise InvalidTaskIdError()

    value = int(task_id)
    if not MIN_TASK_ID <= value <= MAX_TASK_ID:
        raise InvalidTaskIdError()
    return value


def get_existing_task(
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
) -> Task:
    """
    Task 존재 확인

    메서드 분기 전에 수행되므로 지원하지 않는 메서드라도 404가 우선한다.
    """
    task = store.get(task_id)
    if task is None:
        raise TaskNotFoundError()
    return task


async def parse_body(request: Request, schema: type[RequestModel]) -> RequestModel:
    """요청 본문을 JSON으로 파싱 후 스키마 검증"""
    body = await request.body()
    try:
        return schema.model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Rejected body for {schema.__name__}: {e.error_count()} error(s)")
        raise InvalidJSONError() from e


# ============================================================================
# Collection endpoint
# ============================================================================


@router.get("/tasks", response_model=list[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """
    Task 목록 조회

    GET /tasks
    → [{"id": 1, "title": "buy milk", "completed": false}, ...]
    """
    return store.list_all()


@router.post("/tasks", response_model=Task, status_code=201)
async def create_task(request: Request, store: TaskStore = Depends(get_task_store)):
    """
    Task 생성

    POST /tasks
    {
      "title": "buy milk"
    }
    """
    payload = await parse_body(request, TaskCreateRequest)
    task = store.create(payload.title)

    logger.info(f"Created task {task.id}")
    return task


@router.api_route("/tasks", methods=["PUT", "DELETE", *UNSUPPORTED_METHODS], include_in_schema=False)
async def tasks_method_not_allowed():
    raise MethodNotSupportedError()


# ============================================================================
# Item endpoint
# ============================================================================


@router.get("/tasks/{task_id:path}", response_model=Task)
async def get_task(task: Task = Depends(get_existing_task)):
    """Task 조회"""
    return task


@router.put("/tasks/{task_id:path}", response_model=Task)
async def update_task(
    request: Request,
    task: Task = Depends(get_existing_task),
    store: TaskStore = Depends(get_task_store),
):
    """
    Task completed 변경

    PUT /tasks/1
    {
      "completed": true
    }
    """
    payload = await parse_body(request, TaskUpdateRequest)

    # 존재 확인 이후 다른 요청이 삭제했을 수 있으므로 원자적 연산 결과로 판단
    updated = store.set_completed(task.id, payload.completed)
    if updated is None:
        raise TaskNotFoundError()

    logger.info(f"Task {updated.id} completed={updated.completed}")
    return updated


@router.delete("/tasks/{task_id:path}", response_model=StatusResponse)
async def delete_task(
    task: Task = Depends(get_existing_task),
    store: TaskStore = Depends(get_task_store),
):
    """Task 삭제"""
    if not store.delete(task.id):
        raise TaskNotFoundError()

    logger.info(f"Deleted task {task.id}")
    return StatusResponse(status="deleted")


@router.api_route(
    "/tasks/{task_id:path}",
    methods=["POST", *UNSUPPORTED_METHODS],
    include_in_schema=False,
    dependencies=[Depends(get_existing_task)],
)
async def task_method_not_allowed():
    raise MethodNotSupportedError()
