from typing import Any

from pydantic import BaseModel, StrictBool, StrictStr, model_validator


class Task(BaseModel):
    """Task 객체"""

    id: int  # Store가 발급 (1부터 증가)
    title: str
    completed: bool = False


# ============================================================================
# Request/Response Schemas
# ============================================================================


class TaskRequest(BaseModel):
    """요청 본문 공통 처리: null 본문과 null 필드는 기본값으로 취급"""

    @model_validator(mode="before")
    @classmethod
    def null_as_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class TaskCreateRequest(TaskRequest):
    """POST /tasks 요청 본문"""

    title: StrictStr = ""  # 없거나 null이면 빈 문자열


class TaskUpdateRequest(TaskRequest):
    """PUT /tasks/{id} 요청 본문"""

    completed: StrictBool = False  # 없거나 null이면 false


class ErrorResponse(BaseModel):
    """에러 응답"""

    error: str


class StatusResponse(BaseModel):
    """상태 응답 (삭제 등)"""

    status: str
