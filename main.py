import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from models.tasks import ErrorResponse
from routers import tasks
from services.errors import MethodNotSupportedError, TaskAPIError
from services.task_store import TaskStore

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Debug 모드 활성화 시 로깅 레벨 조정
if settings.debug:
    logging.getLogger().setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)
    logger.info("🐛 Debug mode enabled")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def task_api_error_handler(request: Request, exc: TaskAPIError):
    """TaskAPIError → {"error": message}"""
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """프레임워크 레벨 에러도 동일한 에러 형식으로 응답"""
    if exc.status_code == 405:
        return error_response(405, MethodNotSupportedError.message)
    return error_response(exc.status_code, str(exc.detail).lower())


def create_app(task_store: Optional[TaskStore] = None) -> FastAPI:
    """
    FastAPI 앱 생성

    Args:
        task_store: 사용할 TaskStore (없으면 새로 생성)

    Returns:
        TaskStore가 app.state에 연결된 FastAPI 앱
    """
    app = FastAPI(
        title="Task List Service",
        version=VERSION,
        description="In-memory task list CRUD service",
    )
    app.state.task_store = task_store if task_store is not None else TaskStore()

    # Debug 미들웨어
    @app.middleware("http")
    async def debug_middleware(request: Request, call_next):
        """Debug 모드 활성화 시 요청/응답 로깅"""
        if settings.debug_log_requests:
            logger.debug(f"📥 Request: {request.method} {request.url}")
            if request.method in ["POST", "PUT", "PATCH"]:
                body = await request.body()
                logger.debug(f"   Body: {body.decode('utf-8', errors='replace')[:500]}")  # 처음 500자만

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        if settings.debug_log_responses:
            logger.debug(f"📤 Response: {response.status_code} (took {process_time:.3f}s)")

        return response

    # 에러 핸들러 등록
    app.add_exception_handler(TaskAPIError, task_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # 라우터 등록
    app.include_router(tasks.router)

    @app.on_event("startup")
    async def startup_event():
        """앱 시작 시 초기화"""
        logger.info("🚀 Task List Service 시작")
        logger.info(f"  - Listen: {settings.host}:{settings.port}")

    @app.get("/health")
    async def health():
        """헬스체크 엔드포인트"""
        return {
            "status": "ok",
            "service": "task-list-service",
            "version": VERSION,
            "tasks": app.state.task_store.count(),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
