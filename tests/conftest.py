import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app
from services.task_store import TaskStore


@pytest.fixture
def task_store():
    """각 테스트마다 새로운 TaskStore 생성"""
    return TaskStore()


@pytest.fixture
def app(task_store):
    """TaskStore가 연결된 FastAPI 앱"""
    return create_app(task_store=task_store)


@pytest.fixture
async def client(app):
    """비동기 HTTP 클라이언트 (ASGI 직접 호출)"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
