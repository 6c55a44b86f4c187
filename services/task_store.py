"""
Task Store - InMemory 기반 Task 저장소

서버 재시작 시 데이터 소실. 모든 연산은 단일 Lock 안에서 원자적으로 수행된다.
"""

import threading
from typing import Optional

from models.tasks import Task


class TaskStore:
    """InMemory Task 저장소 (Thread-safe)"""

    def __init__(self):
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[Task]:
        """전체 Task 목록 조회 (스냅샷 복사본)"""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def create(self, title: str) -> Task:
        """Task 생성 (id 자동 발급, 재사용 없음)"""
        with self._lock:
            task = Task(id=self._next_id, title=title, completed=False)
            self._tasks[task.id] = task
            self._next_id += 1
            return task.model_copy()

    def get(self, task_id: int) -> Optional[Task]:
        """Task 조회 (없으면 None)"""
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def set_completed(self, task_id: int, completed: bool) -> Optional[Task]:
        """completed 필드만 변경 (없으면 None)"""
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            task.completed = completed
            return task.model_copy()

    def delete(self, task_id: int) -> bool:
        """Task 삭제"""
        with self._lock:
            if task_id in self._tasks:
                del self._tasks[task_id]
                return True
            return False

    def count(self) -> int:
        """Task 개수 조회"""
        with self._lock:
            return len(self._tasks)
