"""
Task API 에러 정의

모든 에러는 요청 단위로 종료되며 {"error": message} 형태로 응답된다.
"""


class TaskAPIError(Exception):
    """Task API 에러 기본 클래스"""

    status_code: int = 500
    message: str = "internal error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ClientInputError(TaskAPIError):
    """잘못된 클라이언트 입력 (400)"""

    status_code = 400
    message = "bad request"


class InvalidJSONError(ClientInputError):
    message = "invalid json"


class InvalidTaskIdError(ClientInputError):
    message = "invalid id"


class TaskNotFoundError(TaskAPIError):
    """존재하지 않는 Task (404)"""

    status_code = 404
    message = "task not found"


class MethodNotSupportedError(TaskAPIError):
    """지원하지 않는 HTTP 메서드 (405)"""

    status_code = 405
    message = "method not allowed"
