from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Task List Service 설정"""

    # 서버 설정
    port: int = 8080
    host: str = "0.0.0.0"
    log_level: str = "INFO"
    debug: bool = False  # Debug 모드 (상세 로깅 활성화)

    # Debug 전용 설정
    debug_log_requests: bool = False  # 모든 요청 로깅
    debug_log_responses: bool = False  # 모든 응답 로깅

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
