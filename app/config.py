"""
HomeLens 설정 관리

모든 설정값은 .env 파일에서 관리합니다.
사용법:
    from app.config import settings
    mode = settings.INTEGRATIONS_MODE
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # .env에 정의되지 않은 변수 무시
    )

    # === 환경 ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === 연동 모드 (mock / real) ===
    INTEGRATIONS_MODE: str = "mock"

    # === 숏리스트 저장소 ===
    SHORTLIST_PATH: str = ".data/shortlist"

    # === Mock 매물 검색 ===
    MOCK_SEARCH_LIMIT: int = 20

    # === 통근 기본 목적지 (검색 조건에 목적지가 없을 때) ===
    DEFAULT_COMMUTE_DESTINATION: str = "downtown"

    # === 외부 API (real 모드) ===
    LISTINGS_API_BASE_URL: str = ""
    LISTINGS_API_KEY: str = ""
    NEIGHBORHOOD_API_BASE_URL: str = ""
    NEIGHBORHOOD_API_KEY: str = ""
    MARKET_API_BASE_URL: str = ""
    MARKET_API_KEY: str = ""
    COMMUTE_API_BASE_URL: str = ""
    COMMUTE_API_KEY: str = ""
    PROVIDER_TIMEOUT: int = 30


# 싱글톤 인스턴스
settings = Settings()
