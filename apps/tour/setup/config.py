"""Tour Service Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tour Service 설정."""

    # Environment
    environment: str = "local"
    debug: bool = False

    # CORS (production: 명시적 origins 필수)
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # 한국관광공사 API (TOUR_API_KEY)
    api_key: str | None = None
    api_base_url: str = "https://apis.data.go.kr/B551011/KorService2"
    mobile_app: str = "MyTrip"
    api_timeout: float = 30.0
    api_max_retries: int = Field(3, ge=0)
    api_retry_delays: list[float] = [1.0, 2.0, 4.0]

    # 목록
    page_size: int = Field(20, ge=1, le=100)
    max_pages: int = Field(100, ge=1)

    # 반려동물 정보
    pet_lookup_cap: int = Field(20, ge=0)
    pet_cache_max_size: int = Field(1000, ge=1)

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TOUR_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤."""
    return Settings()
