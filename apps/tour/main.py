"""Tour Service Application.

한국관광공사 관광 정보 탐색 서비스 (읽기 전용 API).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tour.presentation.http import router
from tour.presentation.http.errors import register_exception_handlers
from tour.setup.config import Settings, get_settings
from tour.setup.dependencies import cleanup
from tour.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """시작 시 설정 요약을 남기고, 종료 시 공유 HTTP 클라이언트와 캐시를 정리."""
    settings = get_settings()
    if not settings.api_key:
        logger.warning("TOUR_API_KEY is not set; tour endpoints will respond with 503")
    logger.info(
        "Tour service starting",
        extra={
            "environment": settings.environment,
            "api_base_url": settings.api_base_url,
            "page_size": settings.page_size,
            "max_pages": settings.max_pages,
            "pet_lookup_cap": settings.pet_lookup_cap,
            "pet_cache_max_size": settings.pet_cache_max_size,
        },
    )
    try:
        yield
    finally:
        logger.info("Tour service shutting down")
        await cleanup()


def _add_cors(app: FastAPI, settings: Settings) -> None:
    # 조회 전용 API라 자격 증명 없이 GET만 허용
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Tour Service",
        description="지역/테마/반려동물 조건 기반 관광지 탐색 서비스",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    _add_cors(app, settings)
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("tour.main:app", host="0.0.0.0", port=8000, reload=get_settings().debug)
