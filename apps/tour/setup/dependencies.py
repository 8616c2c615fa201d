"""Dependency Injection.

FastAPI 의존성 주입 팩토리.
HTTP 클라이언트와 반려동물 정보 캐시는 프로세스 단위 싱글톤입니다.
"""

from __future__ import annotations

import httpx

from tour.application.queries import FetchTourPageQuery, GetTourDetailQuery
from tour.application.services import PetInfoLoader, TourPageAssembler
from tour.infrastructure.cache import InMemoryPetInfoCache
from tour.infrastructure.integrations.tour_api import TourApiClient
from tour.setup.config import get_settings

# 싱글톤
_http_client: httpx.AsyncClient | None = None
_tour_client: TourApiClient | None = None
_pet_cache: InMemoryPetInfoCache | None = None


def get_http_client() -> httpx.AsyncClient:
    """공유 HTTP 클라이언트 (싱글톤)."""
    global _http_client
    if _http_client is None:
        settings = get_settings()
        _http_client = httpx.AsyncClient(timeout=settings.api_timeout)
    return _http_client


def get_tour_source() -> TourApiClient:
    """한국관광공사 API 클라이언트 (싱글톤)."""
    global _tour_client
    if _tour_client is None:
        settings = get_settings()
        _tour_client = TourApiClient(
            api_key=settings.api_key,
            http_client=get_http_client(),
            base_url=settings.api_base_url,
            mobile_app=settings.mobile_app,
            timeout=settings.api_timeout,
            max_retries=settings.api_max_retries,
            retry_delays=settings.api_retry_delays,
        )
    return _tour_client


def get_pet_info_cache() -> InMemoryPetInfoCache:
    """반려동물 정보 캐시 (싱글톤)."""
    global _pet_cache
    if _pet_cache is None:
        settings = get_settings()
        _pet_cache = InMemoryPetInfoCache(max_size=settings.pet_cache_max_size)
    return _pet_cache


def get_tour_page_assembler() -> TourPageAssembler:
    """TourPageAssembler 조립."""
    settings = get_settings()
    source = get_tour_source()
    loader = PetInfoLoader(
        source=source,
        cache=get_pet_info_cache(),
        max_lookups=settings.pet_lookup_cap,
    )
    return TourPageAssembler(
        source=source,
        pet_loader=loader,
        page_size=settings.page_size,
        max_pages=settings.max_pages,
    )


def get_fetch_tour_page_query() -> FetchTourPageQuery:
    """FetchTourPageQuery 의존성 주입."""
    settings = get_settings()
    return FetchTourPageQuery(
        assembler=get_tour_page_assembler(),
        max_pages=settings.max_pages,
    )


def get_tour_detail_query() -> GetTourDetailQuery:
    """GetTourDetailQuery 의존성 주입."""
    return GetTourDetailQuery(
        source=get_tour_source(),
        pet_cache=get_pet_info_cache(),
    )


async def cleanup() -> None:
    """리소스 정리."""
    global _http_client, _tour_client, _pet_cache

    if _tour_client:
        await _tour_client.close()
        _tour_client = None

    if _http_client:
        await _http_client.aclose()
        _http_client = None

    _pet_cache = None

