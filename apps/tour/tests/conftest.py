"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Generator
from unittest.mock import AsyncMock

import pytest

from tour.application.ports import TourListPage
from tour.domain.entities import PetTourInfo, TourItem
from tour.infrastructure.cache import InMemoryPetInfoCache

# pytest-asyncio 자동 모드 설정
pytest_plugins = ("pytest_asyncio",)


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "TOUR_API_KEY": "test-service-key",
            "TOUR_API_RETRY_DELAYS": "[0, 0, 0]",
            "TOUR_ENVIRONMENT": "test",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def make_tour_item() -> Callable[..., TourItem]:
    """TourItem 팩토리."""

    def _make(
        content_id: str,
        title: str | None = None,
        content_type_id: str = "12",
        modified_time: str = "20240101000000",
        mapx: str = "126.9780",
        mapy: str = "37.5665",
        **kwargs,
    ) -> TourItem:
        return TourItem(
            content_id=content_id,
            title=title or f"관광지 {content_id}",
            content_type_id=content_type_id,
            addr1="서울특별시 중구",
            mapx=mapx,
            mapy=mapy,
            modified_time=modified_time,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_pet_info() -> Callable[..., PetTourInfo]:
    """PetTourInfo 팩토리."""

    def _make(
        content_id: str,
        chkpetleash: str | None = "가능",
        chkpetsize: str | None = "소형, 중형",
    ) -> PetTourInfo:
        return PetTourInfo(
            content_id=content_id,
            chkpetleash=chkpetleash,
            chkpetsize=chkpetsize,
        )

    return _make


@pytest.fixture
def sample_items(make_tour_item: Callable[..., TourItem]) -> list[TourItem]:
    """샘플 관광지 목록 (수정일 뒤섞임)."""
    return [
        make_tour_item("100", title="경복궁", modified_time="20240110120000"),
        make_tour_item("200", title="남산서울타워", modified_time="20240305090000"),
        make_tour_item("300", title="국립중앙박물관", content_type_id="14", modified_time="20231201000000"),
        make_tour_item("400", title="광장시장", content_type_id="39", modified_time="20240201000000"),
    ]


# ============================================================
# Mock Fixtures
# ============================================================


@pytest.fixture
def mock_tour_source() -> AsyncMock:
    """Mock TourSourcePort."""
    mock = AsyncMock()
    mock.area_based_list = AsyncMock(return_value=TourListPage())
    mock.search_keyword = AsyncMock(return_value=TourListPage())
    mock.detail_pet_tour = AsyncMock(return_value=None)
    mock.area_codes = AsyncMock(return_value=[])
    mock.detail_common = AsyncMock(return_value=None)
    mock.detail_intro = AsyncMock(return_value=None)
    mock.detail_image = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def pet_cache() -> InMemoryPetInfoCache:
    """빈 반려동물 정보 캐시."""
    return InMemoryPetInfoCache(max_size=100)
