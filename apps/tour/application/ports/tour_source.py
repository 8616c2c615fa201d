"""Tour Source Port.

한국관광공사 공공 API 추상화 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tour.domain.entities import (
        AreaCode,
        PetTourInfo,
        TourDetail,
        TourImage,
        TourIntro,
        TourItem,
    )


@dataclass(frozen=True)
class TourListPage:
    """목록 API 한 페이지 결과.

    Attributes:
        items: 파싱된 관광지 목록
        page: 요청한 페이지 번호 (1부터)
        page_size: 요청한 페이지 크기
        raw_count: 응답에 포함된 원본 항목 수 (파싱 실패 포함)
        total_count: 전체 항목 수 (응답에 없으면 None)
    """

    items: list[TourItem] = field(default_factory=list)
    page: int = 1
    page_size: int = 20
    raw_count: int = 0
    total_count: int | None = None


class TourSourcePort(ABC):
    """관광 정보 소스 포트.

    목록(지역 기반/키워드 검색)과 항목별 보강 정보를 제공합니다.
    """

    @abstractmethod
    async def area_based_list(
        self,
        area_code: str,
        content_type_id: str | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> TourListPage:
        """지역 기반 목록 조회.

        Args:
            area_code: 지역코드
            content_type_id: 관광 타입 ID (단일)
            page: 페이지 번호
            page_size: 페이지당 항목 수

        Returns:
            목록 페이지
        """
        pass

    @abstractmethod
    async def search_keyword(
        self,
        keyword: str,
        area_code: str | None = None,
        content_type_id: str | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> TourListPage:
        """키워드 검색.

        Args:
            keyword: 검색어
            area_code: 지역코드 (optional)
            content_type_id: 관광 타입 ID (단일, optional)
            page: 페이지 번호
            page_size: 페이지당 항목 수

        Returns:
            목록 페이지
        """
        pass

    @abstractmethod
    async def detail_pet_tour(self, content_id: str) -> PetTourInfo | None:
        """반려동물 동반 정보 조회.

        Args:
            content_id: 콘텐츠 ID

        Returns:
            반려동물 정보, 없으면 None
        """
        pass

    @abstractmethod
    async def area_codes(self, page_size: int = 50) -> list[AreaCode]:
        """지역코드 목록 (시/도).

        Args:
            page_size: 조회할 항목 수
        """
        pass

    @abstractmethod
    async def detail_common(self, content_id: str) -> TourDetail | None:
        """공통 정보 조회. 없으면 None."""
        pass

    @abstractmethod
    async def detail_intro(self, content_id: str, content_type_id: str) -> TourIntro | None:
        """소개 정보 조회."""
        pass

    @abstractmethod
    async def detail_image(self, content_id: str) -> list[TourImage]:
        """이미지 목록 조회."""
        pass

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
