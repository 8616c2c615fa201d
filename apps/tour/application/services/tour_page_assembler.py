"""Tour Page Assembler.

한 페이지 분량의 관광지 목록을 조회하고 필터/보강/정렬을 적용합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tour.application.dto import AssembledPage
from tour.application.services.tour_filter import TourFilterService
from tour.domain.constants import DEFAULT_AREA_CODE, MAX_PAGES, PAGE_SIZE

if TYPE_CHECKING:
    from tour.application.dto import FilterState
    from tour.application.ports import TourListPage, TourSourcePort
    from tour.application.services.pet_info_loader import PetInfoLoader

logger = logging.getLogger(__name__)


class TourPageAssembler:
    """페이지 조립 서비스.

    요청마다 고정된 순서로 처리:
    1. 데이터 소스 선택 (검색어 있으면 키워드 검색, 없으면 지역 기반 목록)
    2. 관광 타입 다중 선택 필터링
    3. 반려동물 필터 (활성화 시, 모든 페이지에 동일 적용)
    4. 정렬
    """

    def __init__(
        self,
        source: TourSourcePort,
        pet_loader: PetInfoLoader,
        page_size: int = PAGE_SIZE,
        max_pages: int = MAX_PAGES,
    ):
        self._source = source
        self._pet_loader = pet_loader
        self._page_size = page_size
        self._max_pages = max_pages

    @property
    def page_size(self) -> int:
        return self._page_size

    async def fetch_page(
        self,
        filters: FilterState,
        keyword: str = "",
        page: int = 1,
    ) -> AssembledPage:
        """한 페이지 조립.

        Args:
            filters: 필터 상태
            keyword: 검색어 (공백이면 지역 기반 목록)
            page: 페이지 번호 (1부터)

        Returns:
            조립된 페이지

        Raises:
            TourApiError: 목록 조회 실패
        """
        listing = await self._fetch_listing(filters, keyword.strip(), page)

        items = TourFilterService.filter_by_content_types(
            listing.items, filters.content_type_ids
        )

        pet_infos = {}
        if filters.pet_friendly:
            pet_infos = await self._pet_loader.load(items)
            items = TourFilterService.filter_by_pet(
                items,
                pet_infos,
                filters.pet_friendly,
                filters.pet_sizes,
            )

        items = TourFilterService.sort_tours(items, filters.sort)
        has_more = self._has_more(listing, page)

        logger.info(
            "Tour page assembled",
            extra={
                "page": page,
                "keyword": bool(keyword.strip()),
                "area_code": filters.area_code,
                "raw_count": listing.raw_count,
                "visible": len(items),
                "has_more": has_more,
            },
        )

        return AssembledPage(
            items=items,
            page=page,
            has_more=has_more,
            raw_count=listing.raw_count,
            total_count=listing.total_count,
            pet_infos=pet_infos,
        )

    async def _fetch_listing(
        self,
        filters: FilterState,
        keyword: str,
        page: int,
    ) -> TourListPage:
        if keyword:
            return await self._source.search_keyword(
                keyword=keyword,
                area_code=filters.area_code,
                content_type_id=filters.primary_content_type_id,
                page=page,
                page_size=self._page_size,
            )
        return await self._source.area_based_list(
            area_code=filters.area_code or DEFAULT_AREA_CODE,
            content_type_id=filters.primary_content_type_id,
            page=page,
            page_size=self._page_size,
        )

    def _has_more(self, listing: TourListPage, page: int) -> bool:
        # 클라이언트 필터 적용 전 원격 응답 기준
        if listing.raw_count < self._page_size:
            return False
        if page >= self._max_pages:
            return False
        if listing.total_count is not None and page * self._page_size >= listing.total_count:
            return False
        return True
