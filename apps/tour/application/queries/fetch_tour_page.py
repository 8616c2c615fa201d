"""Fetch Tour Page Query.

상태 없는 단일 페이지 조회 (HTTP API용).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tour.application.exceptions import InvalidPageError
from tour.domain.constants import MAX_PAGES

if TYPE_CHECKING:
    from tour.application.dto import AssembledPage, FilterState
    from tour.application.services.tour_page_assembler import TourPageAssembler


class FetchTourPageQuery:
    """관광지 목록 페이지 조회 Query."""

    def __init__(self, assembler: TourPageAssembler, max_pages: int = MAX_PAGES):
        self._assembler = assembler
        self._max_pages = max_pages

    async def execute(
        self,
        filters: FilterState,
        keyword: str = "",
        page: int = 1,
    ) -> AssembledPage:
        """Query 실행.

        Raises:
            InvalidPageError: 페이지 번호가 범위를 벗어남
            TourApiError: 원격 호출 실패
        """
        if page < 1 or page > self._max_pages:
            raise InvalidPageError(page, self._max_pages)
        return await self._assembler.fetch_page(filters, keyword, page)
