"""Tour List Controller.

필터/검색/페이지 상태를 소유하고 무한 스크롤 목록을 관리하는 UseCase.

상태 전이:
    IDLE → INITIAL_LOADING → LOADED ⇄ LOADING_MORE
    INITIAL_LOADING / LOADING_MORE → ERROR → (retry) 같은 요청 재시도
    호출자 취소 시 INITIAL_LOADING → IDLE, LOADING_MORE → LOADED

필터나 검색어가 바뀌면 요청 세대(generation)를 올리고 진행 중인 요청을 취소합니다.
응답은 요청 시점의 세대가 현재 세대와 같을 때만 반영합니다.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING

from tour.application.dto import FilterState, ListState, TourListSnapshot
from tour.application.exceptions import ApplicationError
from tour.application.services.tour_filter import TourFilterService

if TYPE_CHECKING:
    from tour.application.dto import AssembledPage
    from tour.application.services.tour_page_assembler import TourPageAssembler
    from tour.domain.entities import PetTourInfo, TourItem

logger = logging.getLogger(__name__)


class _RequestKind(str, Enum):
    INITIAL = "initial"
    MORE = "more"


class TourListController:
    """관광지 목록 컨트롤러.

    단일 이벤트 루프에서 협력적으로 동작합니다.
    - 초기 로드는 필터/검색어 조합마다 하나만 유효
    - load_more는 로딩 중이거나 더 가져올 데이터가 없으면 요청하지 않음
    - 추가 로드 실패 시 기존 목록 유지
    """

    def __init__(
        self,
        assembler: TourPageAssembler,
        filters: FilterState | None = None,
        keyword: str = "",
    ):
        """초기화.

        Args:
            assembler: 페이지 조립 서비스
            filters: 초기 필터 상태
            keyword: 초기 검색어
        """
        self._assembler = assembler
        self._filters = filters or FilterState()
        self._keyword = keyword.strip()

        self._items: list[TourItem] = []
        self._pet_infos: dict[str, PetTourInfo | None] = {}
        self._page = 0
        self._has_more = True
        self._state = ListState.IDLE
        self._error: ApplicationError | None = None
        self._failed_request: _RequestKind | None = None
        self._initial_loaded = False

        self._generation = 0
        self._inflight: asyncio.Task[AssembledPage] | None = None

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def generation(self) -> int:
        return self._generation

    def snapshot(self) -> TourListSnapshot:
        """현재 목록 상태."""
        return TourListSnapshot(
            items=tuple(self._items),
            state=self._state,
            is_loading=self._state is ListState.INITIAL_LOADING,
            is_loading_more=self._state is ListState.LOADING_MORE,
            has_more=self._has_more,
            page=self._page,
            error=self._error,
            pet_infos=dict(self._pet_infos),
        )

    async def set_filters(self, filters: FilterState) -> None:
        """필터 변경 → 첫 페이지부터 다시 로드."""
        if filters == self._filters and self._state is not ListState.IDLE:
            return
        self._filters = filters
        await self._reload()

    async def set_search_keyword(self, keyword: str) -> None:
        """검색어 변경 → 첫 페이지부터 다시 로드."""
        keyword = keyword.strip()
        if keyword == self._keyword and self._state is not ListState.IDLE:
            return
        self._keyword = keyword
        await self._reload()

    async def refresh(self) -> None:
        """현재 조건으로 첫 페이지부터 다시 로드."""
        await self._reload()

    async def load_more(self) -> bool:
        """다음 페이지 로드.

        Returns:
            요청을 보내 목록에 반영했으면 True, 건너뛰었거나 실패하면 False
        """
        if not self._can_load_more():
            logger.debug(
                "load_more skipped",
                extra={
                    "state": self._state.value,
                    "has_more": self._has_more,
                    "initial_loaded": self._initial_loaded,
                },
            )
            return False

        generation = self._generation
        next_page = self._page + 1
        self._state = ListState.LOADING_MORE
        self._error = None
        self._failed_request = None

        page = await self._run(generation, _RequestKind.MORE, next_page)
        if page is None:
            return False

        visible_ids = [item.content_id for item in self._items]
        new_items = TourFilterService.deduplicate(page.items, visible_ids)
        self._items.extend(new_items)
        self._pet_infos.update(page.pet_infos)
        self._page = next_page
        self._has_more = page.has_more
        self._state = ListState.LOADED

        logger.info(
            "Tour list page appended",
            extra={"page": next_page, "added": len(new_items), "total": len(self._items)},
        )
        return True

    async def retry(self) -> bool:
        """실패한 요청 재시도.

        Returns:
            재시도했으면 True (ERROR 상태가 아니면 False)
        """
        if self._state is not ListState.ERROR:
            return False
        if self._failed_request is _RequestKind.MORE:
            return await self.load_more()
        await self._reload()
        return True

    async def close(self) -> None:
        """진행 중인 요청 취소."""
        self._generation += 1
        self._cancel_inflight()

    def _can_load_more(self) -> bool:
        return (
            self._initial_loaded
            and self._has_more
            and self._state in (ListState.LOADED, ListState.ERROR)
        )

    async def _reload(self) -> None:
        self._generation += 1
        generation = self._generation
        self._cancel_inflight()

        self._page = 0
        self._has_more = True
        self._error = None
        self._failed_request = None
        self._initial_loaded = False
        self._state = ListState.INITIAL_LOADING

        page = await self._run(generation, _RequestKind.INITIAL, 1)
        if page is None:
            return

        self._items = TourFilterService.deduplicate(page.items)
        self._pet_infos = dict(page.pet_infos)
        self._page = 1
        self._has_more = page.has_more
        self._initial_loaded = True
        self._state = ListState.LOADED

        logger.info(
            "Tour list loaded",
            extra={
                "generation": generation,
                "count": len(self._items),
                "has_more": self._has_more,
            },
        )

    async def _run(
        self,
        generation: int,
        kind: _RequestKind,
        page_no: int,
    ) -> AssembledPage | None:
        """페이지 요청 실행.

        세대가 바뀌었거나 실패하면 None.
        """
        task = asyncio.create_task(
            self._assembler.fetch_page(self._filters, self._keyword, page_no)
        )
        self._inflight = task
        try:
            page = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug("Superseded request cancelled", extra={"generation": generation})
                return None
            self._restore_after_cancel(kind)
            raise
        except ApplicationError as e:
            if generation != self._generation:
                return None
            self._fail(e, kind)
            return None
        except Exception as e:
            if generation == self._generation:
                self._fail(ApplicationError(str(e) or "관광지 목록을 불러올 수 없습니다."), kind)
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

        if generation != self._generation:
            logger.info(
                "Discarding stale page",
                extra={"generation": generation, "current": self._generation, "page": page_no},
            )
            return None
        return page

    def _fail(self, error: ApplicationError, kind: _RequestKind) -> None:
        self._state = ListState.ERROR
        self._error = error
        self._failed_request = kind
        if kind is _RequestKind.INITIAL:
            self._items = []
            self._pet_infos = {}
        logger.error(
            "Tour list request failed",
            extra={"request": kind.value, "page": self._page + 1, "error": error.message},
        )

    def _restore_after_cancel(self, kind: _RequestKind) -> None:
        """호출자 취소로 중단된 요청 이전 상태로 복구."""
        if kind is _RequestKind.MORE:
            self._state = ListState.LOADED
        else:
            self._items = []
            self._pet_infos = {}
            self._initial_loaded = False
            self._state = ListState.IDLE
        logger.info(
            "Tour list request interrupted",
            extra={"request": kind.value, "state": self._state.value},
        )

    def _cancel_inflight(self) -> None:
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None
