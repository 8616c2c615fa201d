"""TourListController Unit Tests.

- 필터 변경 시 최신 요청 결과만 반영
- load_more 중복/불필요 요청 방지
- 실패 후 재시도
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from tour.application.commands import TourListController
from tour.application.dto import AssembledPage, FilterState, ListState
from tour.application.exceptions import TourApiError, TourApiNetworkError
from tour.application.services import TourPageAssembler


def _page(items, page: int = 1, has_more: bool = True) -> AssembledPage:
    return AssembledPage(items=list(items), page=page, has_more=has_more, raw_count=len(items))


async def _settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


class TestTourListController:
    """TourListController 테스트."""

    @pytest.fixture
    def assembler(self) -> MagicMock:
        mock = MagicMock(spec=TourPageAssembler)
        mock.fetch_page = AsyncMock(return_value=_page([], has_more=False))
        return mock

    @pytest.fixture
    def controller(self, assembler: MagicMock) -> TourListController:
        return TourListController(assembler)

    @pytest.mark.asyncio
    async def test_initial_load(
        self,
        controller: TourListController,
        assembler: MagicMock,
        sample_items,
    ) -> None:
        assembler.fetch_page.return_value = _page(sample_items)

        await controller.refresh()

        snapshot = controller.snapshot()
        assert snapshot.state is ListState.LOADED
        assert snapshot.items == tuple(sample_items)
        assert snapshot.page == 1
        assert snapshot.has_more is True
        assert snapshot.is_loading is False
        assembler.fetch_page.assert_awaited_once_with(FilterState(), "", 1)

    @pytest.mark.asyncio
    async def test_filter_change_discards_superseded_result(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        """진행 중인 초기 로드 도중 필터 변경 → 최신 필터 결과만 표시."""
        gate = asyncio.Event()
        stale = [make_tour_item("stale")]
        fresh = [make_tour_item("fresh")]

        async def fetch_page(filters, keyword, page):
            if filters.area_code == "1":
                await gate.wait()
                return _page(stale)
            return _page(fresh)

        assembler.fetch_page.side_effect = fetch_page

        first = asyncio.create_task(controller.set_filters(FilterState(area_code="1")))
        await _settle()
        assert controller.snapshot().is_loading is True

        await controller.set_filters(FilterState(area_code="6"))
        gate.set()
        await first

        snapshot = controller.snapshot()
        assert [i.content_id for i in snapshot.items] == ["fresh"]
        assert snapshot.state is ListState.LOADED
        assert controller.filters.area_code == "6"

    @pytest.mark.asyncio
    async def test_stale_result_ignored_when_cancellation_not_honored(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        """취소를 무시하고 늦게 도착한 응답도 반영하지 않음."""
        gate = asyncio.Event()
        release = asyncio.Event()

        async def fetch_page(filters, keyword, page):
            if filters.area_code == "1":
                try:
                    await gate.wait()
                except asyncio.CancelledError:
                    await release.wait()
                return _page([make_tour_item("stale")])
            return _page([make_tour_item("fresh")])

        assembler.fetch_page.side_effect = fetch_page

        first = asyncio.create_task(controller.set_filters(FilterState(area_code="1")))
        await _settle()
        await controller.set_filters(FilterState(area_code="6"))
        release.set()
        await first

        assert [i.content_id for i in controller.snapshot().items] == ["fresh"]

    @pytest.mark.asyncio
    async def test_same_filters_do_not_reload(
        self,
        controller: TourListController,
        assembler: MagicMock,
    ) -> None:
        await controller.set_filters(FilterState(area_code="1"))
        await controller.set_filters(FilterState(area_code="1"))

        assert assembler.fetch_page.await_count == 1

    @pytest.mark.asyncio
    async def test_search_keyword_reloads_from_first_page(
        self,
        controller: TourListController,
        assembler: MagicMock,
    ) -> None:
        await controller.set_search_keyword(" 경주 ")

        assembler.fetch_page.assert_awaited_once_with(FilterState(), "경주", 1)
        assert controller.keyword == "경주"

    @pytest.mark.asyncio
    async def test_load_more_before_initial_load_is_noop(
        self,
        controller: TourListController,
        assembler: MagicMock,
    ) -> None:
        assert await controller.load_more() is False
        assembler.fetch_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_load_more_without_more_data_is_noop(
        self,
        controller: TourListController,
        assembler: MagicMock,
        sample_items,
    ) -> None:
        assembler.fetch_page.return_value = _page(sample_items, has_more=False)
        await controller.refresh()

        assert await controller.load_more() is False
        assert assembler.fetch_page.await_count == 1

    @pytest.mark.asyncio
    async def test_load_more_while_loading_is_noop(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        gate = asyncio.Event()

        async def fetch_page(filters, keyword, page):
            if page == 2:
                await gate.wait()
            return _page([make_tour_item(f"p{page}")], page=page)

        assembler.fetch_page.side_effect = fetch_page
        await controller.refresh()

        pending = asyncio.create_task(controller.load_more())
        await _settle()
        assert controller.snapshot().is_loading_more is True

        assert await controller.load_more() is False

        gate.set()
        assert await pending is True
        assert assembler.fetch_page.await_count == 2

    @pytest.mark.asyncio
    async def test_load_more_while_initial_loading_is_noop(
        self,
        controller: TourListController,
        assembler: MagicMock,
    ) -> None:
        gate = asyncio.Event()

        async def fetch_page(filters, keyword, page):
            await gate.wait()
            return _page([], has_more=True)

        assembler.fetch_page.side_effect = fetch_page

        initial = asyncio.create_task(controller.refresh())
        await _settle()

        assert await controller.load_more() is False

        gate.set()
        await initial
        assert assembler.fetch_page.await_count == 1

    @pytest.mark.asyncio
    async def test_load_more_appends_without_duplicates(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        assembler.fetch_page.side_effect = [
            _page([make_tour_item("1"), make_tour_item("2")], page=1),
            _page([make_tour_item("2"), make_tour_item("3")], page=2, has_more=False),
        ]
        await controller.refresh()

        assert await controller.load_more() is True

        snapshot = controller.snapshot()
        assert [i.content_id for i in snapshot.items] == ["1", "2", "3"]
        assert snapshot.page == 2
        assert snapshot.has_more is False
        assembler.fetch_page.assert_awaited_with(FilterState(), "", 2)

    @pytest.mark.asyncio
    async def test_initial_failure_then_retry(
        self,
        controller: TourListController,
        assembler: MagicMock,
        sample_items,
    ) -> None:
        assembler.fetch_page.side_effect = [
            TourApiError("API 오류: SERVICE ERROR"),
            _page(sample_items),
        ]

        await controller.refresh()

        snapshot = controller.snapshot()
        assert snapshot.state is ListState.ERROR
        assert snapshot.items == ()
        assert snapshot.error is not None
        assert snapshot.error.message == "API 오류: SERVICE ERROR"

        assert await controller.retry() is True

        snapshot = controller.snapshot()
        assert snapshot.state is ListState.LOADED
        assert snapshot.error is None
        assert len(snapshot.items) == len(sample_items)

    @pytest.mark.asyncio
    async def test_load_more_failure_keeps_items_and_retries_same_page(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        assembler.fetch_page.side_effect = [
            _page([make_tour_item("1")], page=1),
            TourApiNetworkError(),
            _page([make_tour_item("2")], page=2),
        ]
        await controller.refresh()

        assert await controller.load_more() is False
        snapshot = controller.snapshot()
        assert snapshot.state is ListState.ERROR
        assert [i.content_id for i in snapshot.items] == ["1"]
        assert snapshot.page == 1

        assert await controller.retry() is True
        snapshot = controller.snapshot()
        assert [i.content_id for i in snapshot.items] == ["1", "2"]
        assert snapshot.page == 2
        assembler.fetch_page.assert_awaited_with(FilterState(), "", 2)

    @pytest.mark.asyncio
    async def test_retry_without_error_is_noop(
        self,
        controller: TourListController,
        assembler: MagicMock,
    ) -> None:
        await controller.refresh()

        assert await controller.retry() is False
        assert assembler.fetch_page.await_count == 1

    @pytest.mark.asyncio
    async def test_close_discards_inflight(
        self,
        controller: TourListController,
        assembler: MagicMock,
    ) -> None:
        gate = asyncio.Event()

        async def fetch_page(filters, keyword, page):
            await gate.wait()
            return _page([])

        assembler.fetch_page.side_effect = fetch_page

        initial = asyncio.create_task(controller.refresh())
        await _settle()
        await controller.close()
        await initial

        assert controller.snapshot().items == ()
        assert assembler.fetch_page.await_count == 1

    @pytest.mark.asyncio
    async def test_cancelled_initial_load_returns_to_idle(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        """호출자 취소로 중단된 초기 로드 → 같은 필터로 다시 로드 가능."""
        gate = asyncio.Event()
        calls = 0

        async def fetch_page(filters, keyword, page):
            nonlocal calls
            calls += 1
            if calls == 1:
                await gate.wait()
            return _page([make_tour_item(f"p{page}")], page=page)

        assembler.fetch_page.side_effect = fetch_page
        filters = FilterState(area_code="1")

        pending = asyncio.create_task(controller.set_filters(filters))
        await _settle()
        pending.cancel()
        with pytest.raises(asyncio.CancelledError):
            await pending

        snapshot = controller.snapshot()
        assert snapshot.state is ListState.IDLE
        assert snapshot.is_loading is False
        assert await controller.load_more() is False

        await controller.set_filters(filters)

        snapshot = controller.snapshot()
        assert snapshot.state is ListState.LOADED
        assert [i.content_id for i in snapshot.items] == ["p1"]
        assert await controller.load_more() is True
        assert assembler.fetch_page.await_count == 3

    @pytest.mark.asyncio
    async def test_cancelled_load_more_keeps_list(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        """호출자 취소로 중단된 추가 로드 → 기존 목록 유지, 다시 load_more 가능."""
        gate = asyncio.Event()
        calls = 0

        async def fetch_page(filters, keyword, page):
            nonlocal calls
            calls += 1
            if calls == 2:
                await gate.wait()
            return _page([make_tour_item(f"p{page}")], page=page)

        assembler.fetch_page.side_effect = fetch_page
        await controller.refresh()

        pending = asyncio.create_task(controller.load_more())
        await _settle()
        assert controller.snapshot().is_loading_more is True
        pending.cancel()
        with pytest.raises(asyncio.CancelledError):
            await pending

        snapshot = controller.snapshot()
        assert snapshot.state is ListState.LOADED
        assert snapshot.is_loading_more is False
        assert [i.content_id for i in snapshot.items] == ["p1"]
        assert snapshot.page == 1

        assert await controller.load_more() is True
        assert [i.content_id for i in controller.snapshot().items] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_load_more_with_pet_filter_passes_filters(
        self,
        controller: TourListController,
        assembler: MagicMock,
        make_tour_item,
    ) -> None:
        """반려동물 필터는 추가 페이지 요청에도 그대로 전달."""
        assembler.fetch_page.side_effect = [
            _page([make_tour_item("1")], page=1),
            _page([make_tour_item("2")], page=2),
        ]
        filters = FilterState(pet_friendly=True)

        await controller.set_filters(filters)
        assert await controller.load_more() is True

        assembler.fetch_page.assert_awaited_with(filters, "", 2)
