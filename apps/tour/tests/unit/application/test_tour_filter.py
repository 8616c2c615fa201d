"""TourFilterService Unit Tests."""

from __future__ import annotations

from tour.application.services import TourFilterService
from tour.domain.entities import TourItem
from tour.domain.enums import SortOption


def _ids(items: list[TourItem]) -> list[str]:
    return [item.content_id for item in items]


class TestFilterByContentTypes:
    """관광 타입 필터 테스트."""

    def test_empty_selection_keeps_all(self, sample_items: list[TourItem]) -> None:
        assert TourFilterService.filter_by_content_types(sample_items, ()) == sample_items

    def test_multi_selection(self, sample_items: list[TourItem]) -> None:
        result = TourFilterService.filter_by_content_types(sample_items, ("14", "39"))

        assert _ids(result) == ["300", "400"]


class TestFilterByPet:
    """반려동물 필터 테스트."""

    def test_disabled_keeps_all(self, sample_items: list[TourItem]) -> None:
        assert TourFilterService.filter_by_pet(sample_items, {}, pet_friendly=False) == sample_items

    def test_excludes_missing_and_disallowed(self, sample_items, make_pet_info) -> None:
        pet_infos = {
            "100": make_pet_info("100"),
            "200": make_pet_info("200", chkpetleash="불가"),
            "300": None,
            # 400: 조회하지 않음
        }

        result = TourFilterService.filter_by_pet(sample_items, pet_infos, pet_friendly=True)

        assert _ids(result) == ["100"]

    def test_size_condition(self, sample_items, make_pet_info) -> None:
        pet_infos = {
            "100": make_pet_info("100", chkpetsize="대형"),
            "200": make_pet_info("200", chkpetsize="소형견 가능"),
            "300": make_pet_info("300", chkpetsize="소형, 중형"),
        }

        result = TourFilterService.filter_by_pet(
            sample_items, pet_infos, pet_friendly=True, pet_sizes=("소형",)
        )

        assert _ids(result) == ["200", "300"]


class TestSortTours:
    """정렬 테스트."""

    def test_latest_descending(self, sample_items: list[TourItem]) -> None:
        result = TourFilterService.sort_tours(sample_items, SortOption.LATEST)

        timestamps = [item.modified_at for item in result]
        assert timestamps == sorted(timestamps, reverse=True)
        assert _ids(result) == ["200", "400", "100", "300"]

    def test_latest_unparsable_last_in_original_order(self, make_tour_item) -> None:
        items = [
            make_tour_item("a", modified_time="garbage"),
            make_tour_item("b", modified_time="20240101000000"),
            make_tour_item("c", modified_time=""),
            make_tour_item("d", modified_time="20250101000000"),
        ]

        result = TourFilterService.sort_tours(items, "latest")

        assert _ids(result) == ["d", "b", "a", "c"]

    def test_latest_ties_keep_order(self, make_tour_item) -> None:
        items = [
            make_tour_item("x", modified_time="20240101000000"),
            make_tour_item("y", modified_time="20240101000000"),
        ]

        assert _ids(TourFilterService.sort_tours(items, SortOption.LATEST)) == ["x", "y"]

    def test_name_ascending_korean(self, sample_items: list[TourItem]) -> None:
        result = TourFilterService.sort_tours(sample_items, SortOption.NAME)

        assert [item.title for item in result] == ["경복궁", "광장시장", "국립중앙박물관", "남산서울타워"]

    def test_name_stable_for_equal_titles(self, make_tour_item) -> None:
        items = [
            make_tour_item("2", title="동일"),
            make_tour_item("1", title="동일"),
            make_tour_item("3", title="가나"),
        ]

        assert _ids(TourFilterService.sort_tours(items, SortOption.NAME)) == ["3", "2", "1"]

    def test_does_not_mutate_input(self, sample_items: list[TourItem]) -> None:
        before = list(sample_items)

        TourFilterService.sort_tours(sample_items, SortOption.NAME)

        assert sample_items == before


class TestDeduplicate:
    """중복 제거 테스트."""

    def test_removes_seen_and_repeated(self, make_tour_item) -> None:
        items = [make_tour_item("1"), make_tour_item("2"), make_tour_item("2"), make_tour_item("3")]

        result = TourFilterService.deduplicate(items, seen_ids=["1"])

        assert _ids(result) == ["2", "3"]


class TestSortTitleCase:
    """대소문자만 다른 이름 정렬 테스트."""

    def test_case_insensitive_titles_keep_input_order(self, make_tour_item) -> None:
        items = [
            make_tour_item("1", title="seoul forest"),
            make_tour_item("2", title="Seoul Forest"),
            make_tour_item("3", title="Busan"),
        ]

        result = TourFilterService.sort_tours(items, SortOption.NAME)

        assert _ids(result) == ["3", "1", "2"]

    def test_decomposed_hangul_sorts_with_composed(self, make_tour_item) -> None:
        import unicodedata

        items = [
            make_tour_item("1", title=unicodedata.normalize("NFD", "나무")),
            make_tour_item("2", title="가람"),
        ]

        assert _ids(TourFilterService.sort_tours(items, SortOption.NAME)) == ["2", "1"]
