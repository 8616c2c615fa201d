"""Domain Entity Unit Tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from tour.domain.entities import AreaCode, PetTourInfo, TourDetail, TourImage, TourIntro, TourItem
from tour.domain.entities.tour_item import parse_modified_time
from tour.domain.enums import ContentType
from tour.domain.services import get_region_center
from tour.domain.services.region_center import DEFAULT_CENTER


class TestParseModifiedTime:
    """수정일 파싱 테스트."""

    def test_full_timestamp(self) -> None:
        assert parse_modified_time("20240115093000") == datetime(2024, 1, 15, 9, 30, 0)

    def test_date_only(self) -> None:
        assert parse_modified_time("20240115") == datetime(2024, 1, 15)

    def test_iso_with_timezone_is_naive(self) -> None:
        parsed = parse_modified_time("2024-01-15T09:30:00Z")

        assert parsed == datetime(2024, 1, 15, 9, 30, 0)
        assert parsed.tzinfo is None

    @pytest.mark.parametrize("value", [None, "", "not-a-date", "2024/13/45"])
    def test_unparsable(self, value) -> None:
        assert parse_modified_time(value) is None


class TestTourItem:
    """TourItem 테스트."""

    def test_from_api(self) -> None:
        item = TourItem.from_api(
            {
                "contentid": 126508,
                "title": "경복궁",
                "contenttypeid": "12",
                "addr1": "서울특별시 종로구 사직로 161",
                "addr2": "",
                "mapx": "126.9767375783",
                "mapy": "37.5760836609",
                "modifiedtime": "20240115093000",
                "areacode": "1",
                "firstimage": "http://tong.visitkorea.or.kr/a.jpg",
            }
        )

        assert item is not None
        assert item.content_id == "126508"
        assert item.addr2 is None
        assert item.address == "서울특별시 종로구 사직로 161"
        assert item.content_type is ContentType.TOURIST_SPOT
        assert item.modified_at == datetime(2024, 1, 15, 9, 30, 0)
        assert item.coordinates() is not None

    @pytest.mark.parametrize(
        "raw",
        [
            {"title": "제목만"},
            {"contentid": "1"},
            {"contentid": "", "title": "빈 ID"},
            "not-a-dict",
        ],
    )
    def test_from_api_requires_id_and_title(self, raw) -> None:
        assert TourItem.from_api(raw) is None

    def test_unknown_content_type(self, make_tour_item) -> None:
        item = make_tour_item("1", content_type_id="99")

        assert item.content_type is ContentType.UNKNOWN
        assert item.content_type.label == "기타"


class TestPetTourInfo:
    """반려동물 정보 테스트."""

    @pytest.mark.parametrize("value", ["가능", "Y", "yes"])
    def test_allows_pets(self, value) -> None:
        assert PetTourInfo(content_id="1", chkpetleash=value).allows_pets is True

    @pytest.mark.parametrize("value", [None, "불가", "N", ""])
    def test_disallows_pets(self, value) -> None:
        assert PetTourInfo(content_id="1", chkpetleash=value).allows_pets is False

    def test_matches_size_substring(self) -> None:
        info = PetTourInfo(content_id="1", chkpetleash="가능", chkpetsize="소형견, 중형견")

        assert info.matches_size(["소형"]) is True
        assert info.matches_size(["대형"]) is False
        assert info.matches_size(["대형", "중형"]) is True
        assert info.matches_size([]) is True

    def test_matches_size_without_size_text(self) -> None:
        info = PetTourInfo(content_id="1", chkpetleash="가능")

        assert info.matches_size(["소형"]) is False

    def test_from_api_uses_fallback_id(self) -> None:
        info = PetTourInfo.from_api({"chkpetleash": "가능", "chkpetsize": " "}, content_id="55")

        assert info is not None
        assert info.content_id == "55"
        assert info.chkpetsize is None


class TestDetailEntities:
    """상세 엔티티 테스트."""

    def test_tour_detail_from_api(self) -> None:
        detail = TourDetail.from_api(
            {
                "contentid": "126508",
                "contenttypeid": "12",
                "title": "경복궁",
                "addr1": "서울특별시 종로구",
                "addr2": "사직로 161",
                "mapx": "1269767375",
                "mapy": "375760836",
                "overview": "조선 왕조의 법궁",
            }
        )

        assert detail is not None
        assert detail.address == "서울특별시 종로구 사직로 161"
        assert detail.coordinates() is not None
        assert detail.homepage is None

    def test_tour_intro_keeps_non_empty_fields(self) -> None:
        intro = TourIntro.from_api(
            {"contentid": "1", "contenttypeid": "12", "usetime": "09:00~18:00", "parking": ""}
        )

        assert intro is not None
        assert intro.get("usetime") == "09:00~18:00"
        assert intro.get("parking") is None
        assert "contentid" not in intro.fields

    def test_tour_image_requires_origin_url(self) -> None:
        assert TourImage.from_api({"contentid": "1"}) is None
        image = TourImage.from_api({"contentid": "1", "originimgurl": "http://a/b.jpg"})
        assert image is not None
        assert image.origin_url == "http://a/b.jpg"

    def test_area_code_from_api(self) -> None:
        assert AreaCode.from_api({"code": "1", "name": "서울"}) == AreaCode(code="1", name="서울")
        assert AreaCode.from_api({"name": "이름만"}) is None


class TestRegionCenter:
    """지역 중심 좌표 테스트."""

    def test_known_region(self) -> None:
        center = get_region_center("39")

        assert center.latitude == pytest.approx(33.4996)

    @pytest.mark.parametrize("code", [None, "", "12345"])
    def test_unknown_region_defaults_to_seoul(self, code) -> None:
        assert get_region_center(code) == DEFAULT_CENTER
