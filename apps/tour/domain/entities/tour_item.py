"""Tour Item Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from tour.domain.enums import ContentType
from tour.domain.services.coordinate_normalizer import normalize_coordinates
from tour.domain.value_objects import Coordinates

# modifiedtime 형식 (예: "20240115093000")
MODIFIED_TIME_FORMATS = ("%Y%m%d%H%M%S", "%Y%m%d")


def parse_modified_time(value: str | None) -> datetime | None:
    """수정일 문자열 파싱.

    YYYYMMDDHHMMSS / YYYYMMDD / ISO 8601을 지원합니다.
    파싱할 수 없으면 None.
    """
    if not value:
        return None
    text = value.strip()
    for fmt in MODIFIED_TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    # aware/naive 비교 방지
    return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed


def _str(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _opt(value: Any) -> str | None:
    text = _str(value)
    return text or None


@dataclass(frozen=True)
class TourItem:
    """관광지 목록 항목 엔티티 (areaBasedList2 / searchKeyword2).

    Attributes:
        content_id: 콘텐츠 ID
        title: 관광지명
        content_type_id: 관광 타입 ID
        addr1: 주소
        mapx: 경도 원본 값
        mapy: 위도 원본 값
        modified_time: 수정일 원본 문자열
        addr2: 상세주소 (optional)
        area_code: 지역코드 (optional)
        first_image: 대표이미지 (optional)
        first_image2: 대표이미지 썸네일 (optional)
        tel: 전화번호 (optional)
        cat1: 대분류 (optional)
        cat2: 중분류 (optional)
        cat3: 소분류 (optional)
    """

    content_id: str
    title: str
    content_type_id: str
    addr1: str
    mapx: str
    mapy: str
    modified_time: str
    addr2: str | None = None
    area_code: str | None = None
    first_image: str | None = None
    first_image2: str | None = None
    tel: str | None = None
    cat1: str | None = None
    cat2: str | None = None
    cat3: str | None = None

    @property
    def content_type(self) -> ContentType:
        return ContentType.from_code(self.content_type_id)

    @property
    def modified_at(self) -> datetime | None:
        return parse_modified_time(self.modified_time)

    @property
    def address(self) -> str:
        """주소 + 상세주소."""
        return " ".join(part for part in (self.addr1, self.addr2) if part)

    def coordinates(self) -> Coordinates | None:
        return normalize_coordinates(self.mapx, self.mapy)

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> TourItem | None:
        """API 응답 아이템 → TourItem.

        contentid / title이 없으면 None.
        """
        if not isinstance(item, dict):
            return None
        content_id = _str(item.get("contentid"))
        title = _str(item.get("title"))
        if not content_id or not title:
            return None

        return cls(
            content_id=content_id,
            title=title,
            content_type_id=_str(item.get("contenttypeid")),
            addr1=_str(item.get("addr1")),
            mapx=_str(item.get("mapx")),
            mapy=_str(item.get("mapy")),
            modified_time=_str(item.get("modifiedtime")),
            addr2=_opt(item.get("addr2")),
            area_code=_opt(item.get("areacode")),
            first_image=_opt(item.get("firstimage")),
            first_image2=_opt(item.get("firstimage2")),
            tel=_opt(item.get("tel")),
            cat1=_opt(item.get("cat1")),
            cat2=_opt(item.get("cat2")),
            cat3=_opt(item.get("cat3")),
        )
