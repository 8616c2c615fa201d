"""관광 타입 (contentTypeId)."""

from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    """한국관광공사 관광 타입 ID.

    API가 문자열 코드로 내려주므로 str Enum으로 정의합니다.
    목록에 없는 코드는 UNKNOWN으로 취급합니다.
    """

    TOURIST_SPOT = "12"
    CULTURAL_FACILITY = "14"
    FESTIVAL = "15"
    TOUR_COURSE = "25"
    LEISURE_SPORTS = "28"
    ACCOMMODATION = "32"
    SHOPPING = "38"
    RESTAURANT = "39"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """한국어 표시 이름."""
        return CONTENT_TYPE_LABELS.get(self, "기타")

    @classmethod
    def from_code(cls, code: str | None) -> ContentType:
        """코드 → Enum 변환 (알 수 없는 코드는 UNKNOWN)."""
        if not code:
            return cls.UNKNOWN
        try:
            member = cls(code.strip())
        except ValueError:
            return cls.UNKNOWN
        return member

    @classmethod
    def known(cls) -> list[ContentType]:
        """UNKNOWN을 제외한 8개 관광 타입."""
        return [m for m in cls if m is not cls.UNKNOWN]


CONTENT_TYPE_LABELS: dict[ContentType, str] = {
    ContentType.TOURIST_SPOT: "관광지",
    ContentType.CULTURAL_FACILITY: "문화시설",
    ContentType.FESTIVAL: "축제/행사",
    ContentType.TOUR_COURSE: "여행코스",
    ContentType.LEISURE_SPORTS: "레포츠",
    ContentType.ACCOMMODATION: "숙박",
    ContentType.SHOPPING: "쇼핑",
    ContentType.RESTAURANT: "음식점",
}
