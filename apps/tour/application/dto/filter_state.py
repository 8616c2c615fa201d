"""Filter State DTO."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from tour.domain.enums import SortOption


def _normalize(values: Iterable[str] | None) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values or ():
        text = str(value).strip()
        if text:
            seen.setdefault(text, None)
    return tuple(seen)


@dataclass(frozen=True)
class FilterState:
    """관광지 목록 필터 상태.

    Attributes:
        area_code: 지역코드 (None이면 기본 지역)
        content_type_ids: 선택된 관광 타입 ID (비어 있으면 전체)
        sort: 정렬 옵션
        pet_friendly: 반려동물 동반 가능 필터
        pet_sizes: 반려동물 크기 조건 (pet_friendly일 때만 의미 있음)
    """

    area_code: str | None = None
    content_type_ids: tuple[str, ...] = field(default_factory=tuple)
    sort: SortOption = SortOption.LATEST
    pet_friendly: bool = False
    pet_sizes: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        area_code = (self.area_code or "").strip() or None
        object.__setattr__(self, "area_code", area_code)
        object.__setattr__(self, "content_type_ids", _normalize(self.content_type_ids))
        object.__setattr__(self, "sort", SortOption(self.sort))
        # 크기 조건은 반려동물 필터가 켜져 있을 때만 유지
        sizes = _normalize(self.pet_sizes) if self.pet_friendly else ()
        object.__setattr__(self, "pet_sizes", sizes)

    @property
    def primary_content_type_id(self) -> str | None:
        """원격 API에 전달할 단일 관광 타입 (첫 번째 선택값)."""
        return self.content_type_ids[0] if self.content_type_ids else None

    def with_changes(self, **changes: object) -> FilterState:
        """일부 필드를 바꾼 새 인스턴스 반환."""
        return replace(self, **changes)
