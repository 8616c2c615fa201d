"""Pet Tour Info Entity."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from tour.domain.constants import PET_ALLOWED_VALUES


def _opt(value: Any) -> str | None:
    text = "" if value is None else str(value).strip()
    return text or None


@dataclass(frozen=True)
class PetTourInfo:
    """반려동물 동반 정보 (detailPetTour2).

    Attributes:
        content_id: 콘텐츠 ID
        chkpetleash: 반려동물 동반 여부
        chkpetsize: 반려동물 크기
        chkpetplace: 입장 가능 장소
        chkpetfee: 추가 요금
        petinfo: 기타 반려동물 정보
        parking: 주차장 정보
    """

    content_id: str
    chkpetleash: str | None = None
    chkpetsize: str | None = None
    chkpetplace: str | None = None
    chkpetfee: str | None = None
    petinfo: str | None = None
    parking: str | None = None

    @property
    def allows_pets(self) -> bool:
        return (self.chkpetleash or "").strip() in PET_ALLOWED_VALUES

    def matches_size(self, sizes: Iterable[str] | None) -> bool:
        """크기 조건 일치 여부 (조건이 없으면 True)."""
        wanted = [s for s in (sizes or ()) if s]
        if not wanted:
            return True
        size_text = self.chkpetsize or ""
        return any(size in size_text for size in wanted)

    @classmethod
    def from_api(cls, item: dict[str, Any], content_id: str | None = None) -> PetTourInfo | None:
        if not isinstance(item, dict):
            return None
        resolved_id = _opt(item.get("contentid")) or content_id
        if not resolved_id:
            return None
        return cls(
            content_id=resolved_id,
            chkpetleash=_opt(item.get("chkpetleash")),
            chkpetsize=_opt(item.get("chkpetsize")),
            chkpetplace=_opt(item.get("chkpetplace")),
            chkpetfee=_opt(item.get("chkpetfee")),
            petinfo=_opt(item.get("petinfo")),
            parking=_opt(item.get("parking")),
        )
