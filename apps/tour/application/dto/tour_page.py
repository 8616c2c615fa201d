"""Tour Page DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tour.application.exceptions import ApplicationError
    from tour.domain.entities import PetTourInfo, TourItem


@dataclass(frozen=True)
class AssembledPage:
    """필터/보강/정렬이 적용된 한 페이지.

    Attributes:
        items: 화면에 표시할 관광지 (정렬 완료)
        page: 페이지 번호
        has_more: 다음 페이지 존재 여부
        raw_count: 원격 응답 항목 수 (클라이언트 필터 적용 전)
        total_count: 원격 전체 항목 수
        pet_infos: 이번 페이지에서 확인된 반려동물 정보
    """

    items: list[TourItem]
    page: int
    has_more: bool
    raw_count: int = 0
    total_count: int | None = None
    pet_infos: dict[str, PetTourInfo | None] = field(default_factory=dict)


class ListState(str, Enum):
    """목록 컨트롤러 상태."""

    IDLE = "idle"
    INITIAL_LOADING = "initial_loading"
    LOADED = "loaded"
    LOADING_MORE = "loading_more"
    ERROR = "error"


@dataclass(frozen=True)
class TourListSnapshot:
    """표시 계층에 전달하는 목록 상태."""

    items: tuple[TourItem, ...]
    state: ListState
    is_loading: bool
    is_loading_more: bool
    has_more: bool
    page: int
    error: ApplicationError | None = None
    pet_infos: dict[str, PetTourInfo | None] = field(default_factory=dict)
