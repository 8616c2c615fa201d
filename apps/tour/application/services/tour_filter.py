"""Tour Filter Service.

관광지 목록의 클라이언트 측 필터링/정렬/중복 제거.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from tour.domain.enums import SortOption

if TYPE_CHECKING:
    from tour.domain.entities import PetTourInfo, TourItem

logger = logging.getLogger(__name__)


def _name_key(item: TourItem) -> str:
    # 한글 음절은 NFC 코드포인트 순서가 가나다 순서와 일치
    return unicodedata.normalize("NFC", item.title).casefold()


class TourFilterService:
    """관광지 필터/정렬 서비스.

    정책:
    1. 관광 타입 다중 선택은 클라이언트에서 좁힘 (원격 API는 단일 타입만 지원)
    2. 반려동물 필터는 보강 정보가 없으면 제외
    3. 최신순 정렬에서 수정일을 파싱할 수 없는 항목은 맨 뒤
    """

    @staticmethod
    def filter_by_content_types(
        items: Sequence[TourItem],
        content_type_ids: Sequence[str],
    ) -> list[TourItem]:
        """관광 타입 필터링.

        Args:
            items: 관광지 목록
            content_type_ids: 선택된 관광 타입 ID (비어 있으면 전체)

        Returns:
            필터링된 목록
        """
        if not content_type_ids:
            return list(items)
        selected = set(content_type_ids)
        return [item for item in items if item.content_type_id in selected]

    @staticmethod
    def filter_by_pet(
        items: Sequence[TourItem],
        pet_infos: dict[str, PetTourInfo | None],
        pet_friendly: bool,
        pet_sizes: Sequence[str] = (),
    ) -> list[TourItem]:
        """반려동물 동반 조건 필터링.

        Args:
            items: 관광지 목록
            pet_infos: 콘텐츠 ID → 반려동물 정보
            pet_friendly: 필터 활성화 여부
            pet_sizes: 크기 조건 (예: ["소형"])

        Returns:
            필터링된 목록
        """
        if not pet_friendly:
            return list(items)

        result: list[TourItem] = []
        for item in items:
            info = pet_infos.get(item.content_id)
            if info is None or not info.allows_pets:
                continue
            if not info.matches_size(pet_sizes):
                continue
            result.append(item)
        return result

    @staticmethod
    def sort_tours(items: Iterable[TourItem], sort: SortOption | str) -> list[TourItem]:
        """정렬.

        Args:
            items: 관광지 목록
            sort: 정렬 옵션 ("latest" | "name")

        Returns:
            정렬된 새 목록 (안정 정렬)
        """
        option = SortOption(sort)
        if option is SortOption.NAME:
            return sorted(items, key=_name_key)

        dated: list[TourItem] = []
        undated: list[TourItem] = []
        for item in items:
            (dated if item.modified_at is not None else undated).append(item)
        dated.sort(key=lambda i: i.modified_at, reverse=True)
        return dated + undated

    @staticmethod
    def deduplicate(
        items: Iterable[TourItem],
        seen_ids: Iterable[str] = (),
    ) -> list[TourItem]:
        """content_id 기준 중복 제거.

        Args:
            items: 새로 추가할 항목
            seen_ids: 이미 표시 중인 콘텐츠 ID

        Returns:
            중복이 제거된 목록 (원래 순서 유지)
        """
        seen = set(seen_ids)
        unique: list[TourItem] = []
        for item in items:
            if item.content_id in seen:
                continue
            seen.add(item.content_id)
            unique.append(item)
        return unique
