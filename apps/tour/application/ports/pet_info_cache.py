"""Pet Info Cache Port.

반려동물 정보 캐시 추상화 인터페이스.

키가 없으면 "아직 조회하지 않음", 값이 None이면 "정보 없음"(조회 실패 포함)입니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tour.domain.entities import PetTourInfo


class PetInfoCachePort(ABC):
    """반려동물 정보 캐시 포트."""

    @abstractmethod
    async def get_many(self, content_ids: Iterable[str]) -> dict[str, PetTourInfo | None]:
        """캐시된 항목 조회.

        Args:
            content_ids: 콘텐츠 ID 목록

        Returns:
            캐시에 있는 ID만 포함한 매핑 (값 None = 정보 없음)
        """
        pass

    @abstractmethod
    async def set(self, content_id: str, info: PetTourInfo | None) -> None:
        """조회 결과 저장.

        Args:
            content_id: 콘텐츠 ID
            info: 반려동물 정보 (없으면 None)
        """
        pass

    @abstractmethod
    async def size(self) -> int:
        """캐시 항목 수."""
        pass

    async def clear(self) -> None:
        """캐시 비우기 (optional)."""
        pass
