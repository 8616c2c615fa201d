"""In-Memory Pet Info Cache.

LRU 방식의 반려동물 정보 캐시.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tour.application.ports.pet_info_cache import PetInfoCachePort

if TYPE_CHECKING:
    from tour.domain.entities import PetTourInfo

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000


class InMemoryPetInfoCache(PetInfoCachePort):
    """프로세스 메모리 LRU 캐시.

    단일 이벤트 루프에서만 접근합니다 (await 지점이 없어 락 불필요).
    max_size를 넘으면 가장 오래 사용하지 않은 항목부터 제거합니다.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be positive")
        self._max_size = max_size
        self._entries: OrderedDict[str, PetTourInfo | None] = OrderedDict()

    @property
    def max_size(self) -> int:
        return self._max_size

    async def get_many(self, content_ids: Iterable[str]) -> dict[str, PetTourInfo | None]:
        found: dict[str, PetTourInfo | None] = {}
        for content_id in content_ids:
            if content_id in self._entries:
                self._entries.move_to_end(content_id)
                found[content_id] = self._entries[content_id]
        return found

    async def set(self, content_id: str, info: PetTourInfo | None) -> None:
        self._entries[content_id] = info
        self._entries.move_to_end(content_id)
        while len(self._entries) > self._max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Pet info cache evicted", extra={"content_id": evicted})

    async def size(self) -> int:
        return len(self._entries)

    async def clear(self) -> None:
        self._entries.clear()
