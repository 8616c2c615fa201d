"""Pet Info Loader.

관광지 배치의 반려동물 정보를 캐시 우선으로 조회합니다.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tour.application.exceptions import TourApiKeyError
from tour.domain.constants import PET_LOOKUP_CAP

if TYPE_CHECKING:
    from tour.application.ports import PetInfoCachePort, TourSourcePort
    from tour.domain.entities import PetTourInfo, TourItem

logger = logging.getLogger(__name__)


class PetInfoLoader:
    """반려동물 정보 배치 로더.

    플로우:
    1. 캐시에 있는 항목은 재조회하지 않음
    2. 캐시에 없는 항목은 최대 max_lookups개까지 한 번에 병렬 조회
    3. 개별 조회 실패는 해당 항목만 "정보 없음"으로 처리
    4. 상한을 넘은 항목은 조회하지 않고 결과에서 제외
    """

    def __init__(
        self,
        source: TourSourcePort,
        cache: PetInfoCachePort,
        max_lookups: int = PET_LOOKUP_CAP,
    ):
        """초기화.

        Args:
            source: 관광 정보 소스
            cache: 반려동물 정보 캐시
            max_lookups: 배치당 최대 조회 수
        """
        self._source = source
        self._cache = cache
        self._max_lookups = max_lookups

    async def load(self, items: Sequence[TourItem]) -> dict[str, PetTourInfo | None]:
        """반려동물 정보 조회.

        Args:
            items: 관광지 목록

        Returns:
            콘텐츠 ID → 반려동물 정보 (조회하지 않은 항목은 키 없음)
        """
        content_ids = list(dict.fromkeys(item.content_id for item in items))
        if not content_ids:
            return {}

        known = await self._cache.get_many(content_ids)
        missing = [cid for cid in content_ids if cid not in known]
        to_fetch = missing[: self._max_lookups]
        skipped = len(missing) - len(to_fetch)

        if to_fetch:
            results = await asyncio.gather(*(self._fetch_one(cid) for cid in to_fetch))
            for content_id, info in zip(to_fetch, results):
                known[content_id] = info

        logger.debug(
            "Pet info batch loaded",
            extra={
                "requested": len(content_ids),
                "cached": len(content_ids) - len(missing),
                "fetched": len(to_fetch),
                "skipped": skipped,
            },
        )

        return {cid: known[cid] for cid in content_ids if cid in known}

    async def _fetch_one(self, content_id: str) -> PetTourInfo | None:
        try:
            info = await self._source.detail_pet_tour(content_id)
        except TourApiKeyError:
            raise
        except Exception as e:
            logger.warning(
                "Pet info lookup failed",
                extra={"content_id": content_id, "error": str(e)},
            )
            info = None
        await self._cache.set(content_id, info)
        return info
