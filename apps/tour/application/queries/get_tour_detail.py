"""Get Tour Detail Query.

공통 정보 + 소개 정보 + 이미지 + 반려동물 정보를 한 번에 조회합니다.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING, TypeVar

from tour.application.dto import TourDetailResult
from tour.application.exceptions import TourApiError, TourApiKeyError, TourNotFoundError

if TYPE_CHECKING:
    from tour.application.ports import PetInfoCachePort, TourSourcePort
    from tour.domain.entities import PetTourInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GetTourDetailQuery:
    """관광지 상세 조회 Query.

    공통 정보가 없으면 TourNotFoundError.
    부가 정보(소개/이미지/반려동물) 실패는 해당 섹션만 비웁니다.
    """

    def __init__(self, source: TourSourcePort, pet_cache: PetInfoCachePort | None = None):
        self._source = source
        self._pet_cache = pet_cache

    async def execute(self, content_id: str) -> TourDetailResult:
        detail = await self._source.detail_common(content_id)
        if detail is None:
            raise TourNotFoundError(content_id)

        intro, images, pet_info = await asyncio.gather(
            self._optional(self._source.detail_intro(content_id, detail.content_type_id), None),
            self._optional(self._source.detail_image(content_id), []),
            self._optional(self.get_pet_info(content_id), None),
        )

        return TourDetailResult(
            detail=detail,
            coordinates=detail.coordinates(),
            intro=intro,
            images=images,
            pet_info=pet_info,
        )

    async def get_pet_info(self, content_id: str) -> PetTourInfo | None:
        """반려동물 정보 (캐시 우선)."""
        if self._pet_cache is not None:
            cached = await self._pet_cache.get_many([content_id])
            if content_id in cached:
                return cached[content_id]

        info = await self._source.detail_pet_tour(content_id)
        if self._pet_cache is not None:
            await self._pet_cache.set(content_id, info)
        return info

    async def _optional(self, call: Awaitable[T], default: T) -> T:
        try:
            return await call
        except TourApiKeyError:
            raise
        except TourApiError as e:
            logger.warning("Optional detail section failed", extra={"error": e.message})
            return default
