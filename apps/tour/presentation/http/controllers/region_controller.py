"""Region Controller.

지역 코드 / 지도 중심 좌표 엔드포인트.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tour.application.ports import TourSourcePort
from tour.domain.services import all_region_codes, get_region_center
from tour.presentation.http.schemas import (
    CoordinatesSchema,
    RegionCenterResponseSchema,
    RegionListResponseSchema,
    RegionSchema,
)
from tour.setup.dependencies import get_tour_source

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get(
    "",
    response_model=RegionListResponseSchema,
    summary="지역 목록 조회",
)
async def list_regions(
    source: TourSourcePort = Depends(get_tour_source),
) -> RegionListResponseSchema:
    """시/도 지역코드 목록 (원격 areaCode2)."""
    codes = await source.area_codes()
    return RegionListResponseSchema(
        regions=[RegionSchema(code=c.code, name=c.name) for c in codes],
    )


@router.get(
    "/{area_code}/center",
    response_model=RegionCenterResponseSchema,
    summary="지역 중심 좌표 조회",
)
async def get_center(area_code: str) -> RegionCenterResponseSchema:
    """지도 초기 위치. 알 수 없는 지역은 서울 좌표."""
    center = get_region_center(area_code)
    return RegionCenterResponseSchema(
        area_code=area_code,
        center=CoordinatesSchema(latitude=center.latitude, longitude=center.longitude),
        is_default=area_code.strip() not in all_region_codes(),
    )
