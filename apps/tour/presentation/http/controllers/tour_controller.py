"""Tour Controller.

관광지 API 엔드포인트 핸들러.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tour.application.dto import FilterState
from tour.application.exceptions import (
    InvalidContentTypeError,
    InvalidPetSizeError,
    InvalidSortOptionError,
)
from tour.application.queries import FetchTourPageQuery, GetTourDetailQuery
from tour.domain.constants import PET_SIZE_OPTIONS
from tour.domain.enums import ContentType, SortOption
from tour.presentation.http.schemas import (
    ContentTypeListResponseSchema,
    ContentTypeSchema,
    CoordinatesSchema,
    PetInfoSchema,
    TourDetailResponseSchema,
    TourImageSchema,
    TourItemSchema,
    TourListResponseSchema,
)
from tour.setup.dependencies import get_fetch_tour_page_query, get_tour_detail_query

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tours"])


def _split_csv(value: str | None) -> list[str]:
    return [part.strip() for part in (value or "").split(",") if part.strip()]


def _parse_content_type_ids_param(value: str | None) -> tuple[str, ...]:
    allowed = [ct.value for ct in ContentType.known()]
    ids = _split_csv(value)
    for content_type_id in ids:
        if content_type_id not in allowed:
            raise InvalidContentTypeError(content_type_id, allowed)
    return tuple(ids)


def _parse_sort_param(value: str) -> SortOption:
    try:
        return SortOption(value.strip().lower())
    except ValueError:
        raise InvalidSortOptionError(value, [o.value for o in SortOption]) from None


def _parse_pet_sizes_param(value: str | None) -> tuple[str, ...]:
    allowed = list(PET_SIZE_OPTIONS)
    sizes = _split_csv(value)
    for size in sizes:
        if size not in allowed:
            raise InvalidPetSizeError(size, allowed)
    return tuple(sizes)


@router.get(
    "/tours",
    response_model=TourListResponseSchema,
    summary="관광지 목록 조회",
    description="지역/검색어/관광 타입/반려동물 조건으로 관광지를 페이지 단위로 조회합니다.",
)
async def list_tours(
    area_code: Annotated[
        str | None,
        Query(description="지역코드 (생략 시 서울)"),
    ] = None,
    content_type_ids: Annotated[
        str | None,
        Query(description="관광 타입 ID, 쉼표 구분 (예: 12,39)"),
    ] = None,
    keyword: Annotated[
        str,
        Query(description="검색어 (있으면 키워드 검색)"),
    ] = "",
    sort: Annotated[
        str,
        Query(description="정렬 (latest, name)"),
    ] = SortOption.LATEST.value,
    pet_friendly: Annotated[
        bool,
        Query(description="반려동물 동반 가능만"),
    ] = False,
    pet_sizes: Annotated[
        str | None,
        Query(description="반려동물 크기, 쉼표 구분 (소형, 중형, 대형)"),
    ] = None,
    page: Annotated[
        int,
        Query(description="페이지 번호 (1부터)"),
    ] = 1,
    query: FetchTourPageQuery = Depends(get_fetch_tour_page_query),
) -> TourListResponseSchema:
    """관광지 목록 조회.

    - **content_type_ids**: 여러 개 선택 시 첫 번째 타입으로 원격 조회 후 나머지로 좁힘
    - **pet_friendly**: 반려동물 정보가 확인된 항목만 반환
    - **page**: has_more가 true일 때 다음 페이지 요청
    """
    filters = FilterState(
        area_code=area_code,
        content_type_ids=_parse_content_type_ids_param(content_type_ids),
        sort=_parse_sort_param(sort),
        pet_friendly=pet_friendly,
        pet_sizes=_parse_pet_sizes_param(pet_sizes),
    )

    result = await query.execute(filters, keyword=keyword, page=page)

    return TourListResponseSchema(
        items=[
            TourItemSchema.from_entity(item, result.pet_infos.get(item.content_id))
            for item in result.items
        ],
        page=result.page,
        has_more=result.has_more,
        total_count=result.total_count,
    )


@router.get(
    "/tours/{content_id}",
    response_model=TourDetailResponseSchema,
    summary="관광지 상세 조회",
)
async def get_tour(
    content_id: str,
    query: GetTourDetailQuery = Depends(get_tour_detail_query),
) -> TourDetailResponseSchema:
    """관광지 상세 (공통 + 소개 + 이미지 + 반려동물)."""
    result = await query.execute(content_id)
    detail = result.detail

    return TourDetailResponseSchema(
        content_id=detail.content_id,
        content_type_id=detail.content_type_id,
        title=detail.title,
        address=detail.address,
        zipcode=detail.zipcode,
        tel=detail.tel,
        homepage=detail.homepage,
        overview=detail.overview,
        image_url=detail.first_image,
        coordinates=CoordinatesSchema.from_value(result.coordinates),
        intro=dict(result.intro.fields) if result.intro else {},
        images=[TourImageSchema.from_entity(image) for image in result.images],
        pet_info=PetInfoSchema.from_entity(result.pet_info) if result.pet_info else None,
    )


@router.get(
    "/tours/{content_id}/pet",
    response_model=PetInfoSchema | None,
    summary="반려동물 동반 정보 조회",
)
async def get_tour_pet_info(
    content_id: str,
    query: GetTourDetailQuery = Depends(get_tour_detail_query),
) -> PetInfoSchema | None:
    """반려동물 동반 정보 (없으면 null)."""
    info = await query.get_pet_info(content_id)
    return PetInfoSchema.from_entity(info) if info else None


@router.get(
    "/content-types",
    response_model=ContentTypeListResponseSchema,
    summary="관광 타입 목록 조회",
)
async def get_content_types() -> ContentTypeListResponseSchema:
    """관광 타입 목록 조회."""
    return ContentTypeListResponseSchema(
        content_types=[
            ContentTypeSchema(id=ct.value, name=ct.label) for ct in ContentType.known()
        ]
    )
