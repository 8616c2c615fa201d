"""HTTP Response Schemas.

Pydantic 모델 기반 API 응답 스키마.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tour.domain.entities import PetTourInfo, TourImage, TourItem
from tour.domain.value_objects import Coordinates


class CoordinatesSchema(BaseModel):
    """WGS84 좌표 스키마."""

    latitude: float = Field(..., description="위도")
    longitude: float = Field(..., description="경도")

    @classmethod
    def from_value(cls, coords: Coordinates | None) -> CoordinatesSchema | None:
        if coords is None:
            return None
        return cls(latitude=coords.latitude, longitude=coords.longitude)


class PetInfoSchema(BaseModel):
    """반려동물 동반 정보 스키마."""

    content_id: str = Field(..., description="콘텐츠 ID")
    allows_pets: bool = Field(..., description="동반 가능 여부")
    chkpetleash: str | None = Field(None, description="동반 가능 여부 원문")
    chkpetsize: str | None = Field(None, description="동반 가능 크기")
    chkpetplace: str | None = Field(None, description="동반 가능 장소")
    chkpetfee: str | None = Field(None, description="추가 요금")
    petinfo: str | None = Field(None, description="기타 안내")
    parking: str | None = Field(None, description="주차 정보")

    @classmethod
    def from_entity(cls, info: PetTourInfo) -> PetInfoSchema:
        return cls(
            content_id=info.content_id,
            allows_pets=info.allows_pets,
            chkpetleash=info.chkpetleash,
            chkpetsize=info.chkpetsize,
            chkpetplace=info.chkpetplace,
            chkpetfee=info.chkpetfee,
            petinfo=info.petinfo,
            parking=info.parking,
        )


class TourItemSchema(BaseModel):
    """관광지 목록 항목 스키마."""

    content_id: str = Field(..., description="콘텐츠 ID")
    title: str = Field(..., description="이름")
    content_type_id: str = Field(..., description="관광 타입 ID")
    content_type_name: str = Field(..., description="관광 타입 이름")
    address: str = Field(..., description="주소")
    area_code: str | None = Field(None, description="지역코드")
    image_url: str | None = Field(None, description="대표 이미지 URL")
    thumbnail_url: str | None = Field(None, description="썸네일 URL")
    tel: str | None = Field(None, description="전화번호")
    modified_time: str = Field(..., description="수정일 (YYYYMMDDHHMMSS)")
    coordinates: CoordinatesSchema | None = Field(None, description="정규화된 좌표")
    pet_info: PetInfoSchema | None = Field(None, description="반려동물 정보 (필터 사용 시)")

    @classmethod
    def from_entity(
        cls,
        item: TourItem,
        pet_info: PetTourInfo | None = None,
    ) -> TourItemSchema:
        return cls(
            content_id=item.content_id,
            title=item.title,
            content_type_id=item.content_type_id,
            content_type_name=item.content_type.label,
            address=item.address,
            area_code=item.area_code,
            image_url=item.first_image,
            thumbnail_url=item.first_image2,
            tel=item.tel,
            modified_time=item.modified_time,
            coordinates=CoordinatesSchema.from_value(item.coordinates()),
            pet_info=PetInfoSchema.from_entity(pet_info) if pet_info else None,
        )


class TourListResponseSchema(BaseModel):
    """관광지 목록 응답 스키마."""

    items: list[TourItemSchema] = Field(..., description="관광지 목록")
    page: int = Field(..., description="페이지 번호")
    has_more: bool = Field(..., description="다음 페이지 존재 여부")
    total_count: int | None = Field(None, description="원격 전체 항목 수")


class TourImageSchema(BaseModel):
    """이미지 스키마."""

    origin_url: str = Field(..., description="원본 이미지 URL")
    small_url: str | None = Field(None, description="썸네일 URL")

    @classmethod
    def from_entity(cls, image: TourImage) -> TourImageSchema:
        return cls(origin_url=image.origin_url, small_url=image.small_url)


class TourDetailResponseSchema(BaseModel):
    """관광지 상세 응답 스키마."""

    content_id: str = Field(..., description="콘텐츠 ID")
    content_type_id: str = Field(..., description="관광 타입 ID")
    title: str = Field(..., description="이름")
    address: str = Field(..., description="주소")
    zipcode: str | None = Field(None, description="우편번호")
    tel: str | None = Field(None, description="전화번호")
    homepage: str | None = Field(None, description="홈페이지 (HTML 포함 가능)")
    overview: str | None = Field(None, description="개요")
    image_url: str | None = Field(None, description="대표 이미지 URL")
    coordinates: CoordinatesSchema | None = Field(None, description="정규화된 좌표")
    intro: dict[str, str] = Field(default_factory=dict, description="타입별 소개 정보")
    images: list[TourImageSchema] = Field(default_factory=list, description="이미지 목록")
    pet_info: PetInfoSchema | None = Field(None, description="반려동물 정보")

class RegionSchema(BaseModel):
    """지역 스키마."""

    code: str = Field(..., description="지역코드")
    name: str = Field(..., description="지역 이름")


class RegionListResponseSchema(BaseModel):
    """지역 목록 응답 스키마."""

    regions: list[RegionSchema] = Field(..., description="지역 목록")


class RegionCenterResponseSchema(BaseModel):
    """지역 중심 좌표 응답 스키마."""

    area_code: str = Field(..., description="요청한 지역코드")
    center: CoordinatesSchema = Field(..., description="중심 좌표")
    is_default: bool = Field(..., description="알 수 없는 지역이라 기본 좌표(서울)를 반환했는지")


class ContentTypeSchema(BaseModel):
    """관광 타입 스키마."""

    id: str = Field(..., description="관광 타입 ID")
    name: str = Field(..., description="관광 타입 이름 (한국어)")


class ContentTypeListResponseSchema(BaseModel):
    """관광 타입 목록 응답 스키마."""

    content_types: list[ContentTypeSchema] = Field(..., description="관광 타입 목록")


class HealthCheckResponseSchema(BaseModel):
    """헬스체크 응답 스키마."""

    status: str = Field(..., description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
