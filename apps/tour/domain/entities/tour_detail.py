"""Tour Detail Entities (상세 페이지용)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tour.domain.services.coordinate_normalizer import normalize_coordinates
from tour.domain.value_objects import Coordinates


def _str(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _opt(value: Any) -> str | None:
    return _str(value) or None


@dataclass(frozen=True)
class TourDetail:
    """관광지 공통 정보 (detailCommon2)."""

    content_id: str
    content_type_id: str
    title: str
    addr1: str
    mapx: str
    mapy: str
    addr2: str | None = None
    zipcode: str | None = None
    tel: str | None = None
    homepage: str | None = None
    overview: str | None = None
    first_image: str | None = None
    first_image2: str | None = None

    @property
    def address(self) -> str:
        return " ".join(part for part in (self.addr1, self.addr2) if part)

    def coordinates(self) -> Coordinates | None:
        return normalize_coordinates(self.mapx, self.mapy)

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> TourDetail | None:
        if not isinstance(item, dict):
            return None
        content_id = _str(item.get("contentid"))
        if not content_id:
            return None
        return cls(
            content_id=content_id,
            content_type_id=_str(item.get("contenttypeid")),
            title=_str(item.get("title")),
            addr1=_str(item.get("addr1")),
            mapx=_str(item.get("mapx")),
            mapy=_str(item.get("mapy")),
            addr2=_opt(item.get("addr2")),
            zipcode=_opt(item.get("zipcode")),
            tel=_opt(item.get("tel")),
            homepage=_opt(item.get("homepage")),
            overview=_opt(item.get("overview")),
            first_image=_opt(item.get("firstimage")),
            first_image2=_opt(item.get("firstimage2")),
        )


@dataclass(frozen=True)
class TourIntro:
    """운영 정보 (detailIntro2).

    타입별로 필드가 달라 원본 값을 그대로 보관합니다.
    """

    content_id: str
    content_type_id: str
    fields: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.fields.get(key) or None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> TourIntro | None:
        if not isinstance(item, dict):
            return None
        content_id = _str(item.get("contentid"))
        if not content_id:
            return None
        fields = {
            key: _str(value)
            for key, value in item.items()
            if key not in ("contentid", "contenttypeid") and _str(value)
        }
        return cls(
            content_id=content_id,
            content_type_id=_str(item.get("contenttypeid")),
            fields=fields,
        )


@dataclass(frozen=True)
class TourImage:
    """이미지 정보 (detailImage2)."""

    content_id: str
    origin_url: str
    small_url: str | None = None
    serial_num: str | None = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> TourImage | None:
        if not isinstance(item, dict):
            return None
        origin_url = _str(item.get("originimgurl"))
        if not origin_url:
            return None
        return cls(
            content_id=_str(item.get("contentid")),
            origin_url=origin_url,
            small_url=_opt(item.get("smallimageurl")),
            serial_num=_opt(item.get("serialnum")),
        )


@dataclass(frozen=True)
class AreaCode:
    """지역코드 (areaCode2)."""

    code: str
    name: str

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> AreaCode | None:
        if not isinstance(item, dict):
            return None
        code = _str(item.get("code"))
        if not code:
            return None
        return cls(code=code, name=_str(item.get("name")))
