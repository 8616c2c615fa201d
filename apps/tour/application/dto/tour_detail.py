"""Tour Detail DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tour.domain.entities import PetTourInfo, TourDetail, TourImage, TourIntro
    from tour.domain.value_objects import Coordinates


@dataclass(frozen=True)
class TourDetailResult:
    """관광지 상세 조회 결과."""

    detail: TourDetail
    coordinates: Coordinates | None
    intro: TourIntro | None = None
    images: list[TourImage] = field(default_factory=list)
    pet_info: PetTourInfo | None = None
