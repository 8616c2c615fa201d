"""Domain Entities."""

from tour.domain.entities.pet_tour_info import PetTourInfo
from tour.domain.entities.tour_detail import AreaCode, TourDetail, TourImage, TourIntro
from tour.domain.entities.tour_item import TourItem

__all__ = [
    "TourItem",
    "PetTourInfo",
    "TourDetail",
    "TourIntro",
    "TourImage",
    "AreaCode",
]
