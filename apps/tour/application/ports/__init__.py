"""Application Ports (Interfaces)."""

from tour.application.ports.pet_info_cache import PetInfoCachePort
from tour.application.ports.tour_source import TourListPage, TourSourcePort

__all__ = [
    "PetInfoCachePort",
    "TourListPage",
    "TourSourcePort",
]
