"""Application DTOs."""

from tour.application.dto.filter_state import FilterState
from tour.application.dto.tour_detail import TourDetailResult
from tour.application.dto.tour_page import AssembledPage, ListState, TourListSnapshot

__all__ = [
    "AssembledPage",
    "FilterState",
    "ListState",
    "TourDetailResult",
    "TourListSnapshot",
]
