"""Application Services."""

from tour.application.services.pet_info_loader import PetInfoLoader
from tour.application.services.tour_filter import TourFilterService
from tour.application.services.tour_page_assembler import TourPageAssembler

__all__ = ["PetInfoLoader", "TourFilterService", "TourPageAssembler"]
