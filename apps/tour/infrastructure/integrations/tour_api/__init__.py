"""한국관광공사 공공 API 연동."""

from tour.infrastructure.integrations.tour_api.tour_api_client import (
    TourApiClient,
    extract_items,
)

__all__ = ["TourApiClient", "extract_items"]
