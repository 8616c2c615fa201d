"""Tour Service Setup."""

from tour.setup.config import get_settings
from tour.setup.dependencies import get_fetch_tour_page_query, get_tour_detail_query

__all__ = [
    "get_settings",
    "get_fetch_tour_page_query",
    "get_tour_detail_query",
]
