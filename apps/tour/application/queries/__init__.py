"""Application Queries."""

from tour.application.queries.fetch_tour_page import FetchTourPageQuery
from tour.application.queries.get_tour_detail import GetTourDetailQuery

__all__ = ["FetchTourPageQuery", "GetTourDetailQuery"]
