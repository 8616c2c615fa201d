"""Application Exceptions."""

from tour.application.exceptions.base import ApplicationError
from tour.application.exceptions.tour_api import (
    TourApiError,
    TourApiKeyError,
    TourApiNetworkError,
    TourApiRateLimitError,
    TourApiResponseError,
    TourApiResultError,
)
from tour.application.exceptions.validation import (
    InvalidContentTypeError,
    InvalidPageError,
    InvalidPetSizeError,
    InvalidSortOptionError,
    TourNotFoundError,
)

__all__ = [
    "ApplicationError",
    "TourApiError",
    "TourApiKeyError",
    "TourApiNetworkError",
    "TourApiRateLimitError",
    "TourApiResponseError",
    "TourApiResultError",
    "InvalidContentTypeError",
    "InvalidPageError",
    "InvalidPetSizeError",
    "InvalidSortOptionError",
    "TourNotFoundError",
]
