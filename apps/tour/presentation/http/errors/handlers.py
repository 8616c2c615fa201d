"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tour.application.exceptions import (
    ApplicationError,
    InvalidContentTypeError,
    InvalidPageError,
    InvalidPetSizeError,
    InvalidSortOptionError,
    TourApiError,
    TourApiKeyError,
    TourApiNetworkError,
    TourApiRateLimitError,
    TourNotFoundError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidContentTypeError)
    async def invalid_content_type_handler(request: Request, exc: InvalidContentTypeError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_CONTENT_TYPE"},
        )

    @app.exception_handler(InvalidSortOptionError)
    async def invalid_sort_handler(request: Request, exc: InvalidSortOptionError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_SORT"},
        )

    @app.exception_handler(InvalidPetSizeError)
    async def invalid_pet_size_handler(request: Request, exc: InvalidPetSizeError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_PET_SIZE"},
        )

    @app.exception_handler(InvalidPageError)
    async def invalid_page_handler(request: Request, exc: InvalidPageError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_PAGE"},
        )

    @app.exception_handler(TourNotFoundError)
    async def not_found_handler(request: Request, exc: TourNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "TOUR_NOT_FOUND"},
        )

    @app.exception_handler(TourApiKeyError)
    async def api_key_handler(request: Request, exc: TourApiKeyError):
        logger.error("Tour API key missing", extra={"path": request.url.path})
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "TOUR_API_KEY_MISSING"},
        )

    @app.exception_handler(TourApiRateLimitError)
    async def rate_limit_handler(request: Request, exc: TourApiRateLimitError):
        return JSONResponse(
            status_code=429,
            content={"detail": exc.message, "code": "TOUR_API_RATE_LIMITED"},
        )

    @app.exception_handler(TourApiNetworkError)
    async def network_handler(request: Request, exc: TourApiNetworkError):
        return JSONResponse(
            status_code=504,
            content={"detail": exc.message, "code": "TOUR_API_UNAVAILABLE"},
        )

    @app.exception_handler(TourApiError)
    async def tour_api_handler(request: Request, exc: TourApiError):
        logger.warning(
            "Tour API error",
            extra={"path": request.url.path, "status_code": exc.status_code, "error": exc.message},
        )
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "TOUR_API_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
