"""HTTP Router.

FastAPI 라우터 설정.
"""

from fastapi import APIRouter

from tour.presentation.http.controllers.region_controller import (
    router as region_router,
)
from tour.presentation.http.controllers.tour_controller import (
    router as tour_router,
)
from tour.presentation.http.schemas import HealthCheckResponseSchema

router = APIRouter(prefix="/api/v1/tour")

router.include_router(tour_router)
router.include_router(region_router)


@router.get(
    "/health",
    response_model=HealthCheckResponseSchema,
    tags=["health"],
    summary="헬스체크",
)
async def health_check() -> HealthCheckResponseSchema:
    """서비스 헬스체크."""
    return HealthCheckResponseSchema(status="ok", service="tour")
