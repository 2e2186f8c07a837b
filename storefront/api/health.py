import logging
from fastapi import APIRouter, Depends, status
from starlette.responses import JSONResponse

from storefront.db import schemas
from storefront.api.deps import get_health_service
from storefront.errors import DomainError
from storefront.services.health_service import HealthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=schemas.HealthStatus,
    responses={500: {"model": schemas.ErrorResponse}},
)
def health_endpoint(service: HealthService = Depends(get_health_service)):
    try:
        return service.check_health()
    except DomainError as exc:
        logger.error("Health check failed: %s", exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Health check failed", "code": "HEALTH_CHECK_FAILED"},
        )
