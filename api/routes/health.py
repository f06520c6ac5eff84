from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_rate_service
from api.schemas import HealthResponse
from application.services import RateService

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Service health check')
async def health_check(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> HealthResponse:
	"""Reports whether a rate snapshot is loaded. Never triggers a fetch."""
	snapshot = service.current
	if snapshot is None:
		return HealthResponse(status='degraded', snapshot_loaded=False)

	return HealthResponse(
		status='ok',
		snapshot_loaded=True,
		source=service.source,
		base=snapshot.base,
		date=snapshot.date,
	)
