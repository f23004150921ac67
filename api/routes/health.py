from fastapi import APIRouter

from api.schemas import HealthResponse

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Liveness check')
def health() -> HealthResponse:
	return HealthResponse(status='ok')
