from fastapi import APIRouter

from api.schemas import HealthResponse, RootResponse

router = APIRouter(tags=['health'])

RESOURCE_ENDPOINTS = ['/api/weather', '/api/currency', '/api/quote']


@router.get('/api/health', response_model=HealthResponse, summary='Liveness check')
async def health_check() -> HealthResponse:
	return HealthResponse(status='OK', message='InfoHub API is running')


@router.get('/', response_model=RootResponse, summary='API information')
async def root() -> RootResponse:
	return RootResponse(message='InfoHub API', endpoints=RESOURCE_ENDPOINTS)
