from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_weather_service
from api.error_handlers import upstream_errors
from api.schemas import ErrorResponse, WeatherResponse
from application.services import WeatherService
from application.services.weather_service import WEATHER_ERROR_MESSAGE

router = APIRouter(prefix='/api', tags=['weather'])


@router.get(
	'/weather',
	response_model=WeatherResponse,
	status_code=status.HTTP_200_OK,
	summary='Get current weather for a city',
	responses={404: {'model': ErrorResponse}, 500: {'model': ErrorResponse}},
)
async def get_weather(
	service: Annotated[WeatherService, Depends(get_weather_service)],
	city: Annotated[str | None, Query(description='City name, defaults to London')] = None,
) -> WeatherResponse:
	with upstream_errors(WEATHER_ERROR_MESSAGE):
		report = await service.get_weather(city)
		return WeatherResponse.from_domain(report)
