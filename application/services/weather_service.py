import logging

from domain.exceptions.infohub import CityNotFoundError, UpstreamServiceError
from domain.models.mock_data import mock_weather
from domain.models.upstream import FetchStatus
from domain.models.weather import WeatherReport
from infrastructure.providers.openweather import OpenWeatherProvider

logger = logging.getLogger(__name__)

WEATHER_ERROR_MESSAGE = 'Could not fetch weather data'
CITY_NOT_FOUND_MESSAGE = 'City not found'


class WeatherService:
	"""Current weather for a city.

	Without an API key the mock record is returned and no upstream call is
	made. With a key, an upstream 404 is reported as ``CityNotFoundError``.
	Other failures raise ``UpstreamServiceError`` unless ``fallback_on_error``
	is set, in which case the mock record is served instead.
	"""

	def __init__(
		self,
		provider: OpenWeatherProvider,
		default_city: str = 'London',
		fallback_on_error: bool = False,
	):
		self.provider = provider
		self.default_city = default_city
		self.fallback_on_error = fallback_on_error

	def resolve_city(self, city: str | None) -> str:
		if city is None or not city.strip():
			return self.default_city
		return city.strip()

	async def get_weather(self, city: str | None = None) -> WeatherReport:
		city = self.resolve_city(city)

		if not self.provider.is_configured:
			logger.info(f'No weather API key configured, returning mock weather for {city}')
			return mock_weather(city)

		result = await self.provider.fetch_weather(city)
		if result.is_successful:
			return result.data

		if result.status == FetchStatus.NOT_FOUND:
			raise CityNotFoundError(CITY_NOT_FOUND_MESSAGE)

		if self.fallback_on_error:
			logger.info(f'Weather provider unavailable ({result.status.value}), using mock data')
			return mock_weather(city)

		raise UpstreamServiceError(WEATHER_ERROR_MESSAGE)
