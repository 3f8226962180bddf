import logging
from typing import Annotated

import httpx
from fastapi import Depends

from application.services import CurrencyService, QuoteService, WeatherService
from config.settings import Settings, get_settings
from infrastructure.providers import (
	ExchangeRateAPIProvider,
	OpenWeatherProvider,
	QuotableProvider,
)

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	http_client: httpx.AsyncClient | None = None
	quote_provider: QuotableProvider | None = None
	weather_provider: OpenWeatherProvider | None = None
	rate_provider: ExchangeRateAPIProvider | None = None


deps = AppDependencies()


def init_dependencies(settings: Settings | None = None) -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT))
	deps.quote_provider = QuotableProvider(settings.QUOTE_API_URL, client=deps.http_client)
	deps.weather_provider = OpenWeatherProvider(
		settings.OPENWEATHER_API_KEY, settings.WEATHER_API_URL, client=deps.http_client
	)
	deps.rate_provider = ExchangeRateAPIProvider(
		settings.EXCHANGE_RATE_API_URL, client=deps.http_client
	)

	if not deps.weather_provider.is_configured:
		logger.warning('OPENWEATHER_API_KEY not set, weather will be served from mock data')
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	# providers share the client, so closing it once is enough
	if deps.http_client:
		await deps.http_client.aclose()
	deps.http_client = None
	deps.quote_provider = None
	deps.weather_provider = None
	deps.rate_provider = None

	logger.info('Cleanup complete')


def get_quote_provider() -> QuotableProvider:
	if deps.quote_provider is None:
		raise RuntimeError('Quote provider not initialized')
	return deps.quote_provider


def get_weather_provider() -> OpenWeatherProvider:
	if deps.weather_provider is None:
		raise RuntimeError('Weather provider not initialized')
	return deps.weather_provider


def get_rate_provider() -> ExchangeRateAPIProvider:
	if deps.rate_provider is None:
		raise RuntimeError('Rate provider not initialized')
	return deps.rate_provider


async def get_quote_service(
	provider: Annotated[QuotableProvider, Depends(get_quote_provider)],
) -> QuoteService:
	return QuoteService(provider=provider)


async def get_weather_service(
	provider: Annotated[OpenWeatherProvider, Depends(get_weather_provider)],
	settings: Annotated[Settings, Depends(get_settings)],
) -> WeatherService:
	return WeatherService(
		provider=provider,
		default_city=settings.DEFAULT_CITY,
		fallback_on_error=settings.WEATHER_FALLBACK_ON_ERROR,
	)


async def get_currency_service(
	provider: Annotated[ExchangeRateAPIProvider, Depends(get_rate_provider)],
) -> CurrencyService:
	return CurrencyService(provider=provider)
