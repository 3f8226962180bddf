from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Application
	APP_NAME: str = 'InfoHub API'
	DEBUG: bool = False
	HOST: str = '0.0.0.0'
	PORT: int = 3001

	# Upstream providers
	OPENWEATHER_API_KEY: str = ''
	QUOTE_API_URL: str = 'https://api.quotable.io/random'
	WEATHER_API_URL: str = 'https://api.openweathermap.org/data/2.5/weather'
	EXCHANGE_RATE_API_URL: str = 'https://api.exchangerate-api.com/v4/latest/INR'
	HTTP_TIMEOUT: float = 5.0

	# Weather
	DEFAULT_CITY: str = 'London'
	WEATHER_FALLBACK_ON_ERROR: bool = False

	CORS_ORIGINS: list[str] = [
		'https://info-hub-frontend-red.vercel.app',
		'https://info-hub-frontend-wdti.vercel.app',
	]

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = ''

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
