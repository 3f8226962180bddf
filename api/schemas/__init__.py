from .responses import (
	CurrencyRates,
	CurrencyResponse,
	ErrorResponse,
	HealthResponse,
	QuoteResponse,
	RootResponse,
	WeatherResponse,
)

__all__ = [
	'CurrencyRates',
	'CurrencyResponse',
	'ErrorResponse',
	'HealthResponse',
	'QuoteResponse',
	'RootResponse',
	'WeatherResponse',
]
