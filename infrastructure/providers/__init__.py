from .base import BaseUpstreamProvider
from .exchangerate import ExchangeRateAPIProvider
from .openweather import OpenWeatherProvider
from .quotable import QuotableProvider

__all__ = ['BaseUpstreamProvider', 'ExchangeRateAPIProvider', 'OpenWeatherProvider', 'QuotableProvider']
