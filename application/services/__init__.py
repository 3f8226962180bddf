from .currency_service import CurrencyService
from .quote_service import QuoteService
from .weather_service import WeatherService

__all__ = ['CurrencyService', 'QuoteService', 'WeatherService']
