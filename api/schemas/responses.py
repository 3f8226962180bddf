from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import CurrencyConversion
from domain.models.quote import Quote
from domain.models.weather import WeatherReport


class QuoteResponse(BaseModel):
	text: str = Field(..., description='Quote text')
	author: str = Field(..., description='Quote author')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'text': 'The only way to do great work is to love what you do.',
				'author': 'Steve Jobs',
			}
		}
	)

	@classmethod
	def from_domain(cls, quote: Quote) -> 'QuoteResponse':
		return cls(text=quote.text, author=quote.author)


class WeatherResponse(BaseModel):
	city: str = Field(..., description='City name as reported by the provider')
	temperature: int = Field(..., description='Temperature in degrees Celsius, rounded')
	condition: str = Field(..., description='Short condition, e.g. Clear')
	description: str = Field(..., description='Longer condition description')
	humidity: int = Field(..., description='Relative humidity in percent')
	icon: str = Field(..., description='Provider icon code')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'city': 'London',
				'temperature': 22,
				'condition': 'Clear',
				'description': 'Clear sky',
				'humidity': 60,
				'icon': '01d',
			}
		}
	)

	@classmethod
	def from_domain(cls, report: WeatherReport) -> 'WeatherResponse':
		return cls(
			city=report.city,
			temperature=report.temperature,
			condition=report.condition,
			description=report.description,
			humidity=report.humidity,
			icon=report.icon,
		)


def _as_number(value: Decimal) -> int | float:
	# whole amounts go out as 1000, not 1000.0
	if value == value.to_integral_value():
		return int(value)
	return float(value)


class CurrencyRates(BaseModel):
	INR_to_USD: str = Field(..., description='INR to USD rate, 6 decimal places')
	INR_to_EUR: str = Field(..., description='INR to EUR rate, 6 decimal places')


class CurrencyResponse(BaseModel):
	inr: int | float = Field(..., description='Amount requested, in INR')
	usd: str = Field(..., description='Converted amount in USD, 2 decimal places')
	eur: str = Field(..., description='Converted amount in EUR, 2 decimal places')
	rates: CurrencyRates

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'inr': 1000,
				'usd': '12.00',
				'eur': '11.00',
				'rates': {'INR_to_USD': '0.012000', 'INR_to_EUR': '0.011000'},
			}
		}
	)

	@classmethod
	def from_domain(cls, conversion: CurrencyConversion) -> 'CurrencyResponse':
		# fixed-point strings regardless of which rates were used
		return cls(
			inr=_as_number(conversion.inr),
			usd=format(conversion.usd, 'f'),
			eur=format(conversion.eur, 'f'),
			rates=CurrencyRates(
				INR_to_USD=format(conversion.inr_to_usd, 'f'),
				INR_to_EUR=format(conversion.inr_to_eur, 'f'),
			),
		)


class HealthResponse(BaseModel):
	status: str = Field(..., description='Service status')
	message: str


class RootResponse(BaseModel):
	message: str
	endpoints: list[str] = Field(description='Available resource endpoints')


class ErrorResponse(BaseModel):
	error: str = Field(..., description='Client-safe error message')
